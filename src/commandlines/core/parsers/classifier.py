"""
Classifies invocation tokens.

Every token maps to exactly one TokenKind. Precedence, highest first:
terminator, long option, mops, short option, positional. Once the first
``--`` has been seen, every remaining token is part of the tail.
"""

from collections.abc import Iterable

from commandlines.constants import (
    DEFINITION_SEPARATOR,
    LONG_PREFIX,
    SHORT_PREFIX,
    TERMINATOR,
)
from commandlines.core.domain.tokens import ClassifiedToken, TokenKind


def is_terminator(token: str) -> bool:
    return token == TERMINATOR


def is_long_option_name(name: str) -> bool:
    """Return True for names of at least two alphanumerics or hyphens.

    The first character must be alphanumeric so that ``---`` style tokens
    are not mistaken for options.
    """
    if len(name) < 2 or not name[0].isalnum():
        return False
    return all(ch.isalnum() or ch == "-" for ch in name)


def is_option(token: str) -> bool:
    """Return True for a single hyphen followed by one alphanumeric character."""
    return (
        len(token) == 2
        and token.startswith(SHORT_PREFIX)
        and token[1].isalnum()
    )


def is_long_option(token: str) -> bool:
    """Return True for ``--name`` and ``--name=value`` tokens."""
    if not token.startswith(LONG_PREFIX):
        return False
    name = token[len(LONG_PREFIX):].split(DEFINITION_SEPARATOR, 1)[0]
    return is_long_option_name(name)


def is_mops(token: str) -> bool:
    """Return True for multi-option short syntax such as ``-lmn``."""
    if not token.startswith(SHORT_PREFIX) or token.startswith(LONG_PREFIX):
        return False
    body = token[len(SHORT_PREFIX):]
    # str.isalnum() is False for any body containing '='
    return len(body) >= 2 and body.isalnum()


def classify_token(token: str) -> ClassifiedToken:
    """Classify a single token without regard to its position."""
    if is_terminator(token):
        return ClassifiedToken(raw=token, kind=TokenKind.TERMINATOR)

    if is_long_option(token):
        body = token[len(LONG_PREFIX):]
        if DEFINITION_SEPARATOR in body:
            name, value = body.split(DEFINITION_SEPARATOR, 1)
            return ClassifiedToken(
                raw=token,
                kind=TokenKind.LONG_OPTION_WITH_VALUE,
                name=name,
                value=value,
            )
        return ClassifiedToken(raw=token, kind=TokenKind.LONG_OPTION, name=body)

    if is_mops(token):
        return ClassifiedToken(raw=token, kind=TokenKind.MOPS)

    if is_option(token):
        return ClassifiedToken(raw=token, kind=TokenKind.SHORT_OPTION, name=token[1])

    return ClassifiedToken(raw=token, kind=TokenKind.POSITIONAL)


def classify_tokens(tokens: Iterable[str]) -> list[ClassifiedToken]:
    """Classify tokens in a single left-to-right scan.

    Args:
        tokens: The invocation arguments, without the executable.

    Returns:
        One ClassifiedToken per input token, in input order.
    """
    classified: list[ClassifiedToken] = []
    in_tail = False
    for token in tokens:
        if in_tail:
            classified.append(ClassifiedToken(raw=token, kind=TokenKind.TAIL))
            continue

        entry = classify_token(token)
        if entry.kind is TokenKind.TERMINATOR:
            in_tail = True
        classified.append(entry)
    return classified
