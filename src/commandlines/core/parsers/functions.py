"""
Parser functions that derive each structural piece of a command line.

Every function accepts either the raw argument tokens (without the
executable) or a sequence already produced by ``classify_tokens``. Passing
the classified sequence lets callers scan the tokens once and project many
fields from the result.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from commandlines.constants import SHORT_PREFIX, OptionArgumentPolicy
from commandlines.core.domain.tokens import ClassifiedToken, TokenKind
from commandlines.core.parsers.classifier import classify_tokens

TokenInput = Iterable[str] | Sequence[ClassifiedToken]

_LONG_KINDS = (TokenKind.LONG_OPTION, TokenKind.LONG_OPTION_WITH_VALUE)


def _ensure_classified(tokens: TokenInput) -> list[ClassifiedToken]:
    items = list(tokens)
    if all(isinstance(item, ClassifiedToken) for item in items):
        return items  # type: ignore[return-value]
    return classify_tokens(str(item) for item in items)


def parse_options(tokens: TokenInput) -> list[str]:
    """Return short option characters, expanding mops left to right."""
    options: list[str] = []
    for entry in _ensure_classified(tokens):
        if entry.kind is TokenKind.SHORT_OPTION and entry.name is not None:
            options.append(entry.name)
        elif entry.kind is TokenKind.MOPS:
            options.extend(entry.raw[len(SHORT_PREFIX):])
    return options


def parse_mops(tokens: TokenInput) -> list[str]:
    """Return the raw, undecomposed mops tokens."""
    return [
        entry.raw
        for entry in _ensure_classified(tokens)
        if entry.kind is TokenKind.MOPS
    ]


def parse_long_options(tokens: TokenInput) -> list[str]:
    """Return long option names; for ``--name=value`` only ``name`` is kept."""
    return [
        entry.name
        for entry in _ensure_classified(tokens)
        if entry.kind in _LONG_KINDS and entry.name is not None
    ]


def parse_long_option_arguments(
    tokens: TokenInput,
    policy: OptionArgumentPolicy = OptionArgumentPolicy.LAST,
) -> dict[str, str]:
    """Map long option names to the values given with ``--name=value``.

    Args:
        tokens: Raw or classified tokens.
        policy: Whether the first or the last definition of a repeated
            name is kept.

    Returns:
        A dict ordered by the first appearance of each name.
    """
    definitions: dict[str, str] = {}
    for entry in _ensure_classified(tokens):
        if entry.kind is not TokenKind.LONG_OPTION_WITH_VALUE:
            continue
        if entry.name is None or entry.value is None:
            continue
        if policy is OptionArgumentPolicy.FIRST and entry.name in definitions:
            continue
        definitions[entry.name] = entry.value
    return definitions


def parse_args(tokens: TokenInput) -> list[str]:
    """Return positional arguments, i.e. everything that is not option-like,
    the terminator, or part of the double-dash tail."""
    return [
        entry.raw
        for entry in _ensure_classified(tokens)
        if entry.kind is TokenKind.POSITIONAL
    ]


def parse_first_arg(tokens: TokenInput) -> str | None:
    args = parse_args(tokens)
    return args[0] if args else None


def parse_last_arg(tokens: TokenInput) -> str | None:
    args = parse_args(tokens)
    return args[-1] if args else None


def parse_double_dash_args(tokens: TokenInput) -> list[str]:
    """Return every token after the first ``--``; empty if there is none."""
    return [
        entry.raw
        for entry in _ensure_classified(tokens)
        if entry.kind is TokenKind.TAIL
    ]
