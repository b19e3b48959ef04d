"""
Core data structures for token classification.
"""

from dataclasses import dataclass
from enum import Enum

from commandlines.core.interfaces.model_bases import InternalDTO


class TokenKind(str, Enum):
    """The category a single invocation token falls into."""

    TERMINATOR = "terminator"
    LONG_OPTION = "long_option"
    LONG_OPTION_WITH_VALUE = "long_option_with_value"
    MOPS = "mops"
    SHORT_OPTION = "short_option"
    POSITIONAL = "positional"
    TAIL = "tail"


@dataclass(frozen=True)
class ClassifiedToken(InternalDTO):
    """
    A token paired with its classification.

    Attributes:
        raw: The token exactly as it was received.
        kind: The category assigned by the classifier.
        name: The option character for short options, the name for long
            options, otherwise None.
        value: The text after the first '=' of a long option definition.
    """

    raw: str
    kind: TokenKind
    name: str | None = None
    value: str | None = None
