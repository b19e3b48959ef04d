from enum import Enum

TERMINATOR: str = "--"
SHORT_PREFIX: str = "-"
LONG_PREFIX: str = "--"
DEFINITION_SEPARATOR: str = "="

ENV_PREFIX: str = "COMMANDLINES_"


class OptionArgumentPolicy(str, Enum):
    """Which value wins when a long option is defined more than once."""

    FIRST = "first"
    LAST = "last"


DEFAULT_HELP_OPTIONS: tuple[str, ...] = ("h",)
DEFAULT_HELP_LONG_OPTIONS: tuple[str, ...] = ("help",)
DEFAULT_USAGE_LONG_OPTIONS: tuple[str, ...] = ("usage",)
DEFAULT_VERSION_OPTIONS: tuple[str, ...] = ("v",)
DEFAULT_VERSION_LONG_OPTIONS: tuple[str, ...] = ("version",)
