"""Command line argument classification and queries."""

from commandlines.command import Command
from commandlines.constants import OptionArgumentPolicy
from commandlines.core.config.app_config import (
    AppConfig,
    CommandConventions,
    load_config,
)
from commandlines.core.domain.tokens import ClassifiedToken, TokenKind
from commandlines.core.parsers.classifier import (
    classify_token,
    classify_tokens,
    is_long_option,
    is_mops,
    is_option,
    is_terminator,
)
from commandlines.core.parsers.functions import (
    parse_args,
    parse_double_dash_args,
    parse_first_arg,
    parse_last_arg,
    parse_long_option_arguments,
    parse_long_options,
    parse_mops,
    parse_options,
)
from commandlines.process import command_from_process, get_command

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "ClassifiedToken",
    "Command",
    "CommandConventions",
    "OptionArgumentPolicy",
    "TokenKind",
    "classify_token",
    "classify_tokens",
    "command_from_process",
    "get_command",
    "is_long_option",
    "is_mops",
    "is_option",
    "is_terminator",
    "load_config",
    "parse_args",
    "parse_double_dash_args",
    "parse_first_arg",
    "parse_last_arg",
    "parse_long_option_arguments",
    "parse_long_options",
    "parse_mops",
    "parse_options",
]
