"""
Inspection CLI: shows how a command line is classified.

Usage:
    commandlines-inspect [--config FILE] [--log-level LEVEL] -- prog -lmn --name=value x -- tail

Everything after the first ``--`` is treated as a complete invocation,
executable first, and printed as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from commandlines.command import Command
from commandlines.constants import TERMINATOR
from commandlines.core.common.exceptions import ConfigurationError
from commandlines.core.common.logging_utils import (
    LogContext,
    configure_logging,
    get_logger,
)
from commandlines.core.config.app_config import LogLevel, load_config


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the inspector's own flags."""
    parser = argparse.ArgumentParser(
        prog="commandlines-inspect",
        description="Classify a command line and print the result as JSON",
        epilog="Pass the command line to inspect after a literal '--'.",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="FILE",
        help="YAML file with commandlines conventions",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="Override the configured log level",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print JSON on a single line",
    )
    return parser


def _split_invocation(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split the inspector's own flags from the command line to inspect."""
    argv = list(argv)
    if TERMINATOR in argv:
        position = argv.index(TERMINATOR)
        return argv[:position], argv[position + 1 :]
    return argv, []


def _report_error(error: ConfigurationError) -> int:
    """Print the error and its details to stderr and return the exit code."""
    print(f"commandlines-inspect: {error.message}", file=sys.stderr)
    if error.details:
        print(json.dumps(error.to_dict(), indent=2, default=str), file=sys.stderr)
    return 2


def main(argv: Sequence[str] | None = None) -> int:
    own_args, inspected = _split_invocation(
        sys.argv[1:] if argv is None else argv
    )
    parser = build_cli_parser()
    args = parser.parse_args(own_args)

    try:
        config = load_config(args.config_file)
    except ConfigurationError as e:
        return _report_error(e)

    level = args.log_level or config.logging.level.value
    try:
        configure_logging(
            level=getattr(logging, level), log_file=config.logging.log_file
        )
    except OSError as e:
        return _report_error(
            ConfigurationError(
                f"Cannot open log file: {e.strerror or e}",
                details={"log_file": config.logging.log_file},
            )
        )
    logger = get_logger(__name__)

    command = Command(
        inspected,
        conventions=config.conventions,
    )
    with LogContext(logger, executable=command.executable) as log:
        log.debug("Inspected command line", argc=command.argc)

    indent = None if args.compact else 2
    print(json.dumps(command.to_dict(), indent=indent))
    return 0
