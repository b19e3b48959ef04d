"""
Builds a Command from the running process's own invocation.

This is the only module that reads ``sys.argv``; the parsing core works on
whatever token list it is given.
"""

from __future__ import annotations

import sys

from commandlines.command import Command
from commandlines.core.config.app_config import CommandConventions


def command_from_process(conventions: CommandConventions | None = None) -> Command:
    """Return a Command for ``sys.argv``."""
    return Command(sys.argv, conventions=conventions)


get_command = command_from_process
