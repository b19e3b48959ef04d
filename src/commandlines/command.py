"""
The Command structure: a parsed, read-only view of an invocation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from commandlines.core.config.app_config import CommandConventions
from commandlines.core.parsers.classifier import classify_tokens
from commandlines.core.parsers.functions import (
    parse_args,
    parse_double_dash_args,
    parse_long_option_arguments,
    parse_long_options,
    parse_mops,
    parse_options,
)
from commandlines.core.utils.path import make_path_from

logger = logging.getLogger(__name__)


class Command:
    """A command line parsed into options, arguments and the double-dash tail.

    The first token is the executable; everything after it is classified once
    at construction time. The instance cannot be modified afterwards.

    Args:
        tokens: The full invocation, executable first.
        conventions: Names that answer the help, usage and version queries
            and the policy for repeated ``--name=value`` definitions.
    """

    __slots__ = (
        "_executable",
        "_argv",
        "_options",
        "_mops",
        "_long_options",
        "_option_arguments",
        "_args",
        "_double_dash_argv",
        "_conventions",
    )

    def __init__(
        self,
        tokens: Iterable[Any],
        conventions: CommandConventions | None = None,
    ) -> None:
        all_tokens = [str(token) for token in tokens]
        if conventions is None:
            conventions = CommandConventions()

        executable = all_tokens[0] if all_tokens else ""
        argv = tuple(all_tokens[1:])
        classified = classify_tokens(argv)

        set_ = object.__setattr__
        set_(self, "_executable", executable)
        set_(self, "_argv", argv)
        set_(self, "_options", tuple(parse_options(classified)))
        set_(self, "_mops", tuple(parse_mops(classified)))
        set_(self, "_long_options", tuple(parse_long_options(classified)))
        set_(
            self,
            "_option_arguments",
            MappingProxyType(
                parse_long_option_arguments(
                    classified, conventions.option_argument_policy
                )
            ),
        )
        set_(self, "_args", tuple(parse_args(classified)))
        set_(self, "_double_dash_argv", tuple(parse_double_dash_args(classified)))
        set_(self, "_conventions", conventions)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Parsed %s: %d options, %d long options, %d args, %d after --",
                executable or "<no executable>",
                len(self._options),
                len(self._long_options),
                len(self._args),
                len(self._double_dash_argv),
            )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), ((self._executable, *self._argv), self._conventions))

    def __copy__(self) -> Command:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Command:
        return self

    # Fields

    @property
    def executable(self) -> str:
        return self._executable

    @property
    def argv(self) -> tuple[str, ...]:
        """All tokens after the executable, in order."""
        return self._argv

    @property
    def argc(self) -> int:
        return len(self._argv)

    @property
    def options(self) -> tuple[str, ...]:
        """Short option characters, including those expanded from mops."""
        return self._options

    @property
    def mops(self) -> tuple[str, ...]:
        return self._mops

    @property
    def long_options(self) -> tuple[str, ...]:
        return self._long_options

    @property
    def option_arguments(self) -> Mapping[str, str]:
        """Values of ``--name=value`` tokens keyed by name."""
        return self._option_arguments

    @property
    def args(self) -> tuple[str, ...]:
        """Positional arguments before any ``--``."""
        return self._args

    @property
    def first_arg(self) -> str | None:
        return self._args[0] if self._args else None

    @property
    def last_arg(self) -> str | None:
        return self._args[-1] if self._args else None

    @property
    def double_dash_argv(self) -> tuple[str, ...]:
        return self._double_dash_argv

    @property
    def conventions(self) -> CommandConventions:
        return self._conventions

    @property
    def num_of_options(self) -> int:
        return len(self._options)

    @property
    def num_of_long_options(self) -> int:
        return len(self._long_options)

    @property
    def num_of_mops(self) -> int:
        return len(self._mops)

    @property
    def num_of_args(self) -> int:
        return len(self._args)

    @property
    def num_of_double_dash_args(self) -> int:
        return len(self._double_dash_argv)

    # Queries

    def contains_option(self, option: str) -> bool:
        return option in self._options

    def contains_any_option(self, options: Iterable[str]) -> bool:
        return any(option in self._options for option in options)

    def contains_all_options(self, options: Iterable[str]) -> bool:
        return all(option in self._options for option in options)

    def contains_long_option(self, name: str) -> bool:
        return name in self._long_options

    def has_mops(self) -> bool:
        return bool(self._mops)

    def contains_mops(self, mops: str) -> bool:
        return mops in self._mops

    def contains_any_mops(self, mops: Iterable[str]) -> bool:
        return any(item in self._mops for item in mops)

    def contains_all_mops(self, mops: Iterable[str]) -> bool:
        return all(item in self._mops for item in mops)

    def contains_arg(self, arg: str) -> bool:
        return arg in self._args

    def has_args(self) -> bool:
        return bool(self._args)

    def has_option_arguments(self) -> bool:
        return bool(self._option_arguments)

    def contains_option_argument(self, name: str) -> bool:
        return name in self._option_arguments

    def get_option_argument(self, name: str) -> str | None:
        return self._option_arguments.get(name)

    def has_double_dash_args(self) -> bool:
        return bool(self._double_dash_argv)

    def get_arguments_after_double_dash(self) -> list[str]:
        return list(self._double_dash_argv)

    def contains_sequence(self, sequence: Iterable[str]) -> bool:
        """Return True if ``sequence`` appears contiguously, in order, in argv.

        An empty sequence never matches.
        """
        needle = tuple(sequence)
        size = len(needle)
        if size == 0 or size > len(self._argv):
            return False
        return any(
            self._argv[start : start + size] == needle
            for start in range(len(self._argv) - size + 1)
        )

    def get_argument_at(self, index: int) -> str | None:
        """Return ``argv[index]``; negative or out of range indices give None."""
        if 0 <= index < len(self._argv):
            return self._argv[index]
        return None

    def get_argument_after(self, token: str) -> str | None:
        """Return the token that follows the first occurrence of ``token``."""
        try:
            position = self._argv.index(token)
        except ValueError:
            return None
        return self.get_argument_at(position + 1)

    def get_path_at(self, index: int) -> Path | None:
        argument = self.get_argument_at(index)
        return make_path_from(argument) if argument is not None else None

    def is_help_request(self) -> bool:
        return self.contains_any_option(
            self._conventions.help_options
        ) or any(
            name in self._long_options for name in self._conventions.help_long_options
        )

    def is_usage_request(self) -> bool:
        return any(
            name in self._long_options for name in self._conventions.usage_long_options
        )

    def is_version_request(self) -> bool:
        return self.contains_any_option(
            self._conventions.version_options
        ) or any(
            name in self._long_options
            for name in self._conventions.version_long_options
        )

    # Representation

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable snapshot of every field."""
        return {
            "executable": self._executable,
            "argv": list(self._argv),
            "argc": self.argc,
            "options": list(self._options),
            "mops": list(self._mops),
            "long_options": list(self._long_options),
            "option_arguments": dict(self._option_arguments),
            "args": list(self._args),
            "first_arg": self.first_arg,
            "last_arg": self.last_arg,
            "double_dash_argv": list(self._double_dash_argv),
            "is_help_request": self.is_help_request(),
            "is_usage_request": self.is_usage_request(),
            "is_version_request": self.is_version_request(),
        }

    def __str__(self) -> str:
        command_string = " ".join((self._executable, *self._argv)).strip()
        return f"Command: '{command_string}'"

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} executable={self._executable!r} "
            f"argv={list(self._argv)!r}>"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return (
            self._executable == other._executable
            and self._argv == other._argv
            and self._conventions == other._conventions
        )

    def __hash__(self) -> int:
        return hash((self._executable, self._argv, self._conventions))
