from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import ConfigDict, Field, ValidationError, field_validator

from commandlines.constants import (
    DEFAULT_HELP_LONG_OPTIONS,
    DEFAULT_HELP_OPTIONS,
    DEFAULT_USAGE_LONG_OPTIONS,
    DEFAULT_VERSION_LONG_OPTIONS,
    DEFAULT_VERSION_OPTIONS,
    ENV_PREFIX,
    OptionArgumentPolicy,
)
from commandlines.core.common.exceptions import ConfigurationError
from commandlines.core.interfaces.model_bases import DomainModel
from commandlines.core.parsers.classifier import is_long_option_name

logger = logging.getLogger(__name__)


def _process_list(raw: str) -> list[str]:
    """Process a comma-separated string into its non-empty items."""
    result: list[str] = []
    for item in raw.split(","):
        stripped = item.strip()
        if stripped:
            result.append(stripped)
    return result


def _get_env_value(
    env: Mapping[str, str],
    name: str,
    transform: Callable[[str], Any] | None = None,
) -> Any | None:
    """Return the transformed value of ``COMMANDLINES_<name>`` if it is set."""
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return None
    return transform(raw) if transform is not None else raw.strip()


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


class CommandConventions(DomainModel):
    """Option names that answer the help, usage and version queries, and the
    rule for repeated ``--name=value`` definitions."""

    model_config = ConfigDict(frozen=True)

    help_options: tuple[str, ...] = DEFAULT_HELP_OPTIONS
    help_long_options: tuple[str, ...] = DEFAULT_HELP_LONG_OPTIONS
    usage_long_options: tuple[str, ...] = DEFAULT_USAGE_LONG_OPTIONS
    version_options: tuple[str, ...] = DEFAULT_VERSION_OPTIONS
    version_long_options: tuple[str, ...] = DEFAULT_VERSION_LONG_OPTIONS
    option_argument_policy: OptionArgumentPolicy = OptionArgumentPolicy.LAST

    @field_validator("help_options", "version_options", mode="before")
    @classmethod
    def validate_short_options(cls, v: Any) -> Any:
        """Accept a comma-separated string and require single alphanumerics."""
        if isinstance(v, str):
            v = _process_list(v)
        if v is not None and not isinstance(v, list | tuple):
            raise ValueError(f"Expected a list of option names, got {type(v).__name__}")
        for item in v or ():
            if not isinstance(item, str) or len(item) != 1 or not item.isalnum():
                raise ValueError(
                    f"Short option conventions must be single alphanumeric characters, got {item!r}"
                )
        return tuple(v or ())

    @field_validator(
        "help_long_options",
        "usage_long_options",
        "version_long_options",
        mode="before",
    )
    @classmethod
    def validate_long_options(cls, v: Any) -> Any:
        """Accept a comma-separated string and require valid long option names."""
        if isinstance(v, str):
            v = _process_list(v)
        if v is not None and not isinstance(v, list | tuple):
            raise ValueError(f"Expected a list of option names, got {type(v).__name__}")
        names = tuple(
            item[2:] if isinstance(item, str) and item.startswith("--") else item
            for item in v or ()
        )
        for name in names:
            if not isinstance(name, str) or not is_long_option_name(name):
                raise ValueError(
                    f"Long option conventions must be valid option names, got {name!r}"
                )
        return names

    @field_validator("option_argument_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v


class AppConfig(DomainModel):
    """Top-level configuration for applications embedding commandlines."""

    conventions: CommandConventions = Field(default_factory=CommandConventions)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create AppConfig from environment variables."""
        env: Mapping[str, str] = os.environ if environ is None else environ
        return cls.model_validate(_merge(cls().model_dump(), _env_overrides(env)))


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    conventions: dict[str, Any] = {}
    for field_name in (
        "help_options",
        "help_long_options",
        "usage_long_options",
        "version_options",
        "version_long_options",
    ):
        value = _get_env_value(env, field_name.upper(), _process_list)
        if value is not None:
            conventions[field_name] = value

    policy = _get_env_value(env, "OPTION_ARGUMENT_POLICY")
    if policy:
        conventions["option_argument_policy"] = policy

    logging_section: dict[str, Any] = {}
    level = _get_env_value(env, "LOG_LEVEL")
    if level:
        logging_section["level"] = level
    log_file = _get_env_value(env, "LOG_FILE")
    if log_file:
        logging_section["log_file"] = log_file

    overrides: dict[str, Any] = {}
    if conventions:
        overrides["conventions"] = conventions
    if logging_section:
        overrides["logging"] = logging_section
    return overrides


def _merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from defaults, a YAML file and the environment.

    Later sources win: environment over file over defaults.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Environment mapping, ``os.environ`` when omitted

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If the file has an unsupported format or the
            merged configuration is invalid.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    config_data: dict[str, Any] = AppConfig().model_dump()

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            if path.suffix.lower() not in [".yaml", ".yml"]:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
                    details={"path": str(path)},
                )
            try:
                with open(path, encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Could not parse configuration file: {e}",
                    details={"path": str(path)},
                ) from e
            if not isinstance(file_config, Mapping):
                raise ConfigurationError(
                    "Configuration file must contain a mapping at the top level",
                    details={"path": str(path)},
                )
            config_data = _merge(config_data, file_config)
            logger.debug("Loaded configuration file %s", path)

    config_data = _merge(config_data, _env_overrides(env))

    try:
        return AppConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid commandlines configuration",
            details={"errors": e.errors(include_url=False)},
        ) from e
