"""
Builder configuration.

Builders receive a ``BuilderConfig`` at construction; when none is passed they
capture the process-wide default held here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

DEFAULT_ENV_PREFIX = "FLUENTSQL_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigurationError(ValueError):
    """Raised when configuration values cannot be parsed."""


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


@dataclass(frozen=True)
class BuilderConfig:
    """
    Settings read by builders and handed on to the execution layer.

    ``debug`` gates the ``print_query``/``print_parameters`` hooks.
    ``throw_exceptions`` and ``default_connection`` are not interpreted by the
    builders; they travel with the config for whatever executes the statements.
    """

    debug: bool = False
    throw_exceptions: bool = False
    default_connection: str = "default"

    @classmethod
    def from_env(
        cls, prefix: str = DEFAULT_ENV_PREFIX, environ: Mapping[str, str] | None = None
    ) -> "BuilderConfig":
        """
        Build a config from ``<prefix>DEBUG``, ``<prefix>THROW_EXCEPTIONS`` and
        ``<prefix>DEFAULT_CONNECTION``; unset variables keep their defaults.
        """

        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        debug_key = f"{prefix}DEBUG"
        if env.get(debug_key):
            values["debug"] = _parse_bool(env[debug_key], key=debug_key)

        throw_key = f"{prefix}THROW_EXCEPTIONS"
        if env.get(throw_key):
            values["throw_exceptions"] = _parse_bool(env[throw_key], key=throw_key)

        connection_key = f"{prefix}DEFAULT_CONNECTION"
        connection = env.get(connection_key, "").strip()
        if connection:
            values["default_connection"] = connection

        return cls(**values)

    def with_changes(self, **changes: object) -> "BuilderConfig":
        return replace(self, **changes)


_default_config = BuilderConfig()


def get_default_config() -> BuilderConfig:
    return _default_config


def set_default_config(config: BuilderConfig) -> BuilderConfig:
    """
    Replace the process-wide default and return the previous one.
    """

    global _default_config
    if not isinstance(config, BuilderConfig):
        raise ConfigurationError(f"Expected BuilderConfig, got {type(config).__name__}")
    previous = _default_config
    _default_config = config
    return previous


def set_debug(enabled: bool) -> None:
    set_default_config(_default_config.with_changes(debug=bool(enabled)))
