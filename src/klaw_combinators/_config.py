"""Runtime configuration: Config dataclass, environment lookup, and init()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_combinators._logging import configure_logging

__all__ = [
    'DEFAULT_LOG_FILE',
    'ENV_JSON_LOGS',
    'ENV_LOG_FILE',
    'ENV_LOG_LEVEL',
    'Config',
    'get_config',
    'init',
]

ENV_LOG_LEVEL = 'KLAW_COMBINATORS_LOG_LEVEL'
ENV_JSON_LOGS = 'KLAW_COMBINATORS_JSON_LOGS'
ENV_LOG_FILE = 'KLAW_COMBINATORS_LOG_FILE'

DEFAULT_LOG_FILE = './info.log'

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class Config:
    """Configuration for klaw-combinators.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON log lines instead of console output.
        log_file: File appended to by the demo's file sink.
    """

    log_level: str | None = None
    json_logs: bool = False
    log_file: str = DEFAULT_LOG_FILE


# Global configuration (set by init())
_config: Config | None = None


def _env_log_level() -> str | None:
    value = os.environ.get(ENV_LOG_LEVEL, '').strip()
    return value.upper() or None


def _env_json_logs() -> bool:
    """Read the JSON flag from the environment.

    Unrecognized values fall back to console output with a warning.
    """
    value = os.environ.get(ENV_JSON_LOGS, '').strip().lower()
    if value in _TRUE:
        return True
    if value and value not in _FALSE:
        logging.warning("Unknown %s value '%s', defaulting to false", ENV_JSON_LOGS, value)
    return False


def _env_log_file() -> str:
    return os.environ.get(ENV_LOG_FILE, '').strip() or DEFAULT_LOG_FILE


def init(
    *,
    log_level: str | None = None,
    json_logs: bool | None = None,
    log_file: str | None = None,
) -> Config:
    """Initialize the global configuration.

    Explicit arguments win over environment variables, which win over the
    defaults. Logging is configured only when a level is set.

    Args:
        log_level: Logging level, or None to read ``KLAW_COMBINATORS_LOG_LEVEL``.
        json_logs: JSON output flag, or None to read ``KLAW_COMBINATORS_JSON_LOGS``.
        log_file: Demo sink path, or None to read ``KLAW_COMBINATORS_LOG_FILE``.

    Returns:
        The Config now in effect.
    """
    global _config

    config = Config(
        log_level=log_level.upper() if log_level else _env_log_level(),
        json_logs=json_logs if json_logs is not None else _env_json_logs(),
        log_file=log_file or _env_log_file(),
    )

    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_logs)

    _config = config
    return config


def get_config() -> Config:
    """Get the current configuration, initializing from the environment if needed."""
    if _config is None:
        return init()
    return _config
