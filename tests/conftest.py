"""Pytest configuration and shared fixtures for klaw-combinators tests."""

import logging

import pytest
import structlog
from klaw_combinators import _config


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Start every test without a global config or config environment."""
    monkeypatch.setattr(_config, '_config', None)
    for name in (_config.ENV_LOG_LEVEL, _config.ENV_JSON_LOGS, _config.ENV_LOG_FILE):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any configure_logging() call so later tests start unconfigured."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def log_file(tmp_path):
    """Path of a not-yet-existing log file for the file sink."""
    return tmp_path / 'info.log'
