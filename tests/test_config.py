import logging
from collections.abc import Generator

import pytest

from app.core.config import Settings, settings
from app.core.log_config import configure_logging


@pytest.fixture(name="root_level")
def root_level_fixture() -> Generator[logging.Logger, None, None]:
    """Restores the root logger level and handlers after each logging test."""
    root = logging.getLogger()
    original_level = root.level
    original_handlers = root.handlers[:]
    yield root
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


# --- 1. Settings ---

def test_settings_defaults() -> None:
    """Settings load without any environment configuration."""
    s = Settings(_env_file=None)
    assert s.APP_NAME == "Customer CRUD"
    assert s.LOG_LEVEL == "INFO"
    assert "%(levelname)s" in s.LOG_FORMAT

def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables override the defaults."""
    monkeypatch.setenv("APP_NAME", "Billing CRM")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.APP_NAME == "Billing CRM"
    assert s.LOG_LEVEL == "DEBUG"


# --- 2. Logging ---

def test_configure_logging_applies_level(root_level: logging.Logger) -> None:
    """The returned level is also applied to the root logger, even when handlers already exist."""
    root_level.setLevel(logging.INFO)
    assert configure_logging("error") == logging.ERROR
    assert root_level.level == logging.ERROR

    assert configure_logging("DEBUG") == logging.DEBUG
    assert root_level.level == logging.DEBUG

def test_configure_logging_uses_settings_default(
    root_level: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without an override the level comes from settings.LOG_LEVEL."""
    monkeypatch.setattr(settings, "LOG_LEVEL", "warning")
    assert configure_logging() == logging.WARNING
    assert root_level.level == logging.WARNING

def test_configure_logging_rejects_unknown_level(root_level: logging.Logger) -> None:
    """Unknown level names raise ValueError and leave the root level alone."""
    root_level.setLevel(logging.WARNING)
    with pytest.raises(ValueError):
        configure_logging("verbose")
    assert root_level.level == logging.WARNING
