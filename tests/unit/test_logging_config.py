"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Unit tests for the logging configuration in gatekeeper/__init__.py
"""
# pylint: disable=protected-access

import logging

import pytest

import gatekeeper
from gatekeeper._version import __version__


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg="Test message",
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    """Return to the default configuration after each test."""
    yield
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DRIVER_LOG_LEVEL", raising=False)
    gatekeeper.configure_logging("INFO")


class TestVersionFilter:
    """Tests for _VersionFilter logging filter."""

    def test_injects_version_into_record(self):
        """_VersionFilter should inject __version__ into log records."""
        record = _record()

        result = gatekeeper._VersionFilter().filter(record)

        assert result is True
        assert getattr(record, "__version__") == __version__

    def test_does_not_overwrite_existing_version(self):
        """_VersionFilter should not overwrite an existing __version__."""
        record = _record()
        record.__version__ = "existing"

        gatekeeper._VersionFilter().filter(record)

        assert record.__version__ == "existing"


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_sets_root_handlers_with_version_filter(self):
        """Every root handler should carry the version filter."""
        gatekeeper.configure_logging()

        root = logging.getLogger()
        assert root.handlers
        for handler in root.handlers:
            assert any(isinstance(f, gatekeeper._VersionFilter) for f in handler.filters)

    def test_respects_level_argument(self):
        """configure_logging should use the provided log level."""
        gatekeeper.configure_logging(log_level="warning")

        assert logging.getLogger().level == logging.WARNING

    def test_default_level(self, monkeypatch):
        """configure_logging should default to INFO when no env var is set."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("DRIVER_LOG_LEVEL", raising=False)

        gatekeeper.configure_logging()

        assert logging.getLogger().level == logging.INFO

    def test_level_from_env(self, monkeypatch):
        """configure_logging should read LOG_LEVEL from the environment."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        gatekeeper.configure_logging()

        assert logging.getLogger().level == logging.DEBUG

    def test_uvicorn_loggers_configured(self):
        """uvicorn loggers should not propagate to the root logger."""
        gatekeeper.configure_logging()

        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            assert logging.getLogger(name).propagate is False


class TestFormatterConfig:
    """Tests for formatter constants."""

    def test_formatter_format_string(self):
        """Format string should contain expected fields."""
        for field in ("%(asctime)s", "%(levelname)", "%(name)s", "%(message)s", "%(__version__)s"):
            assert field in gatekeeper.FORMATTER["format"]


class TestDriverLoggers:
    """Tests for third-party driver logger levels."""

    def test_driver_loggers_default_to_warning(self, monkeypatch):
        """Driver loggers stay at WARNING even when the app logs at DEBUG."""
        monkeypatch.delenv("DRIVER_LOG_LEVEL", raising=False)

        gatekeeper.configure_logging("DEBUG")

        for name in ("pymongo", "couchbase", "psycopg", "pymysql", "httpx", "httpcore"):
            assert logging.getLogger(name).level == logging.WARNING
            assert logging.getLogger(name).propagate is True

    def test_driver_level_from_env(self, monkeypatch):
        """DRIVER_LOG_LEVEL overrides the driver logger level."""
        monkeypatch.setenv("DRIVER_LOG_LEVEL", "error")

        gatekeeper.configure_logging()

        assert logging.getLogger("pymongo").level == logging.ERROR
