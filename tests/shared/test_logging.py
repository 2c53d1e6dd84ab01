"""Tests for logging configuration."""

import logging

import structlog

from shared.logging import _renderer, add_context, clear_context, configure_logging, get_log_level


class TestLogLevel:
    def test_test_environment_is_quiet(self, monkeypatch):
        monkeypatch.delenv("ENV", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "test")
        assert get_log_level() == "WARNING"

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("PROTEAN_ENV", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"


class TestRenderer:
    def test_json_in_production(self, monkeypatch):
        monkeypatch.delenv("ENV", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "production")
        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_console_elsewhere(self, monkeypatch):
        monkeypatch.delenv("ENV", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "development")
        assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


class TestConfigureLogging:
    def test_writes_log_files(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        root = logging.getLogger()
        previous = root.handlers[:]
        try:
            configure_logging(tmp_path)
            assert (tmp_path / "unwind.log").exists()
            assert len(root.handlers) == 3
            assert [handler.level for handler in root.handlers] == [logging.INFO, logging.INFO, logging.ERROR]
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = previous

    def test_context_is_merged(self):
        clear_context()
        add_context(request_id="abc123")
        assert structlog.contextvars.get_contextvars() == {"request_id": "abc123"}
        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
