"""Tests for logging configuration."""

import logging

from neo_esi.config.logging_config import LoggingConfig, get_log_level_from_verbosity


class TestLoggingConfig:
    """Test environment-driven logging setup."""

    def test_verbosity_levels(self):
        assert get_log_level_from_verbosity("QUIET") == "ERROR"
        assert get_log_level_from_verbosity("DEBUG") == "DEBUG"
        assert get_log_level_from_verbosity("unknown") == "WARNING"

    def test_log_level_overrides_verbosity(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.setenv("LOG_VERBOSITY", "DEBUG")

        LoggingConfig.configure()

        assert logging.getLogger("neo_esi").level == logging.ERROR

    def test_dispatcher_quiet_unless_debugging(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "NORMAL")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        LoggingConfig.configure()

        assert logging.getLogger("neo_esi.platform.dispatch.fragment_dispatcher").level == logging.WARNING
        assert logging.getLogger("redis").level == logging.ERROR
