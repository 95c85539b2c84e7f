"""Tests for logging configuration."""

import pytest
from pydantic import ValidationError

from mdcext.logging.config import LogFormat, LoggingConfig, LogLevel, get_logging_config


class TestLoggingConfig:
    def test_defaults(self):
        config = LoggingConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_format == LogFormat.JSON
        assert config.service_name == "mdcext"
        assert config.include_mdc is True
        assert config.mdc_key_prefix == ""

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert LoggingConfig().log_level == LogLevel.DEBUG

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "HUMAN")
        assert LoggingConfig().log_format == LogFormat.HUMAN

    def test_mdc_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("INCLUDE_MDC", "false")
        monkeypatch.setenv("MDC_KEY_PREFIX", "ctx.")
        config = LoggingConfig()
        assert config.include_mdc is False
        assert config.mdc_key_prefix == "ctx."

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            LoggingConfig()

    def test_empty_service_name_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(service_name="")


class TestGetLoggingConfig:
    def test_returns_cached_config(self):
        get_logging_config.cache_clear()
        assert get_logging_config() is get_logging_config()
        assert isinstance(get_logging_config(), LoggingConfig)
