"""Tests for logging setup and logger factory."""

import io
import json
import logging

from mdcext import put_closeable
from mdcext.logging.config import LogFormat, LoggingConfig, LogLevel
from mdcext.logging.filters import MDCFilter
from mdcext.logging.formatters import HumanFormatter, JSONFormatter
from mdcext.logging.logger import create_formatter, get_logger, reset_logging, setup_logging


class TestSetupLogging:
    def setup_method(self):
        reset_logging()

    def test_configures_root_logger(self):
        setup_logging()
        root = logging.getLogger()
        assert len(root.handlers) > 0

    def test_handler_has_mdc_filter(self):
        setup_logging()
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, MDCFilter) for f in handler.filters)

    def test_json_output_carries_mdc(self):
        stream = io.StringIO()
        setup_logging(stream=stream)
        logger = get_logger("test")
        with put_closeable("requestId", "r-42"):
            logger.info("handling request")
        logger.info("after request")
        first, second = (json.loads(line) for line in stream.getvalue().splitlines())
        assert first["requestId"] == "r-42"
        assert "requestId" not in second

    def test_human_format(self):
        config = LoggingConfig(log_format=LogFormat.HUMAN, use_colors=False)
        stream = io.StringIO()
        setup_logging(config=config, stream=stream)
        with put_closeable("userId", "12345"):
            get_logger("test").info("test message")
        output = stream.getvalue()
        assert "|" in output
        assert "userId=12345" in output

    def test_debug_lifecycle_logged(self):
        config = LoggingConfig(log_level=LogLevel.DEBUG)
        stream = io.StringIO()
        setup_logging(config=config, stream=stream)
        with put_closeable("userId", "12345"):
            pass
        messages = [json.loads(line)["message"] for line in stream.getvalue().splitlines()]
        assert "Added scoped MDC entry" in messages
        assert "Removed scoped MDC entries" in messages

    def test_idempotent_without_force(self):
        setup_logging()
        root = logging.getLogger()
        handler_count = len(root.handlers)
        setup_logging()
        assert len(root.handlers) == handler_count

    def test_force_reconfigures(self):
        setup_logging()
        setup_logging(force=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1

    def test_respects_log_level(self):
        config = LoggingConfig(log_level=LogLevel.ERROR)
        setup_logging(config=config)
        root = logging.getLogger()
        assert root.level == logging.ERROR


class TestCreateFormatter:
    def test_json_by_default(self):
        assert isinstance(create_formatter(LoggingConfig()), JSONFormatter)

    def test_human(self):
        config = LoggingConfig(log_format=LogFormat.HUMAN)
        assert isinstance(create_formatter(config), HumanFormatter)


class TestGetLogger:
    def test_returns_logger(self):
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"


class TestResetLogging:
    def test_removes_handlers(self):
        setup_logging()
        reset_logging()
        root = logging.getLogger()
        assert len(root.handlers) == 0
