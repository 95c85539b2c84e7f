"""MDC-aware structured logging.

Usage:
    from mdcext.logging import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__)
    logger.info("Processing order", extra={"order_id": "123"})
"""

from mdcext.logging.config import LogFormat, LoggingConfig, LogLevel
from mdcext.logging.context import (
    ContextVarMDCAdapter,
    MDCAdapter,
    clear_context,
    generate_correlation_id,
    get_copy_of_context_map,
    get_correlation_id,
    get_mdc_adapter,
    set_correlation_id,
)
from mdcext.logging.filters import MDCFilter
from mdcext.logging.formatters import HumanFormatter, JSONFormatter
from mdcext.logging.logger import get_logger, reset_logging, setup_logging

__all__ = [
    "ContextVarMDCAdapter",
    "HumanFormatter",
    "JSONFormatter",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "MDCAdapter",
    "MDCFilter",
    "clear_context",
    "generate_correlation_id",
    "get_copy_of_context_map",
    "get_correlation_id",
    "get_logger",
    "get_mdc_adapter",
    "reset_logging",
    "set_correlation_id",
    "setup_logging",
]
