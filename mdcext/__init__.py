"""Scoped Mapped Diagnostic Context for Python logging.

Usage:
    from mdcext import put_closeable
    from mdcext.logging import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)

    with put_closeable("requestId", "r-42"):
        logger.info("Handling request")
"""

from mdcext.exceptions import DuplicateKeyError, MDCExtError
from mdcext.logging.context import (
    clear,
    get,
    get_copy_of_context_map,
    put,
    remove,
    set_context_map,
)
from mdcext.scoped import (
    MDCCloseable,
    MDCWriter,
    mdc_context,
    put_closeable,
    put_closeable_entries,
    put_closeable_map,
)

__all__ = [
    "DuplicateKeyError",
    "MDCCloseable",
    "MDCExtError",
    "MDCWriter",
    "clear",
    "get",
    "get_copy_of_context_map",
    "mdc_context",
    "put",
    "put_closeable",
    "put_closeable_entries",
    "put_closeable_map",
    "remove",
    "set_context_map",
]
