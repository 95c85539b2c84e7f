"""mdcext exception hierarchy.

Architecture:
    MDCExtError (base)
    └── DuplicateKeyError (also a ValueError)

Errors raised by an MDC store are never wrapped and reach the caller as-is.

Usage:
    from mdcext.exceptions import DuplicateKeyError

    try:
        put_closeable_entries(("user", "a"), ("user", "b"))
    except DuplicateKeyError as error:
        logger.warning("Rejected MDC entries", extra={"error": error.to_log_dict()})
"""

from mdcext.exceptions.base import MDCExtError
from mdcext.exceptions.client_errors import DuplicateKeyError

__all__ = [
    "DuplicateKeyError",
    "MDCExtError",
]
