"""Logging filter that attaches the current MDC to each record."""

import logging

from mdcext.logging.context import get_copy_of_context_map


class MDCFilter(logging.Filter):
    """Adds the MDC of the emitting context to every log record as ``record.mdc``.

    The snapshot is taken when the record passes the filter, so handlers that
    format later (for example from a queue) still see the emitter's entries.
    ``%(mdc)s`` can be used in stdlib format strings.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not isinstance(getattr(record, "mdc", None), dict):
            record.mdc = get_copy_of_context_map()
        return True
