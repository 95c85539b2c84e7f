"""Log formatters that render the MDC into every record."""

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import Any, ClassVar

from mdcext.logging.context import CORRELATION_ID_KEY, get_copy_of_context_map

_STANDARD_LOG_ATTRS: frozenset[str] = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
        "mdc",
    }
)

_MAX_LOGGER_NAME_LENGTH = 30


def _record_mdc(record: logging.LogRecord) -> dict[str, str]:
    """Return the MDC snapshot for a record.

    Prefers the snapshot taken by MDCFilter at emit time, falling back to
    the MDC of the formatting context.
    """
    snapshot = getattr(record, "mdc", None)
    if isinstance(snapshot, dict):
        return dict(snapshot)
    return get_copy_of_context_map()


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_LOG_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """Format log records as JSON with MDC entries as top-level fields."""

    def __init__(
        self,
        *,
        service_name: str = "mdcext",
        include_timestamp: bool = True,
        include_location: bool = True,
        include_mdc: bool = True,
        mdc_key_prefix: str = "",
    ) -> None:
        """Initialize the JSON formatter.

        Args:
            service_name: Service identifier for log aggregation.
            include_timestamp: Whether to include timestamp field.
            include_location: Whether to include module/function/line fields.
            include_mdc: Whether to include MDC entries.
            mdc_key_prefix: Prefix prepended to every MDC key.
        """
        super().__init__()
        self._service_name = service_name
        self._include_timestamp = include_timestamp
        self._include_location = include_location
        self._include_mdc = include_mdc
        self._mdc_key_prefix = mdc_key_prefix

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        log_entry: dict[str, Any] = {}

        if self._include_timestamp:
            log_entry["timestamp"] = datetime.now(UTC).isoformat(timespec="milliseconds")

        log_entry["level"] = record.levelname
        log_entry["logger"] = record.name
        log_entry["message"] = record.getMessage()

        mdc = _record_mdc(record)
        corr_id = mdc.pop(CORRELATION_ID_KEY, "")
        if corr_id:
            log_entry["correlation_id"] = corr_id

        log_entry["service"] = self._service_name

        if self._include_location:
            log_entry["module"] = record.module
            log_entry["function"] = record.funcName
            log_entry["line"] = record.lineno

        if self._include_mdc:
            for key, value in mdc.items():
                log_entry[f"{self._mdc_key_prefix}{key}"] = value

        log_entry.update(_extra_fields(record))

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else "Unknown",
                "message": str(record.exc_info[1]) if record.exc_info[1] else "",
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


class HumanFormatter(logging.Formatter):
    """Format log records for human readability, MDC as key=value pairs."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self, *, use_colors: bool = True, include_mdc: bool = True) -> None:
        """Initialize the human formatter.

        Args:
            use_colors: Whether to use ANSI colors in output.
            include_mdc: Whether to append MDC entries.
        """
        super().__init__()
        self._use_colors = use_colors
        self._include_mdc = include_mdc

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record for human readability."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        level = record.levelname
        if self._use_colors:
            color = self.COLORS.get(level, "")
            level_string = f"{color}{level:<8}{self.RESET}"
        else:
            level_string = f"{level:<8}"

        logger_name = record.name
        if len(logger_name) > _MAX_LOGGER_NAME_LENGTH:
            truncate_at = _MAX_LOGGER_NAME_LENGTH - 3
            logger_name = "..." + logger_name[-truncate_at:]

        context_parts: list[str] = []

        mdc = _record_mdc(record)
        corr_id = mdc.pop(CORRELATION_ID_KEY, "")
        if corr_id:
            context_parts.append(f"correlation_id={corr_id}")

        if self._include_mdc:
            context_parts.extend(f"{key}={value}" for key, value in sorted(mdc.items()))

        context_parts.extend(f"{key}={value}" for key, value in _extra_fields(record).items())

        parts = [timestamp, "|", level_string, "|", f"{logger_name:<30}", "|", record.getMessage()]
        if context_parts:
            parts.extend(["|", " ".join(context_parts)])

        result = " ".join(parts)

        if record.exc_info:
            result += "\n" + "".join(traceback.format_exception(*record.exc_info))

        return result
