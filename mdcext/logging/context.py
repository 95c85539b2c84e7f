"""Mapped Diagnostic Context backed by context variables.

Uses Python's contextvars for thread-safe, async-compatible context. Every
mutation copies the current mapping before setting it, so a thread or an
asyncio task never observes writes made by another one.
"""

from contextvars import ContextVar
from typing import Protocol
from uuid import uuid4

CORRELATION_ID_KEY = "correlation_id"

_context_map: ContextVar[dict[str, str] | None] = ContextVar("mdc_context_map", default=None)


class MDCAdapter(Protocol):
    """Interface of an MDC store."""

    def put(self, key: str, value: str) -> None:
        """Insert or overwrite an entry."""
        ...

    def get(self, key: str) -> str | None:
        """Return the value for key, or None when absent."""
        ...

    def remove(self, key: str) -> None:
        """Remove an entry. Removing an absent key is a no-op."""
        ...

    def clear(self) -> None:
        """Remove every entry."""
        ...

    def get_copy_of_context_map(self) -> dict[str, str]:
        """Return a copy of the current entries."""
        ...


class ContextVarMDCAdapter:
    """MDC store keeping one mapping per execution context."""

    def __init__(self, context_map: ContextVar[dict[str, str] | None] = _context_map) -> None:
        """Initialize the adapter.

        Args:
            context_map: Context variable holding the mapping.
        """
        self._context_map = context_map

    def put(self, key: str, value: str) -> None:
        """Insert or overwrite an entry in the current context.

        Args:
            key: The MDC key. Must not be None.
            value: The value to associate with the key.

        Raises:
            ValueError: If key is None.
        """
        if key is None:
            raise ValueError("MDC key cannot be None")
        current = self._context_map.get()
        current = {} if current is None else current.copy()
        current[key] = value
        self._context_map.set(current)

    def get(self, key: str) -> str | None:
        """Get the value for key in the current context.

        Args:
            key: The MDC key.

        Returns:
            The value, or None if the key is absent.
        """
        current = self._context_map.get()
        if current is None:
            return None
        return current.get(key)

    def remove(self, key: str) -> None:
        """Remove key from the current context. Absent keys are ignored."""
        current = self._context_map.get()
        if current is None or key not in current:
            return
        current = current.copy()
        del current[key]
        self._context_map.set(current)

    def clear(self) -> None:
        """Remove every entry from the current context."""
        self._context_map.set(None)

    def get_copy_of_context_map(self) -> dict[str, str]:
        """Get a copy of the current entries.

        Returns:
            Dictionary of MDC entries. Mutating it does not affect the store.
        """
        current = self._context_map.get()
        if current is None:
            return {}
        return current.copy()

    def set_context_map(self, context_map: dict[str, str]) -> None:
        """Replace every entry of the current context with a copy of context_map."""
        self._context_map.set(dict(context_map))


_default_adapter = ContextVarMDCAdapter()


def get_mdc_adapter() -> ContextVarMDCAdapter:
    """Get the process-wide MDC adapter."""
    return _default_adapter


def put(key: str, value: str) -> None:
    """Put an entry into the MDC of the current context."""
    _default_adapter.put(key, value)


def get(key: str) -> str | None:
    """Get an entry from the MDC of the current context."""
    return _default_adapter.get(key)


def remove(key: str) -> None:
    """Remove an entry from the MDC of the current context."""
    _default_adapter.remove(key)


def clear() -> None:
    """Clear the MDC of the current context."""
    _default_adapter.clear()


def get_copy_of_context_map() -> dict[str, str]:
    """Get a copy of the MDC of the current context."""
    return _default_adapter.get_copy_of_context_map()


def set_context_map(context_map: dict[str, str]) -> None:
    """Replace the MDC of the current context."""
    _default_adapter.set_context_map(context_map)


def get_correlation_id() -> str:
    """Get the current correlation ID.

    Returns:
        The correlation ID for the current context, or an empty string.
    """
    return _default_adapter.get(CORRELATION_ID_KEY) or ""


def set_correlation_id(value: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        value: The correlation ID.
    """
    _default_adapter.put(CORRELATION_ID_KEY, value)


def generate_correlation_id() -> str:
    """Generate and set a new correlation ID.

    Returns:
        The generated correlation ID.
    """
    new_id = str(uuid4())
    _default_adapter.put(CORRELATION_ID_KEY, new_id)
    return new_id


def clear_context() -> None:
    """Clear all context (correlation ID included)."""
    _default_adapter.clear()
