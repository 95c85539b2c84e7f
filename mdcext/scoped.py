"""Scoped MDC entries that remove themselves when the scope ends.

Usage:
    from mdcext import put_closeable, put_closeable_map

    with put_closeable("userId", "12345"):
        logger.info("Loading profile")

    with put_closeable_map({"userId": "12345", "sessionId": "abc123"}):
        logger.info("Session started")

Release removes the managed keys unconditionally. A value shadowed by a
nested scope is not restored when that scope ends.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from types import TracebackType
from typing import Protocol, Self

from mdcext.exceptions import DuplicateKeyError
from mdcext.logging.context import get_mdc_adapter
from mdcext.logging.logger import get_logger

logger = get_logger(__name__)


class MDCWriter(Protocol):
    """The part of an MDC store a scoped handle needs."""

    def put(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MDCCloseable:
    """Handle owning a fixed set of MDC keys until it is closed.

    Use as a context manager so the keys are removed on every exit path.

    Attributes:
        keys: The managed keys, fixed at construction.
        closed: Whether close() has already run.
    """

    __slots__ = ("_closed", "_keys", "_mdc")

    def __init__(self, keys: str | frozenset[str] | set[str], mdc: MDCWriter | None = None) -> None:
        """Initialize the handle.

        Args:
            keys: A single key or the set of keys to manage.
            mdc: Store to remove the keys from. Defaults to the process-wide MDC.
        """
        self._keys = frozenset([keys]) if isinstance(keys, str) else frozenset(keys)
        self._mdc = mdc if mdc is not None else get_mdc_adapter()
        self._closed = False

    @property
    def keys(self) -> frozenset[str]:
        return self._keys

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Remove every managed key from the MDC.

        Subsequent calls do nothing. Keys already removed or overwritten by
        someone else are removed without error.
        """
        if self._closed:
            return
        self._closed = True
        for key in self._keys:
            self._mdc.remove(key)
        logger.debug("Removed scoped MDC entries", extra={"mdc_keys": sorted(self._keys)})

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "active"
        return f"{self.__class__.__name__}(keys={sorted(self._keys)!r}, state={state})"


def put_closeable(key: str, value: str, *, mdc: MDCWriter | None = None) -> MDCCloseable:
    """Put a key-value pair in the MDC and return a handle that removes it.

    Any previous value for key is overwritten and not saved.

    Args:
        key: The key to store in the MDC.
        value: The value associated with the key.
        mdc: Store to write to. Defaults to the process-wide MDC.

    Returns:
        A handle that removes key from the MDC when closed.
    """
    store = mdc if mdc is not None else get_mdc_adapter()
    store.put(key, value)
    logger.debug("Added scoped MDC entry", extra={"mdc_keys": [key]})
    return MDCCloseable(key, store)


def put_closeable_entries(*entries: tuple[str, str], mdc: MDCWriter | None = None) -> MDCCloseable:
    """Put several key-value pairs in the MDC and return a handle that removes them.

    Args:
        *entries: (key, value) pairs. Keys must be unique.
        mdc: Store to write to. Defaults to the process-wide MDC.

    Returns:
        A handle that removes every supplied key when closed.

    Raises:
        DuplicateKeyError: If a key appears more than once. Nothing is inserted.
    """
    entry_map: dict[str, str] = {}
    for key, value in entries:
        if key in entry_map:
            raise DuplicateKeyError(f"Duplicate MDC key: {key!r}", key=key)
        entry_map[key] = value
    return put_closeable_map(entry_map, mdc=mdc)


def put_closeable_map(entry_map: Mapping[str, str], *, mdc: MDCWriter | None = None) -> MDCCloseable:
    """Put every entry of a mapping in the MDC and return a handle that removes them.

    Args:
        entry_map: Entries to add to the MDC.
        mdc: Store to write to. Defaults to the process-wide MDC.

    Returns:
        A handle that removes the mapping's keys when closed.
    """
    store = mdc if mdc is not None else get_mdc_adapter()
    entries = dict(entry_map)
    for key, value in entries.items():
        store.put(key, value)
    logger.debug("Added scoped MDC entries", extra={"mdc_keys": sorted(entries)})
    return MDCCloseable(frozenset(entries), store)


@contextmanager
def mdc_context(**entries: str) -> Iterator[MDCCloseable]:
    """Keyword form of put_closeable_map for use in a with statement.

    Args:
        **entries: Entries to add to the MDC for the duration of the block.

    Yields:
        The active handle.
    """
    with put_closeable_map(entries) as handle:
        yield handle
