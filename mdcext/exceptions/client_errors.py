"""Errors caused by invalid arguments from the caller."""

from typing import Any, ClassVar

from mdcext.exceptions.base import MDCExtError


class DuplicateKeyError(MDCExtError, ValueError):
    """The same MDC key was supplied more than once.

    Raised before any entry is inserted, so the MDC is left untouched.
    """

    error_code: ClassVar[str] = "DUPLICATE_KEY"

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize duplicate key error with the colliding key.

        Args:
            message: Description of the collision.
            key: The key that appeared more than once.
            context: Additional context information.
        """
        context_dict = context or {}
        if key is not None:
            context_dict["key"] = key
        super().__init__(message, context=context_dict)
        self.key = key
