"""Base exception class for mdcext.

Uses a registry keyed by error code for structured error handling.
"""

from typing import Any, ClassVar


class MDCExtError(Exception):
    """Base exception for all mdcext errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        context: Additional debugging information.
    """

    error_code: ClassVar[str] = "MDCEXT_ERROR"

    _registry: ClassVar[dict[str, type["MDCExtError"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register subclass in the exception registry."""
        super().__init_subclass__(**kwargs)
        cls._registry[cls.error_code] = cls

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            context: Additional key-value pairs for debugging.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a serializable dictionary."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }

    def to_log_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            **self.to_dict(),
            "exception_type": self.__class__.__name__,
        }

    @classmethod
    def get_by_error_code(cls, error_code: str) -> type["MDCExtError"] | None:
        """Look up exception class by error code.

        Args:
            error_code: The error code to look up.

        Returns:
            The exception class, or None if not found.
        """
        return cls._registry.get(error_code)

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"context={self.context!r})"
        )
