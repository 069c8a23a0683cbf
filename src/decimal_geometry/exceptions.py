"""Exception hierarchy for geometry errors.

All errors raised by the package derive from ``DecimalGeometryError`` so
callers can catch them as a group, or narrow to the specific failure.
"""

from __future__ import annotations

from typing import Any


class DecimalGeometryError(Exception):
    """Base exception for all decimal geometry errors."""

    error_code: str = ""

    def __init__(self, message: str, error_code: str | None = None, **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.__dict__.update(kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Flatten the error and its context for structured log records.

        Geometry code logs rejected input through this, so the offending
        ``field`` and any ``violations`` appear alongside the message.
        """
        result: dict[str, Any] = {
            "error": True,
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
        }
        # e.g. field, violations
        result.update(
            {k: v for k, v in self.__dict__.items() if k not in ["message", "error_code"]}
        )
        return result


class ValidationError(DecimalGeometryError):
    """Raised when an argument is outside its accepted domain."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, **kwargs: Any):
        super().__init__(message, type(self).error_code, field=field, **kwargs)


class EmptyInputError(ValidationError):
    """Raised when a coordinate sequence that must be non-empty is empty."""

    error_code = "EMPTY_INPUT"


__all__ = [
    "DecimalGeometryError",
    "ValidationError",
    "EmptyInputError",
]
