"""Input validation and decimal coercion for geometry values.

Provides validation for the scalar types accepted by coordinates and boxes:
- Decimals, ints and decimal literal strings (taken as-is)
- Floats (converted through their shortest repr, so 0.1 stays 0.1)
- Edge quadruples (right must not be left of left, bottom not above top)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from .exceptions import ValidationError


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    valid: bool
    value: Any = None
    error: str | None = None

    @classmethod
    def success(cls, value: Any = None) -> ValidationResult:
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, error: str, value: Any = None) -> ValidationResult:
        return cls(valid=False, value=value, error=error)


def validate_scalar(value: Any, name: str = "value") -> ValidationResult:
    """Validate a scalar and convert it to ``Decimal``.

    Args:
        value: The scalar to validate.
        name: The parameter name for error messages.

    Returns:
        ValidationResult with the ``Decimal`` value or error.
    """
    # bool is an int subclass but never a meaningful coordinate
    if isinstance(value, bool):
        return ValidationResult.failure(f"{name} must be a number, got bool")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return ValidationResult.failure(f"{name} must be finite, got {value!r}")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            return ValidationResult.failure(f"{name} is not a decimal literal: {value!r}")
    else:
        return ValidationResult.failure(f"{name} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        return ValidationResult.failure(f"{name} must be finite, got {value!r}")

    return ValidationResult.success(result)


def require_scalar(value: Any, name: str = "value") -> Decimal:
    """Convert a scalar to ``Decimal`` or raise.

    Raises:
        ValidationError: If the value is not an accepted finite number.
    """
    result = validate_scalar(value, name)
    if not result.valid:
        raise ValidationError(result.error or f"invalid {name}", field=name)
    return result.value


def validate_edges(
    left: Decimal, top: Decimal, right: Decimal, bottom: Decimal
) -> ValidationResult:
    """Validate that four edges describe a non-inverted rectangle.

    Both edge pairs are checked, so a failure lists every violated pair.

    Args:
        left: X value of the left side.
        top: Y value of the top side.
        right: X value of the right side.
        bottom: Y value of the bottom side.

    Returns:
        ValidationResult with the edge tuple, or an error whose ``value`` is
        the list of offending edge names (``right`` before ``bottom``).
    """
    violations: list[str] = []
    messages: list[str] = []

    if right < left:
        violations.append("right")
        messages.append(f"The value of 'right' ({right}) cannot be less than the value of 'left' ({left}).")

    if bottom < top:
        violations.append("bottom")
        messages.append(f"The value of 'bottom' ({bottom}) cannot be less than the value of 'top' ({top}).")

    if violations:
        return ValidationResult.failure(" ".join(messages), value=violations)

    return ValidationResult.success((left, top, right, bottom))
