"""Two-dimensional coordinate stored as decimal values."""

from __future__ import annotations

import math
from contextlib import AbstractContextManager
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Context, Decimal, localcontext
from typing import Any, Union

from .constants import DECIMAL_PRECISION, FIELD_SEPARATOR
from .validation import require_scalar

Scalar = Union[Decimal, int, float, str]
"""Anything accepted where a decimal scalar is expected."""


def arithmetic_context() -> AbstractContextManager[Context]:
    """Decimal context used for all coordinate and edge arithmetic."""
    return localcontext(Context(prec=DECIMAL_PRECISION))


def format_scalar(value: Decimal) -> str:
    """Render a decimal as plain fixed-point text (never exponent notation)."""
    return format(value, "f")


@dataclass
class Coordinate:
    """A 2D position with decimal X and Y values.

    Attributes:
        x: X value. Always read back as ``Decimal``.
        y: Y value. Always read back as ``Decimal``.

    Both attributes accept any ``Scalar`` (``Decimal``, ``int``, ``float`` or
    a decimal literal ``str``), at construction or on later assignment, and
    coerce it to ``Decimal``. Floats go through their shortest repr so that
    ``0.1`` is stored as ``Decimal("0.1")``.
    """

    x: Decimal = Decimal(0)
    y: Decimal = Decimal(0)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("x", "y"):
            value = require_scalar(value, name)
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return f"{format_scalar(self.x)}{FIELD_SEPARATOR}{format_scalar(self.y)}"

    def copy(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    def angle_to(self, other: Coordinate) -> Decimal:
        """Angle in degrees from this coordinate to ``other``."""
        return Coordinate.angle_between(self, other)

    @staticmethod
    def angle_between(origin: Coordinate, target: Coordinate) -> Decimal:
        """Angle from ``origin`` to ``target``.

        Measured in degrees counter-clockwise from due East of ``origin``,
        in the range (-180, 180]. Coincident coordinates give 0.
        """
        with arithmetic_context():
            dx = target.x - origin.x
            dy = target.y - origin.y
            # atan2 depends only on the ratio; scaling keeps both deltas
            # within float range however large or small they are
            scale = max(abs(dx), abs(dy))
            if scale:
                dx = dx / scale
                dy = dy / scale
        # Adding 0.0 folds -0.0 into 0.0 so a due-West target gives 180, not -180
        degrees = math.degrees(math.atan2(float(dy) + 0.0, float(dx) + 0.0))
        return require_scalar(degrees, "angle")

    def distance_to(self, other: Coordinate) -> Decimal:
        """Straight-line distance from this coordinate to ``other``."""
        return Coordinate.distance_between(self, other)

    @staticmethod
    def distance_between(c1: Coordinate, c2: Coordinate) -> Decimal:
        """Straight-line distance between two coordinates.

        Computed entirely in decimal, so the result is zero only for equal
        coordinates and never overflows at magnitudes a ``Decimal`` can hold.
        """
        with arithmetic_context():
            dx = c2.x - c1.x
            dy = c2.y - c1.y
            return (dx * dx + dy * dy).sqrt()

    def to_point(self, factory: Callable[[float, float], Any] | None = None) -> Any:
        """Narrow to float for a host UI point type.

        Args:
            factory: Host point constructor taking ``(x, y)`` floats.
                     When omitted a plain ``(x, y)`` tuple is returned.
        """
        x, y = float(self.x), float(self.y)
        if factory is None:
            return (x, y)
        return factory(x, y)
