"""Axis-aligned bounding box stored as four decimal edges.

The four edges are the only stored state. Width, height, corners and
centers are derived from them on every read, so an edge assignment is
immediately reflected everywhere without any lockstep bookkeeping.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Any

from .constants import FIELD_SEPARATOR
from .coordinate import Coordinate, Scalar, arithmetic_context, format_scalar
from .exceptions import EmptyInputError, ValidationError
from .logging_config import create_logger
from .validation import require_scalar, validate_edges

logger = create_logger(__name__)


class BoundingBox:
    """The smallest axis-aligned rectangle enclosing a set of coordinates.

    Y grows downward, so ``top <= bottom`` for a well-formed box. Edges may
    be reassigned freely after construction; assignments are not re-checked
    against the opposite edge.
    """

    __slots__ = ("_left", "_top", "_right", "_bottom")

    def __init__(
        self,
        left: Scalar,
        top: Scalar,
        right: Scalar | None = None,
        bottom: Scalar | None = None,
    ) -> None:
        """Create a box from its edges.

        Args:
            left: X value of the left side.
            top: Y value of the top side.
            right: X value of the right side. Defaults to ``left``.
            bottom: Y value of the bottom side. Defaults to ``top``.

        Raises:
            ValidationError: If an edge is not a finite number, or if
                ``right < left`` or ``bottom < top``. Both inversions are
                reported together; ``field`` names the first of them.
        """
        left_value = require_scalar(left, "left")
        top_value = require_scalar(top, "top")
        right_value = left_value if right is None else require_scalar(right, "right")
        bottom_value = top_value if bottom is None else require_scalar(bottom, "bottom")

        result = validate_edges(left_value, top_value, right_value, bottom_value)
        if not result.valid:
            error = ValidationError(
                result.error or "inverted bounding box",
                field=result.value[0],
                violations=result.value,
            )
            logger.debug("Rejected inverted box: %s", error.to_dict())
            raise error

        self._left = left_value
        self._top = top_value
        self._right = right_value
        self._bottom = bottom_value

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate) -> BoundingBox:
        """Create a zero-size box anchored at ``coordinate``."""
        return cls(coordinate.x, coordinate.y)

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Coordinate]) -> BoundingBox:
        """Create the minimal box enclosing every coordinate.

        Raises:
            EmptyInputError: If ``coordinates`` yields nothing.
        """
        iterator = iter(coordinates)
        first = next(iterator, None)
        if first is None:
            raise EmptyInputError(
                "Cannot create a bounding box from an empty coordinate sequence.",
                field="coordinates",
            )
        box = cls.from_coordinate(first)
        box.encompass(iterator)
        return box

    # Edges

    @property
    def left(self) -> Decimal:
        return self._left

    @left.setter
    def left(self, value: Scalar) -> None:
        self._left = require_scalar(value, "left")

    @property
    def top(self) -> Decimal:
        return self._top

    @top.setter
    def top(self, value: Scalar) -> None:
        self._top = require_scalar(value, "top")

    @property
    def right(self) -> Decimal:
        return self._right

    @right.setter
    def right(self, value: Scalar) -> None:
        self._right = require_scalar(value, "right")

    @property
    def bottom(self) -> Decimal:
        return self._bottom

    @bottom.setter
    def bottom(self, value: Scalar) -> None:
        self._bottom = require_scalar(value, "bottom")

    # Derived geometry

    @property
    def width(self) -> Decimal:
        with arithmetic_context():
            return self._right - self._left

    @property
    def height(self) -> Decimal:
        with arithmetic_context():
            return self._bottom - self._top

    @property
    def top_left(self) -> Coordinate:
        return Coordinate(self._left, self._top)

    @property
    def top_right(self) -> Coordinate:
        return Coordinate(self._right, self._top)

    @property
    def bottom_left(self) -> Coordinate:
        return Coordinate(self._left, self._bottom)

    @property
    def bottom_right(self) -> Coordinate:
        return Coordinate(self._right, self._bottom)

    @property
    def relative_center(self) -> Coordinate:
        """Center expressed as an offset from the top-left corner."""
        with arithmetic_context():
            return Coordinate(self.width / 2, self.height / 2)

    @property
    def center(self) -> Coordinate:
        offset = self.relative_center
        with arithmetic_context():
            return Coordinate(self._left + offset.x, self._top + offset.y)

    # Operations

    def contains(self, coordinate: Coordinate) -> bool:
        """Whether ``coordinate`` lies inside the box, edges included."""
        return (
            self._left <= coordinate.x <= self._right
            and self._top <= coordinate.y <= self._bottom
        )

    def encompass(self, coordinates: Coordinate | Iterable[Coordinate]) -> None:
        """Grow the box, if needed, so it also encloses ``coordinates``.

        Accepts a single coordinate or an iterable of them, applied in order.
        """
        if isinstance(coordinates, Coordinate):
            self._encompass_one(coordinates)
            return
        for coordinate in coordinates:
            self._encompass_one(coordinate)

    def _encompass_one(self, c: Coordinate) -> None:
        # Each edge is checked on its own; growth can happen on any side
        if c.x < self._left:
            self._left = c.x
        if c.x > self._right:
            self._right = c.x
        if c.y < self._top:
            self._top = c.y
        if c.y > self._bottom:
            self._bottom = c.y
        logger.debug("Encompassed %s -> %r", c, self)

    def to_rect(
        self,
        factory: Callable[[Any, Any], Any] | None = None,
        point_factory: Callable[[float, float], Any] | None = None,
    ) -> Any:
        """Narrow to float for a host UI rectangle type.

        Args:
            factory: Host rectangle constructor taking the top-left and
                     bottom-right points. When omitted the pair is returned.
            point_factory: Host point constructor passed to ``to_point``.
        """
        top_left = self.top_left.to_point(point_factory)
        bottom_right = self.bottom_right.to_point(point_factory)
        if factory is None:
            return (top_left, bottom_right)
        return factory(top_left, bottom_right)

    def copy(self) -> BoundingBox:
        # Skips __init__ so a box inverted by edge assignment copies as-is
        clone = BoundingBox.__new__(BoundingBox)
        clone._left = self._left
        clone._top = self._top
        clone._right = self._right
        clone._bottom = self._bottom
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return (self._left, self._top, self._right, self._bottom) == (
            other._left,
            other._top,
            other._right,
            other._bottom,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"BoundingBox(left={self._left!r}, top={self._top!r}, "
            f"right={self._right!r}, bottom={self._bottom!r})"
        )

    def __str__(self) -> str:
        return FIELD_SEPARATOR.join(
            format_scalar(value) for value in (self._top, self._left, self.width, self.height)
        )
