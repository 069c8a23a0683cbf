"""Decimal-backed 2D geometry: coordinates and axis-aligned bounding boxes."""

from .bounding_box import BoundingBox
from .coordinate import Coordinate
from .exceptions import DecimalGeometryError, EmptyInputError, ValidationError
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "BoundingBox",
    "Coordinate",
    "DecimalGeometryError",
    "EmptyInputError",
    "ValidationError",
    "setup_logging",
]
