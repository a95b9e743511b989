"""
Integer geometry primitives used by the cloud layout.
Coordinates follow image conventions: y grows downward.
"""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Integer (x, y) position or offset."""

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    """Integer (width, height) of a requested rectangle."""

    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle defined by its top-left origin and size."""

    origin: Point
    size: Size

    @classmethod
    def centered_at(cls, center: Point, size: Size) -> "Rectangle":
        """Build the rectangle whose centroid sits on ``center``."""
        return cls(
            Point(center.x - size.width // 2, center.y - size.height // 2), size
        )

    @property
    def left(self) -> int:
        return self.origin.x

    @property
    def top(self) -> int:
        return self.origin.y

    @property
    def right(self) -> int:
        return self.origin.x + self.size.width

    @property
    def bottom(self) -> int:
        return self.origin.y + self.size.height

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def area(self) -> int:
        return self.size.width * self.size.height

    @property
    def center(self) -> Point:
        return Point(
            self.left + self.size.width // 2, self.top + self.size.height // 2
        )

    def intersects(self, other: "Rectangle") -> bool:
        """
        Check whether two rectangles share interior area.

        Rectangles that only touch along an edge or a corner do not intersect.
        """
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def as_box(self) -> Tuple[int, int, int, int]:
        """Return (left, top, right, bottom) as expected by Pillow drawing calls."""
        return self.left, self.top, self.right, self.bottom
