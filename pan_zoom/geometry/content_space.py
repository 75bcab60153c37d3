"""Value types for the content (SVG) coordinate system.

Content space uses arbitrary user units. In this system its y-axis points
down, like the view port, so a rect's ``top`` is smaller than its ``bottom``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from pan_zoom.errors import InvalidDimensions

Bounds = tuple[float, float, float, float]


@dataclass(frozen=True)
class Vector:
    """An element of the vector space of the content coordinate system."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector":
        return cls(0.0, 0.0)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vector":
        return Vector(self.x / divisor, self.y / divisor)

    def __str__(self) -> str:
        return f"Vec({self.x}, {self.y})"


@dataclass(frozen=True)
class Point:
    """A point in the content coordinate system."""

    x: float
    y: float

    def __add__(self, other: Vector) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def __str__(self) -> str:
        return f"SvgPoint ({self.x}, {self.y})"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned content-space rectangle with a non-negative extent."""

    top_left: Point
    dimensions: Vector

    def __post_init__(self) -> None:
        # ``not >=`` also rejects NaN
        if not (self.dimensions.x >= 0.0 and self.dimensions.y >= 0.0):
            raise InvalidDimensions(self.dimensions.x, self.dimensions.y)

    @classmethod
    def from_bounds(
        cls, min_x: float, max_x: float, min_y: float, max_y: float
    ) -> "Rect":
        return cls(Point(min_x, min_y), Vector(max_x - min_x, max_y - min_y))

    @classmethod
    def bounding(cls, points: Iterable[Point]) -> "Rect | None":
        """Return the smallest rect containing ``points``, or ``None`` if empty."""
        pts = list(points)
        if not pts:
            return None
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls.from_bounds(min(xs), max(xs), min(ys), max(ys))

    @property
    def left(self) -> float:
        return self.top_left.x

    @property
    def top(self) -> float:
        return self.top_left.y

    @property
    def width(self) -> float:
        return self.dimensions.x

    @property
    def height(self) -> float:
        return self.dimensions.y

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def aspect_ratio(self) -> float:
        """width / height"""
        if self.height == 0.0:
            return math.inf
        return self.width / self.height

    def bounds(self) -> Bounds:
        return (self.left, self.right, self.top, self.bottom)

    def __str__(self) -> str:
        return (
            f"SvgRect x:{{{self.left}..{self.right}}} "
            f"⨯ y:{{{self.top}..{self.bottom}}}"
        )
