"""Screen-space value types relative to the view port.

All positions are in screen pixels with the y-axis pointing down. A
``ViewPortPos`` is always relative to the top-left corner of a fixed element,
so ``ViewPortPos.origin()`` refers to that corner. Positions may be negative
or lie beyond the displayable area.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from pan_zoom.errors import DegenerateRect, InvalidDimensions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewPortVector:
    """A 2-dimensional screen-space vector (y-axis down)."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> "ViewPortVector":
        return cls(0.0, 0.0)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def __add__(self, other: "ViewPortVector") -> "ViewPortVector":
        if not isinstance(other, ViewPortVector):
            return NotImplemented
        return ViewPortVector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "ViewPortVector") -> "ViewPortVector":
        if not isinstance(other, ViewPortVector):
            return NotImplemented
        return ViewPortVector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "ViewPortVector":
        return ViewPortVector(-self.x, -self.y)

    def __mul__(self, factor: float) -> "ViewPortVector":
        return ViewPortVector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"Vec({self.x}, {self.y})"


@dataclass(frozen=True)
class ViewPortPos:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def origin(cls) -> "ViewPortPos":
        return cls(0.0, 0.0)

    def as_vector(self) -> ViewPortVector:
        return ViewPortVector(self.x, self.y)

    def __add__(self, other: ViewPortVector) -> "ViewPortPos":
        if not isinstance(other, ViewPortVector):
            return NotImplemented
        return ViewPortPos(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if isinstance(other, ViewPortPos):
            return ViewPortVector(self.x - other.x, self.y - other.y)
        if isinstance(other, ViewPortVector):
            return ViewPortPos(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class ViewPortRect:
    """A screen-space rect relative to the view port."""

    top_left: ViewPortPos
    width: float
    height: float

    def __post_init__(self) -> None:
        if not (self.width >= 0.0 and self.height >= 0.0):
            raise InvalidDimensions(self.width, self.height)

    @classmethod
    def from_corners(
        cls, top_left: ViewPortPos, bottom_right: ViewPortPos
    ) -> "ViewPortRect":
        return cls(top_left, bottom_right.x - top_left.x, bottom_right.y - top_left.y)

    @property
    def left(self) -> float:
        return self.top_left.x

    @property
    def top(self) -> float:
        return self.top_left.y

    @property
    def right(self) -> float:
        return self.top_left.x + self.width

    @property
    def bottom(self) -> float:
        return self.top_left.y + self.height

    @property
    def bottom_right(self) -> ViewPortPos:
        return ViewPortPos(self.right, self.bottom)

    @property
    def aspect_ratio(self) -> float:
        """width / height"""
        if self.height == 0.0:
            return math.inf
        return self.width / self.height

    def center(self) -> ViewPortPos:
        return ViewPortPos(self.left + self.width / 2, self.top + self.height / 2)

    def contains(self, point: ViewPortPos) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def offset(self, point: ViewPortPos) -> ViewPortVector:
        """Return the vector from the top-left corner of this rect to ``point``."""
        offset = point - self.top_left
        logger.debug("offset for %s to top left of %s is %s", point, self, offset)
        return offset

    def relative_offset(self, point: ViewPortPos) -> ViewPortVector:
        """Return the offset of ``point`` divided by the rect size per dimension.

        Points inside the rect have components between ``0.0`` and ``1.0``.
        Raises ``DegenerateRect`` when the width or height is zero.
        """
        if self.width == 0.0 or self.height == 0.0:
            raise DegenerateRect(self.width, self.height)
        absolute = self.offset(point)
        return ViewPortVector(absolute.x / self.width, absolute.y / self.height)

    def __str__(self) -> str:
        return (
            f"Rect x:{{{self.left}..{self.right}}} "
            f"⨯ y:{{{self.top}..{self.bottom}}}"
        )
