"""Affine transforms between content space and view-port space."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

import numpy as np

from pan_zoom.errors import NonInvertibleTransform
from pan_zoom.geometry.content_space import Point
from pan_zoom.geometry.view_port import ViewPortPos

if TYPE_CHECKING:
    from pan_zoom.elements import TransformedExtent

# (row, column) of a, b, c, d, e, f in the 3x3 matrix
_MATRIX_ORDER = ((0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2))


@dataclass(frozen=True)
class AffineTransform:
    """A 2x3 affine matrix.

    ::

        [a c e]
        [b d f]
        [0 0 1]

    i.e. ``x' = a*x + c*y + e`` and ``y' = b*x + d*y + f``. This is the layout
    of an SVG/DOM matrix as returned by ``getScreenCTM()``.
    """

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "AffineTransform":
        return cls(sx, 0.0, 0.0, sx if sy is None else sy, 0.0, 0.0)

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(1.0, 0.0, 0.0, 1.0, tx, ty)

    @classmethod
    def from_element(cls, element: "TransformedExtent") -> "AffineTransform":
        """Read the element's current content-to-screen transform."""
        transform = element.current_transform()
        if not isinstance(transform, AffineTransform):
            raise TypeError(
                f"{type(element).__name__}.current_transform() returned "
                f"{type(transform).__name__}, expected AffineTransform"
            )
        return transform

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "AffineTransform":
        m = np.asarray(matrix, dtype=float)
        if m.shape not in ((2, 3), (3, 3)):
            raise ValueError(f"Expected a 2x3 or 3x3 matrix, got shape {m.shape}")
        return cls(*(float(m[row, col]) for row, col in _MATRIX_ORDER))

    def as_matrix(self) -> np.ndarray:
        return np.array(
            [
                [self.a, self.c, self.e],
                [self.b, self.d, self.f],
                [0.0, 0.0, 1.0],
            ]
        )

    def determinant(self) -> float:
        return self.a * self.d - self.c * self.b

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= sys.float_info.epsilon

    def try_invert(self) -> "AffineTransform | None":
        """Return the exact inverse, or ``None`` for a (nearly) singular matrix.

        See https://www.wolframalpha.com/input?i=inverse+%7B%7Ba%2C+c%2C+e%7D%2C+%7Bb%2C+d%2C+f%7D%2C+%7B0%2C0%2C1%7D%7D
        """
        det = self.determinant()
        if abs(det) < sys.float_info.epsilon:
            return None
        return AffineTransform(
            a=self.d / det,
            b=-self.b / det,
            c=-self.c / det,
            d=self.a / det,
            e=-(self.d * self.e - self.c * self.f) / det,
            f=(self.b * self.e - self.a * self.f) / det,
        )

    def invert(self) -> "AffineTransform":
        inverse = self.try_invert()
        if inverse is None:
            raise NonInvertibleTransform(self.determinant())
        return inverse

    def then(self, other: "AffineTransform") -> "AffineTransform":
        """Return the transform applying ``self`` first and ``other`` second."""
        return AffineTransform.from_matrix(other.as_matrix() @ self.as_matrix())

    def _map(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.a * x + self.c * y + self.e,
            self.b * x + self.d * y + self.f,
        )

    @overload
    def apply(self, point: Point) -> ViewPortPos: ...

    @overload
    def apply(self, point: ViewPortPos) -> Point: ...

    def apply(self, point):
        """Map ``point`` into the other coordinate system.

        A content ``Point`` maps to a ``ViewPortPos``; a ``ViewPortPos`` maps
        to a content ``Point``, which is how an inverted (screen-to-content)
        transform is used.
        """
        if isinstance(point, ViewPortPos):
            return Point(*self._map(point.x, point.y))
        if isinstance(point, Point):
            return ViewPortPos(*self._map(point.x, point.y))
        raise TypeError(f"Cannot transform {type(point).__name__}")

    def apply_inverse(self, pos: ViewPortPos) -> Point:
        """Map a view-port position back into content space."""
        return self.invert().apply(pos)

    def apply_points(self, points: np.ndarray) -> np.ndarray:
        """Map an ``(N, 2)`` array of coordinates in one step."""
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        linear = np.array([[self.a, self.c], [self.b, self.d]])
        return pts @ linear.T + np.array([self.e, self.f])

    def __str__(self) -> str:
        return (
            f"[{self.a} {self.c} {self.e}; {self.b} {self.d} {self.f}]"
        )
