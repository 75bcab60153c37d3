"""Error types raised by the pan/zoom geometry engine."""

from __future__ import annotations


class PanZoomError(Exception):
    """Base class for recoverable pan/zoom failures."""


class InvalidDimensions(PanZoomError, ValueError):
    """Raised when a rectangle is built with a negative (or NaN) extent."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(
            f"Rectangle dimensions must be non-negative, got width={width}, height={height}."
        )
        self.width = width
        self.height = height


class DegenerateRect(PanZoomError, ZeroDivisionError):
    """Raised when a measurement needs a rect with non-zero width and height."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(
            f"Rectangle has no area (width={width}, height={height})."
        )
        self.width = width
        self.height = height


class NonInvertibleTransform(PanZoomError, ArithmeticError):
    """Raised when an element's transform is singular, e.g. a zero-area element."""

    def __init__(self, determinant: float) -> None:
        super().__init__(
            f"Transform is not invertible (determinant {determinant!r})."
        )
        self.determinant = determinant


class InvalidScale(PanZoomError, ValueError):
    """Raised when a scale change cannot be applied to the backing model."""


class UnsupportedEventTarget(PanZoomError, TypeError):
    """Raised when an event target has no determinable position and size.

    Only windows, documents and elements are supported; other targets (text
    nodes, document fragments, workers, ...) have no geometric extent.
    """

    def __init__(self, target_description: str) -> None:
        super().__init__(f"Unexpected event target type {target_description}")
        self.target_description = target_description


class BindingError(PanZoomError, ValueError):
    """Raised when an element cannot be bound to a pan/zoom state."""


__all__ = [
    "BindingError",
    "DegenerateRect",
    "InvalidDimensions",
    "InvalidScale",
    "NonInvertibleTransform",
    "PanZoomError",
    "UnsupportedEventTarget",
]
