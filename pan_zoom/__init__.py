"""2D pan/zoom geometry engine for SVG view boxes and translate+scale elements."""
from __future__ import annotations

from pan_zoom.errors import (
    BindingError,
    DegenerateRect,
    InvalidDimensions,
    InvalidScale,
    NonInvertibleTransform,
    PanZoomError,
    UnsupportedEventTarget,
)
from pan_zoom.geometry import (
    AffineTransform,
    Point,
    Rect,
    Vector,
    ViewPortPos,
    ViewPortRect,
    ViewPortVector,
)
from pan_zoom.model import (
    InvariantError,
    PanZoomState,
    PanZoomStore,
    TranslateScaleModel,
    ViewBox,
    ViewBoxModel,
    ViewState,
    bind_view_box,
)

__version__ = "0.1.0"

__all__ = [
    "AffineTransform",
    "BindingError",
    "DegenerateRect",
    "InvalidDimensions",
    "InvalidScale",
    "InvariantError",
    "NonInvertibleTransform",
    "PanZoomError",
    "PanZoomState",
    "PanZoomStore",
    "Point",
    "Rect",
    "TranslateScaleModel",
    "UnsupportedEventTarget",
    "Vector",
    "ViewBox",
    "ViewBoxModel",
    "ViewPortPos",
    "ViewPortRect",
    "ViewPortVector",
    "ViewState",
    "bind_view_box",
]
