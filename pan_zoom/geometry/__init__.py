"""Coordinate primitives and transforms shared by the pan/zoom models."""
from __future__ import annotations

from pan_zoom.geometry.affine import AffineTransform
from pan_zoom.geometry.content_space import Bounds, Point, Rect, Vector
from pan_zoom.geometry.view_port import ViewPortPos, ViewPortRect, ViewPortVector

__all__ = [
    "AffineTransform",
    "Bounds",
    "Point",
    "Rect",
    "Vector",
    "ViewPortPos",
    "ViewPortRect",
    "ViewPortVector",
]
