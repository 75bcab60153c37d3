"""Consistency checks for zoom operations in verification builds.

These checks catch programming errors in the pan/zoom models. They are run
only when invariant verification is enabled and are never part of the
regular control flow.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pan_zoom.geometry import ViewPortPos, ViewPortRect, ViewPortVector

if TYPE_CHECKING:
    from pan_zoom.model.pan_zoom_state import PanZoomState

FLOAT32_EPSILON = float(np.finfo(np.float32).eps)


class InvariantError(AssertionError):
    """Raised when a zoom operation violates a geometric invariant."""


def approx_eq_f32(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=FLOAT32_EPSILON, abs_tol=FLOAT32_EPSILON)


def pair_approx_eq_f32(a: tuple[float, float], b: tuple[float, float]) -> bool:
    return approx_eq_f32(a[0], b[0]) and approx_eq_f32(a[1], b[1])


def vector_approx_eq_f32(a: ViewPortVector, b: ViewPortVector) -> bool:
    return approx_eq_f32(a.x, b.x) and approx_eq_f32(a.y, b.y)


@dataclass(frozen=True)
class ZoomCheckpoint:
    """Geometry captured right before a zoom, compared against after redraw."""

    fix_point: ViewPortPos
    bounds: ViewPortRect
    unscaled_dimensions: tuple[float, float]

    def relative_fix_point(self) -> ViewPortVector | None:
        if self.bounds.width == 0.0 or self.bounds.height == 0.0:
            return None
        return self.bounds.relative_offset(self.fix_point)


def capture_zoom_checkpoint(
    state: "PanZoomState", element, fix_point: ViewPortPos
) -> ZoomCheckpoint | None:
    """Capture the checkpoint, or ``None`` when the geometry is degenerate."""
    if state.scale() == 0.0:
        return None
    return ZoomCheckpoint(
        fix_point=fix_point,
        bounds=state.bounding_rect(element),
        unscaled_dimensions=state.unscaled_dimensions(element),
    )


def assert_zoom_consistent(
    before: ZoomCheckpoint,
    state: "PanZoomState",
    element,
    *,
    scale_changed: bool,
) -> None:
    """Assert the content did not resize and the fix point did not move.

    ``element`` must reflect the state after the redraw that followed the zoom.
    """
    new_bounds = state.bounding_rect(element)
    if scale_changed and new_bounds == before.bounds:
        raise InvariantError(
            f"Bounds {new_bounds} did not change although the scale changed."
        )

    if state.scale() == 0.0:
        return
    new_unscaled = state.unscaled_dimensions(element)
    if not pair_approx_eq_f32(new_unscaled, before.unscaled_dimensions):
        raise InvariantError(
            f"Unscaled dimensions new {new_unscaled} != old {before.unscaled_dimensions}"
        )

    old_relative = before.relative_fix_point()
    if old_relative is None or new_bounds.width == 0.0 or new_bounds.height == 0.0:
        return
    new_relative = new_bounds.relative_offset(before.fix_point)
    if not vector_approx_eq_f32(new_relative, old_relative):
        diff = new_relative - old_relative
        raise InvariantError(
            "relative pointer offset must be a fix point, i.e new == old.\n"
            f"order of magnitude: ({max(new_relative.x, old_relative.x)}, "
            f"{max(new_relative.y, old_relative.y)})\n"
            f"absolute unzoomed diff: ({diff.x * new_unscaled[0]}, "
            f"{diff.y * new_unscaled[1]})"
        )


def assert_aspect_ratio_matches(content_rect_ratio: float, view_port_rect: ViewPortRect) -> None:
    if view_port_rect.width == 0.0 or view_port_rect.height == 0.0:
        return
    if not math.isclose(content_rect_ratio, view_port_rect.aspect_ratio, rel_tol=1e-9):
        raise InvariantError(
            f"Aspect ratio of view box in view port coordinate system "
            f"{view_port_rect.aspect_ratio} does not match that in SVG coordinate "
            f"system {content_rect_ratio}"
        )
