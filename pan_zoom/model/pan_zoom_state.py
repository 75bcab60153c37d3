"""Pan/zoom capability shared by the view-box and translate+scale models.

Both models answer the same questions about an element (scale, top-left,
bounding rect) and both implement the same zoom operation: change the scale
while keeping a view-port "fix point" over the same piece of content.
"""
from __future__ import annotations

import logging
import math
from typing import Protocol, Union, runtime_checkable

from pan_zoom.elements import PositionedExtent, TransformedExtent
from pan_zoom.errors import InvalidScale
from pan_zoom.geometry import AffineTransform, ViewPortPos, ViewPortRect, ViewPortVector
from pan_zoom.model import invariants
from pan_zoom.model.view_box import ViewBox
from pan_zoom.model.view_state import ViewState

logger = logging.getLogger(__name__)

Snapshot = Union[ViewBox, ViewState]


@runtime_checkable
class PanZoomState(Protocol):
    def scale(self) -> float:
        """Current zoom factor (dimensionless)."""

    def unscaled_dimensions(self, element) -> tuple[float, float]:
        """Width and height of the content with the scale divided out.

        The values are in a model-internal unit and may only be compared to
        other results of this method; a zoom must leave them unchanged.
        """

    def top_left(self, element) -> ViewPortPos:
        """Top-left corner of the zoomed content in view-port coordinates."""

    def bounding_rect(self, element) -> ViewPortRect:
        """On-screen rect of the zoomed content in view-port coordinates."""

    def set_scale(self, element, fix_point: ViewPortPos, new_scale: float) -> None:
        """Change the scale to ``new_scale`` keeping ``fix_point`` in place."""

    def snapshot(self) -> Snapshot:
        """Return a detached copy of the backing value."""


class ViewBoxModel:
    """Pan/zoom state of an ``<svg>`` element driven by its ``viewBox``.

    The element's screen CTM maps content space to the view port. It must be
    an ``<svg>`` rendered with the default ``preserveAspectRatio`` of
    ``"xMidYMid meet"``.
    """

    def __init__(self, view_box: ViewBox | None = None, *, verify_invariants: bool = False) -> None:
        self.view_box = view_box if view_box is not None else ViewBox()
        self.verify_invariants = verify_invariants

    def scale(self) -> float:
        return self.view_box.scale()

    def unscaled_dimensions(self, element: TransformedExtent) -> tuple[float, float]:
        scale = self.view_box.scale()
        return (self.view_box.width * scale, self.view_box.height * scale)

    def top_left(self, element: TransformedExtent) -> ViewPortPos:
        transform = AffineTransform.from_element(element)
        svg_top_left = self.view_box.content_box.top_left
        view_port_top_left = transform.apply(svg_top_left)
        logger.debug(
            "top left of content is svg %s, view port %s",
            svg_top_left,
            view_port_top_left,
        )
        return view_port_top_left

    def bounding_rect(self, element: TransformedExtent) -> ViewPortRect:
        transform = AffineTransform.from_element(element)
        content = self.view_box.content_box
        rect = ViewPortRect.from_corners(
            transform.apply(content.top_left), transform.apply(content.bottom_right)
        )
        if self.verify_invariants:
            invariants.assert_aspect_ratio_matches(self.view_box.view_box.aspect_ratio, rect)
        return rect

    def set_scale(
        self, element: TransformedExtent, fix_point: ViewPortPos, new_scale: float
    ) -> None:
        old_scale = self.view_box.scale()
        logger.info(
            "Changing scale from %s to %s with fix point %s", old_scale, new_scale, fix_point
        )
        # all checks run before the view box is touched
        self.view_box.check_scale(new_scale)
        to_content = AffineTransform.from_element(element).invert()
        fix_point_svg = to_content.apply(fix_point)
        old_top_left_svg = self.view_box.top_left()
        old_offset = fix_point_svg - old_top_left_svg
        new_offset = old_offset * (old_scale / new_scale)
        new_top_left_svg = fix_point_svg - new_offset
        logger.debug(
            "fix point svg %s, offset %s -> %s, new top left %s",
            fix_point_svg,
            old_offset,
            new_offset,
            new_top_left_svg,
        )

        self.view_box.set_top_left(new_top_left_svg)
        self.view_box.set_scale(new_scale)
        assert self.view_box.top_left() == new_top_left_svg

    def snapshot(self) -> ViewBox:
        return self.view_box.copy()

    def __str__(self) -> str:
        return str(self.view_box)


class TranslateScaleModel:
    """Pan/zoom state of an element positioned by ``translate(...) scale(...)``.

    Works directly in view-port units, so no transform inversion is needed.
    """

    def __init__(self, view_state: ViewState | None = None) -> None:
        self.view_state = view_state if view_state is not None else ViewState()

    def scale(self) -> float:
        return self.view_state.scale

    def unscaled_dimensions(self, element: PositionedExtent) -> tuple[float, float]:
        rect = element.bounding_rect()
        return (rect.width / self.view_state.scale, rect.height / self.view_state.scale)

    def top_left(self, element: PositionedExtent) -> ViewPortPos:
        return self.view_state.top_left

    def bounding_rect(self, element: PositionedExtent) -> ViewPortRect:
        return element.bounding_rect()

    def set_scale(
        self, element: PositionedExtent, fix_point: ViewPortPos, new_scale: float
    ) -> None:
        old_scale = self.view_state.scale
        if new_scale < 0.0 or math.isnan(new_scale):
            raise InvalidScale(f"Scale must not be negative, got {new_scale}.")
        if old_scale == 0.0:
            raise InvalidScale("Cannot zoom an element whose scale is 0.")

        # distance from top left of zoom element in view port units
        fix_point_offset = self.bounding_rect(element).offset(fix_point)
        logger.info(
            "Computing translation for scale change from %s to %s with top-left "
            "relative fix point %s",
            old_scale,
            new_scale,
            fix_point_offset,
        )
        scale_ratio = new_scale / old_scale
        if invariants.approx_eq_f32(new_scale, old_scale):
            translation = ViewPortVector.zero()
        else:
            translation = fix_point_offset * (1.0 - scale_ratio)
        logger.debug(
            "fix point stabilizing translation %s = offset %s * (1 - %s)",
            translation,
            fix_point_offset,
            scale_ratio,
        )

        self.view_state.top_left = self.view_state.top_left + translation
        self.view_state.scale = new_scale

    def snapshot(self) -> ViewState:
        return self.view_state.copy()

    def __str__(self) -> str:
        return str(self.view_state)
