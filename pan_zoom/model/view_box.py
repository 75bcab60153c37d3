"""The visible region of an SVG canvas and the content it is measured against."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from pan_zoom.errors import InvalidScale
from pan_zoom.geometry import Point, Rect, Vector

logger = logging.getLogger(__name__)

SCALE_TOLERANCE = 1e-12


def _default_rect() -> Rect:
    return Rect(Point(-100.0, -100.0), Vector(200.0, 200.0))


@dataclass
class ViewBox:
    """The visible part of the infinite SVG canvas.

    A larger view port (the part of the screen displaying the view box) shows
    the same view box larger than a smaller one. The view box knows nothing
    about padding; to pad, make the view box larger.

    ``view_box`` is the user-controlled visible window. ``content_box`` is the
    bounding box of the rendered content; it is updated by whoever renders the
    content and serves as the measure for the scale.
    """

    view_box: Rect = field(default_factory=_default_rect)
    content_box: Rect = field(default_factory=_default_rect)

    @property
    def min_x(self) -> float:
        return self.view_box.left

    @property
    def min_y(self) -> float:
        return self.view_box.top

    @property
    def width(self) -> float:
        return self.view_box.width

    @property
    def height(self) -> float:
        return self.view_box.height

    def scale(self) -> float:
        content = self.content_box
        if content.dimensions.is_zero():
            return 1.0
        if content.width == 0.0:
            return _ratio(content.height, self.height)
        if content.height == 0.0:
            return _ratio(content.width, self.width)
        return max(
            _ratio(content.width, self.width),
            _ratio(content.height, self.height),
        )

    def check_scale(self, new_scale: float) -> None:
        """Raise ``InvalidScale`` unless ``set_scale(new_scale)`` would succeed."""
        if not new_scale > 0.0:
            raise InvalidScale(f"View box scale must be positive, got {new_scale}.")
        if self.content_box.dimensions.is_zero():
            raise InvalidScale(
                "Content box has no extent; the view box scale is fixed at 1.0."
            )

    def set_scale(self, new_scale: float) -> None:
        """Resize the visible window so that ``scale()`` becomes ``new_scale``."""
        self.check_scale(new_scale)
        logger.info(
            "Changing scale of view box from %s to %s", self.scale(), new_scale
        )
        self.view_box = Rect(self.view_box.top_left, self.content_box.dimensions / new_scale)

        assert math.isclose(
            self.scale(), new_scale, rel_tol=SCALE_TOLERANCE, abs_tol=SCALE_TOLERANCE
        ), f"Computed scale {self.scale()} does not match set scale {new_scale}"

    def top_left(self) -> Point:
        return self.view_box.top_left

    def set_top_left(self, pos: Point) -> None:
        logger.info(
            "Changing top left of view box from %s to %s", self.view_box.top_left, pos
        )
        self.view_box = Rect(pos, self.view_box.dimensions)

    def set_content_box(self, rect: Rect) -> None:
        self.content_box = rect

    def copy(self) -> "ViewBox":
        return ViewBox(self.view_box, self.content_box)

    def to_svg_string(self) -> str:
        """Return the value of the ``viewBox`` attribute."""
        return f"{self.min_x} {self.min_y} {self.width} {self.height}"

    def __str__(self) -> str:
        return f"ViewBox {{{self.to_svg_string()}}}"


def _ratio(content_extent: float, view_extent: float) -> float:
    if view_extent == 0.0:
        return math.inf
    return content_extent / view_extent
