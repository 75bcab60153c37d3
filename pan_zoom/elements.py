"""Positioned objects supplied by the rendering layer.

The pan/zoom models never talk to a widget toolkit directly. They ask an
element for its bounding rect in view-port coordinates and, for SVG content,
for its current content-to-screen transform. This module defines those
interfaces, resolves event targets to positioned objects, and provides
plain-Python elements that compute the geometry a renderer would report.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

from pan_zoom.errors import BindingError, UnsupportedEventTarget
from pan_zoom.geometry import AffineTransform, ViewPortPos, ViewPortRect

if TYPE_CHECKING:
    from pan_zoom.model.view_box import ViewBox
    from pan_zoom.model.view_state import ViewState

logger = logging.getLogger(__name__)

DEFAULT_PRESERVE_ASPECT_RATIO = "xMidYMid meet"

_ALIGN_FACTORS = {"Min": 0.0, "Mid": 0.5, "Max": 1.0}


@runtime_checkable
class PositionedExtent(Protocol):
    """A geometrically positioned and sized object, with a (possibly zero) extent."""

    def top_left(self) -> ViewPortPos: ...

    def bounding_rect(self) -> ViewPortRect: ...


@runtime_checkable
class TransformedExtent(PositionedExtent, Protocol):
    """A positioned object with its own content coordinate system."""

    def current_transform(self) -> AffineTransform: ...


@dataclass(frozen=True)
class WindowTarget:
    """The browser/application window; always anchored at the view-port origin."""

    width: float
    height: float

    def top_left(self) -> ViewPortPos:
        return ViewPortPos.origin()

    def bounding_rect(self) -> ViewPortRect:
        return ViewPortRect(ViewPortPos.origin(), self.width, self.height)


@dataclass(frozen=True)
class DocumentTarget:
    """A document, positioned by its body element."""

    body: PositionedExtent

    def top_left(self) -> ViewPortPos:
        return self.body.bounding_rect().top_left

    def bounding_rect(self) -> ViewPortRect:
        return self.body.bounding_rect()


def describe_target(target: object) -> str:
    if isinstance(target, WindowTarget):
        return "Window"
    if isinstance(target, DocumentTarget):
        return "Document"
    tag = getattr(target, "tag_name", None) or type(target).__name__
    element_id = getattr(target, "element_id", None) or "EMPTY"
    css_class = getattr(target, "css_class", None) or "EMPTY"
    return f"{tag} id={element_id}, class={css_class}"


def resolve_event_target(target: object) -> PositionedExtent:
    """Return ``target`` as a positioned object.

    Windows, documents and elements are supported. Anything else has no
    determinable geometric position and raises ``UnsupportedEventTarget``.
    """
    if isinstance(target, (WindowTarget, DocumentTarget)):
        return target
    if isinstance(target, PositionedExtent):
        return target
    raise UnsupportedEventTarget(describe_target(target))


@dataclass(frozen=True)
class ElementSnapshot:
    """One consistent read of an element's geometry.

    All geometry of a single zoom event is computed from one snapshot so that
    the element is not re-queried halfway through the computation.
    """

    rect: ViewPortRect
    transform: AffineTransform | None
    description: str

    @classmethod
    def capture(cls, element: PositionedExtent) -> "ElementSnapshot":
        transform = None
        if isinstance(element, TransformedExtent):
            transform = AffineTransform.from_element(element)
        return cls(element.bounding_rect(), transform, describe_target(element))

    def top_left(self) -> ViewPortPos:
        return self.rect.top_left

    def bounding_rect(self) -> ViewPortRect:
        return self.rect

    def current_transform(self) -> AffineTransform:
        if self.transform is None:
            raise BindingError(f"{self.description} has no content coordinate system")
        return self.transform


def parse_preserve_aspect_ratio(value: str) -> tuple[float, float, bool] | None:
    """Parse an SVG ``preserveAspectRatio`` value.

    Returns ``(align_x, align_y, slice)`` with alignment factors in
    ``{0.0, 0.5, 1.0}``, or ``None`` for ``"none"`` (non-uniform scaling).
    """
    parts = value.split()
    if not parts or len(parts) > 2:
        raise ValueError(f"Invalid preserveAspectRatio {value!r}")
    align = parts[0]
    mode = parts[1] if len(parts) == 2 else "meet"
    if mode not in ("meet", "slice"):
        raise ValueError(f"Invalid preserveAspectRatio {value!r}")
    if align == "none":
        return None
    if len(align) != 8 or align[0] != "x" or align[4] != "Y":
        raise ValueError(f"Invalid preserveAspectRatio {value!r}")
    try:
        return _ALIGN_FACTORS[align[1:4]], _ALIGN_FACTORS[align[5:8]], mode == "slice"
    except KeyError:
        raise ValueError(f"Invalid preserveAspectRatio {value!r}") from None


class SvgViewBoxElement:
    """An ``<svg>`` element filling ``frame`` and displaying a view box.

    The screen CTM follows the SVG rules for ``viewBox`` and
    ``preserveAspectRatio``, which is what ``getScreenCTM()`` reports for an
    outermost ``<svg>`` element.
    """

    tag_name = "svg"

    def __init__(
        self,
        frame: ViewPortRect,
        view_box_source: Callable[[], "ViewBox"] | None = None,
        *,
        preserve_aspect_ratio: str = DEFAULT_PRESERVE_ASPECT_RATIO,
        element_id: str | None = None,
        css_class: str | None = None,
    ) -> None:
        parse_preserve_aspect_ratio(preserve_aspect_ratio)
        self.frame = frame
        self.view_box_source = view_box_source
        self.preserve_aspect_ratio = preserve_aspect_ratio
        self.element_id = element_id
        self.css_class = css_class

    def resize(self, frame: ViewPortRect) -> None:
        self.frame = frame

    def top_left(self) -> ViewPortPos:
        return self.frame.top_left

    def bounding_rect(self) -> ViewPortRect:
        return self.frame

    def current_transform(self) -> AffineTransform:
        if self.view_box_source is None:
            raise BindingError("svg element is not bound to a view box")
        view = self.view_box_source().view_box
        frame = self.frame
        if view.width == 0.0 or view.height == 0.0:
            # an empty viewBox disables rendering; everything collapses
            return AffineTransform(0.0, 0.0, 0.0, 0.0, frame.left, frame.top)

        sx = frame.width / view.width
        sy = frame.height / view.height
        alignment = parse_preserve_aspect_ratio(self.preserve_aspect_ratio)
        if alignment is None:
            align_x = align_y = 0.0
        else:
            align_x, align_y, use_slice = alignment
            sx = sy = max(sx, sy) if use_slice else min(sx, sy)
        tx = frame.left + align_x * (frame.width - view.width * sx) - view.left * sx
        ty = frame.top + align_y * (frame.height - view.height * sy) - view.top * sy
        return AffineTransform(sx, 0.0, 0.0, sy, tx, ty)


class TransformedElement:
    """An element laid out at ``layout_rect`` and moved by a CSS transform.

    The transform is ``translate(x, y) scale(s)`` with ``transform-origin: 0 0``,
    taken from the bound view state.
    """

    tag_name = "div"

    def __init__(
        self,
        layout_rect: ViewPortRect,
        state_source: Callable[[], "ViewState"],
        *,
        element_id: str | None = None,
        css_class: str | None = None,
    ) -> None:
        self.layout_rect = layout_rect
        self.state_source = state_source
        self.element_id = element_id
        self.css_class = css_class

    def top_left(self) -> ViewPortPos:
        return self.bounding_rect().top_left

    def bounding_rect(self) -> ViewPortRect:
        state = self.state_source()
        return ViewPortRect(
            self.layout_rect.top_left + state.top_left.as_vector(),
            self.layout_rect.width * state.scale,
            self.layout_rect.height * state.scale,
        )

    def css_transform(self) -> str:
        return self.state_source().css_transform()
