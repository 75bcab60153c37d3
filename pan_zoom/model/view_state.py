"""Translate + scale view state for elements positioned by a CSS transform."""
from __future__ import annotations

from dataclasses import dataclass, field

from pan_zoom.geometry import ViewPortPos


@dataclass
class ViewState:
    top_left: ViewPortPos = field(default_factory=ViewPortPos.origin)
    scale: float = 1.0

    def copy(self) -> "ViewState":
        return ViewState(self.top_left, self.scale)

    def css_transform(self) -> str:
        """Return the ``transform`` style value; pair with ``transform-origin: 0 0``."""
        return (
            f"translate({self.top_left.x}px, {self.top_left.y}px) scale({self.scale})"
        )

    def __str__(self) -> str:
        return f"ViewState{{top left: {self.top_left}, scale: {self.scale}}}"
