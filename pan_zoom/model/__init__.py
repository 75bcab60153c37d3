"""Pan/zoom state models."""
from __future__ import annotations

from pan_zoom.model.invariants import InvariantError
from pan_zoom.model.pan_zoom_state import PanZoomState, TranslateScaleModel, ViewBoxModel
from pan_zoom.model.store import PanZoomStore, bind_view_box
from pan_zoom.model.view_box import ViewBox
from pan_zoom.model.view_state import ViewState

__all__ = [
    "InvariantError",
    "PanZoomState",
    "PanZoomStore",
    "TranslateScaleModel",
    "ViewBox",
    "ViewBoxModel",
    "ViewState",
    "bind_view_box",
]
