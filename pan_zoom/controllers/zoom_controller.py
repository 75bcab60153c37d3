"""Wheel-driven zoom around the pointer position."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from pan_zoom.config import ZoomSettings
from pan_zoom.elements import ElementSnapshot, PositionedExtent, resolve_event_target
from pan_zoom.geometry import ViewPortPos
from pan_zoom.model import invariants
from pan_zoom.model.store import PanZoomStore

logger = logging.getLogger(__name__)

AfterRedraw = Callable[[Callable[[], None]], None]


class WheelInput(Protocol):
    def position(self) -> ViewPortPos: ...

    def wheel_delta_y(self) -> float: ...

    def ctrl_pressed(self) -> bool: ...


@dataclass(frozen=True)
class WheelSample:
    """A toolkit-independent wheel event."""

    pos: ViewPortPos
    delta_y: float
    ctrl: bool = True

    def position(self) -> ViewPortPos:
        return self.pos

    def wheel_delta_y(self) -> float:
        return self.delta_y

    def ctrl_pressed(self) -> bool:
        return self.ctrl


def run_immediately(func: Callable[[], None]) -> None:
    func()


class ZoomController:
    """Turns ctrl+wheel events into scale changes of a pan/zoom store.

    Geometry errors (``NonInvertibleTransform``, ``InvalidScale``) propagate
    to the caller with the store left unchanged.
    """

    def __init__(
        self,
        store: PanZoomStore,
        element: object,
        settings: ZoomSettings | None = None,
        *,
        after_redraw: AfterRedraw | None = None,
    ) -> None:
        self._store = store
        self._element: PositionedExtent = resolve_event_target(element)
        self._settings = settings or ZoomSettings()
        self._after_redraw = after_redraw or run_immediately

    @property
    def element(self) -> PositionedExtent:
        return self._element

    def zoom_amount(self, delta_y: float) -> float:
        """Zoom in percent for a wheel delta; scrolling up (negative) zooms in."""
        return -delta_y * self._settings.speed_factor

    def handle_wheel(self, event: WheelInput) -> bool:
        """Handle a wheel event, returning ``True`` when it was consumed."""
        if not event.ctrl_pressed():
            # TODO: scroll the view by the wheel deltas when ctrl is not held
            logger.debug("Ignoring wheel event without ctrl; panning is not supported")
            return False

        fix_point = event.position()
        zoom_amount = self.zoom_amount(event.wheel_delta_y())
        logger.info("Zooming by %s%% with fix point %s", zoom_amount, fix_point)
        if zoom_amount == 0.0:
            return True

        snapshot = ElementSnapshot.capture(self._element)
        checkpoint = None
        with self._store.lock_mut() as state:
            if self._settings.verify_invariants:
                checkpoint = invariants.capture_zoom_checkpoint(state, snapshot, fix_point)
            new_scale = max(state.scale() * (1.0 + zoom_amount / 100.0), 0.0)
            state.set_scale(snapshot, fix_point, new_scale)

        if checkpoint is not None:
            self._after_redraw(lambda: self._verify(checkpoint))
        return True

    def _verify(self, checkpoint: invariants.ZoomCheckpoint) -> None:
        logger.debug("Verifying zoom invariants after redraw")
        redrawn = ElementSnapshot.capture(self._element)
        with self._store.read() as state:
            invariants.assert_zoom_consistent(
                checkpoint, state, redrawn, scale_changed=True
            )
