"""QObject-based owner of the single pan/zoom state of a view."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from PyQt5 import QtCore

from pan_zoom.elements import DEFAULT_PRESERVE_ASPECT_RATIO, SvgViewBoxElement
from pan_zoom.errors import BindingError
from pan_zoom.model.pan_zoom_state import PanZoomState, Snapshot, ViewBoxModel
from pan_zoom.model.view_box import ViewBox

logger = logging.getLogger(__name__)


class PanZoomStore(QtCore.QObject):
    """Single owner of a ``PanZoomState``.

    The store is created once at startup and handed to whoever needs it.
    All access goes through one re-entrant lock; every successful write
    emits ``changed`` with a detached snapshot for the renderer.
    """

    changed = QtCore.pyqtSignal(object)

    def __init__(self, model: PanZoomState, parent: QtCore.QObject | None = None) -> None:
        super().__init__(parent)
        self._model = model
        self._lock = threading.RLock()

    @contextmanager
    def read(self) -> Iterator[PanZoomState]:
        with self._lock:
            yield self._model

    @contextmanager
    def lock_mut(self) -> Iterator[PanZoomState]:
        """Yield the model for mutation; observers are notified on success only."""
        with self._lock:
            yield self._model
            snapshot = self._model.snapshot()
        logger.debug("pan/zoom state changed: %s", snapshot)
        self.changed.emit(snapshot)

    def get(self) -> Snapshot:
        with self._lock:
            return self._model.snapshot()

    def current_view_box(self) -> ViewBox:
        """Return the live view box of a view-box backed store."""
        with self._lock:
            if not isinstance(self._model, ViewBoxModel):
                raise BindingError(
                    f"store holds {type(self._model).__name__}, not a view box"
                )
            return self._model.view_box


def bind_view_box(element: SvgViewBoxElement, store: PanZoomStore) -> SvgViewBoxElement:
    """Render ``element`` from the store's view box.

    Zooming relies on the element's CTM honouring the view box with the
    default ``preserveAspectRatio``; anything else is rejected here rather
    than producing a drifting fix point later.
    """
    normalized = " ".join(element.preserve_aspect_ratio.split())
    if normalized not in (DEFAULT_PRESERVE_ASPECT_RATIO, "xMidYMid"):
        raise BindingError(
            f"svg element must use preserveAspectRatio "
            f"{DEFAULT_PRESERVE_ASPECT_RATIO!r}, got {element.preserve_aspect_ratio!r}"
        )
    store.current_view_box()
    element.view_box_source = store.current_view_box
    return element
