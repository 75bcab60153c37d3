"""Qt widget showing SVG-style content through a zoomable view box.

The widget owns the svg element stand-in and the zoom controller. It
forwards wheel events to the controller and repaints whenever the store
reports a new state; it never mutates the view box itself.
"""
from __future__ import annotations

import logging

import numpy as np
from PyQt5 import QtCore, QtGui, QtWidgets

from pan_zoom.config import ZoomSettings
from pan_zoom.controllers import ZoomController
from pan_zoom.elements import SvgViewBoxElement
from pan_zoom.errors import PanZoomError
from pan_zoom.geometry import AffineTransform, ViewPortPos, ViewPortRect
from pan_zoom.model import PanZoomStore, bind_view_box
from pan_zoom.ui.qt_adapters import QtWheelInput, after_two_frames, to_qtransform

logger = logging.getLogger(__name__)

# (cx, cy, r, fill) in content units
CIRCLES = (
    (-30.0, -30.0, 10.0, "cadetblue"),
    (30.0, 30.0, 10.0, "steelblue"),
    (30.0, -30.0, 10.0, "lightblue"),
    (-30.0, 30.0, 10.0, "cornflowerblue"),
)


class ViewBoxCanvas(QtWidgets.QWidget):
    def __init__(
        self,
        store: PanZoomStore,
        settings: ZoomSettings | None = None,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("my_svg_element")
        self.setMinimumSize(320, 240)

        self._store = store
        self._element = bind_view_box(
            SvgViewBoxElement(self._frame(), element_id=self.objectName()), store
        )
        self._controller = ZoomController(
            store, self._element, settings, after_redraw=after_two_frames
        )
        store.changed.connect(self._on_state_changed)

    @property
    def element(self) -> SvgViewBoxElement:
        return self._element

    @property
    def controller(self) -> ZoomController:
        return self._controller

    def _frame(self) -> ViewPortRect:
        return ViewPortRect(ViewPortPos.origin(), float(self.width()), float(self.height()))

    def _on_state_changed(self, _snapshot) -> None:
        self.update()

    def circle_centers(self, transform: AffineTransform) -> np.ndarray:
        """Screen positions of the circle centres under ``transform``."""
        return transform.apply_points(np.array([(cx, cy) for cx, cy, _r, _fill in CIRCLES]))

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------
    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # noqa: D401 - Qt signature
        self._element.resize(self._frame())
        super().resizeEvent(event)

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: D401 - Qt signature
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)
        painter.fillRect(self.rect(), QtGui.QColor("white"))

        transform = AffineTransform.from_element(self._element)
        if not transform.is_invertible():
            painter.end()
            return

        centers = self.circle_centers(transform)
        painter.setPen(QtCore.Qt.NoPen)
        for (x, y), (_cx, _cy, radius, fill) in zip(centers, CIRCLES):
            painter.setBrush(QtGui.QColor(fill))
            painter.drawEllipse(
                QtCore.QPointF(x, y), radius * transform.a, radius * transform.d
            )

        view = self._store.current_view_box().view_box
        pen = QtGui.QPen(QtGui.QColor("crimson"))
        pen.setCosmetic(True)
        painter.setPen(pen)
        painter.setBrush(QtCore.Qt.NoBrush)
        painter.setTransform(to_qtransform(transform))
        painter.drawRect(QtCore.QRectF(view.left, view.top, view.width, view.height))
        painter.end()

    def wheelEvent(self, event: QtGui.QWheelEvent) -> None:  # noqa: D401 - Qt signature
        try:
            handled = self._controller.handle_wheel(QtWheelInput(event))
        except PanZoomError:
            logger.warning("Ignoring wheel event the view could not apply", exc_info=True)
            handled = True
        if handled:
            event.accept()
            return
        super().wheelEvent(event)
