"""Adapters between Qt objects and the toolkit-independent pan/zoom types."""
from __future__ import annotations

from typing import Callable

from PyQt5 import QtCore, QtGui, QtWidgets

from pan_zoom.elements import PositionedExtent, WindowTarget, resolve_event_target
from pan_zoom.geometry import AffineTransform, ViewPortPos, ViewPortRect

# Qt reports 120 angle units per wheel notch; browsers report a deltaY of
# about 100 pixels per notch, with the opposite sign for "scroll up".
QT_ANGLE_PER_NOTCH = 120.0
DOM_DELTA_PER_NOTCH = 100.0


class QtWheelInput:
    """Presents a ``QWheelEvent`` as a ``WheelInput``."""

    def __init__(self, event: QtGui.QWheelEvent) -> None:
        self._event = event

    def position(self) -> ViewPortPos:
        pos = self._event.pos()
        return ViewPortPos(float(pos.x()), float(pos.y()))

    def wheel_delta_y(self) -> float:
        notches = self._event.angleDelta().y() / QT_ANGLE_PER_NOTCH
        return -notches * DOM_DELTA_PER_NOTCH

    def ctrl_pressed(self) -> bool:
        return bool(self._event.modifiers() & QtCore.Qt.ControlModifier)


def to_qtransform(transform: AffineTransform) -> QtGui.QTransform:
    return QtGui.QTransform(
        transform.a,
        transform.b,
        transform.c,
        transform.d,
        transform.e,
        transform.f,
    )


def from_qtransform(transform: QtGui.QTransform) -> AffineTransform:
    return AffineTransform(
        transform.m11(),
        transform.m12(),
        transform.m21(),
        transform.m22(),
        transform.dx(),
        transform.dy(),
    )


class WidgetElement:
    """A ``QWidget`` as a positioned element.

    Positions are relative to ``view_port`` (the widget's window by default).
    """

    def __init__(
        self, widget: QtWidgets.QWidget, view_port: QtWidgets.QWidget | None = None
    ) -> None:
        self._widget = widget
        self._view_port = view_port or widget.window()
        self.tag_name = widget.metaObject().className()
        self.element_id = widget.objectName() or None
        self.css_class = None

    def top_left(self) -> ViewPortPos:
        if self._widget is self._view_port:
            return ViewPortPos.origin()
        pos = self._widget.mapTo(self._view_port, QtCore.QPoint(0, 0))
        return ViewPortPos(float(pos.x()), float(pos.y()))

    def bounding_rect(self) -> ViewPortRect:
        return ViewPortRect(
            self.top_left(), float(self._widget.width()), float(self._widget.height())
        )


def qt_event_target(target: object) -> PositionedExtent:
    """Resolve a Qt event receiver to a positioned object."""
    if isinstance(target, QtWidgets.QWidget):
        if target.isWindow():
            return WindowTarget(float(target.width()), float(target.height()))
        return WidgetElement(target)
    return resolve_event_target(target)


def after_two_frames(func: Callable[[], None]) -> None:
    """Run ``func`` once the event loop has processed two more rounds.

    The first round lets the pending repaint happen; the second runs ``func``
    against the redrawn geometry.
    """
    QtCore.QTimer.singleShot(0, lambda: QtCore.QTimer.singleShot(0, func))
