import os
from types import SimpleNamespace

import pytest

pytest.importorskip("PyQt5")

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5 import QtCore, QtTest, QtWidgets

from pan_zoom.elements import WindowTarget, describe_target
from pan_zoom.geometry import AffineTransform, ViewPortPos, ViewPortRect
from pan_zoom.model import PanZoomStore, ViewBoxModel
from pan_zoom.ui.canvas_widget import ViewBoxCanvas
from pan_zoom.ui.qt_adapters import (
    QtWheelInput,
    WidgetElement,
    after_two_frames,
    from_qtransform,
    qt_event_target,
    to_qtransform,
)


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


def _wheel_event(x, y, angle_y, modifiers=QtCore.Qt.ControlModifier):
    accepted = []
    return SimpleNamespace(
        pos=lambda: QtCore.QPoint(x, y),
        angleDelta=lambda: QtCore.QPoint(0, angle_y),
        modifiers=lambda: modifiers,
        accept=lambda: accepted.append(True),
        accepted=accepted,
    )


def test_wheel_up_notch_maps_to_negative_dom_delta():
    wheel = QtWheelInput(_wheel_event(12, 34, 120))

    assert wheel.position() == ViewPortPos(12.0, 34.0)
    assert wheel.wheel_delta_y() == -100.0
    assert wheel.ctrl_pressed()


def test_wheel_without_ctrl():
    wheel = QtWheelInput(_wheel_event(0, 0, -240, QtCore.Qt.NoModifier))

    assert wheel.wheel_delta_y() == 200.0
    assert not wheel.ctrl_pressed()


def test_qtransform_conversion_keeps_coefficients():
    transform = AffineTransform(1.5, 0.25, -0.5, 2.0, 200.0, 150.0)

    qtransform = to_qtransform(transform)

    assert qtransform.map(QtCore.QPointF(1.0, 1.0)) == QtCore.QPointF(201.0, 152.25)
    assert from_qtransform(qtransform) == transform


def test_widget_element_is_positioned_in_its_window(qapp):
    window = QtWidgets.QWidget()
    window.resize(300, 200)
    child = QtWidgets.QWidget(window)
    child.setObjectName("canvas")
    child.setGeometry(20, 30, 100, 50)

    element = qt_event_target(child)

    assert isinstance(element, WidgetElement)
    assert element.bounding_rect() == ViewPortRect(ViewPortPos(20.0, 30.0), 100.0, 50.0)
    assert describe_target(element) == "QWidget id=canvas, class=EMPTY"
    assert qt_event_target(window) == WindowTarget(300.0, 200.0)


def test_after_two_frames_defers_call(qapp):
    calls = []

    after_two_frames(lambda: calls.append("verified"))

    assert calls == []
    QtTest.QTest.qWait(50)
    assert calls == ["verified"]


@pytest.fixture
def canvas_and_store(qapp):
    store = PanZoomStore(ViewBoxModel())
    widget = ViewBoxCanvas(store)
    widget.resize(400, 300)
    widget.show()
    qapp.processEvents()
    yield widget, store
    widget.close()


def test_canvas_maps_circles_through_view_box(canvas_and_store):
    canvas, _store = canvas_and_store
    transform = AffineTransform.from_element(canvas.element)

    assert canvas.element.bounding_rect() == ViewPortRect(ViewPortPos.origin(), 400.0, 300.0)
    assert transform == AffineTransform(1.5, 0.0, 0.0, 1.5, 200.0, 150.0)
    assert canvas.circle_centers(transform)[0].tolist() == [155.0, 105.0]


def test_canvas_wheel_zooms_store(canvas_and_store):
    canvas, store = canvas_and_store
    event = _wheel_event(200, 150, 120)

    canvas.wheelEvent(event)

    assert event.accepted == [True]
    assert store.get().scale() == pytest.approx(1.05)


def test_canvas_swallows_rejected_zoom(canvas_and_store, caplog):
    canvas, store = canvas_and_store
    event = _wheel_event(200, 150, -2400)

    with caplog.at_level("WARNING", logger="pan_zoom.ui.canvas_widget"):
        canvas.wheelEvent(event)

    assert event.accepted == [True]
    assert store.get().scale() == 1.0
    assert "could not apply" in caplog.text
