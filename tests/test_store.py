import pytest

from pan_zoom.elements import SvgViewBoxElement
from pan_zoom.errors import BindingError, InvalidScale
from pan_zoom.geometry import ViewPortPos, ViewPortRect
from pan_zoom.model import PanZoomStore, TranslateScaleModel, ViewBoxModel, bind_view_box

FRAME = ViewPortRect(ViewPortPos.origin(), 400.0, 300.0)


def test_successful_write_emits_detached_snapshot():
    model = ViewBoxModel()
    store = PanZoomStore(model)
    events = []
    store.changed.connect(lambda snapshot: events.append(snapshot))

    with store.lock_mut() as state:
        state.view_box.set_scale(2.0)

    assert len(events) == 1
    assert events[0].scale() == pytest.approx(2.0)
    assert events[0] is not model.view_box

    model.view_box.set_scale(4.0)
    assert events[0].scale() == pytest.approx(2.0)


def test_failed_write_does_not_notify():
    store = PanZoomStore(TranslateScaleModel())
    events = []
    store.changed.connect(lambda snapshot: events.append(snapshot))

    with pytest.raises(InvalidScale):
        with store.lock_mut() as state:
            state.set_scale(FRAME, ViewPortPos(1.0, 1.0), -1.0)

    assert events == []


def test_reads_do_not_notify():
    store = PanZoomStore(TranslateScaleModel())
    events = []
    store.changed.connect(lambda snapshot: events.append(snapshot))

    with store.read() as state:
        assert state.scale() == 1.0
    assert store.get().scale == 1.0

    assert events == []


def test_get_returns_copy():
    model = TranslateScaleModel()
    store = PanZoomStore(model)

    snapshot = store.get()
    snapshot.scale = 3.0

    assert model.view_state.scale == 1.0


def test_lock_is_reentrant_on_same_thread():
    store = PanZoomStore(ViewBoxModel())

    with store.lock_mut() as state:
        with store.read() as same_state:
            assert same_state is state
        assert store.get().scale() == 1.0


def test_bind_view_box_renders_from_store():
    store = PanZoomStore(ViewBoxModel())
    element = bind_view_box(SvgViewBoxElement(FRAME), store)

    before = element.current_transform()
    with store.lock_mut() as state:
        state.view_box.set_scale(2.0)

    assert element.current_transform() != before
    assert element.current_transform().a == pytest.approx(3.0)


def test_bind_view_box_rejects_other_preserve_aspect_ratio():
    store = PanZoomStore(ViewBoxModel())
    element = SvgViewBoxElement(FRAME, preserve_aspect_ratio="xMinYMin meet")

    with pytest.raises(BindingError):
        bind_view_box(element, store)

    assert element.view_box_source is None


def test_bind_view_box_requires_view_box_store():
    store = PanZoomStore(TranslateScaleModel())

    with pytest.raises(BindingError):
        bind_view_box(SvgViewBoxElement(FRAME), store)
    with pytest.raises(BindingError):
        store.current_view_box()
