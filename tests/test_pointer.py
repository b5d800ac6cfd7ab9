import pytest

from dragstage.pointer import PointerEventType, PointerSource


def test_emit_reaches_only_matching_handlers_in_order():
    source = PointerSource()
    seen = []
    source.connect(PointerEventType.MOTION, lambda x, y: seen.append(("first", x, y)))
    source.connect(PointerEventType.PRESSED, lambda x, y: seen.append(("press", x, y)))
    source.connect(PointerEventType.MOTION, lambda x, y: seen.append(("second", x, y)))

    source.move(3, 4)

    assert seen == [("first", 3, 4), ("second", 3, 4)]


def test_disconnect():
    source = PointerSource()
    seen = []
    handler_id = source.connect(PointerEventType.RELEASED, lambda x, y: seen.append(x))
    assert source.is_connected(handler_id)
    assert source.handler_count(PointerEventType.RELEASED) == 1

    source.disconnect(handler_id)
    source.release(1, 1)

    assert seen == []
    assert not source.is_connected(handler_id)
    assert source.handler_count(PointerEventType.RELEASED) == 0
    with pytest.raises(KeyError):
        source.disconnect(handler_id)


def test_handlers_connected_during_emit_wait_for_next_event():
    source = PointerSource()
    seen = []

    def on_press(x, y):
        source.connect(PointerEventType.PRESSED, lambda x, y: seen.append("late"))
        seen.append("press")

    source.connect(PointerEventType.PRESSED, on_press)
    source.press(0, 0)
    assert seen == ["press"]
