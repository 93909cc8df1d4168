import pytest

from minipix.events import Event, EventMask, EventType, HookTable


def test_key_hook_gets_keycode_and_param():
    table = HookTable()
    seen = []
    table.key_hook(lambda key, p: seen.append((key, p)), "param")
    table.dispatch(Event(EventType.KEY_RELEASE, keycode=0xFF1B))
    assert seen == [(0xFF1B, "param")]


def test_key_press_not_handled_by_key_hook():
    table = HookTable()
    seen = []
    table.key_hook(lambda key, p: seen.append(key), None)
    table.dispatch(Event(EventType.KEY_PRESS, keycode=5))
    assert seen == []


def test_mouse_hook_arguments():
    table = HookTable()
    seen = []
    table.mouse_hook(lambda b, x, y, p: seen.append((b, x, y, p)), 7)
    table.dispatch(Event(EventType.BUTTON_PRESS, button=1, x=10, y=20))
    assert seen == [(1, 10, 20, 7)]


def test_motion_hook_arguments():
    table = HookTable()
    seen = []
    table.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION,
               lambda x, y, p: seen.append((x, y)), None)
    table.dispatch(Event(EventType.MOTION_NOTIFY, x=3, y=4))
    assert seen == [(3, 4)]


def test_expose_only_on_last_count():
    table = HookTable()
    seen = []
    table.expose_hook(lambda p: seen.append(p), "w")
    table.dispatch(Event(EventType.EXPOSE, count=2))
    table.dispatch(Event(EventType.EXPOSE, count=0))
    assert seen == ["w"]


def test_close_request_calls_destroy_hook():
    table = HookTable()
    seen = []
    table.hook(EventType.DESTROY_NOTIFY, 0, lambda p: seen.append(p), "bye")
    table.dispatch(Event(EventType.CLIENT_MESSAGE, close_request=True))
    assert seen == ["bye"]


def test_event_mask_is_union():
    table = HookTable()
    table.key_hook(lambda *a: None)
    table.mouse_hook(lambda *a: None)
    table.expose_hook(lambda *a: None)
    mask = table.event_mask()
    assert mask == EventMask.KEY_RELEASE | EventMask.BUTTON_PRESS | EventMask.EXPOSURE


def test_empty_mask():
    assert HookTable().event_mask() == 0


def test_out_of_range_event_type():
    with pytest.raises(ValueError):
        HookTable().hook(99, 0, None, None)


def test_documented_event_numbers_map_to_types():
    assert EventType(2) is EventType.KEY_PRESS
    assert EventType(17) is EventType.DESTROY_NOTIFY