import random

import pytest

from minipix.display import Display
from minipix.events import Event, EventMask, EventType

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42


def color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_image_properties():
    display = Display()
    image = display.new_image(IM1_SX, IM1_SY)
    assert image.bpp == 32
    assert image.size_line == IM1_SX * 4


def test_pixel_put_color_map():
    display = Display()
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    for x, y in [(0, 0), (100, 50), (241, 241)]:
        win.pixel_put(x, y, color_map(x, y, WIN1_SX, WIN1_SY))
        assert win.framebuffer.get_pixel(x, y) == color_map(x, y, WIN1_SX, WIN1_SY)
    win.pixel_put(500, 500, 0xFFFFFF)  # clipped
    win.clear()
    assert win.framebuffer.get_pixel(100, 50) == 0


def test_put_image_offset_and_clip():
    display = Display()
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    image = display.new_image(IM1_SX, IM1_SY)
    image.put_pixel(0, 0, 0x112233)
    image.put_pixel(41, 41, 0x445566)
    win.put_image(image, 20, 20)
    assert win.framebuffer.get_pixel(20, 20) == 0x112233
    assert win.framebuffer.get_pixel(61, 61) == 0x445566
    win.put_image(image, 220, 220)
    assert win.framebuffer.get_pixel(220, 220) == 0x112233


def test_string_put_records_text():
    display = Display()
    win = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    win.string_put(5, WIN1_SY // 2, 0xFF99FF, "String output")
    assert win.texts == [(5, WIN1_SY // 2, 0xFF99FF, "String output")]


def test_hooks_dispatched_in_loop_and_escape_destroys():
    display = Display()
    win1 = display.new_window(WIN1_SX, WIN1_SY, "Title1")
    win3 = display.new_window(WIN1_SX, WIN1_SY, "Title3")
    keys = []
    motions = []

    def key_win3(key, p):
        keys.append(key)
        if key == 0xFF1B:
            display.destroy_window(win3)

    win3.hooks.key_hook(key_win3, None)
    win3.hooks.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION,
                    lambda x, y, p: motions.append((x, y)), None)
    win1.hooks.key_hook(lambda key, p: display.destroy_window(win1) if key == 0xFF1B else None, None)
    display.post(win3, Event(EventType.MOTION_NOTIFY, x=1, y=2))
    display.post(win3, Event(EventType.KEY_RELEASE, keycode=0xFF1B))
    display.post(win1, Event(EventType.KEY_RELEASE, keycode=0xFF1B))
    display.loop()
    assert motions == [(1, 2)]
    assert keys == [0xFF1B]
    assert display.windows == []
    assert win3.event_mask == EventMask.KEY_RELEASE | EventMask.POINTER_MOTION


def test_mouse_recreates_window():
    display = Display()
    state = {}
    rng = random.Random(0)
    titles = []

    def gere_mouse(button, x, y, p):
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(rng.randrange(1, 500), rng.randrange(1, 500), "new win")
        titles.append(state["win1"].title)
        state["win1"].hooks.mouse_hook(gere_mouse, None)

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    state["win1"].hooks.mouse_hook(gere_mouse, None)
    win2.hooks.mouse_hook(gere_mouse, None)
    display.post(state["win1"], Event(EventType.BUTTON_PRESS, button=1))
    display.loop()
    assert titles == ["new win"]
    assert len(display.windows) == 2
    assert state["win1"] in display.windows


def test_loop_hook_and_loop_end():
    display = Display()
    win = display.new_window(10, 10, "w")
    calls = []

    def hook(p):
        calls.append(p)
        if len(calls) == 3:
            display.loop_end()

    display.loop_hook(hook, "frame")
    display.loop()
    assert calls == ["frame"] * 3
    assert display.windows == [win]


def test_destroy_unknown_window():
    display = Display()
    win = display.new_window(10, 10, "w")
    display.destroy_window(win)
    with pytest.raises(ValueError):
        display.destroy_window(win)


def test_close_and_screen_size():
    display = Display(screen=(800, 600))
    display.new_window(10, 10, "w")
    assert display.screen_size() == (800, 600)
    display.close()
    assert display.windows == []
    with pytest.raises(RuntimeError):
        display.new_window(10, 10, "again")


def test_shallow_depth_color_value():
    display = Display(depth=16)
    display.shifts = display.shifts._replace(red_bits=5, green_bits=6, blue_bits=5,
                                             red_shift=11, green_shift=5, blue_shift=0)
    assert display.color_value(0xFFFFFF) == 0xFFFF