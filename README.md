# minipix

minipix is a small library for frame-buffer style drawing: windows that
hold their own pixels, images you build pixel by pixel, an XPM reader, and
per-window event hooks driven by a simple event loop. A display can run
headless, with events fed in by your program, or show its newest window on
screen through pygame.

## Installation

```
pip install .
```

The tests need pytest:

```
pip install ".[test]"
pytest
```

## Concepts

Colours are plain integers in `0x00RRGGBB` form. The origin of every window
and image is the top left corner, with y growing downwards.

- `minipix.display.Display(depth=24, screen=(1920, 1080), visible=False)`
  holds windows, pending events and a loop hook.
  - `new_window(width, height, title)` creates a `Window`; the newest window
    is first in `display.windows`.
  - `destroy_window(window)` removes it and drops its pending events
    (`ValueError` if it is not open).
  - `new_image(width, height)` creates a black `Image`.
  - `post(window, event)` queues an `Event` for a window.
  - `loop_hook(func, param)` makes the loop call `func(param)` after each
    round of event handling.
  - `loop()` dispatches queued events to window hooks and calls the loop
    hook. It returns when `loop_end()` is called, when no window is left,
    or, on a headless display, when there is neither a queued event nor a
    loop hook.
  - `color_value(color)` converts a colour for the display's depth
    (unchanged at depth 24 or more).
  - `screen_size()` returns `(width, height)`: the `screen` argument when
    headless, the real screen size when visible.
  - `close()` destroys every window; later calls that create windows or
    images, or run the loop, raise `RuntimeError`.
- `minipix.display.Window` has a `framebuffer` (an `Image`), a `hooks`
  table and a list of drawn `texts`. Draw on it with `clear()`,
  `pixel_put(x, y, color)`, `put_image(image, x, y)` and
  `string_put(x, y, color, text)`. Drawing outside the window is clipped.
  Text is recorded in `texts` and only rendered when the display is visible.
- `minipix.image.Image(width, height)` stores 32-bit pixels in `data`, with
  `bpp`, `size_line` and `endian` (host byte order) describing the layout.
  `put_pixel(x, y, color)` and `get_pixel(x, y)` raise `IndexError` outside
  the image; `rows()` yields each row as a tuple of pixel values.
- `minipix.events` defines `EventType`, `EventMask`, `Event` and
  `HookTable`. `hook(event_type, mask, func, param)` registers a callback;
  `key_hook`, `mouse_hook` and `expose_hook` are shortcuts for key release,
  button press and expose. `dispatch(event)` calls handlers with the
  arguments that fit the event:
  - keys: `func(keycode, param)`
  - buttons: `func(button, x, y, param)`
  - motion: `func(x, y, param)`
  - others: `func(param)`; expose only when `count` is 0.

  An event with `close_request=True` calls the `DESTROY_NOTIFY` handler.
  `event_mask()` is the union of all registered masks.
- `minipix.xpm` reads XPM pictures. `xpm_file_to_image(path)` loads a file
  (comments outside strings are ignored), `xpm_to_image(lines)` and
  `parse_xpm(lines)` take the strings of an XPM in memory. Unknown colour
  names give black and `None` gives `TRANSPARENT` (`0xFF000000`).
  Malformed input raises `XpmError`, a `ValueError`.
  `strip_comments` and `quoted_lines` are the helpers the file reader uses.
- `minipix.colors.lookup_color(name, suffix=None)` turns an X11 colour name
  such as `"light blue"` or a `"#ff8800"` spec into a `0xRRGGBB` value.
  `channel_shifts` and `pixel_value` convert colours for shallower visuals.
- `minipix.textscan` holds the small search and word-splitting helpers used
  by the XPM reader (`find`, `find_outside_quotes`, `split_words`).

## A short example

```python
from minipix.display import Display

display = Display()
window = display.new_window(400, 300, "stripes")
image = display.new_image(400, 300)

for y in range(300):
    for x in range(400):
        image.put_pixel(x, y, 0xFFFFFF if x % 2 else 0xFF0000)

def redraw(param):
    window.put_image(image, 0, 0)
    display.loop_end()

display.loop_hook(redraw, None)
display.loop()
print(hex(window.framebuffer.get_pixel(1, 0)))  # 0xffffff
display.close()
```

Pass `visible=True` to `Display` to see the newest window on screen; its
keyboard, mouse and close events are then posted to it as pygame reports
them, with pygame key codes.

## Demo

`minipix-demo` runs one of four small programs in a visible window:

```
minipix-demo keys
minipix-demo make
minipix-demo modify --texture path/to/picture.xpm
minipix-demo map
```

- `keys` prints a counter that the W key raises, the S key lowers and Esc
  ends. These handlers compare against Mac keyboard codes (W 13, S 1,
  Esc 53), while the window reports pygame key codes, so other keys only
  print the current value.
- `make` shows a 400x300 image of red and white columns.
- `modify` loads an XPM (default `../textures/wall_s.xpm`) and stripes its
  left half; it exits with status 1 if the file cannot be loaded.
- `map` draws an 11x15 tile map with a grey grid and exits when its window
  is closed.

The `keys`, `make` and `modify` programs do not react to closing the
window; stop them with Ctrl+C.

## What minipix does not do

Only the newest window of a display is shown on screen, and there are no
calls to move, hide or show the mouse pointer, query its position, load
fonts, or switch key auto-repeat. Images are always 32 bits per pixel, and
XPM is the only picture format read.