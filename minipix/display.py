"""Display connection, windows with their own framebuffers, and the event loop."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from minipix.colors import channel_shifts, pixel_value
from minipix.events import Event, EventType, HookTable
from minipix.image import Image


@dataclass(eq=False)
class Window:
    """A fixed-size window with a framebuffer of 0xRRGGBB pixel values."""

    display: "Display"
    width: int
    height: int
    title: str
    hooks: HookTable = field(default_factory=HookTable)
    event_mask: int = 0
    texts: list[tuple[int, int, int, str]] = field(default_factory=list)
    framebuffer: Image = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.framebuffer = Image(self.width, self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self) -> None:
        """Fill the window with black and forget drawn text."""
        self.framebuffer.data[:] = bytes(len(self.framebuffer.data))
        self.texts.clear()

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Draw one pixel; points outside the window are clipped."""
        if self._inside(x, y):
            self.framebuffer.put_pixel(x, y, self.display.color_value(color))

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy ``image`` with its top left corner at (x, y), clipped."""
        for row, values in enumerate(image.rows()):
            wy = y + row
            if not 0 <= wy < self.height:
                continue
            for col, value in enumerate(values):
                if 0 <= x + col < self.width:
                    self.framebuffer.put_pixel(x + col, wy, value)

    def string_put(self, x: int, y: int, color: int, text: str) -> None:
        """Draw ``text`` with its baseline at (x, y)."""
        self.texts.append((x, y, self.display.color_value(color), text))


LoopHook = Callable[[Any], Any]


class Display:
    """Connection holding windows, pending events and the loop hook.

    Events are fed with :meth:`post`. With ``visible=True`` the most recent
    window is shown on screen and its input is turned into events.
    """

    def __init__(self, depth: int = 24, screen: tuple[int, int] = (1920, 1080),
                 visible: bool = False) -> None:
        self.depth = depth
        self.shifts = channel_shifts(0xFF0000, 0x00FF00, 0x0000FF)
        self.windows: list[Window] = []
        self._queue: deque[tuple[Window, Event]] = deque()
        self._loop_hook: LoopHook | None = None
        self._loop_param: Any = None
        self._end_loop = False
        self._screen = screen
        self._closed = False
        self._presenter = _Presenter(self) if visible else None

    def color_value(self, color: int) -> int:
        """Return the pixel value of 0xRRGGBB ``color`` on this display."""
        return pixel_value(color, self.depth, self.shifts)

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("display is closed")

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Create a window; newest windows come first in :attr:`windows`."""
        self._check_open()
        window = Window(self, width, height, title)
        self.windows.insert(0, window)
        return window

    def destroy_window(self, window: Window) -> None:
        """Remove ``window`` and drop its pending events."""
        try:
            self.windows.remove(window)
        except ValueError:
            raise ValueError(f"window {window.title!r} is not open") from None
        self._queue = deque(item for item in self._queue if item[0] is not window)

    def new_image(self, width: int, height: int) -> Image:
        """Create a black image."""
        self._check_open()
        return Image(width, height)

    def loop_hook(self, func: LoopHook | None, param: Any = None) -> None:
        """Call ``func(param)`` after each round of event handling."""
        self._loop_hook, self._loop_param = func, param

    def post(self, window: Window, event: Event) -> None:
        """Queue ``event`` for ``window``."""
        self._queue.append((window, event))

    def loop(self) -> None:
        """Handle events and call the loop hook until no window is left.

        Returns when :meth:`loop_end` is called, when every window is
        destroyed, or when there is neither a pending event, a loop hook
        nor a visible screen to wait on.
        """
        self._check_open()
        for window in self.windows:
            window.event_mask = window.hooks.event_mask()
        while self.windows and not self._end_loop:
            if self._presenter is not None:
                self._presenter.pump()
            elif not self._queue and self._loop_hook is None:
                return
            while self._queue and not self._end_loop:
                window, event = self._queue.popleft()
                if window in self.windows:
                    window.hooks.dispatch(event)
            if self._loop_hook is not None and not self._end_loop:
                self._loop_hook(self._loop_param)
            if self._presenter is not None:
                self._presenter.show()

    def loop_end(self) -> None:
        """Make :meth:`loop` return."""
        self._end_loop = True

    def screen_size(self) -> tuple[int, int]:
        """Return the screen size as (width, height)."""
        if self._presenter is not None:
            return self._presenter.screen_size()
        return self._screen

    def close(self) -> None:
        """Destroy every window and close the display."""
        self.windows.clear()
        self._queue.clear()
        if self._presenter is not None:
            self._presenter.close()
        self._closed = True


class _Presenter:
    """Shows the newest window with pygame and turns its input into events."""

    def __init__(self, display: Display) -> None:
        import pygame

        self.pygame = pygame
        self.display = display
        pygame.init()
        self.surface = None
        self.shown: Window | None = None

    def screen_size(self) -> tuple[int, int]:
        info = self.pygame.display.Info()
        return info.current_w, info.current_h

    def _window(self) -> Window | None:
        return self.display.windows[0] if self.display.windows else None

    def pump(self) -> None:
        pg = self.pygame
        window = self._window()
        for ev in pg.event.get():
            if window is None:
                continue
            if ev.type == pg.QUIT:
                self.display.post(window, Event(EventType.CLIENT_MESSAGE, close_request=True))
            elif ev.type in (pg.KEYDOWN, pg.KEYUP):
                kind = EventType.KEY_PRESS if ev.type == pg.KEYDOWN else EventType.KEY_RELEASE
                self.display.post(window, Event(kind, keycode=ev.key))
            elif ev.type in (pg.MOUSEBUTTONDOWN, pg.MOUSEBUTTONUP):
                kind = (EventType.BUTTON_PRESS if ev.type == pg.MOUSEBUTTONDOWN
                        else EventType.BUTTON_RELEASE)
                self.display.post(window, Event(kind, button=ev.button, x=ev.pos[0], y=ev.pos[1]))
            elif ev.type == pg.MOUSEMOTION:
                self.display.post(window, Event(EventType.MOTION_NOTIFY, x=ev.pos[0], y=ev.pos[1]))

    def show(self) -> None:
        pg = self.pygame
        window = self._window()
        if window is None:
            return
        if window is not self.shown:
            self.surface = pg.display.set_mode((window.width, window.height))
            pg.display.set_caption(window.title)
            self.shown = window
            self.display.post(window, Event(EventType.EXPOSE))
        for y, row in enumerate(window.framebuffer.rows()):
            for x, value in enumerate(row):
                self.surface.set_at((x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
        if window.texts:
            font = pg.font.Font(None, 16)
            for x, y, color, text in window.texts:
                rendered = font.render(text, False, ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
                self.surface.blit(rendered, (x, y - rendered.get_height()))
        pg.display.flip()

    def close(self) -> None:
        self.pygame.quit()