"""Small example programs: key counting, striped images and a 2D tile map."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from minipix.display import Display
from minipix.events import EventType
from minipix.image import Image
from minipix.xpm import XpmError, xpm_file_to_image

# Key codes of a Mac keyboard.
KEY_ESC = 53
KEY_Q = 12
KEY_W = 13
KEY_E = 14
KEY_R = 15
KEY_A = 0
KEY_S = 1
KEY_D = 2

RED = 0xFF0000
WHITE = 0xFFFFFF
GRID_COLOR = 0xB3B3B3

TILE_SIZE = 32
ROWS = 11
COLS = 15
WIDTH = COLS * TILE_SIZE
HEIGHT = ROWS * TILE_SIZE

MAP: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1),
    (1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 1),
    (1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)


@dataclass
class KeyCounter:
    """A counter moved up and down with the W and S keys."""

    x: int = 3
    y: int = 4
    text: str = "ab"

    def key_press(self, keycode: int) -> int:
        """W adds one, S subtracts one, ESC exits; prints and returns x."""
        if keycode == KEY_W:
            self.x += 1
        elif keycode == KEY_S:
            self.x -= 1
        elif keycode == KEY_ESC:
            raise SystemExit(0)
        print(f"x: {self.x}")
        return self.x


def _stripe(image: Image, columns: int) -> None:
    for y in range(image.height):
        for x in range(columns):
            image.put_pixel(x, y, WHITE if x % 2 else RED)


def striped_image(width: int = 400, height: int = 300) -> Image:
    """Return an image of alternating red (even) and white (odd) columns."""
    image = Image(width, height)
    _stripe(image, width)
    return image


def stripe_left_half(image: Image) -> Image:
    """Paint red and white columns over the left half of ``image``."""
    _stripe(image, image.width // 2)
    return image


def draw_line(image: Image, x1: float, y1: float, x2: float, y2: float,
              color: int = GRID_COLOR) -> None:
    """Draw a line with the DDA algorithm; the end point is not drawn."""
    dx = x2 - x1
    dy = y2 - y1
    step = max(abs(dx), abs(dy))
    if step == 0:
        return
    dx /= step
    dy /= step
    for _ in range(math.ceil(step)):
        if abs(x2 - x1) <= 0.01 and abs(y2 - y1) <= 0.01:
            break
        image.put_pixel(math.floor(x1), math.floor(y1), color)
        x1 += dx
        y1 += dy


def _exit_hook(*_args: Any) -> None:
    raise SystemExit(0)


def _map_key(keycode: int, _game: Any) -> None:
    if keycode == KEY_ESC:
        raise SystemExit(0)


class MapGame:
    """A tile map drawn into an image and shown in its own window."""

    def __init__(self, display: Display) -> None:
        self.display = display
        self.map = [list(row) for row in MAP]
        self.window = display.new_window(WIDTH, HEIGHT, "mlx 42")
        self.image = display.new_image(WIDTH, HEIGHT)
        self.window.hooks.hook(EventType.KEY_PRESS, 0, _map_key, self)
        self.window.hooks.hook(EventType.DESTROY_NOTIFY, 0, _exit_hook, self)
        display.loop_hook(lambda game: game.render(), self)

    def draw_rectangle(self, col: int, row: int) -> None:
        """Fill the tile at (col, row) with white."""
        left = col * TILE_SIZE
        top = row * TILE_SIZE
        for dy in range(TILE_SIZE):
            for dx in range(TILE_SIZE):
                self.image.put_pixel(left + dx, top + dy, WHITE)

    def draw_rectangles(self) -> None:
        """Fill every wall tile of the map."""
        for row, cells in enumerate(self.map):
            for col, cell in enumerate(cells):
                if cell == 1:
                    self.draw_rectangle(col, row)

    def draw_grid(self) -> None:
        """Draw the tile borders in grey."""
        for i in range(COLS):
            draw_line(self.image, i * TILE_SIZE, 0, i * TILE_SIZE, HEIGHT)
        draw_line(self.image, COLS * TILE_SIZE - 1, 0, COLS * TILE_SIZE - 1, HEIGHT)
        for j in range(ROWS):
            draw_line(self.image, 0, j * TILE_SIZE, WIDTH, j * TILE_SIZE)
        draw_line(self.image, 0, ROWS * TILE_SIZE - 1, WIDTH, ROWS * TILE_SIZE - 1)

    def render(self) -> None:
        """Draw walls and grid, then copy the image to the window."""
        self.draw_rectangles()
        self.draw_grid()
        self.window.put_image(self.image, 0, 0)


def _call_key_press(keycode: int, counter: KeyCounter) -> None:
    counter.key_press(keycode)


def _run_keys(display: Display, _args: argparse.Namespace) -> None:
    counter = KeyCounter()
    window = display.new_window(500, 500, "mlx_project")
    print("-------------------------------")
    print("'W key': Add 1 to x.")
    print("'S key': Subtract 1 from x")
    print("'ESC key': Exit this program")
    print("'Other keys': print current x ")
    print("-------------------------------")
    print(f"Current x = {counter.x}")
    window.hooks.hook(EventType.KEY_PRESS, 0, _call_key_press, counter)


def _run_make(display: Display, _args: argparse.Namespace) -> None:
    window = display.new_window(800, 600, "A simple example")
    window.put_image(striped_image(400, 300), 0, 0)


def _run_modify(display: Display, args: argparse.Namespace) -> None:
    window = display.new_window(500, 500, "my_mlx")
    image = stripe_left_half(xpm_file_to_image(args.texture))
    window.put_image(image, 50, 50)


def _run_map(display: Display, _args: argparse.Namespace) -> None:
    MapGame(display)


_RUNNERS: dict[str, Callable[[Display, argparse.Namespace], None]] = {
    "keys": _run_keys,
    "make": _run_make,
    "modify": _run_modify,
    "map": _run_map,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the example programs in a window."""
    parser = argparse.ArgumentParser(prog="minipix-examples",
                                     description="Run a minipix example.")
    parser.add_argument("example", choices=sorted(_RUNNERS))
    parser.add_argument("--texture", default="../textures/wall_s.xpm",
                        help="XPM file for the 'modify' example")
    args = parser.parse_args(argv)
    display = Display(visible=True)
    try:
        try:
            _RUNNERS[args.example](display, args)
        except (OSError, XpmError) as exc:
            print(f"cannot load {args.texture}: {exc}")
            return 1
        display.loop()
    finally:
        display.close()
    return 0