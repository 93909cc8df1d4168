import pytest

from minipix.display import Display
from minipix.events import Event, EventType
from minipix.image import Image
from minipix.examples import (
    COLS,
    GRID_COLOR,
    HEIGHT,
    KEY_ESC,
    KEY_S,
    KEY_W,
    MAP,
    RED,
    ROWS,
    TILE_SIZE,
    WHITE,
    WIDTH,
    KeyCounter,
    MapGame,
    draw_line,
    striped_image,
    stripe_left_half,
)


def test_key_counter_starts_at_three():
    assert KeyCounter().x == 3


def test_w_adds_and_s_subtracts(capsys):
    counter = KeyCounter()
    assert counter.key_press(KEY_W) == 4
    assert counter.key_press(KEY_W) == 5
    assert counter.key_press(KEY_S) == 4
    assert capsys.readouterr().out == "x: 4\nx: 5\nx: 4\n"


def test_other_key_prints_unchanged(capsys):
    counter = KeyCounter()
    assert counter.key_press(KEY_W + 100) == 3
    assert capsys.readouterr().out == "x: 3\n"


def test_escape_exits():
    with pytest.raises(SystemExit) as info:
        KeyCounter().key_press(KEY_ESC)
    assert info.value.code == 0


def test_striped_image_columns():
    image = striped_image(6, 3)
    assert (image.width, image.height) == (6, 3)
    rows = list(image.rows())
    assert rows[0] == (RED, WHITE, RED, WHITE, RED, WHITE)
    assert all(row == rows[0] for row in rows)


def test_striped_image_default_size():
    image = striped_image()
    assert (image.width, image.height) == (400, 300)


def test_stripe_left_half_leaves_right_half():
    image = Image(6, 2)
    for y in range(2):
        for x in range(6):
            image.put_pixel(x, y, 0x123456)
    result = stripe_left_half(image)
    assert result is image
    for row in image.rows():
        assert row == (RED, WHITE, RED, 0x123456, 0x123456, 0x123456)


def test_draw_line_horizontal_excludes_end():
    image = Image(10, 3)
    draw_line(image, 0, 1, 5, 1, WHITE)
    assert [image.get_pixel(x, 1) for x in range(6)] == [WHITE] * 5 + [0]
    assert all(v == 0 for v in next(image.rows()))


def test_draw_line_vertical():
    image = Image(3, 8)
    draw_line(image, 2, 0, 2, 4, GRID_COLOR)
    assert [image.get_pixel(2, y) for y in range(5)] == [GRID_COLOR] * 4 + [0]


def test_draw_line_diagonal():
    image = Image(5, 5)
    draw_line(image, 0, 0, 3, 3, WHITE)
    lit = {(x, y) for y, row in enumerate(image.rows()) for x, v in enumerate(row) if v}
    assert lit == {(0, 0), (1, 1), (2, 2)}


def test_draw_line_single_point_draws_nothing():
    image = Image(4, 4)
    draw_line(image, 1, 1, 1, 1, WHITE)
    assert all(v == 0 for row in image.rows() for v in row)


def test_map_game_sizes():
    display = Display()
    game = MapGame(display)
    assert (game.window.width, game.window.height) == (WIDTH, HEIGHT)
    assert (game.image.width, game.image.height) == (COLS * TILE_SIZE, ROWS * TILE_SIZE)
    assert display.windows[0] is game.window


def test_draw_rectangle_fills_one_tile():
    game = MapGame(Display())
    game.draw_rectangle(2, 1)
    left, top = 2 * TILE_SIZE, 1 * TILE_SIZE
    assert game.image.get_pixel(left, top) == WHITE
    assert game.image.get_pixel(left + TILE_SIZE - 1, top + TILE_SIZE - 1) == WHITE
    assert game.image.get_pixel(left - 1, top) == 0
    assert game.image.get_pixel(left + TILE_SIZE, top) == 0


def test_draw_rectangles_follow_map():
    game = MapGame(Display())
    game.draw_rectangles()
    half = TILE_SIZE // 2
    for row, cells in enumerate(MAP):
        for col, cell in enumerate(cells):
            value = game.image.get_pixel(col * TILE_SIZE + half, row * TILE_SIZE + half)
            assert value == (WHITE if cell == 1 else 0)


def test_draw_grid_lines():
    game = MapGame(Display())
    game.draw_grid()
    image = game.image
    assert image.get_pixel(0, 5) == GRID_COLOR
    assert image.get_pixel(TILE_SIZE, 5) == GRID_COLOR
    assert image.get_pixel(WIDTH - 1, 5) == GRID_COLOR
    assert image.get_pixel(5, HEIGHT - 1) == GRID_COLOR
    assert image.get_pixel(5, TILE_SIZE) == GRID_COLOR
    assert image.get_pixel(5, 5) == 0


def test_render_copies_to_window():
    game = MapGame(Display())
    game.render()
    frame = game.window.framebuffer
    half = TILE_SIZE // 2
    assert frame.get_pixel(half, half) == WHITE
    assert frame.get_pixel(0, 0) == GRID_COLOR
    assert frame.get_pixel(TILE_SIZE + half, TILE_SIZE + half) == 0
    assert list(frame.rows()) == list(game.image.rows())


def test_loop_renders_and_escape_exits():
    display = Display()
    game = MapGame(display)
    display.post(game.window, Event(EventType.KEY_PRESS, keycode=KEY_W))
    display.post(game.window, Event(EventType.KEY_PRESS, keycode=KEY_ESC))
    with pytest.raises(SystemExit):
        display.loop()


def test_close_request_exits():
    display = Display()
    game = MapGame(display)
    display.post(game.window, Event(EventType.CLIENT_MESSAGE, close_request=True))
    with pytest.raises(SystemExit):
        display.loop()