import pytest

from minipix.colors import lookup_color
from minipix.xpm import (
    TRANSPARENT,
    XpmError,
    parse_xpm,
    quoted_lines,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)


def test_strip_block_comment_keeps_length():
    text = 'a /* note */ "b"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "note" not in stripped
    assert stripped.startswith("a ")
    assert stripped.endswith('"b"')


def test_strip_keeps_quoted_comment_markers():
    text = '"/* kept */" /* gone */'
    stripped = strip_comments(text)
    assert "kept" in stripped
    assert "gone" not in stripped


def test_strip_line_comment_through_newline():
    text = '"x" // remark\n"y"'
    stripped = strip_comments(text)
    assert "remark" not in stripped
    assert "\n" not in stripped
    assert list(quoted_lines(stripped)) == ["x", "y"]


def test_quoted_lines():
    text = 'static char *x[] = { "1 1 1 1", "a c red" , "a" };'
    assert list(quoted_lines(text)) == ["1 1 1 1", "a c red", "a"]


def test_quoted_lines_unterminated():
    assert list(quoted_lines('"one" "two')) == ["one"]


def test_parse_hex_and_none():
    image = parse_xpm(["2 2 2 1", "# c #FF0000", ". c None", "#.", ".#"])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == TRANSPARENT
    assert image.get_pixel(0, 1) == TRANSPARENT
    assert image.get_pixel(1, 1) == 0xFF0000


def test_named_colors_including_two_words():
    image = xpm_to_image(["2 1 2 1", "r c red", "g c light grey", "rg"])
    assert image.get_pixel(0, 0) == lookup_color("red")
    assert image.get_pixel(1, 0) == lookup_color("light grey")


def test_two_chars_per_pixel():
    image = xpm_to_image(["2 1 2 2", "aa c #000010", "bb c #000020", "bbaa"])
    assert list(image.rows()) == [(0x20, 0x10)]


def test_short_keys_last_definition_wins():
    image = xpm_to_image(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x2


def test_long_keys_first_definition_wins():
    image = xpm_to_image(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 0x1


def test_unknown_pixel_key_is_black():
    image = xpm_to_image(["2 1 1 1", "a c #123456", "az"])
    assert image.get_pixel(0, 0) == 0x123456
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "data",
    [
        [],
        ["1 1 1"],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1 x", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
    ],
)
def test_bad_data(data):
    with pytest.raises(XpmError):
        xpm_to_image(data)


def test_file_to_image(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *sample[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1 ",\n'
        '"  c None",\n'
        '". c red",\n'
        "// pixels\n"
        '". "\n'
        "};\n"
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == lookup_color("red")
    assert image.get_pixel(1, 0) == TRANSPARENT


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")