"""Reader for XPM pixmaps, from files or from lists of strings."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from minipix.colors import lookup_color
from minipix.image import Image
from minipix.textscan import find, find_outside_quotes, split_words

# Pixel value stored for the transparent colour "None".
TRANSPARENT = 0xFF000000

_INT_RE = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _atoi(word: str) -> int:
    match = _INT_RE.match(word)
    return int(match.group(1)) if match else 0


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside quoted strings.

    Comments are replaced by spaces, so the length of the text is kept.
    A '//' comment is blanked up to and including its newline.
    """
    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while (begin := find_outside_quotes(text, opener, len(text))) != -1:
            end = find(text[begin + 2:], closer, len(text) - begin - 2)
            span = min(end + extra, len(text) - begin)
            text = text[:begin] + " " * span + text[begin + span:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = find(text[pos:], '"', len(text) - pos)
        if start == -1:
            return
        opened = pos + start + 1
        end = find(text[opened:], '"', len(text) - opened)
        if end == -1:
            return
        yield text[opened:opened + end]
        pos = opened + end + 1


def _key(line: str, start: int, cpp: int) -> str:
    return line[start:start + cpp].ljust(cpp, "\0")


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"XPM data ends before {what}")
    return line


def _read_colors(lines: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    table: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "the colour table is complete")
        words = split_words(line[cpp:])
        try:
            at = words.index("c")
        except ValueError:
            raise XpmError(f"colour line has no 'c' entry: {line!r}") from None
        if at + 1 >= len(words):
            raise XpmError(f"colour line has no colour after 'c': {line!r}")
        suffix = words[at + 2] if at + 2 < len(words) else None
        color = lookup_color(words[at + 1], suffix)
        key = _key(line, 0, cpp)
        if cpp <= 2:
            table[key] = color
        else:
            table.setdefault(key, color)
    return table


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM values: header, colour lines, pixel rows.

    Pixels whose characters name no colour are black; "None" becomes
    :data:`TRANSPARENT`.
    """
    values = iter(lines)
    words = split_words(_next_line(values, "the header"))
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values, got {words!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"XPM header values must be positive: {words[:4]!r}")
    table = _read_colors(values, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        line = _next_line(values, "all pixel rows are read")
        for x in range(width):
            color = table.get(_key(line, x * cpp, cpp), 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(data: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(data)


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and build an image from it.

    Raises OSError when the file cannot be read and XpmError when its
    contents are not a usable XPM.
    """
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))