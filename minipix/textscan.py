"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _terminated(text: str) -> str:
    """Return the part of ``text`` before the first NUL character."""
    nul = text.find("\0")
    return text if nul < 0 else text[:nul]


def find(text: str, needle: str, limit: int | None = None) -> int:
    """Return the position of the first ``needle`` in ``text``, or -1.

    The search stops at the first NUL character. When ``limit`` is given
    and the needle is longer than it, nothing is found.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if limit is not None and len(needle) > limit:
        return -1
    return _terminated(text).find(needle)


def find_outside_quotes(text: str, needle: str, limit: int | None = None) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes.

    Each '"' toggles the quoted state; a quote character itself counts as
    inside the quotes it opens.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if limit is not None and len(needle) > limit:
        return -1
    body = _terminated(text)
    last_start = len(body) - len(needle)
    quoted = False
    for pos, char in enumerate(body[: last_start + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and body.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words.

    Only spaces and tabs separate words; the text ends at the first NUL.
    """
    return [word for word in _WORD_SEPARATORS.split(_terminated(text)) if word]