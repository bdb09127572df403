"""Display-width helpers for clipping frame text to terminal columns."""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_to_width(text: str, max_cols: int) -> str:
    """Trim plain ``text`` to at most ``max_cols`` display columns.

    Tabs and other control characters are replaced by a single space so the
    clipped text cannot move the terminal cursor.
    """
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        if not ch.isprintable():
            ch = " "
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def pad_to_width(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and right-pad it with spaces."""
    clipped = clip_to_width(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
