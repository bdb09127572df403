"""Frame composition for the launcher prompt.

Builds one full terminal frame from session state and the current candidate
list: a boxed input line on top and a boxed result list below it.
Building a frame consumes the one-shot completion preview.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from ..ansi import clip_to_width, display_width, pad_to_width
from ..candidate import Candidate
from ..errors import RenderFailure
from ..state import Session
from ..ui_theme import DEFAULT_THEME, LauncherTheme

INPUT_REGION_HEIGHT = 3


@dataclass(frozen=True)
class Frame:
    """Composed frame text plus the 0-based cursor cell to park on."""

    rows: tuple[str, ...]
    cursor_row: int
    cursor_col: int

    def to_ansi(self) -> str:
        return (
            "\033[H\033[J"
            + "\r\n".join(self.rows)
            + f"\033[{self.cursor_row + 1};{self.cursor_col + 1}H\033[?25h"
        )


def _boxed(lines: Sequence[str], width: int, height: int, theme: LauncherTheme) -> list[str]:
    """Frame pre-styled ``lines`` in a box ``width`` x ``height`` cells large.

    ``lines`` must already be padded to ``width - 2`` columns.
    """
    if height <= 0:
        return []
    inner = max(0, width - 2)
    top = f"{theme.border}┌{'─' * inner}┐{theme.reset}"
    if height == 1:
        return [top]
    blank = " " * inner
    rows = [top]
    for idx in range(height - 2):
        content = lines[idx] if idx < len(lines) else blank
        rows.append(f"{theme.border}│{theme.reset}{content}{theme.border}│{theme.reset}")
    rows.append(f"{theme.border}└{'─' * inner}┘{theme.reset}")
    return rows


def _input_line(session: Session, candidates: Sequence[Candidate], previewing: bool, inner: int, theme: LauncherTheme) -> tuple[str, int]:
    """Return the styled input line and the cursor column inside the box."""
    if previewing:
        selected = session.selection.selected
        text = candidates[selected].display_string() if selected is not None else ""
        return f"{theme.preview}{pad_to_width(text, inner)}{theme.reset}", 0

    prompt_part = clip_to_width(session.prompt, inner)
    query_part = pad_to_width(session.buffer.query, inner - display_width(prompt_part))
    styled = f"{theme.prompt}{prompt_part}{theme.reset}{theme.query}{query_part}{theme.reset}"
    cursor = display_width(session.prompt) + display_width(session.buffer.query[: session.buffer.cursor_index])
    return styled, cursor


def _list_lines(session: Session, candidates: Sequence[Candidate], rows: int, inner: int, theme: LauncherTheme) -> list[str]:
    selection = session.selection
    selection.scroll_into_view(rows)
    indent = " " * display_width(theme.highlight_symbol)
    out: list[str] = []
    for idx in range(selection.list_start, min(len(candidates), selection.list_start + rows)):
        label = candidates[idx].display_string()
        if idx == selection.selected:
            out.append(f"{theme.highlight}{pad_to_width(theme.highlight_symbol + label, inner)}{theme.reset}")
        else:
            out.append(f"{theme.item}{pad_to_width(indent + label, inner)}{theme.reset}")
    return out


def build_frame(
    session: Session,
    candidates: Sequence[Candidate],
    width: int,
    height: int,
    theme: LauncherTheme = DEFAULT_THEME,
) -> Frame:
    """Compose one frame and advance per-frame session state.

    Records the list length (resetting or clamping the selection), lays out
    the input and list regions, then clears the completion preview after the
    input line has been built from it.
    """
    session.selection.set_list_len(len(candidates))

    width = max(2, width)
    height = max(1, height)
    input_height = min(INPUT_REGION_HEIGHT, height)
    list_height = height - input_height
    inner = width - 2

    previewing = session.preview.active
    input_text, cursor_offset = _input_line(session, candidates, previewing, inner, theme)
    list_lines = _list_lines(session, candidates, max(1, list_height - 2), inner, theme)

    rows = _boxed([input_text], width, input_height, theme) + _boxed(list_lines, width, list_height, theme)
    cursor_row = 1 if input_height > 1 else 0
    cursor_col = 1 + min(cursor_offset, max(0, inner - 1))

    session.preview.consume()
    return Frame(rows=tuple(rows), cursor_row=cursor_row, cursor_col=cursor_col)


def render_frame(fd: int, frame: Frame) -> None:
    """Write ``frame`` to ``fd``; terminal write errors are fatal."""
    try:
        os.write(fd, frame.to_ansi().encode("utf-8", errors="replace"))
    except OSError as exc:
        raise RenderFailure(f"failed to draw frame: {exc}") from exc
