"""Mutable session state for the launcher prompt.

Holds the query buffer, list selection, and one-shot completion preview.
Every operation here is total: boundary cases are no-ops, never errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InputBuffer:
    """Query text plus an edit cursor measured in characters."""

    query: str = ""
    cursor_index: int = 0

    def insert(self, ch: str) -> None:
        """Insert ``ch`` at the cursor and advance past it."""
        self.query = self.query[: self.cursor_index] + ch + self.query[self.cursor_index :]
        self.cursor_index += len(ch)

    def delete_before_cursor(self) -> None:
        """Remove the character left of the cursor, if any."""
        if self.cursor_index == 0:
            return
        self.query = self.query[: self.cursor_index - 1] + self.query[self.cursor_index :]
        self.cursor_index -= 1

    def move_left(self) -> None:
        """Move the cursor one character left, stopping at the start."""
        self.cursor_index = max(0, self.cursor_index - 1)

    def move_right(self) -> None:
        """Move the cursor one character right, stopping at the end."""
        self.cursor_index = min(len(self.query), self.cursor_index + 1)


@dataclass
class SelectionIndex:
    """Optional index into the candidate list shown by the latest render.

    ``selected is None`` exactly when ``list_len == 0``. ``list_start`` is the
    first visible row of the list viewport.
    """

    list_len: int = 0
    selected: int | None = None
    list_start: int = 0

    def set_list_len(self, list_len: int) -> None:
        """Record a fresh list length and clamp a stale selection into range."""
        self.list_len = max(0, list_len)
        if self.selected is not None and self.selected >= self.list_len:
            self.selected = self.list_len - 1 if self.list_len > 0 else None
        self.reset_if_unset()

    def reset_if_unset(self) -> None:
        """Select row 0 when nothing is selected; an empty list clears the selection."""
        if self.list_len == 0:
            self.selected = None
            self.list_start = 0
        elif self.selected is None:
            self.selected = 0

    def step(self, direction: int) -> None:
        """Move selection by ``direction`` (-1 or +1), wrapping at both ends."""
        if self.list_len == 0:
            return
        current = self.selected if self.selected is not None else 0
        self.selected = (current + direction) % self.list_len

    def scroll_into_view(self, rows: int) -> None:
        """Shift ``list_start`` so the selected row fits in ``rows`` visible lines."""
        rows = max(1, rows)
        if self.selected is None:
            self.list_start = 0
            return
        if self.selected < self.list_start:
            self.list_start = self.selected
        elif self.selected >= self.list_start + rows:
            self.list_start = self.selected - rows + 1
        max_start = max(0, self.list_len - rows)
        self.list_start = max(0, min(self.list_start, max_start))


@dataclass
class CompletionPreview:
    """One-shot latch: visible for exactly one frame after activation."""

    active: bool = False

    def activate(self, list_len: int) -> None:
        if list_len > 0:
            self.active = True

    def consume(self) -> bool:
        """Return the current flag and clear it."""
        active = self.active
        self.active = False
        return active


@dataclass
class Session:
    """Long-lived state for one interactive launcher run."""

    prompt: str = ""
    running: bool = False
    buffer: InputBuffer = field(default_factory=InputBuffer)
    selection: SelectionIndex = field(default_factory=SelectionIndex)
    preview: CompletionPreview = field(default_factory=CompletionPreview)

    @property
    def query(self) -> str:
        return self.buffer.query

    @property
    def cursor_index(self) -> int:
        return self.buffer.cursor_index

    @property
    def list_len(self) -> int:
        return self.selection.list_len

    @property
    def selected(self) -> int | None:
        return self.selection.selected

    @property
    def completion_active(self) -> bool:
        return self.preview.active
