"""Terminal control helpers for the launcher session.

Owns raw-mode lifecycle and alternate-screen switching.
Restoration is best-effort: every step is attempted even if an earlier one fails.
"""

from __future__ import annotations

import logging
import os
import termios
import tty

from .errors import SetupFailure

logger = logging.getLogger(__name__)

ENTER_SCREEN = b"\x1b[?1049h\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
LEAVE_SCREEN = b"\x1b[?1049l"
FALLBACK_SIZE = (80, 24)


class TerminalController:
    """Manage raw input mode and the alternate screen for one tty."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state: list | None = None
        self.active = False

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode; undo partial entry on failure."""
        if self.active:
            return
        try:
            self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except (termios.error, OSError) as exc:
            raise SetupFailure(f"failed to enable raw mode: {exc}") from exc
        self.active = True
        try:
            os.write(self.stdout_fd, ENTER_SCREEN)
        except OSError as exc:
            self.disable_tui_mode()
            raise SetupFailure(f"failed to enter alternate screen: {exc}") from exc

    def disable_tui_mode(self) -> list[str]:
        """Restore normal terminal state.

        Returns the names of steps that failed; each failure is logged and the
        remaining steps still run.
        """
        if not self.active:
            return []
        failed: list[str] = []
        for name, step in (
            ("show_cursor", lambda: os.write(self.stdout_fd, SHOW_CURSOR)),
            ("leave_alternate_screen", lambda: os.write(self.stdout_fd, LEAVE_SCREEN)),
            ("restore_tty_attributes", self._restore_tty_state),
        ):
            try:
                step()
            except (termios.error, OSError) as exc:
                logger.warning("terminal restore step %s failed: %s", name, exc)
                failed.append(name)
        self.active = False
        return failed

    def _restore_tty_state(self) -> None:
        if self._saved_tty_state is not None:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the output tty, falling back to 80x24."""
        try:
            term = os.get_terminal_size(self.stdout_fd)
        except OSError:
            return FALLBACK_SIZE
        if term.columns <= 0 or term.lines <= 0:
            return FALLBACK_SIZE
        return term.columns, term.lines
