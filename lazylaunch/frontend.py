"""Hosting-process surface of the launcher prompt.

``Frontend`` couples a ``Session`` to a ``TerminalController``: it draws frames
for a caller-supplied candidate list and blocks for one key transition at a time.
The terminal is restored on ``shutdown()``, on context-manager exit, and at
interpreter exit.
"""

from __future__ import annotations

import atexit
import logging
import sys
from collections.abc import Sequence

from .candidate import Candidate
from .errors import RenderFailure
from .input import KeyResult, build_key_registry, handle_key, read_key
from .render import build_frame, render_frame
from .state import Session
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, LauncherTheme

logger = logging.getLogger(__name__)


class Frontend:
    def __init__(self, session: Session, terminal: TerminalController, theme: LauncherTheme = DEFAULT_THEME) -> None:
        self.session = session
        self.terminal = terminal
        self.theme = theme
        self._keys = build_key_registry(session)

    @classmethod
    def init(
        cls,
        prompt: str,
        *,
        stdin_fd: int | None = None,
        stdout_fd: int | None = None,
        theme: LauncherTheme = DEFAULT_THEME,
    ) -> Frontend:
        """Enter interactive mode and return a ready front-end.

        Raises ``SetupFailure`` when the terminal cannot be switched over.
        """
        terminal = TerminalController(
            sys.stdin.fileno() if stdin_fd is None else stdin_fd,
            sys.stdout.fileno() if stdout_fd is None else stdout_fd,
        )
        terminal.enable_tui_mode()
        frontend = cls(Session(prompt=prompt, running=True), terminal, theme)
        atexit.register(frontend.shutdown)
        logger.debug("entered interactive mode on fd %d", terminal.stdout_fd)
        return frontend

    def __enter__(self) -> Frontend:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def set_prompt(self, prompt: str) -> Frontend:
        self.session.prompt = prompt
        return self

    def get_query(self) -> str:
        return self.session.buffer.query

    def render(self, candidates: Sequence[Candidate]) -> Frontend:
        """Draw one frame for ``candidates``."""
        if not self.session.running:
            raise RenderFailure("terminal is not in interactive mode")
        columns, lines = self.terminal.size()
        frame = build_frame(self.session, candidates, columns, lines, self.theme)
        render_frame(self.terminal.stdout_fd, frame)
        return self

    def handle_key(self, key: str) -> KeyResult:
        """Apply one decoded key token to the session."""
        return handle_key(self.session, key, self._keys)

    def wait_for_key(self) -> tuple[bool, int | None]:
        """Block until a bound key arrives and return ``(should_exit, confirmed_index)``.

        Unbound keys and non-key input are skipped without returning.
        """
        while True:
            result = self.handle_key(read_key(self.terminal.stdin_fd))
            if result.handled:
                return result.should_exit, result.confirmed

    def shutdown(self) -> None:
        """Restore the terminal if still in interactive mode; safe to repeat."""
        if not self.session.running:
            return
        self.session.running = False
        failed = self.terminal.disable_tui_mode()
        if failed:
            logger.error("terminal may be left in a bad state; failed steps: %s", ", ".join(failed))
        atexit.unregister(self.shutdown)
