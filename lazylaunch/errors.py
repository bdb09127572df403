"""Error types surfaced by the launcher front-end.

Terminal setup and frame/input failures are fatal for the interactive session.
Callers catch ``LauncherError`` to report them and exit.
"""

from __future__ import annotations


class LauncherError(Exception):
    """Base class for unrecoverable front-end failures."""


class SetupFailure(LauncherError):
    """Raised when raw mode or the alternate screen cannot be entered."""


class RenderFailure(LauncherError):
    """Raised when a frame cannot be drawn or a key event cannot be read."""
