"""Public package surface for lazylaunch.

Exports the front-end types a hosting process drives directly, and ``main``
for programmatic CLI invocation.
"""

from __future__ import annotations

from .candidate import Candidate, TextCandidate
from .errors import LauncherError, RenderFailure, SetupFailure
from .frontend import Frontend
from .state import Session


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Candidate",
    "TextCandidate",
    "Frontend",
    "Session",
    "LauncherError",
    "SetupFailure",
    "RenderFailure",
    "main",
]
