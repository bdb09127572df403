"""Candidate producers for the command-line launcher."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from ..candidate import TextCandidate


def collect_path_executables(path_env: str | None = None) -> list[TextCandidate]:
    """List executable names reachable through ``PATH``.

    The first directory providing a name wins; its full path is kept as the
    candidate payload. Unreadable directories are skipped.
    """
    if path_env is None:
        path_env = os.environ.get("PATH", "")
    found: dict[str, Path] = {}
    for raw_dir in path_env.split(os.pathsep):
        if not raw_dir:
            continue
        directory = Path(raw_dir)
        try:
            entries = sorted(directory.iterdir())
        except OSError:
            continue
        for entry in entries:
            if entry.name in found:
                continue
            try:
                if entry.is_file() and os.access(entry, os.X_OK):
                    found[entry.name] = entry
            except OSError:
                continue
    names = sorted(found, key=str.casefold)
    return [TextCandidate(label=name, payload=found[name]) for name in names]


def candidates_from_lines(lines: Iterable[str]) -> list[TextCandidate]:
    out: list[TextCandidate] = []
    for raw in lines:
        label = raw.rstrip("\r\n")
        if label.strip():
            out.append(TextCandidate(label=label))
    return out


def read_candidates(stream: TextIO) -> list[TextCandidate]:
    """Read one candidate per non-blank line of ``stream``."""
    return candidates_from_lines(stream)
