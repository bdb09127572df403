"""Candidate types shared by the renderer and search collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Candidate(Protocol):
    """One launchable item; the front-end only reads its display string."""

    def display_string(self) -> str: ...


@dataclass(frozen=True)
class TextCandidate:
    label: str
    payload: Any = None

    def display_string(self) -> str:
        return self.label
