"""Keyboard dispatch for the launcher prompt.

Maps one key token to exactly one session transition and a loop decision.
Unbound keys and non-key tokens leave the session untouched and are reported
as unhandled so the caller keeps waiting for the next event.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..state import Session
from .key_registry import KeyComboBinding, KeyComboRegistry

CANCEL_KEY = "CTRL_C"


@dataclass(frozen=True)
class KeyResult:
    """Outcome of one key event.

    ``handled`` is false for ignored keys. ``confirmed`` is the selection index
    captured by Enter and is only meaningful when ``should_exit`` is true.
    """

    handled: bool
    should_exit: bool = False
    confirmed: int | None = None


IGNORED = KeyResult(handled=False)
CONTINUE = KeyResult(handled=True)
CANCEL = KeyResult(handled=True, should_exit=True)


def _edit(action) -> KeyResult:
    action()
    return CONTINUE


def _confirm(session: Session) -> KeyResult:
    selected = session.selection.selected
    if selected is None:
        return CONTINUE
    return KeyResult(handled=True, should_exit=True, confirmed=selected)


def _complete(session: Session) -> KeyResult:
    session.preview.activate(session.selection.list_len)
    session.selection.step(1)
    return CONTINUE


def build_key_registry(session: Session) -> KeyComboRegistry[KeyResult]:
    """Build the key table bound to ``session``."""
    buffer = session.buffer
    selection = session.selection
    return KeyComboRegistry[KeyResult]().register_bindings(
        KeyComboBinding((CANCEL_KEY,), lambda: CANCEL),
        # Delete shares Backspace semantics and removes the character before the cursor.
        KeyComboBinding(("BACKSPACE", "DELETE"), lambda: _edit(buffer.delete_before_cursor)),
        KeyComboBinding(("UP",), lambda: _edit(lambda: selection.step(-1))),
        KeyComboBinding(("DOWN",), lambda: _edit(lambda: selection.step(1))),
        KeyComboBinding(("LEFT",), lambda: _edit(buffer.move_left)),
        KeyComboBinding(("RIGHT",), lambda: _edit(buffer.move_right)),
        KeyComboBinding(("ENTER",), lambda: _confirm(session)),
        KeyComboBinding(("TAB",), lambda: _complete(session)),
    )


def is_printable_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def handle_key(session: Session, key: str, registry: KeyComboRegistry[KeyResult] | None = None) -> KeyResult:
    """Apply ``key`` to ``session`` and return the loop decision.

    ``registry`` must have been built for the same ``session``; one is built
    on demand when omitted.
    """
    if registry is None:
        registry = build_key_registry(session)
    result = registry.dispatch(key)
    if result is not None:
        return result
    if is_printable_key(key):
        session.buffer.insert(key)
        return CONTINUE
    return IGNORED
