"""Input-layer public API for key decoding and dispatch.

Low-level terminal decoding (`read_key`) is kept separate from the
session-level key handler used by the front-end.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import CANCEL_KEY, KeyResult, build_key_registry, handle_key, is_printable_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "CANCEL_KEY",
    "KeyResult",
    "build_key_registry",
    "handle_key",
    "is_printable_key",
]
