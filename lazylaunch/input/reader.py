"""Low-level terminal input decoding.

Reads raw bytes from the tty and translates them into normalized key tokens.
Handles ESC-sequence timing, UTF-8 continuation bytes, and control keys.
"""

from __future__ import annotations

import os
import select

from ..errors import RenderFailure

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_TOKENS = {
    b"\t": "TAB",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
}

_CSI_FINAL_TOKENS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_TOKENS = {
    b"1": "HOME",
    b"2": "INSERT",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}


def _read_byte(fd: int) -> bytes:
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    try:
        ch = os.read(fd, 1)
    except OSError as exc:
        raise RenderFailure(f"failed to read terminal input: {exc}") from exc
    if not ch:
        raise RenderFailure("terminal input closed")
    return ch


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    try:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return None
        ch = os.read(fd, 1)
    except OSError as exc:
        raise RenderFailure(f"failed to read terminal input: {exc}") from exc
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_utf8(fd: int, lead: bytes) -> str:
    """Decode one UTF-8 character; malformed input yields a non-key ``"ESC"``."""
    data = bytearray(lead)
    for _ in range(_utf8_length(lead[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        if nxt[0] & 0xC0 != 0x80:
            _PENDING_BYTES.append(nxt)
            break
        data += nxt
    text = data.decode("utf-8", errors="replace")
    if "\ufffd" in text:
        return "ESC"
    return text


def _decode_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence."""
    payload = bytearray()
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        # Parameter and intermediate bytes run until a final byte in 0x40..0x7e.
        if 0x40 <= part[0] <= 0x7E:
            break
        payload += part
        if len(payload) > 64:
            return "ESC"

    if part == b"~":
        first = bytes(payload.split(b";", 1)[0])
        return _CSI_TILDE_TOKENS.get(first, "ESC")
    if payload.startswith(b"<") and part in {b"M", b"m"}:
        return "MOUSE"
    # Modified arrows such as ``ESC [ 1 ; 5 A`` keep the base direction.
    return _CSI_FINAL_TOKENS.get(part, "ESC")


def read_key(fd: int) -> str:
    """Block until one key token can be decoded from ``fd``.

    Only the bytes following an ESC are read with a short timeout.
    """
    ch = _read_byte(fd)

    token = _CONTROL_TOKENS.get(ch)
    if token is not None:
        return token
    if ch == b"\x1b":
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            return "ESC"
        if seq == b"[":
            return _decode_csi(fd)
        if seq == b"O":
            final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if final is None:
                return "ESC"
            return _CSI_FINAL_TOKENS.get(final, "ESC")
        _PENDING_BYTES.append(seq)
        return "ESC"
    if ch[0] < 0x20:
        return "CTRL_" + chr(ch[0] + 0x40)
    if ch[0] >= 0x80:
        return _decode_utf8(fd, ch)
    return ch.decode("ascii")
