"""Regression tests for raw-key decoding.

Covers ESC timing, arrow/delete sequences, UTF-8, and control-key tokens.
"""

from __future__ import annotations

import os
import time
import unittest

from lazylaunch import input as input_mod
from lazylaunch.errors import RenderFailure


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences(self) -> None:
        keys = self._read_all(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4)
        self.assertEqual(keys, ["UP", "DOWN", "RIGHT", "LEFT"])

    def test_application_mode_arrows(self) -> None:
        self.assertEqual(self._read_all(b"\x1bOA\x1bOB", 2), ["UP", "DOWN"])

    def test_modified_arrow_keeps_direction(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[1;5C", 1), ["RIGHT"])

    def test_delete_sequence(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[3~", 1), ["DELETE"])

    def test_control_tokens(self) -> None:
        keys = self._read_all(b"\x03\t\r\n\x7f\x08\x01", 7)
        self.assertEqual(keys, ["CTRL_C", "TAB", "ENTER", "ENTER", "BACKSPACE", "BACKSPACE", "CTRL_A"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_sgr_mouse_event_is_not_a_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[<0;10;5Mx", 2), ["MOUSE", "x"])

    def test_multibyte_utf8_decodes_to_one_character(self) -> None:
        self.assertEqual(self._read_all("é日".encode("utf-8"), 2), ["é", "日"])

    def test_invalid_utf8_lead_byte_is_not_a_key(self) -> None:
        self.assertEqual(self._read_all(b"\xffa", 2), ["ESC", "a"])

    def test_truncated_utf8_sequence_is_not_a_key(self) -> None:
        self.assertEqual(self._read_all(b"\xe6\x97x", 2), ["ESC", "x"])

    def test_closed_input_raises_render_failure(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            with self.assertRaises(RenderFailure):
                input_mod.read_key(read_fd)
        finally:
            os.close(read_fd)


if __name__ == "__main__":
    unittest.main()
