"""Tests for terminal mode transitions.

Verifies raw-mode lifecycle safety, partial-entry rollback, and best-effort
restoration when individual steps fail.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from lazylaunch.errors import SetupFailure
from lazylaunch.terminal import TerminalController


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_tui_mode_use_alternate_screen_sequences(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("lazylaunch.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "lazylaunch.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("lazylaunch.terminal.os.write") as write_mock, mock.patch(
            "lazylaunch.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            self.assertTrue(controller.active)
            failed = controller.disable_tui_mode()

        self.assertEqual(failed, [])
        self.assertFalse(controller.active)
        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(
            write_mock.call_args_list,
            [
                mock.call(1, b"\x1b[?1049h\x1b[?25l"),
                mock.call(1, b"\x1b[?25h"),
                mock.call(1, b"\x1b[?1049l"),
            ],
        )
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_failure_raises_setup_failure(self) -> None:
        with mock.patch(
            "lazylaunch.terminal.termios.tcgetattr", side_effect=termios.error(25, "not a tty")
        ), mock.patch("lazylaunch.terminal.os.write") as write_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            with self.assertRaises(SetupFailure):
                controller.enable_tui_mode()

        self.assertFalse(controller.active)
        write_mock.assert_not_called()

    def test_alternate_screen_failure_restores_tty_attributes(self) -> None:
        with mock.patch("lazylaunch.terminal.termios.tcgetattr", return_value=[9]), mock.patch(
            "lazylaunch.terminal.tty.setraw"
        ), mock.patch("lazylaunch.terminal.os.write", side_effect=OSError("EIO")), mock.patch(
            "lazylaunch.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            with self.assertLogs("lazylaunch.terminal", level="WARNING"):
                with self.assertRaises(SetupFailure):
                    controller.enable_tui_mode()

        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, [9])
        self.assertFalse(controller.active)

    def test_disable_continues_after_failed_step(self) -> None:
        with mock.patch("lazylaunch.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "lazylaunch.terminal.tty.setraw"
        ), mock.patch("lazylaunch.terminal.termios.tcsetattr") as setattr_mock, mock.patch(
            "lazylaunch.terminal.os.write"
        ) as write_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            write_mock.side_effect = [OSError("EIO"), 5]
            with self.assertLogs("lazylaunch.terminal", level="WARNING") as logs:
                failed = controller.disable_tui_mode()

        self.assertEqual(failed, ["show_cursor"])
        self.assertIn("show_cursor", logs.output[0])
        setattr_mock.assert_called_once()

    def test_disable_is_noop_when_inactive(self) -> None:
        controller = TerminalController(stdin_fd=0, stdout_fd=1)
        with mock.patch("lazylaunch.terminal.os.write") as write_mock:
            self.assertEqual(controller.disable_tui_mode(), [])
        write_mock.assert_not_called()

    def test_size_falls_back_when_not_a_terminal(self) -> None:
        controller = TerminalController(stdin_fd=0, stdout_fd=1)
        with mock.patch("lazylaunch.terminal.os.get_terminal_size", side_effect=OSError("ENOTTY")):
            self.assertEqual(controller.size(), (80, 24))
        with mock.patch("lazylaunch.terminal.os.get_terminal_size", return_value=mock.Mock(columns=120, lines=40)):
            self.assertEqual(controller.size(), (120, 40))


if __name__ == "__main__":
    unittest.main()
