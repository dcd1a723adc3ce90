"""Tests for terminal mode switching.

Checks the escape payloads written on enter/exit, mouse toggling, and that
the tty is always restored.
"""

from __future__ import annotations

import os
import termios
import unittest
from unittest import mock

from lettergrid.runtime.terminal import NotATerminalError, TerminalController, private_modes


def _controller() -> TerminalController:
    with mock.patch("lettergrid.runtime.terminal.os.isatty", return_value=True), mock.patch(
        "lettergrid.runtime.terminal.termios.tcgetattr", return_value=[0]
    ):
        return TerminalController(stdin_fd=0, stdout_fd=1)


class TerminalControllerTests(unittest.TestCase):
    def test_private_modes_encoding(self) -> None:
        self.assertEqual(private_modes((1000, 1006), True), b"\x1b[?1000h\x1b[?1006h")
        self.assertEqual(private_modes((25,), False), b"\x1b[?25l")

    def test_pipe_stdin_is_rejected(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            with self.assertRaises(NotATerminalError):
                TerminalController(stdin_fd=read_fd, stdout_fd=write_fd)
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_enable_and_disable_bracket_screen_and_mouse_modes(self) -> None:
        saved_state = [1, 2, 3]
        with mock.patch("lettergrid.runtime.terminal.os.isatty", return_value=True), mock.patch(
            "lettergrid.runtime.terminal.termios.tcgetattr", return_value=saved_state
        ), mock.patch("lettergrid.runtime.terminal.tty.setraw") as setraw_mock, mock.patch(
            "lettergrid.runtime.terminal.os.write"
        ) as write_mock, mock.patch("lettergrid.runtime.terminal.termios.tcsetattr") as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(
            write_mock.call_args_list,
            [
                mock.call(1, b"\x1b[?1049h\x1b[?25l\x1b[2J"),
                mock.call(1, b"\x1b[?1000h\x1b[?1002h\x1b[?1006h"),
                mock.call(1, b"\x1b[?1000l\x1b[?1002l\x1b[?1006l"),
                mock.call(1, b"\x1b[?25h\x1b[?1049l"),
            ],
        )
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_set_mouse_reporting_is_idempotent(self) -> None:
        controller = _controller()
        with mock.patch("lettergrid.runtime.terminal.os.write") as write_mock:
            controller.set_mouse_reporting(False)
            controller.set_mouse_reporting(True)
            controller.set_mouse_reporting(True)
        self.assertEqual(write_mock.call_args_list, [mock.call(1, b"\x1b[?1000h\x1b[?1002h\x1b[?1006h")])

    def test_clear_writes_erase_display(self) -> None:
        controller = _controller()
        with mock.patch("lettergrid.runtime.terminal.os.write") as write_mock:
            controller.clear()
        write_mock.assert_called_once_with(1, b"\x1b[2J")

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        controller = _controller()
        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")
        enable_mock.assert_called_once()
        disable_mock.assert_called_once()


if __name__ == "__main__":
    unittest.main()
