"""Terminal control for one interactive lettergrid session.

Raw input, the alternate screen, a hidden cursor and SGR mouse tracking are
switched on together and restored together, even when the loop raises.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ALT_SCREEN_MODE = 1049
CURSOR_VISIBLE_MODE = 25
# Button press/release, motion while a button is held, SGR coordinates.
# Drag reports are what let the hit-tester follow the pointer.
MOUSE_MODES = (1000, 1002, 1006)

CLEAR_SCREEN = b"\x1b[2J"


class NotATerminalError(RuntimeError):
    """stdin is not a tty, so no interactive session can run."""


def private_modes(modes: tuple[int, ...], enabled: bool) -> bytes:
    """Encode DEC private mode set (``h``) or reset (``l``) sequences."""
    suffix = "h" if enabled else "l"
    return "".join(f"\x1b[?{mode}{suffix}" for mode in modes).encode("ascii")


class TerminalController:
    """Own the tty attributes and screen modes of one session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        if not os.isatty(stdin_fd):
            raise NotATerminalError("stdin is not a terminal")
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._mouse_reporting_enabled = False

    def _write(self, data: bytes) -> None:
        os.write(self.stdout_fd, data)

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._write(
            private_modes((ALT_SCREEN_MODE,), True)
            + private_modes((CURSOR_VISIBLE_MODE,), False)
            + CLEAR_SCREEN
        )
        self.set_mouse_reporting(True)

    def disable_tui_mode(self) -> None:
        """Undo ``enable_tui_mode``; pending input is discarded with the tty restore."""
        self.set_mouse_reporting(False)
        self._write(private_modes((CURSOR_VISIBLE_MODE,), True) + private_modes((ALT_SCREEN_MODE,), False))
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_mouse_reporting(self, enabled: bool) -> None:
        desired = bool(enabled)
        if desired == self._mouse_reporting_enabled:
            return
        self._write(private_modes(MOUSE_MODES, desired))
        self._mouse_reporting_enabled = desired

    def clear(self) -> None:
        """Wipe the screen so a relocated frame leaves nothing behind."""
        self._write(CLEAR_SCREEN)

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
