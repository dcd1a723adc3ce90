"""Discrete key and on-screen button bindings.

Each physical input maps to exactly one selection command. There are no
modifier combinations; unknown tokens are logged and ignored.
"""

from __future__ import annotations

import logging

from ..selection import (
    BACKSPACE,
    CONFIRM,
    FINISH_WORD,
    MOVE_DOWN,
    MOVE_LEFT,
    MOVE_RIGHT,
    MOVE_UP,
    Command,
)
from .key_registry import CommandBinding, CommandRegistry

logger = logging.getLogger(__name__)

BUTTON_LEFT = "left"
BUTTON_UP = "up"
BUTTON_CENTER = "center"
BUTTON_DOWN = "down"
BUTTON_RIGHT = "right"
BUTTON_BACKSPACE = "backspace"
BUTTON_SPACE = "space"

BUTTON_ORDER: tuple[str, ...] = (
    BUTTON_LEFT,
    BUTTON_UP,
    BUTTON_CENTER,
    BUTTON_DOWN,
    BUTTON_RIGHT,
    BUTTON_BACKSPACE,
    BUTTON_SPACE,
)

QUIT_KEYS = frozenset({"ESC", "CTRL_C", "CTRL_Q"})


def default_key_registry() -> CommandRegistry:
    return CommandRegistry(normalize=str.upper).register_bindings(
        CommandBinding(("LEFT",), MOVE_LEFT),
        CommandBinding(("RIGHT",), MOVE_RIGHT),
        CommandBinding(("UP",), MOVE_UP),
        CommandBinding(("DOWN",), MOVE_DOWN),
        CommandBinding(("SPACE",), CONFIRM),
        CommandBinding(("BACKSPACE",), BACKSPACE),
        CommandBinding(("ENTER",), FINISH_WORD),
    )


def default_button_registry() -> CommandRegistry:
    return CommandRegistry().register_bindings(
        CommandBinding((BUTTON_LEFT,), MOVE_LEFT),
        CommandBinding((BUTTON_UP,), MOVE_UP),
        CommandBinding((BUTTON_CENTER,), CONFIRM),
        CommandBinding((BUTTON_DOWN,), MOVE_DOWN),
        CommandBinding((BUTTON_RIGHT,), MOVE_RIGHT),
        CommandBinding((BUTTON_BACKSPACE,), BACKSPACE),
        CommandBinding((BUTTON_SPACE,), FINISH_WORD),
    )


class InputBindings:
    """Translate key tokens and button ids into selection commands."""

    def __init__(
        self,
        keys: CommandRegistry | None = None,
        buttons: CommandRegistry | None = None,
    ) -> None:
        self.keys = keys if keys is not None else default_key_registry()
        self.buttons = buttons if buttons is not None else default_button_registry()

    def command_for_key(self, key: str) -> Command | None:
        command = self.keys.resolve(key)
        if command is None:
            logger.debug("Ignoring unbound key %r", key)
        return command

    def command_for_button(self, button: str) -> Command | None:
        command = self.buttons.resolve(button)
        if command is None:
            logger.debug("Ignoring unknown button %r", button)
        return command


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR/LF variants into ``ENTER``.

    Returns ``(key, skip_next_lf)``; ``key`` is ``None`` when the token is the
    LF half of a CRLF pair that was already reported.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False
