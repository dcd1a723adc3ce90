"""Mouse token parsing and pointer routing.

Pointer presses land either on the button bar or on the grid. Button presses
are one-shot commands; grid presses start a drag that is hit-tested on every
move so the highlighted cell follows the pointer, and the release commits.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..hit_test import HitTester, PointerEvent, PointerPhase
from ..selection import Command
from .keys import InputBindings

logger = logging.getLogger(__name__)

_PHASE_PREFIXES: dict[str, PointerPhase] = {
    "MOUSE_LEFT_DOWN": PointerPhase.PRESS,
    "MOUSE_LEFT_DRAG": PointerPhase.MOVE,
    "MOUSE_LEFT_UP": PointerPhase.RELEASE,
}


def parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    """Parse ``MOUSE_*:col:row`` key tokens into integer coordinates."""
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


def parse_pointer_event(mouse_key: str) -> PointerEvent | None:
    """Turn a left-button mouse token into a ``PointerEvent``."""
    prefix = mouse_key.split(":", 1)[0]
    phase = _PHASE_PREFIXES.get(prefix)
    if phase is None:
        return None
    col, row = parse_mouse_col_row(mouse_key)
    if col is None or row is None:
        return None
    return PointerEvent(phase=phase, x=col, y=row)


def is_mouse_key(key: str) -> bool:
    return key.startswith("MOUSE")


class PointerRouter:
    """Route pointer events to buttons or the grid hit-tester."""

    def __init__(
        self,
        bindings: InputBindings,
        hit_tester: Callable[[], HitTester],
        button_at: Callable[[float, float], str | None],
    ) -> None:
        self._bindings = bindings
        self._hit_tester = hit_tester
        self._button_at = button_at
        self._button_gesture = False

    def handle(self, event: PointerEvent) -> Command | None:
        if event.phase is PointerPhase.PRESS:
            button = self._button_at(event.x, event.y)
            self._button_gesture = button is not None
            if button is not None:
                return self._bindings.command_for_button(button)
        elif self._button_gesture:
            if event.phase is PointerPhase.RELEASE:
                self._button_gesture = False
            return None
        return self._hit_tester().command_for(event)

    def handle_key(self, mouse_key: str) -> Command | None:
        event = parse_pointer_event(mouse_key)
        if event is None:
            logger.debug("Ignoring mouse token %r", mouse_key)
            return None
        return self.handle(event)
