"""Widget owner holding the latest selection snapshot.

The state machine is pure; this class is the thin caller that stores the
newest snapshot, replaces it wholesale after every command, and rebuilds the
hit-tester whenever the on-screen layout changes.
"""

from __future__ import annotations

import logging

from ..grid import Grid
from ..hit_test import HitTester
from ..input import InputBindings, PointerRouter, is_mouse_key
from ..layout import GridLayout
from ..selection import Command, SelectionMachine, SelectionState

logger = logging.getLogger(__name__)


class GridInputWidget:
    """One active grid input session."""

    def __init__(
        self,
        grid: Grid,
        *,
        layout: GridLayout | None = None,
        bindings: InputBindings | None = None,
        row_overshoot: float | None = None,
    ) -> None:
        self.machine = SelectionMachine(grid)
        self.bindings = bindings if bindings is not None else InputBindings()
        self.row_overshoot = row_overshoot
        self.dirty = True
        self._state = self.machine.initial_state()
        self._layout = layout if layout is not None else GridLayout(grid)
        self._hit_tester = HitTester(self._layout, row_overshoot)
        self._pointer = PointerRouter(
            self.bindings,
            hit_tester=lambda: self._hit_tester,
            button_at=lambda x, y: self._layout.button_at(x, y),
        )

    @property
    def grid(self) -> Grid:
        return self.machine.grid

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def layout(self) -> GridLayout:
        return self._layout

    def set_layout(self, layout: GridLayout) -> None:
        """Swap in fresh geometry; the hit-tester must never see stale rects."""
        if layout == self._layout:
            return
        self._layout = layout
        self._hit_tester = HitTester(layout, self.row_overshoot)
        self.dirty = True

    def dispatch(self, command: Command) -> bool:
        """Apply ``command`` and return whether the snapshot changed."""
        previous = self._state
        self._state = self.machine.apply(previous, command)
        changed = self._state != previous
        if changed:
            self.dirty = True
            logger.debug(
                "%s: mode=%s row=%d col=%d text=%r",
                type(command).__name__,
                self._state.mode.value,
                self._state.row,
                self._state.col,
                self._state.composed,
            )
        return changed

    def handle_key(self, key: str) -> bool:
        command = self.bindings.command_for_key(key)
        if command is None:
            return False
        return self.dispatch(command)

    def handle_mouse(self, mouse_key: str) -> bool:
        command = self._pointer.handle_key(mouse_key)
        if command is None:
            return False
        return self.dispatch(command)

    def handle(self, key: str) -> bool:
        """Route a raw key token to the pointer or key bindings."""
        if is_mouse_key(key):
            return self.handle_mouse(key)
        return self.handle_key(key)
