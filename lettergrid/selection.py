"""Two-phase row/column selection state machine.

``SelectionMachine.apply`` is a pure ``(state, command) -> state`` function.
Each mode owns its own transition function; commands whose effect does not
depend on the mode are resolved once before mode dispatch. Inputs are
clamped or ignored, never rejected, so no command sequence can leave the
state out of bounds.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from .grid import Grid

WORD_SEPARATOR = " "


class Mode(Enum):
    SELECTING_ROW = "row"
    SELECTING_COL = "col"


@dataclass(frozen=True)
class SelectionState:
    """Immutable selection snapshot handed to the renderer."""

    mode: Mode = Mode.SELECTING_ROW
    row: int = 0
    col: int = 0
    text: tuple[str, ...] = ()

    @property
    def composed(self) -> str:
        return "".join(self.text)


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class MoveLeft:
    pass


@dataclass(frozen=True)
class MoveRight:
    pass


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class FinishWord:
    pass


@dataclass(frozen=True)
class JumpTo:
    """Pointer jump to a cell; ``confirm`` commits the cell's symbol."""

    row: int
    col: int
    confirm: bool = False


@dataclass(frozen=True)
class JumpToRow:
    """Pointer jump to a row without entering column selection."""

    row: int


Command = Union[MoveUp, MoveDown, MoveLeft, MoveRight, Confirm, Backspace, FinishWord, JumpTo, JumpToRow]

MOVE_UP = MoveUp()
MOVE_DOWN = MoveDown()
MOVE_LEFT = MoveLeft()
MOVE_RIGHT = MoveRight()
CONFIRM = Confirm()
BACKSPACE = Backspace()
FINISH_WORD = FinishWord()

_VERTICAL_DELTAS: dict[type, int] = {MoveUp: -1, MoveDown: 1}
_HORIZONTAL_DELTAS: dict[type, int] = {MoveLeft: -1, MoveRight: 1}


def _commit(state: SelectionState, grid: Grid, row: int, col: int) -> SelectionState:
    """Append the symbol at ``(row, col)`` and restart at the first row."""
    return SelectionState(
        mode=Mode.SELECTING_ROW,
        row=0,
        col=0,
        text=state.text + (grid.symbol_at(row, col),),
    )


def _selecting_row(state: SelectionState, grid: Grid, command: Command) -> SelectionState:
    delta = _VERTICAL_DELTAS.get(type(command))
    if delta is not None:
        return replace(state, row=grid.clamp_row(state.row + delta))
    if isinstance(command, Confirm):
        return replace(state, mode=Mode.SELECTING_COL)
    # Column movement stays disabled until a row is confirmed.
    return state


def _selecting_col(state: SelectionState, grid: Grid, command: Command) -> SelectionState:
    delta = _HORIZONTAL_DELTAS.get(type(command))
    if delta is not None:
        return replace(state, col=grid.clamp_col(state.col + delta))
    if type(command) in _VERTICAL_DELTAS:
        # Abandon the column pick; the vertical delta is not applied.
        return replace(state, mode=Mode.SELECTING_ROW, col=0)
    if isinstance(command, Confirm):
        return _commit(state, grid, state.row, state.col)
    return state


_MODE_TRANSITIONS: dict[Mode, Callable[[SelectionState, Grid, Command], SelectionState]] = {
    Mode.SELECTING_ROW: _selecting_row,
    Mode.SELECTING_COL: _selecting_col,
}


class SelectionMachine:
    """Applies commands to selection snapshots for one grid."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def initial_state(self) -> SelectionState:
        return SelectionState()

    def apply(self, state: SelectionState, command: Command) -> SelectionState:
        """Return the snapshot that results from applying ``command``."""
        grid = self.grid
        if isinstance(command, Backspace):
            return replace(state, text=state.text[:-1]) if state.text else state
        if isinstance(command, FinishWord):
            text = state.text + (WORD_SEPARATOR,) if state.text else state.text
            return SelectionState(mode=Mode.SELECTING_ROW, row=0, col=0, text=text)
        if isinstance(command, JumpTo):
            row = grid.clamp_row(command.row)
            col = grid.clamp_col(command.col)
            if command.confirm:
                return _commit(state, grid, row, col)
            return replace(state, mode=Mode.SELECTING_COL, row=row, col=col)
        if isinstance(command, JumpToRow):
            return replace(state, mode=Mode.SELECTING_ROW, row=grid.clamp_row(command.row), col=0)
        return _MODE_TRANSITIONS[state.mode](state, grid, command)

    def apply_all(self, commands: Iterable[Command], state: SelectionState | None = None) -> SelectionState:
        """Fold ``commands`` over ``state`` (initial state when omitted)."""
        current = self.initial_state() if state is None else state
        for command in commands:
            current = self.apply(current, command)
        return current


__all__ = [
    "BACKSPACE",
    "CONFIRM",
    "FINISH_WORD",
    "MOVE_DOWN",
    "MOVE_LEFT",
    "MOVE_RIGHT",
    "MOVE_UP",
    "WORD_SEPARATOR",
    "Backspace",
    "Command",
    "Confirm",
    "FinishWord",
    "JumpTo",
    "JumpToRow",
    "Mode",
    "MoveDown",
    "MoveLeft",
    "MoveRight",
    "MoveUp",
    "SelectionMachine",
    "SelectionState",
]
