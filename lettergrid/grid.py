"""Static symbol table navigated by the selection state machine.

A ``Grid`` is built once at startup and never mutated. Rows may be given as
plain strings (one symbol per character) or as sequences of symbol strings.
"""

from __future__ import annotations

from collections.abc import Sequence


class OutOfRange(IndexError):
    """Raised when a grid lookup falls outside the table bounds."""


DEFAULT_LETTERS: tuple[str, ...] = (
    "АБВГД",
    "ЕЁЖЗИ",
    "ЙКЛМН",
    "ОПРСТ",
    "УФХЦЧ",
    "ШЩЪЫЬ",
    "ЭЮЯ.,",
)


class Grid:
    """Immutable rectangular table of symbols."""

    __slots__ = ("_rows", "_cols")

    def __init__(self, rows: Sequence[Sequence[str]]) -> None:
        normalized = tuple(tuple(str(symbol) for symbol in row) for row in rows)
        if not normalized:
            raise ValueError("grid needs at least one row")
        cols = len(normalized[0])
        if cols == 0:
            raise ValueError("grid needs at least one column")
        for idx, row in enumerate(normalized):
            if len(row) != cols:
                raise ValueError(f"row {idx} has {len(row)} symbols, expected {cols}")
        self._rows = normalized
        self._cols = cols

    @classmethod
    def from_rows(cls, rows: Sequence[str | Sequence[str]]) -> Grid:
        """Build a grid from strings (split per character) or symbol lists."""
        return cls([list(row) if isinstance(row, str) else row for row in rows])

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return self._rows

    def row_count(self) -> int:
        return len(self._rows)

    def col_count(self) -> int:
        return self._cols

    def symbol_at(self, row: int, col: int) -> str:
        """Return the symbol at ``(row, col)``.

        Negative indexes are not treated as "from the end"; anything outside
        ``[0, rows) x [0, cols)`` raises ``OutOfRange``.
        """
        if not (0 <= row < len(self._rows)) or not (0 <= col < self._cols):
            raise OutOfRange(f"cell ({row}, {col}) outside {len(self._rows)}x{self._cols} grid")
        return self._rows[row][col]

    def clamp_row(self, row: int) -> int:
        return max(0, min(row, len(self._rows) - 1))

    def clamp_col(self, col: int) -> int:
        return max(0, min(col, self._cols - 1))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Grid({len(self._rows)}x{self._cols})"


DEFAULT_GRID = Grid.from_rows(DEFAULT_LETTERS)


__all__ = [
    "DEFAULT_GRID",
    "DEFAULT_LETTERS",
    "Grid",
    "OutOfRange",
]
