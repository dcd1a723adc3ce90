"""Terminal geometry for the rendered widget.

``GridLayout`` is the single source of truth for where things are drawn: the
renderer places cells from it and the hit-tester reads the same rectangles,
so pointer coordinates always match what is on screen. Coordinates are the
1-based terminal ``(col, row)`` pairs reported by SGR mouse events.

Screen structure, top to bottom::

    title
    grid rows        (row-scroller band on the left, then one cell per column)
    blank
    composed text
    blank
    button bar
    status
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .ansi import display_width
from .grid import Grid
from .hit_test import Rect
from .input.keys import BUTTON_ORDER

SCROLLER_WIDTH = 3
CELL_PADDING = 2
BUTTON_GAP = 1

BUTTON_LABELS: dict[str, str] = {
    "left": "◀",
    "up": "▲",
    "center": "●",
    "down": "▼",
    "right": "▶",
    "backspace": "⌫",
    "space": "␣",
}


def button_caption(button: str) -> str:
    return f"[ {BUTTON_LABELS.get(button, button)} ]"


@dataclass(frozen=True)
class GridLayout:
    """Placement of the grid, text line, and button bar on screen."""

    grid: Grid
    origin_col: int = 1
    origin_row: int = 1
    cell_width: int = field(default=0)

    def __post_init__(self) -> None:
        if self.cell_width <= 0:
            widest = max(display_width(symbol) for row in self.grid.rows for symbol in row)
            object.__setattr__(self, "cell_width", max(1, widest) + CELL_PADDING)

    # GridGeometry protocol

    def row_count(self) -> int:
        return self.grid.row_count()

    def col_count(self) -> int:
        return self.grid.col_count()

    def row_rect(self, row: int) -> Rect:
        return Rect(
            left=self.origin_col,
            top=self.grid_top + row,
            width=self.grid_width,
            height=1,
        )

    def col_rect(self, col: int) -> Rect:
        # Header cells are the first grid row; every row shares their extents.
        return Rect(
            left=self.cells_left + col * self.cell_width,
            top=self.grid_top,
            width=self.cell_width,
            height=1,
        )

    # Derived placement

    @property
    def grid_top(self) -> int:
        return self.origin_row + 1

    @property
    def cells_left(self) -> int:
        return self.origin_col + SCROLLER_WIDTH

    @property
    def grid_width(self) -> int:
        return SCROLLER_WIDTH + self.grid.col_count() * self.cell_width

    @property
    def text_row(self) -> int:
        return self.grid_top + self.grid.row_count() + 1

    @property
    def button_row(self) -> int:
        return self.text_row + 2

    @property
    def status_row(self) -> int:
        return self.button_row + 1

    @property
    def height(self) -> int:
        return self.status_row - self.origin_row + 1

    def button_rects(self) -> dict[str, Rect]:
        rects: dict[str, Rect] = {}
        left = self.origin_col
        for button in BUTTON_ORDER:
            width = display_width(button_caption(button))
            rects[button] = Rect(left=left, top=self.button_row, width=width, height=1)
            left += width + BUTTON_GAP
        return rects

    def button_at(self, x: float, y: float) -> str | None:
        for button, rect in self.button_rects().items():
            if rect.contains(x, y):
                return button
        return None
