"""Frame composition for the grid widget.

``build_frame_lines`` is pure: it turns a selection snapshot and a layout into
styled lines. ``render_frame`` writes them to the terminal in one call.
"""

from __future__ import annotations

import os
import sys

from .ansi import center_in_cell, clip_ansi_line, display_width
from .input.keys import BUTTON_ORDER
from .layout import BUTTON_GAP, GridLayout, button_caption
from .selection import Mode, SelectionState
from .ui_theme import UITheme

TITLE = "lettergrid"
TEXT_PROMPT = "> "
CURSOR = "_"
SCROLLER_MARKER = " ▶ "
SCROLLER_IDLE = " │ "


def _styled(style: str, text: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def _cell_style(state: SelectionState, row: int, col: int, theme: UITheme) -> str:
    if row != state.row:
        return theme.cell
    if state.mode is Mode.SELECTING_COL and col == state.col:
        return theme.cell_selected
    return theme.row_selected


def grid_row_line(state: SelectionState, layout: GridLayout, row: int, theme: UITheme) -> str:
    """Render one grid row including its row-scroller segment."""
    if row == state.row:
        parts = [_styled(theme.scroller_marker, SCROLLER_MARKER, theme)]
    else:
        parts = [_styled(theme.scroller, SCROLLER_IDLE, theme)]
    for col, symbol in enumerate(layout.grid.rows[row]):
        cell = center_in_cell(symbol, layout.cell_width)
        parts.append(_styled(_cell_style(state, row, col, theme), cell, theme))
    return "".join(parts)


def status_text(state: SelectionState) -> str:
    return f"row={state.row} col={state.col} mode={state.mode.value}"


def build_frame_lines(
    state: SelectionState,
    layout: GridLayout,
    theme: UITheme,
    width: int,
) -> list[str]:
    """Compose the widget rows from ``layout.origin_row`` downward."""
    indent = " " * max(0, layout.origin_col - 1)
    lines: list[str] = [indent + TITLE]
    for row in range(layout.grid.row_count()):
        lines.append(indent + grid_row_line(state, layout, row, theme))
    lines.append("")
    text = _styled(theme.text, state.composed, theme) + _styled(theme.cursor, CURSOR, theme)
    lines.append(indent + TEXT_PROMPT + text)
    lines.append("")
    buttons = (" " * BUTTON_GAP).join(
        _styled(theme.button, button_caption(button), theme) for button in BUTTON_ORDER
    )
    lines.append(indent + buttons)
    status = status_text(state)
    status_width = max(0, width - len(indent))
    status = status + " " * max(0, status_width - display_width(status))
    lines.append(indent + _styled(theme.status, status, theme))
    return [clip_ansi_line(line, width) if line else line for line in lines]


def render_frame(
    state: SelectionState,
    layout: GridLayout,
    theme: UITheme,
    width: int,
) -> None:
    """Write a full frame, clearing rows below the widget."""
    out: list[str] = ["\033[H"]
    out.extend("\033[K\r\n" for _ in range(max(0, layout.origin_row - 1)))
    frame = build_frame_lines(state, layout, theme, width)
    for line in frame:
        out.append(line)
        out.append(theme.reset)
        out.append("\033[K\r\n")
    out.append("\033[J")
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))
