"""Interactive session bootstrap.

Builds the widget, terminal controller, and loop callbacks, then hands control
to ``run_main_loop``. Also hosts the non-interactive replay used by ``--keys``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from functools import partial

from ..grid import Grid
from ..input import QUIT_KEYS, normalize_enter
from ..layout import GridLayout
from ..render import render_frame
from ..selection import SelectionState
from ..ui_theme import UITheme, resolve_theme
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController
from .widget import GridInputWidget

logger = logging.getLogger(__name__)


def centered_layout(grid: Grid, columns: int, lines: int) -> GridLayout:
    """Place the widget in the middle of a ``columns`` x ``lines`` terminal."""
    natural = GridLayout(grid)
    origin_col = max(1, (columns - natural.grid_width) // 2 + 1)
    origin_row = max(1, (lines - natural.height) // 2 + 1)
    return GridLayout(grid, origin_col=origin_col, origin_row=origin_row, cell_width=natural.cell_width)


def _render(theme: UITheme, state: SelectionState, layout: GridLayout, width: int) -> None:
    render_frame(state, layout, theme, width)


def run_app(
    grid: Grid,
    theme_name: str | None = None,
    no_color: bool = False,
    row_overshoot: float | None = None,
) -> str:
    """Run an interactive session and return the composed text."""
    theme = resolve_theme(theme_name, no_color=no_color)
    widget = GridInputWidget(grid, row_overshoot=row_overshoot)
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    logger.info("Starting session on %r with theme %s", grid, theme.name)
    final = run_main_loop(
        widget=widget,
        terminal=terminal,
        stdin_fd=sys.stdin.fileno(),
        timing=RuntimeLoopTiming(),
        callbacks=RuntimeLoopCallbacks(
            layout_for_size=partial(centered_layout, grid),
            render_frame=partial(_render, theme),
        ),
    )
    logger.info("Session finished with %d symbols", len(final.text))
    return final.composed


def replay_keys(grid: Grid, keys: Iterable[str], row_overshoot: float | None = None) -> SelectionState:
    """Feed key tokens through the widget without a terminal.

    Mouse tokens are hit-tested against the default top-left layout.
    Replay stops at the first quit key.
    """
    widget = GridInputWidget(grid, row_overshoot=row_overshoot)
    skip_next_lf = False
    for key in keys:
        normalized, skip_next_lf = normalize_enter(key, skip_next_lf)
        if normalized is None:
            continue
        if normalized in QUIT_KEYS:
            break
        widget.handle(normalized)
    return widget.state
