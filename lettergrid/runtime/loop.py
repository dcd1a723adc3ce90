"""Main interactive event loop for the terminal UI.

Each iteration refreshes geometry for the current terminal size, renders when
the snapshot changed, then reads and dispatches exactly one input token. Every
command is applied completely before the next token is read.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import QUIT_KEYS, normalize_enter, read_key
from ..layout import GridLayout
from ..selection import SelectionState
from .terminal import TerminalController
from .widget import GridInputWidget


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_timeout_ms: int = 120


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    layout_for_size: Callable[[int, int], GridLayout]
    render_frame: Callable[[SelectionState, GridLayout, int], None]


def run_main_loop(
    widget: GridInputWidget,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> SelectionState:
    """Run the interactive loop until a quit key; return the final snapshot."""
    skip_next_lf = False
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            terminal.set_mouse_reporting(True)
            layout = callbacks.layout_for_size(term.columns, term.lines)
            if layout != widget.layout:
                terminal.clear()
                widget.set_layout(layout)
            if widget.dirty:
                callbacks.render_frame(widget.state, widget.layout, term.columns)
                widget.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            normalized, skip_next_lf = normalize_enter(key, skip_next_lf)
            if normalized is None:
                continue
            if normalized in QUIT_KEYS:
                break
            widget.handle(normalized)
    return widget.state
