"""Command-line front door for lettergrid.

Parses CLI options, resolves grid/theme/overshoot from flags and config, sets
up logging, then either replays key tokens or runs the interactive session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .grid import DEFAULT_GRID, Grid
from .runtime import config, replay_keys, run_app
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _non_negative_float(value: str) -> float:
    """argparse type for non-negative float values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _configure_logging(log_file: str | None, level_name: str) -> None:
    """Send logs to ``log_file``; without one, keep the terminal clean."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level_name.upper()),
        format=LOG_FORMAT,
    )


def _resolve_grid(grid_path: str | None) -> Grid:
    if grid_path is None:
        return config.load_grid() or DEFAULT_GRID
    path = Path(grid_path)
    if not path.exists():
        raise SystemExit(f"Grid file not found: {path}")
    try:
        return config.load_grid_file(path)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Invalid grid file {path}: {exc}") from exc


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch lettergrid.

    With ``--keys`` the given whitespace-separated key tokens are replayed
    without a terminal and the composed text is printed. Otherwise an
    interactive session runs and the composed text is printed on exit.
    """
    parser = argparse.ArgumentParser(
        description="Compose text by picking a row, then a column, from a symbol grid."
    )
    parser.add_argument(
        "--theme",
        default=None,
        type=str.lower,
        choices=available_theme_names(),
        help="UI theme name; saved as the new default.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--grid", metavar="PATH", help="JSON file with the grid rows.")
    parser.add_argument(
        "--row-overshoot",
        type=_non_negative_float,
        default=None,
        help="Rows of slack below each grid row for pointer hits; saved as the new default.",
    )
    parser.add_argument(
        "--keys",
        metavar="TOKENS",
        help="Replay key tokens (e.g. 'DOWN SPACE RIGHT SPACE') and print the result.",
    )
    parser.add_argument("--log-file", default=None, help="Write diagnostics to this file.")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_file, args.log_level)
    grid = _resolve_grid(args.grid)
    row_overshoot = args.row_overshoot if args.row_overshoot is not None else config.load_row_overshoot()

    if args.keys is not None:
        final = replay_keys(grid, args.keys.split(), row_overshoot=row_overshoot)
        sys.stdout.write(final.composed + "\n")
        return

    theme_name = args.theme
    if theme_name is not None:
        config.save_theme_name(theme_name)
    else:
        theme_name = config.load_theme_name()
    if args.row_overshoot is not None:
        config.save_row_overshoot(args.row_overshoot)

    from .runtime.terminal import NotATerminalError

    try:
        text = run_app(grid, theme_name, args.no_color, row_overshoot)
    except NotATerminalError as exc:
        raise SystemExit(f"lettergrid: {exc}; use --keys to replay input without a terminal") from exc
    if text:
        sys.stdout.write(text + "\n")


if __name__ == "__main__":
    main()
