"""Persistent JSON config helpers.

Stores the UI theme, the row hit-test overshoot, and an optional custom grid.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..grid import Grid

logger = logging.getLogger(__name__)

APP_NAME = "lettergrid"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks an input session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not write config %s: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_row_overshoot() -> float | None:
    """Load the vertical hit-test slack in terminal rows.

    Booleans, non-numbers, and negative values are treated as unset.
    """
    value = load_config().get("row_overshoot")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value < 0:
        return None
    return float(value)


def save_row_overshoot(rows: float) -> None:
    config = load_config()
    config["row_overshoot"] = max(0.0, float(rows))
    save_config(config)


def parse_grid(value: object) -> Grid:
    """Build a grid from a JSON list of strings or list of symbol lists.

    Raises ``ValueError`` when the value does not describe a rectangular,
    non-empty table of strings.
    """
    if not isinstance(value, list) or not value:
        raise ValueError("grid must be a non-empty list of rows")
    rows: list[str | list[str]] = []
    for raw_row in value:
        if isinstance(raw_row, str):
            rows.append(raw_row)
        elif isinstance(raw_row, list) and all(isinstance(symbol, str) and symbol for symbol in raw_row):
            rows.append(list(raw_row))
        else:
            raise ValueError(f"invalid grid row: {raw_row!r}")
    return Grid.from_rows(rows)


def load_grid() -> Grid | None:
    """Load a custom grid from config, ``None`` when unset or invalid."""
    value = load_config().get("grid")
    if value is None:
        return None
    try:
        return parse_grid(value)
    except ValueError as exc:
        logger.warning("Ignoring invalid grid in config: %s", exc)
        return None


def load_grid_file(path: Path) -> Grid:
    """Read a grid from a standalone JSON file.

    Accepts either a bare list of rows or an object with a ``grid`` key.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("grid")
    return parse_grid(data)
