"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the grid, the row-scroller band, the composed
text line, the button bar, and the status line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    cell: str
    row_selected: str
    cell_selected: str
    scroller: str
    scroller_marker: str
    text: str
    cursor: str
    button: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    cell="\033[38;5;252m",
    row_selected="\033[48;5;236;1;38;5;229m",
    cell_selected="\033[7;1m",
    scroller="\033[2;38;5;250m",
    scroller_marker="\033[1;38;5;81m",
    text="\033[1;38;5;81m",
    cursor="\033[5m",
    button="\033[38;5;229m",
    status="\033[7m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    cell="\033[38;5;153m",
    row_selected="\033[48;5;24;1;38;5;195m",
    cell_selected="\033[48;5;39;1;38;5;16m",
    scroller="\033[2;38;5;110m",
    scroller_marker="\033[1;38;5;45m",
    text="\033[1;38;5;45m",
    cursor="\033[5m",
    button="\033[38;5;117m",
    status="\033[48;5;24;38;5;195m",
)

# Reverse video keeps the selection visible without colors.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    cell="",
    row_selected="\033[4m",
    cell_selected="\033[7m",
    scroller="",
    scroller_marker="",
    text="",
    cursor="",
    button="",
    status="\033[7m",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
