"""Input-layer public API for key decoding and command bindings.

Exports are split between low-level terminal decoding (`read_key`) and the
bindings that turn key, button, and pointer input into selection commands.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, _PENDING_BYTES, read_key
from .key_registry import CommandBinding, CommandRegistry
from .keys import (
    BUTTON_ORDER,
    QUIT_KEYS,
    InputBindings,
    default_button_registry,
    default_key_registry,
    normalize_enter,
)
from .mouse import PointerRouter, is_mouse_key, parse_mouse_col_row, parse_pointer_event

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "BUTTON_ORDER",
    "QUIT_KEYS",
    "CommandBinding",
    "CommandRegistry",
    "InputBindings",
    "PointerRouter",
    "default_button_registry",
    "default_key_registry",
    "is_mouse_key",
    "normalize_enter",
    "parse_mouse_col_row",
    "parse_pointer_event",
]
