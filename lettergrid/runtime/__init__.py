"""Public runtime orchestration entry points.

This package groups the interactive session bootstrap (`run_app`), the
non-interactive replay (`replay_keys`), and the event-loop contracts used by
tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming


def run_app(*args, **kwargs):
    """Lazily import the session entrypoint; ``termios`` is only needed here."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


def replay_keys(*args, **kwargs):
    from .app import replay_keys as _replay_keys

    return _replay_keys(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name in {"RuntimeLoopCallbacks", "RuntimeLoopTiming"}:
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "replay_keys",
    "run_app",
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "run_main_loop",
]
