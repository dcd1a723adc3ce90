"""Token-to-command lookup tables shared by key and button bindings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..selection import Command


@dataclass(frozen=True)
class CommandBinding:
    """Mapping from one or more input tokens to a single command."""

    tokens: tuple[str, ...]
    command: Command


class CommandRegistry:
    """Small dispatch table with optional token normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else self._identity
        self._commands: dict[str, Command] = {}

    @staticmethod
    def _identity(token: str) -> str:
        return token

    def register_binding(self, binding: CommandBinding) -> CommandRegistry:
        """Register one binding, overwriting earlier commands for the same tokens."""
        for token in binding.tokens:
            self._commands[self._normalize(token)] = binding.command
        return self

    def register_bindings(self, *bindings: CommandBinding) -> CommandRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def resolve(self, token: str) -> Command | None:
        """Return the command bound to ``token``, or ``None`` when unbound."""
        return self._commands.get(self._normalize(token))

    def tokens(self) -> tuple[str, ...]:
        return tuple(self._commands)
