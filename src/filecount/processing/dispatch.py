from __future__ import annotations

"""
Calculation dispatch.

`CounterRegistry` binds each measuring `Command` to a counting function.
`compute()` looks the command up in the default registry; a command with
nothing bound (e.g. `VERSION`) is an `UnrecognizedCommandError`.
"""

from typing import Callable, Dict, Optional

from filecount.core.errors import UnrecognizedCommandError
from filecount.core.models import Command, TextBuffer
from filecount.processing.counters import count_bytes, count_characters

Counter = Callable[[TextBuffer], int]


class CounterRegistry:
    def __init__(self) -> None:
        self._by_command: Dict[Command, Counter] = {}

    @classmethod
    def default(cls) -> 'CounterRegistry':
        reg = cls()
        reg.register(Command.BYTES, count_bytes)
        reg.register(Command.CHARACTERS, count_characters)
        return reg

    def register(self, command: Command, counter: Counter) -> None:
        if not isinstance(command, Command):
            raise TypeError(f'expected Command, got {type(command).__name__}')
        self._by_command[command] = counter

    def supports(self, command: Command) -> bool:
        return command in self._by_command

    def compute(self, command: Command, text: TextBuffer) -> int:
        counter = self._by_command.get(command)
        if counter is None:
            raise UnrecognizedCommandError(command)
        return counter(text)


_DEFAULT_REGISTRY: Optional[CounterRegistry] = None


def get_default_registry() -> CounterRegistry:
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = CounterRegistry.default()
    return _DEFAULT_REGISTRY


def compute(command: Command, text: TextBuffer) -> int:
    return get_default_registry().compute(command, text)
