from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ResultPrinterProtocol(Protocol):
    """Writes measurement results, one line per call."""

    def print_result(self, result: int) -> None:
        ...

    def print_result_with_filename(self, result: int, filename: str) -> None:
        ...
