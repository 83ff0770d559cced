from __future__ import annotations

import sys
from typing import Optional, TextIO


class ResultPrinter:
    """Write counts as decimal lines on *stream* (stdout by default).

    The stream is looked up on every write when none was given, so output
    follows a redirected `sys.stdout`.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, line: str) -> None:
        out = self.stream
        out.write(line + '\n')
        out.flush()

    def print_result(self, result: int) -> None:
        self._emit(f'{result}')

    def print_result_with_filename(self, result: int, filename: str) -> None:
        self._emit(f'{result} {filename}')
