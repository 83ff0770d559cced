from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from filecount.constants import TERMINATOR
from filecount.core.errors import BufferReleasedError, InvalidTextError


class Command(Enum):
    VERSION = 'version'
    BYTES = 'bytes'
    CHARACTERS = 'characters'


class FileMode(Enum):
    NORMAL = 'normal'
    CSV_LIST = 'csv-list'
    CSV_MERGED = 'csv-merged'


@dataclass(frozen=True)
class Arguments:
    """Structured command line as produced by the parser."""
    command: Command
    filename: Optional[str] = None
    file_mode: FileMode = FileMode.NORMAL


@dataclass(frozen=True)
class CommandContext:
    """Per-batch settings captured by the per-file handler."""
    command: Command
    print_filename: bool = False


@dataclass
class File:
    """Raw content of one file, owned by whoever called the loader."""
    filename: str
    data: Optional[bytes]
    length: int
    released: bool = field(default=False, repr=False)

    def content(self) -> bytes:
        if self.released or self.data is None:
            raise BufferReleasedError(f'file buffer for {self.filename!r} already released')
        return self.data

    def release(self) -> None:
        if self.released:
            raise BufferReleasedError(f'file buffer for {self.filename!r} released twice')
        self.data = None
        self.released = True


class TextBuffer:
    """Owned, terminated text buffer.

    Storage holds the content followed by a single terminator byte. `len()`
    and `value` never include the terminator. After `release()` every access
    raises `BufferReleasedError`; the buffer has exactly one owner and is not
    reference counted.

    Used as a context manager the buffer is released on exit unless the
    owner already released it inside the block.
    """

    __slots__ = ('_storage', '_source')

    def __init__(self, content: bytes | bytearray, *, source: str = '<memory>') -> None:
        storage = bytearray(content)
        storage += TERMINATOR
        self._storage: Optional[bytearray] = storage
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    @property
    def released(self) -> bool:
        return self._storage is None

    def _live(self) -> bytearray:
        if self._storage is None:
            raise BufferReleasedError(f'text buffer for {self._source!r} already released')
        return self._storage

    @property
    def storage(self) -> bytes:
        """Content plus terminator, exactly as held in memory."""
        return bytes(self._live())

    @property
    def value(self) -> bytes:
        return bytes(self._live()[:-1])

    def decode(self) -> str:
        """Return the content as text, strictly decoded as UTF-8."""
        try:
            return self.value.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise InvalidTextError(self._source, exc.reason) from exc

    def release(self) -> None:
        if self._storage is None:
            raise BufferReleasedError(f'text buffer for {self._source!r} released twice')
        self._storage = None

    def __len__(self) -> int:
        return len(self._live()) - len(TERMINATOR)

    def __enter__(self) -> 'TextBuffer':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._storage is not None:
            self.release()

    def __repr__(self) -> str:
        state = 'released' if self._storage is None else f'{len(self)} bytes'
        return f'TextBuffer({self._source!r}, {state})'
