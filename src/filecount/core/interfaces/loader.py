from __future__ import annotations

from typing import Protocol, runtime_checkable

from filecount.core.models import File, TextBuffer


@runtime_checkable
class FileLoaderProtocol(Protocol):
    """Reads whole files into owned buffers and releases them."""

    def load(self, filename: str) -> File:
        ...

    def to_text(self, file: File) -> TextBuffer:
        ...

    def load_text(self, filename: str) -> TextBuffer:
        ...

    def release(self, file: File) -> None:
        ...

    def release_text(self, buffer: TextBuffer) -> None:
        ...
