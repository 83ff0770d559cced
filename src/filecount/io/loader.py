from __future__ import annotations

"""
File content loader.

Reads a named file in one go into an owned `File`, converts it to a
terminated `TextBuffer` on demand, and releases either buffer explicitly.
A failed open is reported as `FileAccessError`; nothing is retried and no
partial content is ever returned.
"""

import logging
from typing import Optional

from filecount.core.errors import FileAccessError
from filecount.core.models import File, TextBuffer
from filecount.logging.helpers import get_logger, trace_io


class FileLoader:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.loader')

    def load(self, filename: str) -> File:
        """Read *filename* fully into a new `File`.

        Any OS-level failure (missing file, permissions, directory, empty
        name) and a name the OS cannot represent (embedded NUL) are reported
        the same way.
        """
        try:
            with open(filename, 'rb') as fh:
                data = fh.read()
        except OSError as exc:
            raise FileAccessError(filename, exc.strerror) from exc
        except ValueError as exc:
            raise FileAccessError(filename, str(exc)) from exc
        trace_io(self._log, 'loaded file', filename=filename, length=len(data))
        return File(filename=filename, data=data, length=len(data))

    def to_text(self, file: File) -> TextBuffer:
        """Copy *file* into a terminated text buffer; *file* stays valid."""
        data = file.content()
        buf = TextBuffer(data[:file.length], source=file.filename)
        trace_io(self._log, 'converted to text', filename=file.filename, length=file.length)
        return buf

    def load_text(self, filename: str) -> TextBuffer:
        """Load *filename* and return its text buffer, releasing the raw `File`."""
        file = self.load(filename)
        try:
            return self.to_text(file)
        finally:
            self.release(file)

    def release(self, file: File) -> None:
        file.release()
        trace_io(self._log, 'released file', filename=file.filename)

    def release_text(self, buffer: TextBuffer) -> None:
        source = buffer.source
        buffer.release()
        trace_io(self._log, 'released text', filename=source)


_DEFAULT_LOADER: Optional[FileLoader] = None


def get_default_loader() -> FileLoader:
    global _DEFAULT_LOADER
    if _DEFAULT_LOADER is None:
        _DEFAULT_LOADER = FileLoader()
    return _DEFAULT_LOADER


def load(filename: str) -> File:
    return get_default_loader().load(filename)


def to_text(file: File) -> TextBuffer:
    return get_default_loader().to_text(file)


def release(file: File) -> None:
    get_default_loader().release(file)


def release_text(buffer: TextBuffer) -> None:
    get_default_loader().release_text(buffer)
