from __future__ import annotations

"""Public surface for filecount.core.

Data types, error types and protocols live here so that downstream code has
one stable import location:

    from filecount.core import Command, FileMode, TextBuffer, FileAccessError
"""

from filecount.core.errors import (
    BufferReleasedError,
    FileAccessError,
    FileCountError,
    InvalidTextError,
    UnrecognizedCommandError,
    UsageError,
)
from filecount.core.models import (
    Arguments,
    Command,
    CommandContext,
    File,
    FileMode,
    TextBuffer,
)
from filecount.core.interfaces import (
    FileLoaderProtocol,
    ResultPrinterProtocol,
)

__all__ = [
    'Arguments',
    'BufferReleasedError',
    'Command',
    'CommandContext',
    'File',
    'FileAccessError',
    'FileCountError',
    'FileLoaderProtocol',
    'FileMode',
    'InvalidTextError',
    'ResultPrinterProtocol',
    'TextBuffer',
    'UnrecognizedCommandError',
    'UsageError',
]
