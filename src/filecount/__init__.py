from __future__ import annotations

from filecount.constants import CSV_DELIM, TERMINATOR
from filecount.core.errors import (
    BufferReleasedError,
    FileAccessError,
    FileCountError,
    InvalidTextError,
    UnrecognizedCommandError,
    UsageError,
)
from filecount.core.models import Arguments, Command, CommandContext, File, FileMode, TextBuffer
from filecount.io.loader import FileLoader
from filecount.processing.csv_batch import for_each_value, free_merged_file, merge_files, split_values
from filecount.processing.dispatch import CounterRegistry, compute
from filecount.rendering.output import ResultPrinter
from filecount.runtime.coordinator import RunCoordinator
from filecount.cli import FileCount, main

__version__ = '1.0.0'

__all__ = [
    'Arguments',
    'BufferReleasedError',
    'CSV_DELIM',
    'Command',
    'CommandContext',
    'CounterRegistry',
    'File',
    'FileAccessError',
    'FileCount',
    'FileCountError',
    'FileLoader',
    'FileMode',
    'InvalidTextError',
    'ResultPrinter',
    'RunCoordinator',
    'TERMINATOR',
    'TextBuffer',
    'UnrecognizedCommandError',
    'UsageError',
    'compute',
    'for_each_value',
    'free_merged_file',
    'main',
    'merge_files',
    'split_values',
]
