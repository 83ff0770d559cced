from __future__ import annotations

"""
csv_batch – Iterate over or merge the files named in a CSV manifest.

A manifest is one comma-delimited line of filenames. Fields are trimmed of
surrounding whitespace and never unquoted. Empty fields are kept as
zero-length filenames and therefore fail at the loader like any other
unopenable path.
"""

import logging
from typing import Callable, List, Optional

from filecount.constants import CSV_DELIM
from filecount.core.interfaces.loader import FileLoaderProtocol
from filecount.core.models import TextBuffer
from filecount.io.loader import get_default_loader
from filecount.logging.helpers import get_logger

ValueHandler = Callable[[str], None]
ReleaseFn = Callable[[TextBuffer], None]

_log = get_logger('csv')


def split_values(csv_text: str) -> List[str]:
    """Return the trimmed fields of *csv_text*, left to right.

    Examples
    --------
    >>> split_values("a.txt, b.txt\\n")
    ['a.txt', 'b.txt']
    >>> split_values("a.txt,,b.txt")
    ['a.txt', '', 'b.txt']
    """
    return [value.strip() for value in csv_text.split(CSV_DELIM)]


def for_each_value(csv_text: str, handler: ValueHandler) -> None:
    """Call *handler* once per manifest field, in order.

    Each call completes before the next field is looked at; an exception
    raised by the handler stops the iteration and propagates unchanged.
    """
    for value in split_values(csv_text):
        handler(value)


def merge_files(
    csv_text: str,
    release_fn: Optional[ReleaseFn] = None,
    *,
    loader: Optional[FileLoaderProtocol] = None,
    logger: Optional[logging.Logger] = None,
    source: str = '<merged>',
) -> TextBuffer:
    """Concatenate every file listed in *csv_text* into one text buffer.

    Files are appended byte for byte in manifest order with no separator.
    Each per-file text buffer is handed to *release_fn* right after its
    bytes are copied, so at most one of them is alive at a time. The first
    file that cannot be loaded aborts the merge with `FileAccessError`.

    *source* names the merged buffer in diagnostics (the coordinator passes
    the manifest path). The caller owns the returned buffer and releases it with
    `free_merged_file`.
    """
    ld = loader or get_default_loader()
    release = release_fn or ld.release_text
    log = logger or _log

    merged = bytearray()
    names = split_values(csv_text)
    for name in names:
        text = ld.load_text(name)
        merged += text.value
        release(text)
    log.debug('merged %d file(s) into %d byte(s)', len(names), len(merged))
    return TextBuffer(merged, source=source)


def free_merged_file(buffer: TextBuffer) -> None:
    buffer.release()
