from __future__ import annotations

"""Counting primitives. Pure functions over a text buffer's content."""

from filecount.core.models import TextBuffer


def count_bytes(text: TextBuffer) -> int:
    """Number of bytes in *text*, terminator excluded."""
    return len(text)


def count_characters(text: TextBuffer) -> int:
    """Number of Unicode scalar values in *text*.

    The content must be valid UTF-8; otherwise `InvalidTextError` is raised
    naming the buffer's source.
    """
    return len(text.decode())
