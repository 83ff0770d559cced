from __future__ import annotations

"""Project-wide constants used across modules."""

# Field separator of CSV manifests. No quoting or escaping is recognised.
CSV_DELIM: str = ','

# Sentinel appended to every text buffer, one byte past its counted length.
TERMINATOR: bytes = b'\0'

PROG_NAME: str = 'filecount'
