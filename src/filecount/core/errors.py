from __future__ import annotations

"""Error types raised by the filecount core.

Every user-facing failure derives from `FileCountError` and carries the
diagnostic printed by the CLI. None of them is retried: the first one
aborts the whole run.
"""


class FileCountError(Exception):
    """Base class for fatal, user-facing failures."""

    exit_code: int = 1


class FileAccessError(FileCountError):
    """A path could not be opened or read."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        msg = f'could not open file: {path!r}'
        if reason:
            msg = f'{msg} ({reason})'
        super().__init__(msg)


class UnrecognizedCommandError(FileCountError):
    """The command word or enum value has no calculation bound to it."""

    def __init__(self, command: object) -> None:
        self.command = command
        name = getattr(command, 'value', command)
        super().__init__(f'unrecognized command: {name!r}')


class InvalidTextError(FileCountError):
    """Content that must be text is not valid UTF-8."""

    def __init__(self, source: str, reason: str | None = None) -> None:
        self.source = source
        msg = f'unicode conversion failed for {source!r}'
        if reason:
            msg = f'{msg} ({reason})'
        super().__init__(msg)


class UsageError(FileCountError):
    """Arguments are well-formed for argparse but incomplete for the tool."""

    exit_code = 2


class BufferReleasedError(RuntimeError):
    """A buffer was used or released after it had already been released."""
