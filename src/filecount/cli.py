from __future__ import annotations

import os
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from filecount.constants import PROG_NAME
from filecount.core.errors import FileCountError
from filecount.core.models import Command
from filecount.logging.factory import DefaultLoggerFactory
from filecount.logging.helpers import get_logger
from filecount.parsing.parser import parse_arguments
from filecount.rendering.output import ResultPrinter
from filecount.runtime.coordinator import RunCoordinator

logger = get_logger(PROG_NAME)


def _configure_logging(argv: Sequence[str], stream: Optional[TextIO] = None) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    factory = DefaultLoggerFactory.from_argv(argv, stream=stream)
    global logger
    logger = factory.get_logger(PROG_NAME)


def version_line() -> str:
    from filecount import __version__

    return f'{PROG_NAME} version {__version__}'


class FileCount:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> None:
        """Run the tool for an argv-like sequence (program name excluded).

        Results are written to *stdout* (default `sys.stdout`); failures
        raise `FileCountError` subclasses.
        """
        _configure_logging(argv, stderr)

        args = parse_arguments(argv)
        printer = ResultPrinter(stdout)

        if args.command is Command.VERSION:
            out = printer.stream
            out.write(version_line() + '\n')
            out.flush()
            return

        RunCoordinator(printer=printer).run(args)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `filecount` script and `python -m filecount`."""
    try:
        FileCount.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except FileCountError as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('%s', exc)
        raise SystemExit(exc.exit_code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
