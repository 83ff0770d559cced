# filecount/parsing/parser.py
from __future__ import annotations

import argparse
from typing import Optional, Sequence

from filecount.constants import PROG_NAME
from filecount.core.errors import UnrecognizedCommandError, UsageError
from filecount.core.models import Arguments, Command, FileMode


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - The command word is parsed as a free string and resolved by
          `parse_arguments`, so an unknown word is reported as an
          unrecognized command rather than an argparse usage error.
        - At most one CSV flag may be given; without one the file is
          measured on its own.
    """
    p = argparse.ArgumentParser(
        prog=PROG_NAME,
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s COMMAND [FILE] [--csv-list | --csv-merged] [OPTIONS]",
        description=(
            "filecount – measure files by bytes or characters\n"
            "FILE may also be a comma-separated manifest of filenames, "
            "measured per file (--csv-list) or merged (--csv-merged)."
        ),
    )

    g_cmd = p.add_argument_group("Command")
    g_csv = p.add_argument_group("CSV manifests").add_mutually_exclusive_group()
    g_misc = p.add_argument_group("Miscellaneous")

    g_cmd.add_argument(
        "command",
        metavar="COMMAND",
        help=(
            "One of: "
            + ", ".join(c.value for c in Command)
            + ".\n'version' prints the program version and ignores FILE."
        ),
    )
    g_cmd.add_argument(
        "filename",
        metavar="FILE",
        nargs="?",
        default=None,
        help="File to measure, or the CSV manifest when a CSV flag is given.",
    )

    g_csv.add_argument(
        "--csv-list",
        action="store_const",
        const=FileMode.CSV_LIST,
        dest="file_mode",
        help="Treat FILE as a manifest and print '<count> <filename>' per listed file.",
    )
    g_csv.add_argument(
        "--csv-merged",
        action="store_const",
        const=FileMode.CSV_MERGED,
        dest="file_mode",
        help="Treat FILE as a manifest, concatenate every listed file and print one count.",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit diagnostics on stderr as JSON records (also FILECOUNT_JSON_LOGS=1).",
    )
    p.set_defaults(file_mode=FileMode.NORMAL)
    return p


def resolve_command(word: str) -> Command:
    """Map a command word to its `Command`, case-sensitively."""
    for command in Command:
        if command.value == word:
            return command
    raise UnrecognizedCommandError(word)


def to_arguments(ns: argparse.Namespace) -> Arguments:
    command = resolve_command(ns.command)
    if command is Command.VERSION:
        return Arguments(command=command, filename=ns.filename, file_mode=ns.file_mode)
    if ns.filename is None:
        raise UsageError("missing filename")
    return Arguments(command=command, filename=ns.filename, file_mode=ns.file_mode)


def parse_arguments(
    argv: Sequence[str], parser: Optional[argparse.ArgumentParser] = None
) -> Arguments:
    """Parse *argv* (without the program name) into `Arguments`.

    argparse-level problems (unknown flags, both CSV flags) exit with status
    2 the usual argparse way; an unknown command word raises
    `UnrecognizedCommandError` and a missing FILE raises `UsageError`.
    """
    ns = (parser or _build_parser()).parse_args(list(argv))
    return to_arguments(ns)
