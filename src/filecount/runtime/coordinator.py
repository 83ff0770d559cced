from __future__ import annotations

"""
Run coordinator: drive one measurement run for a parsed command line.

Strategies by file mode:
    NORMAL      load the file, compute, print the bare count.
    CSV_LIST    load the manifest, then load/compute/print "<count> <name>"
                for every listed file, in order.
    CSV_MERGED  load the manifest, merge every listed file, compute once,
                print the bare count.

Errors are never handled here. They propagate to the CLI, which is the only
place that turns them into an exit status.
"""

import logging
from typing import Optional

from filecount.core.interfaces.loader import FileLoaderProtocol
from filecount.core.interfaces.output import ResultPrinterProtocol
from filecount.core.models import Arguments, CommandContext, FileMode
from filecount.io.loader import FileLoader
from filecount.logging.helpers import get_logger
from filecount.processing.csv_batch import for_each_value, free_merged_file, merge_files
from filecount.processing.dispatch import CounterRegistry, get_default_registry
from filecount.rendering.output import ResultPrinter


class RunCoordinator:
    def __init__(
        self,
        *,
        loader: Optional[FileLoaderProtocol] = None,
        counters: Optional[CounterRegistry] = None,
        printer: Optional[ResultPrinterProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('runtime')
        self._loader: FileLoaderProtocol = loader or FileLoader(logger=get_logger('io.loader'))
        self._counters = counters or get_default_registry()
        self._printer: ResultPrinterProtocol = printer or ResultPrinter()

    def run(self, args: Arguments) -> None:
        mode = args.file_mode
        self._log.debug('run command=%s mode=%s file=%r', args.command, mode, args.filename)
        if mode is FileMode.NORMAL:
            self._run_normal(args)
        elif mode is FileMode.CSV_LIST:
            self._run_csv_list(args)
        elif mode is FileMode.CSV_MERGED:
            self._run_csv_merged(args)
        else:
            raise AssertionError(f'unhandled file mode: {mode!r}')

    def run_command_for_file(self, filename: str, ctx: CommandContext) -> None:
        """Load, measure and print one file, then release its buffer."""
        with self._loader.load_text(filename) as text:
            result = self._counters.compute(ctx.command, text)
        if ctx.print_filename:
            self._printer.print_result_with_filename(result, filename)
        else:
            self._printer.print_result(result)

    def _run_normal(self, args: Arguments) -> None:
        ctx = CommandContext(command=args.command, print_filename=False)
        self.run_command_for_file(args.filename, ctx)

    def _run_csv_list(self, args: Arguments) -> None:
        ctx = CommandContext(command=args.command, print_filename=True)
        with self._loader.load_text(args.filename) as csv:
            for_each_value(csv.decode(), lambda name: self.run_command_for_file(name, ctx))
            self._loader.release_text(csv)

    def _run_csv_merged(self, args: Arguments) -> None:
        with self._loader.load_text(args.filename) as csv:
            with merge_files(
                csv.decode(),
                self._loader.release_text,
                loader=self._loader,
                logger=self._log,
                source=args.filename,
            ) as content:
                result = self._counters.compute(args.command, content)
                free_merged_file(content)
            self._loader.release_text(csv)
        self._printer.print_result(result)
