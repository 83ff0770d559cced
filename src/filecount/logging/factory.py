from __future__ import annotations

import logging
import os
from typing import Optional, Sequence, TextIO

from filecount.logging.helpers import get_logger, level_from_env, setup_base_logger


class DefaultLoggerFactory:
    """Resolve logging switches for one run and hand out scoped loggers.

    Switches come from the command line (``--json-logs``) and the
    environment (``FILECOUNT_JSON_LOGS``, ``FILECOUNT_LOG_LEVEL``). The base
    logger is configured lazily, the first time a logger is requested.
    """

    JSON_FLAG = '--json-logs'

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.level = int(level)
        self._stream = stream
        self._base: Optional[logging.Logger] = None

    @classmethod
    def from_argv(cls, argv: Sequence[str], *, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        """Build a factory before argparse runs, so parse errors are logged too."""
        json_logs = cls.JSON_FLAG in argv or os.getenv('FILECOUNT_JSON_LOGS') == '1'
        return cls(json_logs=json_logs, level=level_from_env(logging.INFO), stream=stream)

    @property
    def configured(self) -> bool:
        return self._base is not None

    def get_logger(self, name: str) -> logging.Logger:
        if self._base is None:
            self._base = setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self._stream)
        return get_logger(name)
