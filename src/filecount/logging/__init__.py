from filecount.logging.factory import DefaultLoggerFactory
from filecount.logging.helpers import JsonLogFormatter, get_logger, setup_base_logger, trace_io

__all__ = ['DefaultLoggerFactory', 'JsonLogFormatter', 'get_logger', 'setup_base_logger', 'trace_io']
