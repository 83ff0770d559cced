from .loader import FileLoaderProtocol
from .output import ResultPrinterProtocol

__all__ = [
    'FileLoaderProtocol',
    'ResultPrinterProtocol',
]
