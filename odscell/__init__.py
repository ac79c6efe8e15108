from odscell.exc import InvalidValueException, OdsCellException
from odscell.formatter import CellValueFormatter, FormatterConfig
from odscell.values import CellType, CellValue, WhitespaceKind

__version__ = "0.1.0"
__all__ = [
    "CellValueFormatter",
    "FormatterConfig",
    "CellType",
    "CellValue",
    "WhitespaceKind",
    "InvalidValueException",
    "OdsCellException",
]
