import re
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Union

from odscell.ns import TEXT_LINE_BREAK, TEXT_S, TEXT_TAB

CellValue = Union[str, int, float, bool, datetime, timedelta]

# Leading numeric prefix of a string, the part a lenient string-to-number cast
# reads before giving up.
NUMERIC_PREFIX = re.compile(
    r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII
)
INTEGER_PREFIX = re.compile(r"^\s*[+-]?\d+", re.ASCII)


class CellType(Enum):
    STRING = "string"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    TIME = "time"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    VOID = "void"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "CellType":
        """Decode the `office:value-type` attribute. Missing or unknown types
        are treated as empty cells."""
        if raw is None:
            return cls.VOID
        try:
            return cls(raw)
        except ValueError:
            return cls.VOID


class WhitespaceKind(Enum):
    SPACE = TEXT_S
    TAB = TEXT_TAB
    LINE_BREAK = TEXT_LINE_BREAK

    @property
    def char(self) -> str:
        return WHITESPACE_CHARS[self]

    @classmethod
    def from_tag(cls, tag: str) -> Optional["WhitespaceKind"]:
        try:
            return cls(tag)
        except ValueError:
            return None


WHITESPACE_CHARS = {
    WhitespaceKind.SPACE: " ",
    WhitespaceKind.TAB: "\t",
    WhitespaceKind.LINE_BREAK: "\n",
}


def to_number(raw: Optional[str]) -> Union[int, float]:
    """Read a number the way a lenient string cast does: the leading numeric
    part of the string counts, anything else reads as zero. Integer literals
    are read exactly, as `int`."""
    if raw is None:
        return 0
    match = NUMERIC_PREFIX.match(raw)
    if match is None:
        return 0
    text = match.group(0)
    if match.group(3) is None and "." not in text:
        return int(text)
    return float(text)


def to_bool(raw: Optional[str]) -> bool:
    """Only the empty string and "0" are false. Note that this makes "false"
    true."""
    if raw is None:
        return False
    return raw not in ("", "0")


def to_count(raw: Optional[str]) -> int:
    """Repeat count of a whitespace node: the leading integer of the attribute
    when it is positive, 1 otherwise."""
    if raw is None:
        return 1
    match = INTEGER_PREFIX.match(raw)
    if match is None:
        return 1
    count = int(match.group(0))
    return count if count > 0 else 1
