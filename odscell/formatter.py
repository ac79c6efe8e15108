import math
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

import pendulum
from dateutil.parser import isoparse
from lxml import etree
from pendulum.parsing.exceptions import ParserError

from odscell import settings
from odscell.escaper import Unescaper, get_unescaper, unescape_ods
from odscell.exc import InvalidValueException
from odscell.logs import get_logger
from odscell.ns import (
    ATTR_BOOLEAN_VALUE,
    ATTR_CURRENCY,
    ATTR_DATE_VALUE,
    ATTR_TIME_VALUE,
    ATTR_VALUE,
    ATTR_VALUE_TYPE,
)
from odscell.text import extract_text, first_paragraph, iter_paragraphs
from odscell.text import rendered_text
from odscell.values import CellType, CellValue, to_bool, to_number

log = get_logger(__name__)
# Duration designators without any component, e.g. "P", "PT" or "P1DT".
EMPTY_DURATION = re.compile(r"^[+-]?PT?$|T$")


@dataclass(frozen=True)
class FormatterConfig:
    """Settings fixed for the lifetime of a formatter."""

    format_dates: bool = False
    """Return date and time cells as the text shown in the document, instead
    of parsing their machine-readable value attributes."""
    unescape: Unescaper = field(default=unescape_ods)
    """Applied to the content of string cells."""

    @classmethod
    def from_settings(cls) -> "FormatterConfig":
        return cls(
            format_dates=settings.FORMAT_DATES,
            unescape=get_unescaper(settings.UNESCAPE),
        )


class CellValueFormatter(object):
    """Convert `table:table-cell` elements into typed values.

    http://docs.oasis-open.org/office/v1.2/os/OpenDocument-v1.2-os-part1.html#refTable13
    """

    def __init__(self, config: Optional[FormatterConfig] = None) -> None:
        self.config = config or FormatterConfig()

    def extract_and_format_node_value(self, node: etree._Element) -> CellValue:
        """Return the unescaped, typed value of the given cell.

        Args:
            node: A `table:table-cell` element.

        Returns:
            The cell value, or an empty string for void or untyped cells.

        Raises:
            InvalidValueException: A date or time cell could not be parsed.
        """
        raw_type = node.get(ATTR_VALUE_TYPE)
        cell_type = CellType.parse(raw_type)
        if cell_type == CellType.STRING:
            return self.format_string(node)
        elif cell_type == CellType.FLOAT:
            return self.format_float(node)
        elif cell_type == CellType.BOOLEAN:
            return self.format_boolean(node)
        elif cell_type == CellType.DATE:
            return self.format_date(node)
        elif cell_type == CellType.TIME:
            return self.format_time(node)
        elif cell_type == CellType.CURRENCY:
            return self.format_currency(node)
        elif cell_type == CellType.PERCENTAGE:
            return self.format_percentage(node)
        if raw_type is not None and raw_type != CellType.VOID.value:
            log.debug("Unknown cell type", value_type=raw_type)
        return ""

    def format_string(self, node: etree._Element) -> str:
        """Paragraphs are joined with line breaks."""
        values = [extract_text(p) for p in iter_paragraphs(node)]
        return self.config.unescape("\n".join(values))

    def format_float(self, node: etree._Element) -> Union[int, float]:
        """Whole numbers are returned as integers, everything else as floats."""
        number = to_number(node.get(ATTR_VALUE))
        if isinstance(number, int):
            return number
        if math.isfinite(number) and number.is_integer():
            return int(number)
        return number

    def format_percentage(self, node: etree._Element) -> Union[int, float]:
        # office:value holds the ratio (0.5 for 50%), so percentages are
        # formatted like floats.
        return self.format_float(node)

    def format_boolean(self, node: etree._Element) -> bool:
        return to_bool(node.get(ATTR_BOOLEAN_VALUE))

    def format_currency(self, node: etree._Element) -> str:
        """Value and currency code, e.g. "100 USD" or "9.99 EUR"."""
        value = node.get(ATTR_VALUE, "")
        currency = node.get(ATTR_CURRENCY, "")
        return f"{value} {currency}"

    def format_date(self, node: etree._Element) -> Union[str, datetime]:
        # <table:table-cell office:value-type="date" office:date-value="2016-05-19T16:39:00">
        #   <text:p>05/19/16 04:39 PM</text:p>
        # </table:table-cell>
        if self.config.format_dates:
            return self._formatted_text(node)
        value = node.get(ATTR_DATE_VALUE, "")
        try:
            return isoparse(value)
        except (ValueError, OverflowError) as exc:
            log.warning("Invalid date value", value=value, cell=node)
            raise InvalidValueException(value) from exc

    def format_time(self, node: etree._Element) -> Union[str, pendulum.Duration]:
        # <table:table-cell office:value-type="time" office:time-value="PT13H24M00S">
        #   <text:p>01:24:00 PM</text:p>
        # </table:table-cell>
        if self.config.format_dates:
            return self._formatted_text(node)
        value = node.get(ATTR_TIME_VALUE, "")
        if EMPTY_DURATION.search(value):
            log.warning("Time value has no duration components", value=value)
            raise InvalidValueException(value)
        try:
            duration = pendulum.parse(value)
        except (ParserError, ValueError, OverflowError) as exc:
            log.warning("Invalid time value", value=value, cell=node)
            raise InvalidValueException(value) from exc
        # Intervals ("start/end") subclass Duration but are not durations.
        if type(duration) is not pendulum.Duration:
            log.warning("Time value is not a duration", value=value, cell=node)
            raise InvalidValueException(value)
        return duration

    def _formatted_text(self, node: etree._Element) -> str:
        """The rendering of the value in the first paragraph, as is."""
        paragraph = first_paragraph(node)
        if paragraph is None:
            return ""
        return rendered_text(paragraph)
