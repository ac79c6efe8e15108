import logging
from pathlib import Path

import pytest
from lxml import etree

from odscell.formatter import CellValueFormatter, FormatterConfig
from odscell.ns import OFFICE_NS, TABLE_NS, TEXT_NS

FIXTURES_PATH = Path(__file__).parent / "fixtures"
CONTENT_XML = FIXTURES_PATH / "content.xml"
INVALID_XML = FIXTURES_PATH / "invalid_date.xml"

NAMESPACES = f'xmlns:office="{OFFICE_NS}" xmlns:table="{TABLE_NS}" xmlns:text="{TEXT_NS}"'


def make_cell(attrs: str = "", body: str = "") -> etree._Element:
    """Build a table cell from its attribute and content markup, e.g.
    `make_cell('office:value-type="float" office:value="1"')`."""
    xml = f"<table:table-cell {NAMESPACES} {attrs}>{body}</table:table-cell>"
    return etree.fromstring(xml)


@pytest.fixture(scope="function")
def formatter() -> CellValueFormatter:
    return CellValueFormatter(FormatterConfig(format_dates=False))


@pytest.fixture(scope="function")
def date_formatter() -> CellValueFormatter:
    return CellValueFormatter(FormatterConfig(format_dates=True))


@pytest.fixture(autouse=True)
def wrap_test():
    yield
    # CLI runs attach a handler to a captured stream that is closed afterwards.
    logging.getLogger().handlers.clear()
