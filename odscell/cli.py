import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional

import click
from lxml import etree

from odscell import settings
from odscell.exc import InvalidValueException
from odscell.formatter import CellValueFormatter, FormatterConfig
from odscell.logs import configure_logging, get_logger
from odscell.ns import ATTR_VALUE_TYPE, TABLE_CELL
from odscell.util import write_json
from odscell.values import CellType

log = get_logger(__name__)
InPath = click.Path(
    exists=True, dir_okay=False, readable=True, path_type=Path, allow_dash=True
)


@click.group(help="OpenDocument spreadsheet cell converter")
@click.option("--debug", is_flag=True, default=False)
def cli(debug: bool = False) -> None:
    settings.DEBUG = debug or settings.DEBUG
    level = logging.DEBUG if settings.DEBUG else logging.INFO
    configure_logging(level=level)


@cli.command("cells", help="Convert every table cell in an XML document")
@click.argument("path", type=InPath)
@click.option(
    "--format-dates/--raw-dates",
    "format_dates",
    default=None,
    help="Return dates and times as displayed, or parse their values",
)
@click.option("-s", "--skip-invalid", is_flag=True, default=False)
@click.option("-o", "--outfile", type=click.File("wb"), default="-")
def cells(
    path: Path,
    outfile: BinaryIO,
    format_dates: Optional[bool] = None,
    skip_invalid: bool = False,
) -> None:
    config = FormatterConfig.from_settings()
    if format_dates is not None:
        config = FormatterConfig(format_dates=format_dates, unescape=config.unescape)
    formatter = CellValueFormatter(config)
    try:
        if path.as_posix() == "-":
            doc = etree.parse(sys.stdin.buffer)
        else:
            doc = etree.parse(path.as_posix())
    except (OSError, etree.XMLSyntaxError) as exc:
        raise click.ClickException(f"Cannot parse {path}: {exc}")

    count = 0
    for cell in doc.iter(TABLE_CELL):
        cell_type = CellType.parse(cell.get(ATTR_VALUE_TYPE))
        try:
            value = formatter.extract_and_format_node_value(cell)
        except InvalidValueException as exc:
            if not skip_invalid:
                raise click.ClickException(str(exc))
            log.error("Skipping invalid cell", value=exc.value, line=cell.sourceline)
            value = None
        write_json({"type": cell_type.value, "value": value}, outfile)
        count += 1
    log.info("Converted cells", path=path.as_posix(), cells=count)
