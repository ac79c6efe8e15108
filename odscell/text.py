from typing import Iterator, List, Optional

from lxml import etree

from odscell.ns import ATTR_COUNT, TEXT_A, TEXT_P, TEXT_SPAN
from odscell.values import WhitespaceKind, to_count

# Inline elements whose children are visited like those of a paragraph.
TEXT_CONTAINERS = {TEXT_A, TEXT_SPAN}


def iter_paragraphs(cell: etree._Element) -> Iterator[etree._Element]:
    """All `text:p` elements below the cell, in document order."""
    return cell.iterdescendants(TEXT_P)


def first_paragraph(cell: etree._Element) -> Optional[etree._Element]:
    return next(iter_paragraphs(cell), None)


def expand_whitespace(kind: WhitespaceKind, node: etree._Element) -> str:
    """The `<text:s>`, `<text:tab>` and `<text:line-break>` nodes stand in
    for whitespace the markup would otherwise collapse. `<text:s>` can carry a
    `text:c` repeat count.

    https://docs.oasis-open.org/office/v1.2/os/OpenDocument-v1.2-os-part1.html#__RefHeading__1415200_253892949
    """
    return kind.char * to_count(node.get(ATTR_COUNT))


def extract_text(node: etree._Element) -> str:
    """Collect the text of a paragraph, expanding whitespace nodes and
    descending into links and spans. Other child elements are skipped, but
    the text following them is kept."""
    parts: List[str] = []
    if node.text is not None:
        parts.append(node.text)
    for child in node:
        # Comments and processing instructions have no string tag.
        if isinstance(child.tag, str):
            kind = WhitespaceKind.from_tag(child.tag)
            if kind is not None:
                parts.append(expand_whitespace(kind, child))
            elif child.tag in TEXT_CONTAINERS:
                parts.append(extract_text(child))
        if child.tail is not None:
            parts.append(child.tail)
    return "".join(parts)


def rendered_text(node: etree._Element) -> str:
    """Full text content of a node as rendered, without any whitespace node
    expansion."""
    return "".join(node.itertext())
