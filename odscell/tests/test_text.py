from lxml import etree

from odscell.ns import TEXT_P
from odscell.tests.conftest import NAMESPACES
from odscell.text import extract_text, first_paragraph, iter_paragraphs
from odscell.text import rendered_text


def make_paragraph(body: str) -> etree._Element:
    return etree.fromstring(f"<text:p {NAMESPACES}>{body}</text:p>")


def test_plain_text():
    assert extract_text(make_paragraph("Hello, World!")) == "Hello, World!"
    assert extract_text(make_paragraph("")) == ""


def test_repeated_spaces():
    node = make_paragraph('a<text:s text:c="3"/>b')
    assert extract_text(node) == "a   b"


def test_whitespace_nodes():
    node = make_paragraph("a<text:s/>b<text:tab/>c<text:line-break/>d")
    assert extract_text(node) == "a b\tc\nd"


def test_whitespace_count_fallback():
    for count in ("", "0", "-2", "abc"):
        node = make_paragraph(f'a<text:s text:c="{count}"/>b')
        assert extract_text(node) == "a b", count


def test_nested_containers():
    node = make_paragraph(
        "Go to <text:a>our <text:span>web<text:s/>site</text:span></text:a>, now."
    )
    assert extract_text(node) == "Go to our web site, now."


def test_unknown_elements_skipped():
    node = make_paragraph(
        "a<text:note><text:note-body>hidden</text:note-body></text:note>b<!-- c -->d"
    )
    assert extract_text(node) == "abd"


def test_rendered_text():
    node = make_paragraph('05/19/16<text:s text:c="2"/><text:span>04:39 PM</text:span>')
    assert rendered_text(node) == "05/19/1604:39 PM"


def test_first_paragraph():
    cell = etree.fromstring(
        f"<table:table-cell {NAMESPACES}>"
        "<office:annotation><text:p>note</text:p></office:annotation>"
        "<text:p>value</text:p>"
        "</table:table-cell>"
    )
    paragraph = first_paragraph(cell)
    assert paragraph is not None
    assert paragraph.tag == TEXT_P
    assert paragraph.text == "note"
    empty = etree.fromstring(f"<table:table-cell {NAMESPACES}/>")
    assert first_paragraph(empty) is None


def test_paragraphs_need_text_namespace():
    cell = etree.fromstring(
        f"<table:table-cell {NAMESPACES} xmlns:h='http://www.w3.org/1999/xhtml'>"
        "<p>plain</p><h:p>html</h:p><text:p>value</text:p>"
        "</table:table-cell>"
    )
    assert [p.text for p in iter_paragraphs(cell)] == ["value"]
    paragraph = first_paragraph(cell)
    assert paragraph is not None
    assert paragraph.text == "value"
