from lxml.etree import QName

OFFICE_NS = "urn:oasis:names:tc:opendocument:xmlns:office:1.0"
TABLE_NS = "urn:oasis:names:tc:opendocument:xmlns:table:1.0"
TEXT_NS = "urn:oasis:names:tc:opendocument:xmlns:text:1.0"

NSMAP = {"office": OFFICE_NS, "table": TABLE_NS, "text": TEXT_NS}


def qname(name: str) -> str:
    """Expand a prefixed name such as `office:value` into the Clark notation
    used by lxml for tags and attribute keys."""
    prefix, local = name.split(":", 1)
    return QName(NSMAP[prefix], local).text


# Cell attributes
ATTR_VALUE_TYPE = qname("office:value-type")
ATTR_VALUE = qname("office:value")
ATTR_BOOLEAN_VALUE = qname("office:boolean-value")
ATTR_DATE_VALUE = qname("office:date-value")
ATTR_TIME_VALUE = qname("office:time-value")
ATTR_CURRENCY = qname("office:currency")
ATTR_COUNT = qname("text:c")

# Elements
TABLE_CELL = qname("table:table-cell")
TEXT_P = qname("text:p")
TEXT_A = qname("text:a")
TEXT_SPAN = qname("text:span")
TEXT_S = qname("text:s")
TEXT_TAB = qname("text:tab")
TEXT_LINE_BREAK = qname("text:line-break")
