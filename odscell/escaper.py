import html
from typing import Callable, Dict

from odscell.exc import ConfigurationException

Unescaper = Callable[[str], str]


def unescape_ods(text: str) -> str:
    """Unescape text read from an OpenDocument content tree.

    lxml has already decoded the XML entities when building the tree, so the
    text is returned unchanged."""
    return text


def unescape_entities(text: str) -> str:
    """Decode character references left over in text by producers which escape
    their content twice (e.g. `&amp;amp;` in the file, `&amp;` in the tree)."""
    return html.unescape(text)


UNESCAPERS: Dict[str, Unescaper] = {
    "ods": unescape_ods,
    "entities": unescape_entities,
}


def get_unescaper(name: str) -> Unescaper:
    """Look up an unescaper by its configuration name.

    Args:
        name: One of the keys of `UNESCAPERS`.

    Returns:
        The unescaping function.
    """
    unescaper = UNESCAPERS.get(name.strip().lower())
    if unescaper is None:
        raise ConfigurationException(f"Unknown unescaper: {name!r}")
    return unescaper
