import pytest

from odscell.escaper import get_unescaper, unescape_entities, unescape_ods
from odscell.exc import ConfigurationException


def test_unescape_ods():
    assert unescape_ods("a &amp; b <c>") == "a &amp; b <c>"


def test_unescape_entities():
    assert unescape_entities("a &amp; b &lt;c&gt; &#39;d&#39;") == "a & b <c> 'd'"
    assert unescape_entities("plain") == "plain"


def test_get_unescaper():
    assert get_unescaper("ods") is unescape_ods
    assert get_unescaper(" Entities ") is unescape_entities
    with pytest.raises(ConfigurationException) as exc:
        get_unescaper("xml")
    assert "xml" in exc.value.message
