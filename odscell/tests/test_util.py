from datetime import timedelta
from io import BytesIO

import pendulum

from odscell.util import duration_iso, write_json


def test_duration_iso():
    assert duration_iso(timedelta(hours=13, minutes=24)) == "PT13H24M"
    assert duration_iso(timedelta(0)) == "PT0S"
    assert duration_iso(timedelta(days=2, seconds=5)) == "P2DT5S"
    assert duration_iso(timedelta(seconds=1.5)) == "PT1.5S"
    assert duration_iso(-timedelta(hours=1)) == "-PT1H"
    assert duration_iso(pendulum.duration(years=1, months=2, days=3)) == "P1Y2M3D"


def test_write_json():
    fh = BytesIO()
    write_json({"type": "time", "value": timedelta(minutes=90)}, fh)
    assert fh.getvalue() == b'{"type":"time","value":"PT1H30M"}\n'
