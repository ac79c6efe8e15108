import orjson
from datetime import timedelta
from typing import IO, Any, Dict

SECONDS_PER_DAY = 86400


def duration_iso(value: timedelta) -> str:
    """Render a duration as ISO 8601 text, e.g. `PT13H24M`.

    Years and months are only present on `pendulum.Duration`; they are
    counted as 365 and 30 days in its total."""
    years = getattr(value, "years", 0)
    months = getattr(value, "months", 0)
    total = value.total_seconds() - (years * 365 + months * 30) * SECONDS_PER_DAY
    sign = "-" if total < 0 or years < 0 or months < 0 else ""
    days, rest = divmod(abs(total), SECONDS_PER_DAY)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    date_part = ""
    if years:
        date_part += f"{abs(years)}Y"
    if months:
        date_part += f"{abs(months)}M"
    if days:
        date_part += f"{int(days)}D"
    time_part = ""
    if hours:
        time_part += f"{int(hours)}H"
    if minutes:
        time_part += f"{int(minutes)}M"
    if seconds:
        secs = int(seconds) if float(seconds).is_integer() else round(seconds, 6)
        time_part += f"{secs}S"
    if not date_part and not time_part:
        return "PT0S"
    if time_part:
        time_part = f"T{time_part}"
    return f"{sign}P{date_part}{time_part}"


def json_default(obj: Any) -> Any:
    if isinstance(obj, timedelta):
        return duration_iso(obj)
    if isinstance(obj, (tuple, set)):
        return list(obj)
    raise TypeError


def write_json(data: Dict[str, Any], fh: IO[bytes]) -> None:
    """Write a JSON object to the given open file handle."""
    opt = orjson.OPT_APPEND_NEWLINE | orjson.OPT_NON_STR_KEYS
    fh.write(orjson.dumps(data, option=opt, default=json_default))
