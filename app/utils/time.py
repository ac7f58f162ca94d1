import re
from datetime import datetime, timezone
from email.utils import format_datetime

_ISO_UTC = re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z")


def parse_iso_utc(s: str) -> datetime:
    """Parse the fixed ``YYYY-MM-DDTHH:MM:SSZ`` shape GitHub uses for timestamps."""
    m = _ISO_UTC.fullmatch(s)
    if not m:
        raise ValueError(f"not an ISO-8601 UTC instant: {s!r}")
    return datetime(*(int(part) for part in m.groups()), tzinfo=timezone.utc)


def format_created_at(value: str | None) -> str | None:
    """
    Render a GitHub ``created_at`` as e.g. ``Tue, 25 Jan 2011 18:44:36 GMT``.

    Null, blank or unrecognised values come back unchanged.
    """
    if not isinstance(value, str) or not value.strip():
        return value
    try:
        dt = parse_iso_utc(value)
    except ValueError:
        return value
    return format_datetime(dt, usegmt=True)
