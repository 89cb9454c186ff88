"""Calendar date parsing and rendering.

Exercises are stored as midnight datetimes so that a log bound like
``to=2023-01-15`` matches every exercise logged on that day.
"""

from datetime import date, datetime, time
from typing import Any, Optional

# "Sun Jan 15 2023"
READABLE_FORMAT = "%a %b %d %Y"

_FALLBACK_FORMATS = (
    READABLE_FORMAT,
    "%Y/%m/%d",
    "%m/%d/%Y",
)


def parse_date(value: Any) -> Optional[date]:
    """Parse a calendar date, ignoring any time of day.

    Accepts ``date``/``datetime`` objects, ISO 8601 strings (``2023-01-15``,
    ``2023-01-15T10:30:00Z``) and the readable format produced by
    :func:`format_date`. Returns None when the value cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso_text).date()
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def to_storage(day: date) -> datetime:
    """BSON has no date type; store the day as its midnight."""
    return datetime.combine(day, time.min)


def format_date(value: Any) -> Optional[str]:
    """Render a date as e.g. ``Sun Jan 15 2023``."""
    if value is None:
        return None
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime(READABLE_FORMAT)


def today() -> date:
    return datetime.now().date()
