"""
Calendar date helpers shared by the models and the engine.

Stored dates are plain YYYY-MM-DD strings meaning a local calendar day.
They are split into parts and built with date(), so no timezone offset can
move them to the previous or next day.
"""

from datetime import date, datetime
from typing import Union

CalendarInput = Union[str, date]
NowInput = Union[str, date, datetime]


def parse_calendar_date(value: CalendarInput) -> date:
    """
    Parse a stored calendar date.

    Accepts a date (returned unchanged, a datetime is reduced to its date)
    or a "YYYY-MM-DD" string. Malformed strings raise ValueError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    parts = value.strip().split("-")
    if len(parts) != 3:
        raise ValueError(f"Expected a YYYY-MM-DD date, got {value!r}")
    year, month, day = (int(p) for p in parts)
    return date(year, month, day)


def to_local_date(now: NowInput) -> date:
    """
    Reduce a caller-supplied "now" to the local calendar date.

    A datetime contributes its own wall-clock date, in whatever zone the
    caller expressed it. Strings may be a bare date or a full ISO timestamp.
    """
    if isinstance(now, datetime):
        return now.date()
    if isinstance(now, date):
        return now

    text = now.strip()
    if len(text) == 10:
        return parse_calendar_date(text)
    return datetime.fromisoformat(text).date()
