"""
Clock

Day counts between a stored sobriety date and a caller-supplied "now".

DESIGN DECISION: Day counts are differences between calendar dates
(date ordinals), never elapsed seconds divided by 86400. A DST change
between the two dates cannot move the result.

Convention: the start date itself is day 0. "2024-01-01" seen on
"2024-01-11" has 10 elapsed days, and every window count below uses the
same convention, so a window spanning all time equals elapsed_days().
"""

from datetime import date, timedelta

from recovery_progress.dates import (
    CalendarInput,
    NowInput,
    parse_calendar_date,
    to_local_date,
)


def elapsed_days(start_date: CalendarInput, now: NowInput) -> int:
    """
    Whole calendar days from the start date to today.

    A start date later than today counts as 0 days.
    """
    start = parse_calendar_date(start_date)
    today = to_local_date(now)
    return max(0, (today - start).days)


def days_in_window(
    start_date: CalendarInput,
    window_start: CalendarInput,
    window_end: CalendarInput,
    now: NowInput,
) -> int:
    """
    Sober days falling inside a reporting window.

    The sober period runs from start_date up to today; the window is
    [window_start, window_end). The count begins at whichever of start_date
    and window_start is later and stops at whichever of today and
    window_end is earlier.
    """
    start = parse_calendar_date(start_date)
    today = to_local_date(now)

    lower = max(start, parse_calendar_date(window_start))
    upper = min(today, parse_calendar_date(window_end))
    return max(0, (upper - lower).days)


def add_days(start_date: CalendarInput, days: int) -> date:
    return parse_calendar_date(start_date) + timedelta(days=days)


def month_window(now: NowInput) -> tuple[date, date]:
    """[first of this month, first of next month) for "saved this month"."""
    today = to_local_date(now)
    start = today.replace(day=1)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def year_window(now: NowInput) -> tuple[date, date]:
    """[1 January, next 1 January) for "saved this year"."""
    today = to_local_date(now)
    return date(today.year, 1, 1), date(today.year + 1, 1, 1)


def trailing_window(now: NowInput, days: int) -> tuple[date, date]:
    """
    The last `days` calendar days ending with today, as [start, end).

    trailing_window(now, 31) covers today and the 30 days before it.
    """
    today = to_local_date(now)
    end = today + timedelta(days=1)
    return end - timedelta(days=days), end
