"""
Wellness Aggregator

Averages, missed days and graph series over check-in scores.

A score of 0 is a real answer and is averaged like any other value. Only
None (the metric was not reported) is skipped.
"""

from datetime import date, timedelta
from typing import Callable, Iterable, Optional, Sequence, Union

from recovery_progress.dates import NowInput
from recovery_progress.engine.clock import trailing_window
from recovery_progress.models.recovery import CheckIn
from recovery_progress.models.wellness import WellnessMetric

Extractor = Union[WellnessMetric, Callable[[CheckIn], Optional[float]]]

MISSED_LOOKBACK_DAYS = 31


def average_metric(
    check_ins: Iterable[CheckIn],
    extractor: Extractor,
) -> Optional[float]:
    """
    Mean of the values the extractor finds.

    Returns None when no check-in reports the metric, so an empty history
    never divides by zero.
    """
    values = [v for v in (extractor(c) for c in check_ins) if v is not None]
    if not values:
        return None
    return sum(values) / len(values)


def _reported_by_day(
    check_ins: Iterable[CheckIn],
    metric: Extractor,
    window_start: date,
    window_end: date,
) -> dict[date, float]:
    """First reported value per day inside [window_start, window_end)."""
    by_day: dict[date, float] = {}
    for check_in in check_ins:
        if not window_start <= check_in.day < window_end:
            continue
        value = metric(check_in)
        if value is not None and check_in.day not in by_day:
            by_day[check_in.day] = value
    return by_day


def missed_count(
    check_ins: Iterable[CheckIn],
    metric: Extractor,
    now: NowInput,
    lookback_days: int = MISSED_LOOKBACK_DAYS,
) -> int:
    """
    Days in the trailing window with no check-in reporting the metric.

    The window is today and the lookback_days - 1 days before it. Two
    check-ins on one day count as one reported day.
    """
    if lookback_days <= 0:
        return 0

    window_start, window_end = trailing_window(now, lookback_days)
    reported = _reported_by_day(check_ins, metric, window_start, window_end)
    return lookback_days - len(reported)


def daily_series(
    check_ins: Iterable[CheckIn],
    metric: Extractor,
    now: NowInput,
    lookback_days: int = MISSED_LOOKBACK_DAYS,
) -> list[Optional[float]]:
    """One value per day of the trailing window, oldest first; None for gaps."""
    if lookback_days <= 0:
        return []

    window_start, window_end = trailing_window(now, lookback_days)
    reported = _reported_by_day(check_ins, metric, window_start, window_end)
    return [
        reported.get(window_start + timedelta(days=offset))
        for offset in range(lookback_days)
    ]


def total_check_ins(check_ins: Sequence[CheckIn]) -> int:
    """Completed check-ins, counting the morning and evening halves separately."""
    return sum(int(c.has_morning) + int(c.has_evening) for c in check_ins)
