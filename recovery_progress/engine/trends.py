"""
Trend Comparator

Week-over-week change in the check-in scores.

DESIGN DECISION: The trend card averages differently from the wellness
tab. A check-in inside the window that skipped a metric counts as 0 for
that metric here, so a week of partial check-ins reads as a low week.
average_metric() in engine.wellness skips unreported values instead. The
two paths are kept separate on purpose and must not be merged.

Every delta is polarity-adjusted: a positive number always means the person
is doing better, whichever way the metric's scale runs.
"""

from datetime import date, timedelta
from typing import Iterable, Optional, Sequence, Union

from recovery_progress.dates import CalendarInput, NowInput, parse_calendar_date, to_local_date
from recovery_progress.engine.wellness import Extractor
from recovery_progress.models.recovery import CheckIn
from recovery_progress.models.wellness import (
    TREND_METRICS,
    BetterDirection,
    MetricDelta,
    TrendSummary,
    WeeklyTrend,
    WellnessMetric,
)

TREND_WINDOW_DAYS = 7


def window_average(
    records: Iterable[CheckIn],
    window_start: CalendarInput,
    window_end: CalendarInput,
    field: Extractor,
) -> Optional[float]:
    """
    Mean of a field over every record dated in [window_start, window_end).

    A record that does not report the field contributes 0. Returns None only
    when the window holds no records at all.
    """
    start = parse_calendar_date(window_start)
    end = parse_calendar_date(window_end)

    in_window = [r for r in records if start <= r.day < end]
    if not in_window:
        return None

    total = 0.0
    for record in in_window:
        value = field(record)
        total += value if value is not None else 0.0
    return total / len(in_window)


def delta(
    this_week: Optional[float],
    last_week: Optional[float],
    better_direction: BetterDirection,
) -> Optional[float]:
    """
    Polarity-adjusted change between two window averages.

    For "higher is better" metrics this is this_week - last_week, for
    "lower is better" it is last_week - this_week. None if either side has
    no data.
    """
    if this_week is None or last_week is None:
        return None
    if BetterDirection(better_direction) is BetterDirection.LOWER:
        return last_week - this_week
    return this_week - last_week


def classify_trend(
    deltas: Iterable[Union[MetricDelta, Optional[float]]],
) -> Optional[TrendSummary]:
    """
    Summarize a set of deltas into the "improving" verdict.

    Unmeasured metrics (None) are left out of the count. The person is
    improving when at least half of the measured metrics went up. Returns
    None when nothing was measured, which hides the trend card.
    """
    values = [d.delta if isinstance(d, MetricDelta) else d for d in deltas]
    measured = [v for v in values if v is not None]
    if not measured:
        return None

    improved_count = sum(1 for v in measured if v > 0)
    return TrendSummary(
        improved_count=improved_count,
        total_measured=len(measured),
        is_improving=improved_count >= len(measured) / 2,
    )


def weekly_trend(
    check_ins: Sequence[CheckIn],
    now: NowInput,
    window_days: int = TREND_WINDOW_DAYS,
    metrics: Sequence[WellnessMetric] = TREND_METRICS,
) -> Optional[WeeklyTrend]:
    """
    Compare the last window_days days (today included) with the window
    before it.

    Args:
        check_ins: All of the person's check-ins, any order
        now: The caller's current instant
        window_days: Length of each window, 7 for a week
        metrics: Metrics to compare, each with its own better direction

    Returns:
        WeeklyTrend, or None when neither window could measure any metric
    """
    today = to_local_date(now)
    this_start: date = today - timedelta(days=window_days - 1)
    this_end: date = today + timedelta(days=1)
    last_start: date = this_start - timedelta(days=window_days)

    deltas = []
    for metric in metrics:
        this_avg = window_average(check_ins, this_start, this_end, metric)
        last_avg = window_average(check_ins, last_start, this_start, metric)
        deltas.append(MetricDelta(
            metric=metric,
            this_week=this_avg,
            last_week=last_avg,
            delta=delta(this_avg, last_avg, metric.better_direction),
        ))

    summary = classify_trend(deltas)
    if summary is None:
        return None

    return WeeklyTrend(
        this_week_start=this_start,
        last_week_start=last_start,
        deltas=deltas,
        summary=summary,
    )
