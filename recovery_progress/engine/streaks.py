"""
Streak Counter

Runs of consecutive calendar days with a check-in.

Dates are de-duplicated first, so two check-ins on one day extend a streak
by one day, not two.
"""

from datetime import timedelta
from typing import Callable, Iterable, Optional

from recovery_progress.dates import NowInput, to_local_date
from recovery_progress.models.recovery import CheckIn
from recovery_progress.models.wellness import Streak, StreakSummary


def streaks(
    check_ins: Iterable[CheckIn],
    now: NowInput,
    predicate: Optional[Callable[[CheckIn], bool]] = None,
) -> StreakSummary:
    """
    Group check-in days into runs of consecutive days.

    Args:
        check_ins: Check-ins in any order
        now: The caller's current instant
        predicate: Only count check-ins for which this returns True

    Returns:
        StreakSummary with every run in chronological order. current is the
        length of the run ending today, or 0 when there was no check-in
        today.
    """
    today = to_local_date(now)

    # Future-dated check-ins (clock skew) cannot extend or break a run
    days = sorted({
        c.day for c in check_ins
        if c.day <= today and (predicate is None or predicate(c))
    })
    if not days:
        return StreakSummary()

    runs: list[Streak] = []
    run_start = days[0]
    previous = days[0]
    for day in days[1:]:
        if day - previous != timedelta(days=1):
            runs.append(Streak(
                start_date=run_start,
                end_date=previous,
                length=(previous - run_start).days + 1,
            ))
            run_start = day
        previous = day
    runs.append(Streak(
        start_date=run_start,
        end_date=previous,
        length=(previous - run_start).days + 1,
    ))

    last = runs[-1]

    return StreakSummary(
        longest=max(r.length for r in runs),
        current=last.length if last.end_date == today else 0,
        streaks=runs,
    )


def reflection_streaks(check_ins: Iterable[CheckIn], now: NowInput) -> StreakSummary:
    """Streaks counting only days with an evening reflection."""
    return streaks(check_ins, now, predicate=lambda c: c.has_evening)
