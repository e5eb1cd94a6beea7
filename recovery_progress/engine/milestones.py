"""
Milestone Table

Evaluates the milestone catalog against a sobriety start date.

Catalog order is the priority order: the catalog is ascending by threshold,
so it is also ascending by days_until and nothing here re-sorts it.
"""

from typing import Optional, Sequence

from recovery_progress.catalog import MILESTONES
from recovery_progress.dates import CalendarInput, NowInput, parse_calendar_date
from recovery_progress.engine.clock import add_days, elapsed_days
from recovery_progress.engine.rounding import percent_of
from recovery_progress.models.recovery import DerivedMilestone, Milestone


def milestones(
    start_date: CalendarInput,
    now: NowInput,
    catalog: Sequence[Milestone] = MILESTONES,
) -> list[DerivedMilestone]:
    """
    Derive achievement and countdown state for every catalog milestone.

    achieved is elapsed >= threshold, so an earlier (smaller) threshold is
    always achieved before a later one.
    """
    start = parse_calendar_date(start_date)
    elapsed = elapsed_days(start, now)

    return [
        DerivedMilestone(
            id=m.id,
            title=m.title,
            icon=m.icon,
            threshold_days=m.threshold_days,
            achieved=elapsed >= m.threshold_days,
            days_until=max(0, m.threshold_days - elapsed),
            target_date=add_days(start, m.threshold_days),
        )
        for m in catalog
    ]


def next_milestone(derived: Sequence[DerivedMilestone]) -> Optional[DerivedMilestone]:
    """First unachieved milestone, or None once every milestone is achieved."""
    for m in derived:
        if not m.achieved:
            return m
    return None


def upcoming(derived: Sequence[DerivedMilestone], n: int) -> list[DerivedMilestone]:
    """The first n unachieved milestones, in catalog order."""
    if n <= 0:
        return []
    return [m for m in derived if not m.achieved][:n]


def milestone_progress(derived: Sequence[DerivedMilestone], elapsed: int) -> int:
    """
    Percent of the way from the last achieved milestone to the next one.

    Before the first milestone the range starts at day 0. Returns 100 when
    all milestones are achieved.
    """
    target = next_milestone(derived)
    if target is None:
        return 100

    achieved = [m for m in derived if m.achieved]
    floor_days = achieved[-1].threshold_days if achieved else 0
    span = target.threshold_days - floor_days
    if span <= 0:
        return 0

    return percent_of(elapsed - floor_days, span)
