"""
Goal Tracker

Progress toward savings goals, the merged "coming soon" countdown, the
purchasable item carousel and the money map.

PRECONDITION: every function that computes days_away needs a daily cost
above zero. The dashboard hides goal features entirely when the cost is not
set; a zero or negative cost here raises InvalidDailyCostError.
"""

from decimal import Decimal
from typing import Sequence, Union

from recovery_progress.engine.rounding import Number, ceil_int, percent_of, to_decimal
from recovery_progress.engine.savings import InvalidDailyCostError
from recovery_progress.models.savings import (
    ActiveGoalCard,
    CarouselEntry,
    CountdownEntry,
    GoalProgress,
    GoalSource,
    MoneyMapEntry,
    MoneyMapStop,
    PurchasableItem,
    SavingsGoal,
)

CAROUSEL_VISIBILITY_RATIO = Decimal("0.1")


def _require_positive_cost(daily_cost: Number) -> Decimal:
    cost = to_decimal(daily_cost)
    if cost <= 0:
        raise InvalidDailyCostError(
            f"Goal countdowns need a daily cost above zero, got {daily_cost}"
        )
    return cost


def _days_away(amount: Decimal, saved: Decimal, cost: Decimal) -> int:
    return max(0, ceil_int((amount - saved) / cost))


def goal_progress(
    goal: Union[SavingsGoal, Number],
    saved: Number,
    daily_cost: Number,
) -> GoalProgress:
    """
    Percent complete and days until a target amount is reached.

    Args:
        goal: A SavingsGoal, or a bare target amount
        saved: Total saved so far
        daily_cost: Daily savings rate, must be > 0

    percent is clamped to 100 once the goal is passed; days_away never goes
    below 0.
    """
    cost = _require_positive_cost(daily_cost)
    amount = goal.amount if isinstance(goal, SavingsGoal) else to_decimal(goal)
    saved_amount = to_decimal(saved)

    return GoalProgress(
        percent=percent_of(saved_amount, amount),
        days_away=_days_away(amount, saved_amount, cost),
    )


def merged_countdown(
    builtin_goals: Sequence[SavingsGoal],
    custom_goals: Sequence[SavingsGoal],
    saved: Number,
    daily_cost: Number,
) -> list[CountdownEntry]:
    """
    Builtin and custom goals in one list, soonest first.

    Builtins come first in the union. The sort is stable, so goals with equal
    days_away keep that input order. Goals passed in custom_goals are
    labelled CUSTOM whatever source they were stored with.
    """
    tagged_custom = [
        goal if goal.source is GoalSource.CUSTOM
        else goal.model_copy(update={"source": GoalSource.CUSTOM})
        for goal in custom_goals
    ]

    entries = []
    for goal in [*builtin_goals, *tagged_custom]:
        progress = goal_progress(goal, saved, daily_cost)
        entries.append(CountdownEntry(
            goal=goal,
            percent=progress.percent,
            days_away=progress.days_away,
        ))

    return sorted(entries, key=lambda e: e.days_away)


def purchasable_carousel(
    items: Sequence[PurchasableItem],
    saved: Number,
    daily_cost: Number,
    visibility_ratio: Number = CAROUSEL_VISIBILITY_RATIO,
) -> list[CarouselEntry]:
    """
    Items worth showing in the "your savings can buy" carousel.

    An item appears once savings reach visibility_ratio of its minimum
    cost (10% by default), well before it is affordable. Catalog order is
    kept.
    """
    cost = _require_positive_cost(daily_cost)
    saved_amount = to_decimal(saved)
    ratio = to_decimal(visibility_ratio)

    entries = []
    for item in items:
        if saved_amount < item.min_cost * ratio:
            continue

        can_afford = saved_amount >= item.min_cost
        entries.append(CarouselEntry(
            item=item,
            percent=percent_of(saved_amount, item.min_cost),
            can_afford=can_afford,
            days_away=0 if can_afford else _days_away(item.min_cost, saved_amount, cost),
        ))

    return entries


def active_goal_progress(
    goal: SavingsGoal,
    saved: Number,
    daily_cost: Number,
) -> ActiveGoalCard:
    """The headline card for the goal the user selected."""
    progress = goal_progress(goal, saved, daily_cost)
    return ActiveGoalCard(
        goal=goal,
        percent=progress.percent,
        days_away=progress.days_away,
        complete=goal.amount <= to_decimal(saved),
    )


def money_map(stops: Sequence[MoneyMapStop], saved: Number) -> list[MoneyMapEntry]:
    """
    Mark each money map stop as reached, current, or ahead.

    The current stop is the first one not yet reached whose predecessor has
    been reached. Stops are expected in ascending amount order.
    """
    saved_amount = to_decimal(saved)

    entries = []
    for index, stop in enumerate(stops):
        achieved = saved_amount >= stop.amount
        previous_reached = index == 0 or saved_amount >= stops[index - 1].amount
        entries.append(MoneyMapEntry(
            stop=stop,
            achieved=achieved,
            is_current=not achieved and previous_reached,
        ))

    return entries
