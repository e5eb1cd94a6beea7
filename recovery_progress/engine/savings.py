"""
Savings Projector

Turns sober days and a daily cost into money saved over calendar windows,
plus the "if you'd kept using" reality check.

Money stays exact: Decimal products, no rounding except the two rounded
terms of the reality check.
"""

from decimal import Decimal
from typing import Optional

from recovery_progress.dates import CalendarInput, NowInput
from recovery_progress.engine.clock import (
    days_in_window,
    elapsed_days,
    month_window,
    year_window,
)
from recovery_progress.engine.rounding import Number, round_half_up, to_decimal
from recovery_progress.models.savings import (
    CounterfactualCost,
    JarStatus,
    SavingsRates,
    SavingsSummary,
)

INTEREST_SURCHARGE_RATE = Decimal("0.34")
HEALTH_COST_PER_DAY = Decimal("4")


class InvalidDailyCostError(ValueError):
    """
    A savings calculation was called with an unusable daily cost.

    Callers hide savings features when the daily cost is not set, so
    reaching this is a programming error rather than a user error.
    """
    pass


def _checked_cost(daily_cost: Number, allow_zero: bool = True) -> Decimal:
    cost = to_decimal(daily_cost)
    if cost < 0 or (cost == 0 and not allow_zero):
        raise InvalidDailyCostError(
            f"Daily cost must be {'>= 0' if allow_zero else '> 0'}, got {daily_cost}"
        )
    return cost


def total_saved(elapsed: int, daily_cost: Number) -> Decimal:
    """All-time savings: elapsed days times the daily cost."""
    return _checked_cost(daily_cost) * elapsed


def window_saved(
    start_date: CalendarInput,
    daily_cost: Number,
    window_start: CalendarInput,
    window_end: CalendarInput,
    now: NowInput,
) -> Decimal:
    """Savings from the sober days inside [window_start, window_end)."""
    days = days_in_window(start_date, window_start, window_end, now)
    return _checked_cost(daily_cost) * days


def counterfactual_cost(
    elapsed: int,
    daily_cost: Number,
    surcharge_rate: Number = INTEREST_SURCHARGE_RATE,
    health_cost_per_day: Number = HEALTH_COST_PER_DAY,
) -> CounterfactualCost:
    """
    What continuing to use would have cost over the same days.

    interest is round(principal x 0.34) and health_cost is
    round(elapsed x 4), both half up to whole units.
    """
    principal = total_saved(elapsed, daily_cost)
    interest = round_half_up(principal * to_decimal(surcharge_rate))
    health_cost = round_half_up(to_decimal(health_cost_per_day) * elapsed)

    return CounterfactualCost(
        principal=principal,
        interest=interest,
        health_cost=health_cost,
        total=principal + interest + health_cost,
    )


def net_gain(saved: Number, counterfactual_total: Number) -> Decimal:
    """
    The "net gain" figure shown under the reality check.

    This is savings PLUS the counterfactual total, exactly as the product
    displays it. The label suggests a difference; see DESIGN.md before
    changing it.
    """
    return to_decimal(saved) + to_decimal(counterfactual_total)


def savings_rates(daily_cost: Number) -> SavingsRates:
    cost = _checked_cost(daily_cost)
    return SavingsRates(
        daily=cost,
        weekly=cost * 7,
        monthly=cost * 30,
        yearly=cost * 365,
    )


def jar_status(actual: Number, projected: Number) -> JarStatus:
    """Compare money actually set aside with what sobriety has saved."""
    actual_amount = to_decimal(actual)
    projected_amount = to_decimal(projected)
    return JarStatus(
        actual=actual_amount,
        projected=projected_amount,
        on_track=actual_amount >= projected_amount,
        shortfall=max(Decimal("0"), projected_amount - actual_amount),
    )


def savings_summary(
    start_date: CalendarInput,
    daily_cost: Number,
    now: NowInput,
    actual_saved: Optional[Number] = None,
    surcharge_rate: Number = INTEREST_SURCHARGE_RATE,
    health_cost_per_day: Number = HEALTH_COST_PER_DAY,
) -> SavingsSummary:
    """
    Every savings figure for one profile at one instant.

    Args:
        start_date: Sobriety start date
        daily_cost: Daily spend avoided, must be > 0
        now: The caller's current instant
        actual_saved: Money reported as set aside, if the user tracks it
    """
    cost = _checked_cost(daily_cost, allow_zero=False)
    elapsed = elapsed_days(start_date, now)
    saved = total_saved(elapsed, cost)

    month_start, month_end = month_window(now)
    year_start, year_end = year_window(now)
    days_this_month = days_in_window(start_date, month_start, month_end, now)
    days_this_year = days_in_window(start_date, year_start, year_end, now)

    reality_check = counterfactual_cost(
        elapsed,
        cost,
        surcharge_rate=surcharge_rate,
        health_cost_per_day=health_cost_per_day,
    )

    return SavingsSummary(
        total_saved=saved,
        saved_this_month=cost * days_this_month,
        days_this_month=days_this_month,
        saved_this_year=cost * days_this_year,
        days_this_year=days_this_year,
        rates=savings_rates(cost),
        reality_check=reality_check,
        net_gain=net_gain(saved, reality_check.total),
        jar=jar_status(actual_saved, saved) if actual_saved is not None else None,
    )
