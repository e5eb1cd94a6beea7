"""
Calculation Engine Package

Pure functions from stored facts to dashboard numbers. Nothing in this
package reads the clock, the environment, or any store: "now" and every
tunable arrive as arguments.
"""

from recovery_progress.engine.clock import (
    add_days,
    days_in_window,
    elapsed_days,
    month_window,
    trailing_window,
    year_window,
)
from recovery_progress.engine.goals import (
    active_goal_progress,
    goal_progress,
    merged_countdown,
    money_map,
    purchasable_carousel,
)
from recovery_progress.engine.milestones import (
    milestone_progress,
    milestones,
    next_milestone,
    upcoming,
)
from recovery_progress.engine.savings import (
    InvalidDailyCostError,
    counterfactual_cost,
    jar_status,
    net_gain,
    savings_rates,
    savings_summary,
    total_saved,
    window_saved,
)
from recovery_progress.engine.streaks import reflection_streaks, streaks
from recovery_progress.engine.trends import (
    classify_trend,
    delta,
    weekly_trend,
    window_average,
)
from recovery_progress.engine.wellness import (
    average_metric,
    daily_series,
    missed_count,
    total_check_ins,
)

__all__ = [
    # Clock
    "add_days",
    "days_in_window",
    "elapsed_days",
    "month_window",
    "trailing_window",
    "year_window",
    # Milestones
    "milestone_progress",
    "milestones",
    "next_milestone",
    "upcoming",
    # Savings
    "InvalidDailyCostError",
    "counterfactual_cost",
    "jar_status",
    "net_gain",
    "savings_rates",
    "savings_summary",
    "total_saved",
    "window_saved",
    # Goals
    "active_goal_progress",
    "goal_progress",
    "merged_countdown",
    "money_map",
    "purchasable_carousel",
    # Wellness
    "average_metric",
    "daily_series",
    "missed_count",
    "total_check_ins",
    # Trends
    "classify_trend",
    "delta",
    "weekly_trend",
    "window_average",
    # Streaks
    "reflection_streaks",
    "streaks",
]
