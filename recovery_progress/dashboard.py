"""
Dashboard Builder for Recovery Progress

This module ties together all the engine components and produces the one
immutable DashboardView the presentation layer renders per pass:
1. Recovery (start date -> elapsed days -> milestones)
2. Savings (elapsed days x daily cost -> windows, reality check, jar)
3. Goals (savings -> countdown, carousel, money map)
4. Wellness (check-ins -> averages, gaps, streaks, weekly trend)

DESIGN DECISION: The builder enforces the feature gates:
- No day counts without a sobriety date
- No savings or goal math without a daily cost above zero
- Every hidden section is logged with the reason

Sections are hidden (None), never filled with zeros, so the UI can tell
"not set up" apart from "nothing saved yet".
"""

from decimal import Decimal
from typing import Optional, Sequence

from recovery_progress.audit import CalculationAuditor, configure_logging
from recovery_progress.catalog import BUILTIN_GOALS, MONEY_MAP_STOPS, PURCHASABLE_ITEMS
from recovery_progress.config import EngineSettings, get_settings
from recovery_progress.dates import NowInput, to_local_date
from recovery_progress.engine import (
    active_goal_progress,
    average_metric,
    daily_series,
    elapsed_days,
    merged_countdown,
    milestone_progress,
    milestones,
    missed_count,
    money_map,
    next_milestone,
    purchasable_carousel,
    reflection_streaks,
    savings_summary,
    streaks,
    total_check_ins,
    upcoming,
    weekly_trend,
)
from recovery_progress.models import (
    CheckIn,
    DashboardView,
    GoalsSummary,
    MetricOverview,
    MoneyMapStop,
    PurchasableItem,
    RecoverySummary,
    SavingsGoal,
    SavingsSummary,
    SobrietyProfile,
    WellnessMetric,
    WellnessSummary,
)
from recovery_progress.validation import ProfileValidator


class DashboardBuilder:
    """
    Builds the dashboard for one person at one instant.

    Flow:
    1. Validate → report suspicious data (never fix it)
    2. Recovery → only with a sobriety date
    3. Savings → only with a date and a daily cost
    4. Goals → built on the savings total
    5. Wellness → always, from whatever check-ins exist

    Building is deterministic: the same inputs and the same now always
    produce equal views.
    """

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        audit_logger: Optional[CalculationAuditor] = None,
        validator: Optional[ProfileValidator] = None,
    ):
        self._settings = settings or get_settings().engine
        self._audit_logger = audit_logger
        self._validator = validator or ProfileValidator(self._settings)

    def _build_recovery(
        self,
        profile: SobrietyProfile,
        now: NowInput,
    ) -> RecoverySummary:
        derived = milestones(profile.start_date, now)
        elapsed = elapsed_days(profile.start_date, now)

        return RecoverySummary(
            start_date=profile.start_date,
            elapsed_days=elapsed,
            milestones=derived,
            next_milestone=next_milestone(derived),
            upcoming=upcoming(derived, self._settings.upcoming_milestone_count),
            progress_to_next=milestone_progress(derived, elapsed),
        )

    def _build_savings(
        self,
        profile: SobrietyProfile,
        now: NowInput,
    ) -> SavingsSummary:
        return savings_summary(
            profile.start_date,
            profile.daily_cost,
            now,
            actual_saved=profile.actual_saved,
            surcharge_rate=self._settings.interest_surcharge_rate,
            health_cost_per_day=self._settings.health_cost_per_day,
        )

    def _build_goals(
        self,
        profile: SobrietyProfile,
        saved: Decimal,
        builtin_goals: Sequence[SavingsGoal],
        custom_goals: Sequence[SavingsGoal],
        purchasable_items: Sequence[PurchasableItem],
        money_map_stops: Sequence[MoneyMapStop],
        active_goal: Optional[SavingsGoal],
    ) -> GoalsSummary:
        cost = profile.daily_cost

        return GoalsSummary(
            active_goal=(
                active_goal_progress(active_goal, saved, cost)
                if active_goal is not None else None
            ),
            countdown=merged_countdown(builtin_goals, custom_goals, saved, cost),
            carousel=purchasable_carousel(
                purchasable_items,
                saved,
                cost,
                visibility_ratio=self._settings.carousel_visibility_ratio,
            ),
            money_map=money_map(money_map_stops, saved),
        )

    def _build_wellness(
        self,
        check_ins: Sequence[CheckIn],
        now: NowInput,
    ) -> WellnessSummary:
        lookback = self._settings.missed_lookback_days

        overviews = [
            MetricOverview(
                metric=metric,
                average=average_metric(check_ins, metric),
                missed=missed_count(check_ins, metric, now, lookback_days=lookback),
                series=daily_series(check_ins, metric, now, lookback_days=lookback),
            )
            for metric in WellnessMetric
        ]

        return WellnessSummary(
            metrics=overviews,
            total_check_ins=total_check_ins(check_ins),
            check_in_streaks=streaks(check_ins, now),
            reflection_streaks=reflection_streaks(check_ins, now),
            trend=weekly_trend(
                check_ins,
                now,
                window_days=self._settings.trend_window_days,
            ),
        )

    def build(
        self,
        profile: SobrietyProfile,
        check_ins: Sequence[CheckIn],
        now: NowInput,
        builtin_goals: Sequence[SavingsGoal] = BUILTIN_GOALS,
        custom_goals: Sequence[SavingsGoal] = (),
        purchasable_items: Sequence[PurchasableItem] = PURCHASABLE_ITEMS,
        money_map_stops: Sequence[MoneyMapStop] = MONEY_MAP_STOPS,
        active_goal: Optional[SavingsGoal] = None,
    ) -> DashboardView:
        """
        Build the dashboard view.

        Args:
            profile: The stored sobriety profile
            check_ins: All of the person's check-ins, any order
            now: The caller's current instant (date, datetime or ISO string)
            builtin_goals: Builtin goal catalog
            custom_goals: Goals the person created
            purchasable_items: Carousel catalog
            money_map_stops: Coach-defined savings waypoints, ascending
            active_goal: The goal shown on the headline card, if any

        Returns:
            DashboardView with hidden sections set to None
        """
        as_of = to_local_date(now)

        if self._audit_logger:
            result = self._validator.validate(profile, check_ins, now)
            self._audit_logger.log_validation_issues(as_of, result)

        recovery = None
        if profile.start_date is not None:
            recovery = self._build_recovery(profile, now)
        elif self._audit_logger:
            self._audit_logger.log_feature_gated(
                as_of, feature="recovery", reason="start_date not set"
            )

        savings = None
        goals = None
        if profile.savings_enabled:
            savings = self._build_savings(profile, now)
            goals = self._build_goals(
                profile,
                savings.total_saved,
                builtin_goals,
                custom_goals,
                purchasable_items,
                money_map_stops,
                active_goal,
            )
        elif self._audit_logger:
            reason = "start_date not set" if profile.start_date is None else "daily_cost not set"
            self._audit_logger.log_feature_gated(as_of, feature="savings", reason=reason)

        wellness = self._build_wellness(check_ins, now)

        if self._audit_logger:
            self._audit_logger.log_dashboard_built(
                as_of=as_of,
                elapsed_days=recovery.elapsed_days if recovery else None,
                total_saved=str(savings.total_saved) if savings else None,
                check_in_count=len(check_ins),
                trend_shown=wellness.trend is not None,
            )

        return DashboardView(
            as_of=as_of,
            recovery=recovery,
            savings=savings,
            goals=goals,
            wellness=wellness,
        )


def create_dashboard_builder(
    settings: Optional[EngineSettings] = None,
    configure: bool = True,
) -> DashboardBuilder:
    """
    Factory function to create a fully wired dashboard builder.

    Args:
        settings: Engine settings. If None, the cached application settings
                  are used.
        configure: Whether to configure structlog from the logging settings.
                   Set to False when the host application configures it.

    Returns:
        DashboardBuilder with a CalculationAuditor attached
    """
    if configure:
        configure_logging(get_settings().logging)

    return DashboardBuilder(
        settings=settings,
        audit_logger=CalculationAuditor(),
    )
