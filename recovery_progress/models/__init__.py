"""
Data Models Package

All pydantic models used by Recovery Progress: stored-record snapshots the
engine reads and the frozen view-models it returns.
"""

from recovery_progress.models.recovery import (
    CheckIn,
    DerivedMilestone,
    EveningData,
    Milestone,
    MorningData,
    RecoverySummary,
    SobrietyProfile,
)
from recovery_progress.models.savings import (
    ActiveGoalCard,
    CarouselEntry,
    CountdownEntry,
    CounterfactualCost,
    GoalProgress,
    GoalSource,
    GoalsSummary,
    JarStatus,
    MoneyMapEntry,
    MoneyMapStop,
    PurchasableItem,
    SavingsGoal,
    SavingsRates,
    SavingsSummary,
)
from recovery_progress.models.wellness import (
    TREND_METRICS,
    BetterDirection,
    MetricDelta,
    MetricOverview,
    Streak,
    StreakSummary,
    TrendSummary,
    WeeklyTrend,
    WellnessMetric,
    WellnessSummary,
)
from recovery_progress.models.validation import (
    ValidationIssue,
    ValidationResult,
)
from recovery_progress.models.dashboard import DashboardView

__all__ = [
    # Recovery models
    "CheckIn",
    "DerivedMilestone",
    "EveningData",
    "Milestone",
    "MorningData",
    "RecoverySummary",
    "SobrietyProfile",
    # Savings models
    "ActiveGoalCard",
    "CarouselEntry",
    "CountdownEntry",
    "CounterfactualCost",
    "GoalProgress",
    "GoalSource",
    "GoalsSummary",
    "JarStatus",
    "MoneyMapEntry",
    "MoneyMapStop",
    "PurchasableItem",
    "SavingsGoal",
    "SavingsRates",
    "SavingsSummary",
    # Wellness models
    "TREND_METRICS",
    "BetterDirection",
    "MetricDelta",
    "MetricOverview",
    "Streak",
    "StreakSummary",
    "TrendSummary",
    "WeeklyTrend",
    "WellnessMetric",
    "WellnessSummary",
    # Validation models
    "ValidationIssue",
    "ValidationResult",
    # Dashboard
    "DashboardView",
]
