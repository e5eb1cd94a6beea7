"""
Wellness Data Models

Metric definitions for check-in scores and the view-models produced by the
wellness averages, the week-over-week trend and the streak counters.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recovery_progress.models.recovery import CheckIn


# =============================================================================
# ENUMS
# =============================================================================

class BetterDirection(str, Enum):
    """Which way a score moves when things get better."""
    HIGHER = "higher"
    LOWER = "lower"


class WellnessMetric(str, Enum):
    """
    A score reported on a check-in.

    Each metric knows where it lives on a record and which direction
    counts as an improvement.
    """
    MOOD = "mood"
    CRAVING = "craving"
    ANXIETY = "anxiety"
    SLEEP = "sleep"
    OVERALL_DAY = "overall_day"

    @property
    def better_direction(self) -> BetterDirection:
        if self in (WellnessMetric.CRAVING, WellnessMetric.ANXIETY):
            return BetterDirection.LOWER
        return BetterDirection.HIGHER

    def extract(self, check_in: CheckIn) -> Optional[float]:
        """Return this metric's score from a check-in, or None if unreported."""
        if self is WellnessMetric.OVERALL_DAY:
            if check_in.evening_data is None:
                return None
            return check_in.evening_data.overall_day

        if check_in.morning_data is None:
            return None
        return getattr(check_in.morning_data, self.value)

    def __call__(self, check_in: CheckIn) -> Optional[float]:
        return self.extract(check_in)


TREND_METRICS: tuple[WellnessMetric, ...] = (
    WellnessMetric.MOOD,
    WellnessMetric.CRAVING,
    WellnessMetric.ANXIETY,
    WellnessMetric.SLEEP,
)


# =============================================================================
# TREND MODELS
# =============================================================================

class MetricDelta(BaseModel):
    """One metric compared across two windows."""
    model_config = ConfigDict(frozen=True)

    metric: WellnessMetric
    this_week: Optional[float] = None
    last_week: Optional[float] = None
    delta: Optional[float] = Field(
        default=None,
        description="Polarity-adjusted change; positive always means improved"
    )

    @property
    def improved(self) -> bool:
        return self.delta is not None and self.delta > 0


class TrendSummary(BaseModel):
    """How many measured metrics improved, and the overall verdict."""
    model_config = ConfigDict(frozen=True)

    improved_count: int = Field(..., ge=0)
    total_measured: int = Field(..., gt=0)
    is_improving: bool


class WeeklyTrend(BaseModel):
    """The week-over-week card: per-metric deltas plus the verdict."""
    model_config = ConfigDict(frozen=True)

    this_week_start: date
    last_week_start: date
    deltas: list[MetricDelta] = Field(default_factory=list)
    summary: TrendSummary


# =============================================================================
# STREAK MODELS
# =============================================================================

class Streak(BaseModel):
    """A run of consecutive calendar days."""
    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    length: int = Field(..., gt=0)


class StreakSummary(BaseModel):
    """All runs, chronologically, with the longest and the live one."""
    model_config = ConfigDict(frozen=True)

    longest: int = Field(default=0, ge=0)
    current: int = Field(default=0, ge=0)
    streaks: list[Streak] = Field(default_factory=list)


# =============================================================================
# DASHBOARD SECTION
# =============================================================================

class MetricOverview(BaseModel):
    """Average, gaps and graph series for one metric."""
    model_config = ConfigDict(frozen=True)

    metric: WellnessMetric
    average: Optional[float] = None
    missed: int = Field(..., ge=0)
    series: list[Optional[float]] = Field(default_factory=list)


class WellnessSummary(BaseModel):
    """Everything the wellness tab shows."""
    model_config = ConfigDict(frozen=True)

    metrics: list[MetricOverview] = Field(default_factory=list)
    total_check_ins: int = Field(..., ge=0)
    check_in_streaks: StreakSummary
    reflection_streaks: StreakSummary
    trend: Optional[WeeklyTrend] = None

    def for_metric(self, metric: WellnessMetric) -> Optional[MetricOverview]:
        for overview in self.metrics:
            if overview.metric is metric:
                return overview
        return None
