"""
Recovery Data Models

Snapshots of what the persistence layer stores about a person in recovery:
the sobriety profile and the daily check-ins.

DESIGN DECISION: Every model is frozen. The engine receives a snapshot per
computation and never mutates it.

Legacy check-in field names (anxietyLevel, sleepQuality) are normalized to the
canonical ones here, once, when a record is read. Nothing downstream knows the
old names existed.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from recovery_progress.dates import parse_calendar_date, to_local_date


# =============================================================================
# PROFILE
# =============================================================================

class SobrietyProfile(BaseModel):
    """
    The user-owned facts every savings and milestone number derives from.

    start_date is the local calendar date the streak began. It is parsed by
    splitting YYYY-MM-DD, never through a timezone-aware constructor.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_date: Optional[date] = Field(
        default=None,
        validation_alias=AliasChoices("start_date", "sobrietyDate", "startDate"),
        description="Local calendar date the sobriety period began"
    )
    daily_cost: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        validation_alias=AliasChoices("daily_cost", "dailyCost"),
        description="Average daily spend avoided, in the user's currency"
    )
    actual_saved: Optional[Decimal] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("actual_saved", "actualMoneySaved"),
        description="Money the user reports having actually set aside"
    )

    @field_validator('start_date', mode='before')
    @classmethod
    def parse_start_date(cls, v: Any) -> Any:
        """Interpret YYYY-MM-DD strings as local calendar dates."""
        if isinstance(v, str):
            if not v.strip():
                return None
            return parse_calendar_date(v)
        return v

    @field_validator('daily_cost', mode='before')
    @classmethod
    def default_missing_cost(cls, v: Any) -> Any:
        # Stored profiles use null for "not set yet"
        return Decimal("0") if v is None else v

    @property
    def savings_enabled(self) -> bool:
        """Savings and goal features are shown only with a date and a cost."""
        return self.start_date is not None and self.daily_cost > 0


# =============================================================================
# CHECK-INS
# =============================================================================

_LEGACY_MORNING_FIELDS = (
    ("craving", "cravings"),
    ("anxiety", "anxietyLevel"),
    ("sleep", "sleepQuality"),
)


class MorningData(BaseModel):
    """Morning check-in scores, each 0-10 and each optional."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mood: Optional[float] = Field(default=None, ge=0, le=10)
    craving: Optional[float] = Field(
        default=None,
        ge=0,
        le=10,
        validation_alias=AliasChoices("craving", "cravings"),
    )
    anxiety: Optional[float] = Field(
        default=None,
        ge=0,
        le=10,
        validation_alias=AliasChoices("anxiety", "anxietyLevel"),
    )
    sleep: Optional[float] = Field(
        default=None,
        ge=0,
        le=10,
        validation_alias=AliasChoices("sleep", "sleepQuality"),
    )

    @model_validator(mode='before')
    @classmethod
    def prefer_reported_legacy_values(cls, data: Any) -> Any:
        """
        Fall back to the legacy name when the canonical one is null.

        Records written during the rename can hold both keys, e.g.
        anxiety=None alongside anxietyLevel=6.
        """
        if not isinstance(data, dict):
            return data

        migrated = dict(data)
        for canonical, legacy in _LEGACY_MORNING_FIELDS:
            if migrated.get(canonical) is None and legacy in migrated:
                migrated[canonical] = migrated.pop(legacy)
        return migrated


class EveningData(BaseModel):
    """Evening reflection."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    overall_day: Optional[float] = Field(
        default=None,
        ge=0,
        le=10,
        validation_alias=AliasChoices("overall_day", "overallDay"),
    )
    reflection: Optional[str] = None
    gratitude: Optional[str] = None
    challenges: Optional[str] = None


class CheckIn(BaseModel):
    """
    One day's check-in record.

    Either half may be missing. A metric that was not reported stays None;
    it is never stored as zero.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    day: date = Field(
        ...,
        validation_alias=AliasChoices("day", "date", "createdAt", "created_at"),
        description="Local calendar date of the check-in"
    )
    morning_data: Optional[MorningData] = Field(
        default=None,
        validation_alias=AliasChoices("morning_data", "morningData"),
    )
    evening_data: Optional[EveningData] = Field(
        default=None,
        validation_alias=AliasChoices("evening_data", "eveningData"),
    )

    @model_validator(mode='before')
    @classmethod
    def migrate_evening_sleep(cls, data: Any) -> Any:
        """
        Older records kept sleepQuality on the evening half.

        Move it to the morning half unless the morning already reports sleep.
        """
        if not isinstance(data, dict):
            return data

        evening_key = "eveningData" if "eveningData" in data else "evening_data"
        evening = data.get(evening_key)
        if not isinstance(evening, dict) or "sleepQuality" not in evening:
            return data

        morning_key = "morningData" if "morningData" in data else "morning_data"
        morning = data.get(morning_key)
        evening = dict(evening)
        sleep = evening.pop("sleepQuality")

        migrated = dict(data)
        migrated[evening_key] = evening
        if morning is None or isinstance(morning, dict):
            morning = dict(morning or {})
            if morning.get("sleep") is None and morning.get("sleepQuality") is None:
                morning["sleep"] = sleep
            migrated[morning_key] = morning
        return migrated

    @field_validator('day', mode='before')
    @classmethod
    def reduce_to_calendar_date(cls, v: Any) -> Any:
        """Accept a plain date, a timestamp, or an ISO string."""
        if isinstance(v, (str, date)):
            return to_local_date(v)
        return v

    @property
    def has_morning(self) -> bool:
        return self.morning_data is not None

    @property
    def has_evening(self) -> bool:
        return self.evening_data is not None


# =============================================================================
# MILESTONES
# =============================================================================

class Milestone(BaseModel):
    """A named day-count threshold from the static catalog."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    icon: str = Field(default="award")
    threshold_days: int = Field(..., gt=0)


class DerivedMilestone(Milestone):
    """
    A catalog milestone evaluated against one sobriety start date.

    Recomputed from elapsed days on every call, never updated in place.
    """

    achieved: bool
    days_until: int = Field(..., ge=0)
    target_date: date


class RecoverySummary(BaseModel):
    """Day count and milestone state for the dashboard."""
    model_config = ConfigDict(frozen=True)

    start_date: date
    elapsed_days: int = Field(..., ge=0)
    milestones: list[DerivedMilestone] = Field(default_factory=list)
    next_milestone: Optional[DerivedMilestone] = None
    upcoming: list[DerivedMilestone] = Field(default_factory=list)
    progress_to_next: int = Field(
        ...,
        ge=0,
        le=100,
        description="Percent of the way from the last achieved milestone to the next"
    )
