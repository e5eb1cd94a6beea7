"""
Savings Data Models

Goal and item catalogs the savings features read, plus the view-models the
savings and goal calculations produce.

All money is Decimal. The engine never rounds money except where a
calculation says so explicitly (the reality check model).
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)


# =============================================================================
# ENUMS
# =============================================================================

class GoalSource(str, Enum):
    """Where a savings goal came from."""
    BUILTIN = "builtin"
    CUSTOM = "custom"


# =============================================================================
# CATALOG MODELS
# =============================================================================

class SavingsGoal(BaseModel):
    """
    Something the user is saving towards.

    Builtin goals come from the shared catalog; custom goals are created by
    the user. The countdown list treats both the same way.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    icon: str = Field(default="target")
    amount: Decimal = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("amount", "cost"),
        description="Target amount"
    )
    source: GoalSource = Field(default=GoalSource.BUILTIN)


class PurchasableItem(BaseModel):
    """An item shown in the "your savings can buy" carousel."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    icon: str = Field(default="gift")
    min_cost: Decimal = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("min_cost", "minCost"),
    )
    max_cost: Decimal = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("max_cost", "maxCost"),
    )

    @model_validator(mode='after')
    def validate_cost_range(self) -> 'PurchasableItem':
        """Validate the price range is ordered."""
        if self.max_cost < self.min_cost:
            raise ValueError("Maximum cost cannot be below minimum cost")
        return self


class MoneyMapStop(BaseModel):
    """A coach-defined savings waypoint."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    icon: str = Field(default="map-pin")
    amount: Decimal = Field(..., gt=0)


# =============================================================================
# CALCULATED VIEW-MODELS
# =============================================================================

class CounterfactualCost(BaseModel):
    """
    The "if you'd kept using" reality check.

    interest is a flat 34% surcharge on the principal. It approximates
    carrying the spend on a 20% APR card; it is not a compounding model.
    """
    model_config = ConfigDict(frozen=True)

    principal: Decimal
    interest: Decimal
    health_cost: Decimal
    total: Decimal


class SavingsRates(BaseModel):
    """Daily cost projected over common periods."""
    model_config = ConfigDict(frozen=True)

    daily: Decimal
    weekly: Decimal
    monthly: Decimal
    yearly: Decimal


class JarStatus(BaseModel):
    """Money actually set aside compared with the projected savings."""
    model_config = ConfigDict(frozen=True)

    actual: Decimal
    projected: Decimal
    on_track: bool
    shortfall: Decimal = Field(
        ...,
        ge=0,
        description="How much is missing from the jar (0 when on track)"
    )


class GoalProgress(BaseModel):
    """Percent complete and days to go for one target amount."""
    model_config = ConfigDict(frozen=True)

    percent: int = Field(..., ge=0, le=100)
    days_away: int = Field(..., ge=0)

    @property
    def unlocked(self) -> bool:
        return self.days_away == 0


class CountdownEntry(BaseModel):
    """A goal annotated with its progress, as listed in "coming soon"."""
    model_config = ConfigDict(frozen=True)

    goal: SavingsGoal
    percent: int = Field(..., ge=0, le=100)
    days_away: int = Field(..., ge=0)

    @property
    def unlocked(self) -> bool:
        return self.days_away == 0


class ActiveGoalCard(BaseModel):
    """The headline goal the user picked."""
    model_config = ConfigDict(frozen=True)

    goal: SavingsGoal
    percent: int = Field(..., ge=0, le=100)
    days_away: int = Field(..., ge=0)
    complete: bool


class CarouselEntry(BaseModel):
    """A purchasable item the user is getting close to affording."""
    model_config = ConfigDict(frozen=True)

    item: PurchasableItem
    percent: int = Field(..., ge=0, le=100)
    can_afford: bool
    days_away: int = Field(..., ge=0)


class MoneyMapEntry(BaseModel):
    """A money map stop with its reached/current state."""
    model_config = ConfigDict(frozen=True)

    stop: MoneyMapStop
    achieved: bool
    is_current: bool


class SavingsSummary(BaseModel):
    """Every savings number on the dashboard."""
    model_config = ConfigDict(frozen=True)

    total_saved: Decimal
    saved_this_month: Decimal
    days_this_month: int = Field(..., ge=0)
    saved_this_year: Decimal
    days_this_year: int = Field(..., ge=0)
    rates: SavingsRates
    reality_check: CounterfactualCost
    net_gain: Decimal
    jar: Optional[JarStatus] = None


class GoalsSummary(BaseModel):
    """Goal cards, the countdown list, the carousel and the money map."""
    model_config = ConfigDict(frozen=True)

    active_goal: Optional[ActiveGoalCard] = None
    countdown: list[CountdownEntry] = Field(default_factory=list)
    carousel: list[CarouselEntry] = Field(default_factory=list)
    money_map: list[MoneyMapEntry] = Field(default_factory=list)
