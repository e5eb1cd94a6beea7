"""Dashboard view-model: one immutable snapshot per render pass."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from recovery_progress.models.recovery import RecoverySummary
from recovery_progress.models.savings import GoalsSummary, SavingsSummary
from recovery_progress.models.wellness import WellnessSummary


class DashboardView(BaseModel):
    """
    Everything the presentation layer renders.

    A None section means the feature is hidden: recovery needs a sobriety
    date, savings and goals also need a daily cost above zero.
    """
    model_config = ConfigDict(frozen=True)

    as_of: date
    recovery: Optional[RecoverySummary] = None
    savings: Optional[SavingsSummary] = None
    goals: Optional[GoalsSummary] = None
    wellness: WellnessSummary
