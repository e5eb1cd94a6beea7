"""
Static Catalogs

The milestone ladder is fixed product data. The goal, item and money map
catalogs are defaults; deployments that keep their own catalogs pass them to
the engine instead.

Catalog order matters: milestones and money map stops are ascending, and the
engine relies on that order rather than re-sorting.
"""

from decimal import Decimal

from recovery_progress.models.recovery import Milestone
from recovery_progress.models.savings import (
    GoalSource,
    MoneyMapStop,
    PurchasableItem,
    SavingsGoal,
)


MILESTONES: tuple[Milestone, ...] = (
    Milestone(id="1-week", title="1 Week", icon="calendar", threshold_days=7),
    Milestone(id="2-weeks", title="2 Weeks", icon="calendar", threshold_days=14),
    Milestone(id="3-weeks", title="3 Weeks", icon="calendar", threshold_days=21),
    Milestone(id="1-month", title="1 Month", icon="award", threshold_days=30),
    Milestone(id="2-months", title="2 Months", icon="award", threshold_days=60),
    Milestone(id="3-months", title="3 Months", icon="star", threshold_days=90),
    Milestone(id="6-months", title="6 Months", icon="star", threshold_days=180),
    Milestone(id="1-year", title="1 Year", icon="trophy", threshold_days=365),
    Milestone(id="18-months", title="18 Months", icon="trophy", threshold_days=547),
    Milestone(id="2-years", title="2 Years", icon="medal", threshold_days=730),
    Milestone(id="3-years", title="3 Years", icon="medal", threshold_days=1095),
    Milestone(id="5-years", title="5 Years", icon="crown", threshold_days=1825),
    Milestone(id="10-years", title="10 Years", icon="crown", threshold_days=3650),
)


BUILTIN_GOALS: tuple[SavingsGoal, ...] = (
    SavingsGoal(id="nice-dinner", name="Nice Dinner Out", icon="utensils",
                amount=Decimal("100"), source=GoalSource.BUILTIN),
    SavingsGoal(id="concert", name="Concert Tickets", icon="music",
                amount=Decimal("250"), source=GoalSource.BUILTIN),
    SavingsGoal(id="emergency-fund", name="Emergency Fund", icon="shield",
                amount=Decimal("1000"), source=GoalSource.BUILTIN),
    SavingsGoal(id="weekend-trip", name="Weekend Getaway", icon="plane",
                amount=Decimal("1500"), source=GoalSource.BUILTIN),
    SavingsGoal(id="vacation", name="Dream Vacation", icon="palmtree",
                amount=Decimal("5000"), source=GoalSource.BUILTIN),
)


PURCHASABLE_ITEMS: tuple[PurchasableItem, ...] = (
    PurchasableItem(id="gym", name="Gym Membership", icon="dumbbell",
                    min_cost=Decimal("30"), max_cost=Decimal("60")),
    PurchasableItem(id="headphones", name="Wireless Headphones", icon="headphones",
                    min_cost=Decimal("150"), max_cost=Decimal("350")),
    PurchasableItem(id="bike", name="New Bicycle", icon="bike",
                    min_cost=Decimal("400"), max_cost=Decimal("1200")),
    PurchasableItem(id="laptop", name="Laptop", icon="laptop",
                    min_cost=Decimal("800"), max_cost=Decimal("2000")),
    PurchasableItem(id="car-down-payment", name="Car Down Payment", icon="car",
                    min_cost=Decimal("3000"), max_cost=Decimal("6000")),
)


MONEY_MAP_STOPS: tuple[MoneyMapStop, ...] = (
    MoneyMapStop(id="first-100", name="First $100", icon="sprout", amount=Decimal("100")),
    MoneyMapStop(id="bills-caught-up", name="Bills Caught Up", icon="receipt",
                 amount=Decimal("500")),
    MoneyMapStop(id="cushion", name="Safety Cushion", icon="shield",
                 amount=Decimal("1000")),
    MoneyMapStop(id="fresh-start", name="Fresh Start Fund", icon="sunrise",
                 amount=Decimal("5000")),
)
