"""Tests for the savings projector."""

import pytest
from decimal import Decimal

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


class TestTotals:
    """Tests for money saved."""

    def test_total_saved(self):
        """Test 10 days at 20 a day is 200."""
        assert total_saved(10, 20) == Decimal("200")

    def test_total_saved_is_exact(self):
        """Test no float noise creeps into fractional costs."""
        assert total_saved(3, 0.1) == Decimal("0.3")

    def test_negative_cost_rejected(self):
        """Test a negative cost is a programming error."""
        with pytest.raises(InvalidDailyCostError):
            total_saved(10, -1)

    def test_window_saved(self):
        """Test savings counted only inside the month window."""
        saved = window_saved("2023-12-20", 10, "2024-01-01", "2024-02-01", "2024-01-11")
        assert saved == Decimal("100")

    def test_savings_rates(self):
        """Test weekly, monthly and yearly projections."""
        rates = savings_rates(10)
        assert rates.daily == Decimal("10")
        assert rates.weekly == Decimal("70")
        assert rates.monthly == Decimal("300")
        assert rates.yearly == Decimal("3650")


class TestRealityCheck:
    """Tests for the counterfactual cost model."""

    def test_hundred_days_at_fifty(self):
        """Test the documented example."""
        cost = counterfactual_cost(100, 50)
        assert cost.principal == Decimal("5000")
        assert cost.interest == Decimal("1700")
        assert cost.health_cost == Decimal("400")
        assert cost.total == Decimal("7100")

    def test_interest_rounds_half_up(self):
        """Test 8.5 rounds to 9, not to the even 8."""
        cost = counterfactual_cost(25, 1)
        assert cost.interest == Decimal("9")

    def test_zero_days(self):
        """Test day zero costs nothing."""
        cost = counterfactual_cost(0, 50)
        assert cost.total == Decimal("0")

    def test_net_gain_adds_both(self):
        """Test net gain is savings plus the counterfactual total."""
        assert net_gain(Decimal("5000"), Decimal("7100")) == Decimal("12100")


class TestJar:
    """Tests for the savings jar comparison."""

    def test_behind(self):
        """Test a jar short of the projection."""
        jar = jar_status(150, 200)
        assert jar.on_track is False
        assert jar.shortfall == Decimal("50")

    def test_ahead(self):
        """Test a jar ahead of the projection has no shortfall."""
        jar = jar_status(300, 200)
        assert jar.on_track is True
        assert jar.shortfall == Decimal("0")


class TestSavingsSummary:
    """Tests for the combined savings figures."""

    def test_summary(self):
        """Test month and year windows on 2024-03-15."""
        summary = savings_summary("2024-01-01", 20, "2024-03-15")

        assert summary.total_saved == Decimal("1480")
        assert summary.days_this_month == 14
        assert summary.saved_this_month == Decimal("280")
        assert summary.days_this_year == 74
        assert summary.saved_this_year == Decimal("1480")
        assert summary.net_gain == summary.total_saved + summary.reality_check.total
        assert summary.jar is None

    def test_summary_with_jar(self):
        """Test the jar is compared against total savings."""
        summary = savings_summary("2024-01-01", 20, "2024-03-15", actual_saved=Decimal("1000"))
        assert summary.jar.shortfall == Decimal("480")

    def test_summary_requires_cost(self):
        """Test a zero cost cannot produce a summary."""
        with pytest.raises(InvalidDailyCostError):
            savings_summary("2024-01-01", 0, "2024-03-15")
