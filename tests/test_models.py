"""
Tests for Recovery Progress

Test strategy:
1. Unit tests for individual components (models, engine, validator)
2. Integration tests for the dashboard builder
3. Every test passes "now" explicitly; nothing reads the system clock
"""

import pytest
from datetime import date
from decimal import Decimal

from pydantic import ValidationError

from recovery_progress.models import (
    TREND_METRICS,
    BetterDirection,
    CheckIn,
    GoalSource,
    MorningData,
    PurchasableItem,
    SavingsGoal,
    SobrietyProfile,
    ValidationIssue,
    ValidationResult,
    WellnessMetric,
)


class TestSobrietyProfile:
    """Tests for the stored profile model."""

    def test_profile_from_stored_names(self):
        """Test camelCase field names from storage are accepted."""
        profile = SobrietyProfile.model_validate({
            "sobrietyDate": "2024-01-01",
            "dailyCost": 20,
        })
        assert profile.start_date == date(2024, 1, 1)
        assert profile.daily_cost == Decimal("20")

    def test_start_date_is_local_calendar_date(self):
        """Test a YYYY-MM-DD string is never shifted by a timezone."""
        profile = SobrietyProfile(start_date="2024-03-10")
        assert profile.start_date == date(2024, 3, 10)

    def test_empty_start_date_means_not_set(self):
        """Test an empty string is treated as no date."""
        profile = SobrietyProfile.model_validate({"sobrietyDate": "", "dailyCost": 10})
        assert profile.start_date is None
        assert profile.savings_enabled is False

    def test_missing_cost_defaults_to_zero(self):
        """Test a null daily cost reads as 0, which disables savings."""
        profile = SobrietyProfile.model_validate({"sobrietyDate": "2024-01-01", "dailyCost": None})
        assert profile.daily_cost == Decimal("0")
        assert profile.savings_enabled is False

    def test_savings_enabled_with_date_and_cost(self):
        """Test savings are enabled only with both a date and a cost."""
        profile = SobrietyProfile(start_date="2024-01-01", daily_cost=Decimal("15"))
        assert profile.savings_enabled is True

    def test_negative_cost_rejected(self):
        """Test that negative daily costs are rejected."""
        with pytest.raises(ValidationError):
            SobrietyProfile(start_date="2024-01-01", daily_cost=Decimal("-5"))

    def test_malformed_date_rejected(self):
        """Test that a malformed date string is rejected."""
        with pytest.raises(ValidationError):
            SobrietyProfile(start_date="01/02/2024")

    def test_profile_is_frozen(self):
        """Test profiles cannot be mutated after construction."""
        profile = SobrietyProfile(start_date="2024-01-01", daily_cost=Decimal("15"))
        with pytest.raises(ValidationError):
            profile.daily_cost = Decimal("20")


class TestCheckInModels:
    """Tests for check-in normalization."""

    def test_legacy_morning_names_normalized(self):
        """Test anxietyLevel, sleepQuality and cravings map to canonical names."""
        check_in = CheckIn.model_validate({
            "date": "2024-01-05",
            "morningData": {
                "mood": 7,
                "cravings": 2,
                "anxietyLevel": 4,
                "sleepQuality": 6,
            },
        })
        assert check_in.morning_data.mood == 7
        assert check_in.morning_data.craving == 2
        assert check_in.morning_data.anxiety == 4
        assert check_in.morning_data.sleep == 6

    def test_null_canonical_falls_back_to_legacy(self):
        """Test a null canonical score is filled from its legacy name."""
        check_in = CheckIn.model_validate({
            "date": "2024-01-05",
            "morningData": {
                "anxiety": None,
                "anxietyLevel": 6,
                "sleep": None,
                "sleepQuality": 8,
                "craving": None,
                "cravings": 3,
            },
        })
        assert check_in.morning_data.anxiety == 6
        assert check_in.morning_data.sleep == 8
        assert check_in.morning_data.craving == 3
        assert WellnessMetric.ANXIETY(check_in) == 6

    def test_reported_canonical_wins_over_legacy(self):
        """Test a reported canonical score is kept over a legacy one."""
        check_in = CheckIn.model_validate({
            "date": "2024-01-05",
            "morningData": {"anxiety": 2, "anxietyLevel": 9},
        })
        assert check_in.morning_data.anxiety == 2

    def test_evening_sleep_moves_to_morning(self):
        """Test sleepQuality stored on the evening half is read as morning sleep."""
        check_in = CheckIn.model_validate({
            "date": "2024-01-05",
            "morningData": {"mood": 5},
            "eveningData": {"overallDay": 8, "sleepQuality": 7},
        })
        assert check_in.morning_data.sleep == 7
        assert check_in.evening_data.overall_day == 8

    def test_evening_sleep_does_not_override_morning(self):
        """Test an existing morning sleep score wins over a legacy evening one."""
        check_in = CheckIn.model_validate({
            "date": "2024-01-05",
            "morningData": {"sleep": 3},
            "eveningData": {"sleepQuality": 9},
        })
        assert check_in.morning_data.sleep == 3

    def test_evening_sleep_creates_morning_half(self):
        """Test a legacy evening sleep score creates the morning half if missing."""
        check_in = CheckIn.model_validate({
            "date": "2024-01-05",
            "eveningData": {"sleepQuality": 6},
        })
        assert check_in.has_morning
        assert check_in.morning_data.sleep == 6

    def test_timestamp_reduced_to_wall_clock_date(self):
        """Test a late-evening timestamp keeps its own calendar date."""
        check_in = CheckIn.model_validate({"createdAt": "2024-01-05T23:30:00-05:00"})
        assert check_in.day == date(2024, 1, 5)

    def test_score_out_of_range_rejected(self):
        """Test that scores above 10 are rejected."""
        with pytest.raises(ValidationError):
            MorningData(mood=11)

    def test_unreported_metric_stays_none(self):
        """Test a skipped metric is None, not zero."""
        check_in = CheckIn(day=date(2024, 1, 5), morning_data=MorningData(mood=0))
        assert check_in.morning_data.mood == 0
        assert check_in.morning_data.craving is None
        assert check_in.has_evening is False


class TestSavingsModels:
    """Tests for goal and item catalog models."""

    def test_goal_accepts_cost_alias(self):
        """Test custom goals stored with 'cost' are accepted."""
        goal = SavingsGoal.model_validate({
            "id": "g1",
            "name": "  New Phone  ",
            "cost": "600",
            "source": "custom",
        })
        assert goal.amount == Decimal("600")
        assert goal.name == "New Phone"
        assert goal.source == GoalSource.CUSTOM

    def test_goal_amount_must_be_positive(self):
        """Test that a zero goal amount is rejected."""
        with pytest.raises(ValidationError):
            SavingsGoal(id="g1", name="Nothing", amount=Decimal("0"))

    def test_item_cost_range_validation(self):
        """Test an item's maximum cost cannot be below its minimum."""
        with pytest.raises(ValueError, match="Maximum cost cannot be below minimum cost"):
            PurchasableItem(
                id="tv",
                name="TV",
                min_cost=Decimal("500"),
                max_cost=Decimal("100"),
            )


class TestWellnessMetrics:
    """Tests for metric definitions."""

    def test_trend_metrics(self):
        """Test the weekly trend compares the four morning metrics."""
        assert TREND_METRICS == (
            WellnessMetric.MOOD,
            WellnessMetric.CRAVING,
            WellnessMetric.ANXIETY,
            WellnessMetric.SLEEP,
        )

    def test_better_direction(self):
        """Test craving and anxiety improve downwards, the rest upwards."""
        assert WellnessMetric.MOOD.better_direction == BetterDirection.HIGHER
        assert WellnessMetric.SLEEP.better_direction == BetterDirection.HIGHER
        assert WellnessMetric.CRAVING.better_direction == BetterDirection.LOWER
        assert WellnessMetric.ANXIETY.better_direction == BetterDirection.LOWER

    def test_extract_overall_day_from_evening(self):
        """Test overall_day is read from the evening half."""
        check_in = CheckIn.model_validate({
            "date": "2024-01-05",
            "eveningData": {"overallDay": 9},
        })
        assert WellnessMetric.OVERALL_DAY(check_in) == 9
        assert WellnessMetric.MOOD(check_in) is None


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_validation_result_has_errors(self):
        """Test has_errors property."""
        result = ValidationResult(
            profile_valid=False,
            check_ins_valid=True,
            recovery_enabled=True,
            savings_enabled=True,
            issues=[
                ValidationIssue(
                    field="start_date",
                    issue_type="future_date",
                    message="Sobriety date is in the future",
                    severity="error",
                ),
            ],
        )
        assert result.has_errors
        assert result.error_count == 1
        assert result.is_valid is False

    def test_validation_result_warnings_only(self):
        """Test result with only warnings."""
        result = ValidationResult(
            profile_valid=True,
            check_ins_valid=True,
            recovery_enabled=True,
            savings_enabled=True,
            issues=[
                ValidationIssue(
                    field="check_ins",
                    issue_type="duplicate_day",
                    message="2 check-ins are recorded for 2024-01-05",
                    severity="warning",
                ),
            ],
            warnings=["2 check-ins are recorded for 2024-01-05"],
        )
        assert not result.has_errors
        assert result.error_count == 0
        assert result.is_valid

    def test_issue_severity_is_constrained(self):
        """Test severity must be error, warning or info."""
        with pytest.raises(ValidationError):
            ValidationIssue(
                field="x",
                issue_type="y",
                message="z",
                severity="fatal",
            )
