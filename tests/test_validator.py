"""Tests for the two-stage profile validator."""

import pytest
from datetime import date
from decimal import Decimal

from recovery_progress.config import EngineSettings
from recovery_progress.models import CheckIn, EveningData, MorningData, SobrietyProfile
from recovery_progress.validation import ProfileValidator


NOW = "2024-03-15"


@pytest.fixture
def validator():
    return ProfileValidator(EngineSettings(max_daily_cost=500.0, future_date_tolerance_days=0))


def _issue_types(result):
    return {(issue.field, issue.issue_type) for issue in result.issues}


class TestProfileStage:
    """Tests for stage 1."""

    def test_clean_profile(self, validator):
        """Test a complete profile passes without issues."""
        profile = SobrietyProfile(start_date="2024-01-01", daily_cost=Decimal("20"))
        result = validator.validate(profile, [], NOW)

        assert result.is_valid
        assert result.issues == []
        assert result.recovery_enabled
        assert result.savings_enabled
        assert validator.get_user_friendly_summary(result) == "✅ Everything looks good."

    def test_future_start_date(self, validator):
        """Test a start date after today is an error."""
        profile = SobrietyProfile(start_date="2024-04-01", daily_cost=Decimal("20"))
        result = validator.validate(profile, [], NOW)

        assert not result.profile_valid
        assert ("start_date", "future_date") in _issue_types(result)
        assert "❌" in validator.get_user_friendly_summary(result)

    def test_future_tolerance(self):
        """Test the tolerance allows a start date slightly ahead."""
        validator = ProfileValidator(EngineSettings(future_date_tolerance_days=1))
        profile = SobrietyProfile(start_date="2024-03-16", daily_cost=Decimal("20"))
        assert validator.validate(profile, [], NOW).profile_valid

    def test_missing_start_date(self, validator):
        """Test a missing date is a warning that disables recovery."""
        profile = SobrietyProfile(daily_cost=Decimal("20"))
        result = validator.validate(profile, [], NOW)

        assert result.profile_valid
        assert not result.recovery_enabled
        assert ("start_date", "missing") in _issue_types(result)
        assert result.warnings

    def test_zero_cost_is_info(self, validator):
        """Test an unset cost hides savings but is not a problem."""
        profile = SobrietyProfile(start_date="2024-01-01")
        result = validator.validate(profile, [], NOW)

        assert result.is_valid
        assert not result.savings_enabled
        assert ("daily_cost", "not_set") in _issue_types(result)

    def test_implausible_cost(self, validator):
        """Test a very high cost is flagged for review."""
        profile = SobrietyProfile(start_date="2024-01-01", daily_cost=Decimal("900"))
        result = validator.validate(profile, [], NOW)

        assert result.is_valid
        assert ("daily_cost", "suspicious_value") in _issue_types(result)

    def test_never_modifies_profile(self, validator):
        """Test validation leaves the data untouched."""
        profile = SobrietyProfile(start_date="2024-04-01", daily_cost=Decimal("900"))
        validator.validate(profile, [], NOW)
        assert profile.start_date == date(2024, 4, 1)
        assert profile.daily_cost == Decimal("900")


class TestCheckInStage:
    """Tests for stage 2."""

    def test_duplicate_days(self, validator):
        """Test two check-ins on one day are flagged."""
        profile = SobrietyProfile(start_date="2024-01-01", daily_cost=Decimal("20"))
        check_ins = [
            CheckIn(day="2024-03-10", morning_data=MorningData(mood=5)),
            CheckIn(day="2024-03-10", morning_data=MorningData(mood=6)),
        ]
        result = validator.validate(profile, check_ins, NOW)

        assert result.check_ins_valid
        assert ("check_ins", "duplicate_day") in _issue_types(result)

    def test_future_check_in(self, validator):
        """Test a check-in dated after today is an error."""
        profile = SobrietyProfile(start_date="2024-01-01", daily_cost=Decimal("20"))
        check_ins = [CheckIn(day="2024-03-20", evening_data=EveningData(overall_day=5))]
        result = validator.validate(profile, check_ins, NOW)

        assert not result.check_ins_valid
        assert result.has_errors

    def test_before_start_and_empty(self, validator):
        """Test early and empty check-ins are reported as info."""
        profile = SobrietyProfile(start_date="2024-02-01", daily_cost=Decimal("20"))
        check_ins = [CheckIn(day="2024-01-15")]
        result = validator.validate(profile, check_ins, NOW)

        assert result.is_valid
        types = _issue_types(result)
        assert ("check_ins", "before_start_date") in types
        assert ("check_ins", "empty") in types
