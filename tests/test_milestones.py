"""Tests for the milestone table."""

from datetime import date

from recovery_progress.catalog import MILESTONES
from recovery_progress.engine.milestones import (
    milestone_progress,
    milestones,
    next_milestone,
    upcoming,
)


class TestMilestones:
    """Tests for derived milestone state."""

    def test_catalog_is_ascending(self):
        """Test the catalog is ordered by threshold."""
        thresholds = [m.threshold_days for m in MILESTONES]
        assert thresholds == sorted(thresholds)
        assert thresholds[0] == 7
        assert thresholds[-1] == 3650

    def test_ten_days_in(self):
        """Test state after 10 sober days."""
        derived = milestones("2024-01-01", "2024-01-11")

        week, two_weeks = derived[0], derived[1]
        assert week.achieved is True
        assert week.days_until == 0
        assert two_weeks.achieved is False
        assert two_weeks.days_until == 4
        assert two_weeks.target_date == date(2024, 1, 15)

    def test_achieved_on_threshold_day(self):
        """Test a milestone is achieved on exactly its threshold day."""
        derived = milestones("2024-01-01", "2024-01-08")
        assert derived[0].achieved is True

    def test_monotonic(self):
        """Test a later milestone is never achieved before an earlier one."""
        for now in ("2024-01-01", "2024-02-15", "2025-07-01", "2031-01-01"):
            derived = milestones("2024-01-01", now)
            flags = [m.achieved for m in derived]
            assert flags == sorted(flags, reverse=True)

    def test_next_and_upcoming(self):
        """Test the next milestone and the upcoming list."""
        derived = milestones("2024-01-01", "2024-01-11")

        assert next_milestone(derived).id == "2-weeks"
        assert [m.id for m in upcoming(derived, 3)] == ["2-weeks", "3-weeks", "1-month"]
        assert upcoming(derived, 0) == []

    def test_all_achieved(self):
        """Test everything achieved after ten years."""
        derived = milestones("2000-01-01", "2024-01-01")

        assert next_milestone(derived) is None
        assert upcoming(derived, 3) == []
        assert milestone_progress(derived, 8766) == 100

    def test_progress_between_milestones(self):
        """Test progress from 1 week (7) towards 2 weeks (14) at day 10."""
        derived = milestones("2024-01-01", "2024-01-11")
        assert milestone_progress(derived, 10) == 43

    def test_progress_on_day_zero(self):
        """Test nothing achieved on the first day."""
        derived = milestones("2024-01-01", "2024-01-01")
        assert not any(m.achieved for m in derived)
        assert milestone_progress(derived, 0) == 0
