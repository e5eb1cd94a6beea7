"""
Two-Stage Profile Validation

DESIGN DECISION: Validation happens in two distinct stages:

STAGE 1 - PROFILE VALIDATION:
- Sobriety date presence
- Future start date detection
- Daily cost not set, or implausibly high

STAGE 2 - CHECK-IN VALIDATION:
- Future-dated check-ins
- Check-ins dated before the sobriety date
- Duplicate days
- Check-ins with neither half filled in

Malformed records (bad dates, scores outside 0-10, negative costs) never get
this far: the models reject them with a pydantic ValidationError. What is
checked here is data that is well-formed but suspicious.

IMPORTANT: Validation NEVER silently fixes issues.
It reports them for human review.
"""

from collections import Counter
from datetime import timedelta
from typing import Optional, Sequence

from recovery_progress.config import EngineSettings, get_settings
from recovery_progress.dates import NowInput, to_local_date
from recovery_progress.models.recovery import CheckIn, SobrietyProfile
from recovery_progress.models.validation import ValidationIssue, ValidationResult


class ProfileValidator:
    """
    Validates a sobriety profile and its check-ins.

    Stage 1: Profile checks
    Stage 2: Check-in checks (run even when stage 1 fails, since check-in
    problems are independent of the profile)
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        """
        Initialize validator.

        Args:
            settings: Engine settings with the validation thresholds.
                      If None, the cached application settings are used.
        """
        self._settings = settings or get_settings().engine

    def _validate_profile(
        self,
        profile: SobrietyProfile,
        now: NowInput,
    ) -> tuple[bool, list[ValidationIssue]]:
        """
        Stage 1: Profile validation.

        Returns: (is_valid, list_of_issues)
        """
        issues = []
        today = to_local_date(now)

        if profile.start_date is None:
            issues.append(ValidationIssue(
                field="start_date",
                issue_type="missing",
                message="No sobriety date is set, so day counts and milestones are hidden",
                severity="warning",
                suggested_fix="Set your sobriety date in your profile",
            ))
        else:
            latest_allowed = today + timedelta(days=self._settings.future_date_tolerance_days)
            if profile.start_date > latest_allowed:
                issues.append(ValidationIssue(
                    field="start_date",
                    issue_type="future_date",
                    message=f"Sobriety date {profile.start_date} is in the future",
                    severity="error",
                    suggested_fix="Check the year and month of your sobriety date",
                ))

        if profile.daily_cost == 0:
            issues.append(ValidationIssue(
                field="daily_cost",
                issue_type="not_set",
                message="Daily cost is not set, so savings and goals are hidden",
                severity="info",
                suggested_fix="Enter roughly what you used to spend per day",
            ))
        elif profile.daily_cost > self._settings.max_daily_cost:
            issues.append(ValidationIssue(
                field="daily_cost",
                issue_type="suspicious_value",
                message=(
                    f"Daily cost of {profile.daily_cost} is unusually high "
                    f"(over {self._settings.max_daily_cost:g})"
                ),
                severity="warning",
                suggested_fix="Make sure this is a daily amount, not weekly or monthly",
            ))

        if profile.actual_saved is not None and profile.daily_cost == 0:
            issues.append(ValidationIssue(
                field="actual_saved",
                issue_type="unused_value",
                message="Money saved is recorded but cannot be compared without a daily cost",
                severity="info",
            ))

        is_valid = not any(issue.severity == "error" for issue in issues)

        return is_valid, issues

    def _validate_check_ins(
        self,
        check_ins: Sequence[CheckIn],
        profile: SobrietyProfile,
        now: NowInput,
    ) -> tuple[bool, list[ValidationIssue]]:
        """
        Stage 2: Check-in validation.

        Returns: (is_valid, list_of_issues)
        """
        issues = []
        today = to_local_date(now)

        future_days = sorted({c.day for c in check_ins if c.day > today})
        for day in future_days:
            issues.append(ValidationIssue(
                field="check_ins",
                issue_type="future_date",
                message=f"A check-in is dated {day}, which has not happened yet",
                severity="error",
                suggested_fix="Check the device clock used for this check-in",
            ))

        if profile.start_date is not None:
            early = sum(1 for c in check_ins if c.day < profile.start_date)
            if early:
                issues.append(ValidationIssue(
                    field="check_ins",
                    issue_type="before_start_date",
                    message=f"{early} check-in(s) are dated before the sobriety date",
                    severity="info",
                ))

        day_counts = Counter(c.day for c in check_ins)
        for day, count in sorted(day_counts.items()):
            if count > 1:
                issues.append(ValidationIssue(
                    field="check_ins",
                    issue_type="duplicate_day",
                    message=f"{count} check-ins are recorded for {day}",
                    severity="warning",
                    suggested_fix="Only the first check-in of a day is graphed",
                ))

        empty = sum(1 for c in check_ins if not c.has_morning and not c.has_evening)
        if empty:
            issues.append(ValidationIssue(
                field="check_ins",
                issue_type="empty",
                message=f"{empty} check-in(s) have neither a morning nor an evening entry",
                severity="info",
            ))

        is_valid = not any(issue.severity == "error" for issue in issues)

        return is_valid, issues

    def validate(
        self,
        profile: SobrietyProfile,
        check_ins: Sequence[CheckIn],
        now: NowInput,
    ) -> ValidationResult:
        """
        Run full two-stage validation pipeline.

        Args:
            profile: The stored sobriety profile
            check_ins: The person's check-ins
            now: The caller's current instant

        Returns:
            ValidationResult with all issues found
        """
        all_issues = []
        warnings = []

        profile_valid, profile_issues = self._validate_profile(profile, now)
        all_issues.extend(profile_issues)

        check_ins_valid, check_in_issues = self._validate_check_ins(check_ins, profile, now)
        all_issues.extend(check_in_issues)

        for issue in all_issues:
            if issue.severity == "warning":
                warnings.append(issue.message)

        return ValidationResult(
            profile_valid=profile_valid,
            check_ins_valid=check_ins_valid,
            recovery_enabled=profile.start_date is not None,
            savings_enabled=profile.savings_enabled,
            issues=all_issues,
            warnings=warnings,
        )

    def get_user_friendly_summary(
        self,
        result: ValidationResult,
    ) -> str:
        """
        Generate a user-friendly summary of validation results.

        This is what we show to the person and their coach.
        """
        if result.is_valid and not result.warnings:
            return "✅ Everything looks good."

        lines = []

        if result.has_errors:
            lines.append("❌ Some of your information needs fixing:")
            for issue in result.issues:
                if issue.severity == "error":
                    lines.append(f"   • {issue.message}")
                    if issue.suggested_fix:
                        lines.append(f"     💡 {issue.suggested_fix}")

        if result.warnings:
            lines.append("")
            lines.append("⚠️ Please double-check the following:")
            for warning in result.warnings:
                lines.append(f"   • {warning}")

        if not result.savings_enabled:
            lines.append("")
            lines.append("Savings features stay hidden until a sobriety date and daily cost are set.")

        return "\n".join(lines).lstrip("\n")
