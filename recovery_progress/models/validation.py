"""
Validation Models

Findings reported by the profile validator. Validation reports what it finds
for human review; it never changes the data it looks at.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'future_date', 'suspicious_value')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class ValidationResult(BaseModel):
    """
    Result of validating a profile and its check-ins.

    Stage 1: Profile checks (start date, daily cost)
    Stage 2: Check-in checks (dates, duplicate days)
    """

    validated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    profile_valid: bool = Field(
        ...,
        description="Did the profile checks pass?"
    )
    check_ins_valid: bool = Field(
        ...,
        description="Did the check-in checks pass?"
    )

    # Feature gates the dashboard applies
    recovery_enabled: bool = Field(
        ...,
        description="Can day counts and milestones be shown?"
    )
    savings_enabled: bool = Field(
        ...,
        description="Can savings and goal features be shown?"
    )

    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-blocking warnings"
    )

    @property
    def is_valid(self) -> bool:
        return self.profile_valid and self.check_ins_valid

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")
