"""Profile and check-in validation."""

from recovery_progress.validation.validator import ProfileValidator

__all__ = ["ProfileValidator"]
