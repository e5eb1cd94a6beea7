"""Audit logging package."""

from recovery_progress.audit.logger import CalculationAuditor, configure_logging

__all__ = ["CalculationAuditor", "configure_logging"]
