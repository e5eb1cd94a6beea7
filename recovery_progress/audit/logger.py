"""
Calculation Audit Logger

DESIGN DECISION: The engine is pure and never logs. The dashboard builder
is the one place that records what was computed, which features were hidden
and why, and what the validator flagged. This provides:
1. Traceability when a user disputes a number
2. Visibility into hidden features (missing date or cost)

Logging never influences a result, and a failed log call never breaks a
dashboard render.
"""

import logging
from datetime import date
from typing import Optional

import structlog

from recovery_progress.config.settings import LoggingSettings
from recovery_progress.models.validation import ValidationResult


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure structlog for local logging.

    Uses the stdlib logger factory so levels and handlers are controlled
    through the standard logging module.
    """
    settings = settings or LoggingSettings()
    level = getattr(logging, settings.level)

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


class CalculationAuditor:
    """
    Structured log of dashboard computations.

    Every event carries as_of, the local date the numbers were computed
    for, so a logged render can be reproduced exactly.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        """
        Initialize the auditor.

        Args:
            logger: Bound logger to write to. If None, one named after this
                    module is created.
        """
        self._logger = logger or structlog.get_logger(__name__)

    def log_dashboard_built(
        self,
        as_of: date,
        elapsed_days: Optional[int],
        total_saved: Optional[str],
        check_in_count: int,
        trend_shown: bool,
    ) -> None:
        """Log a completed dashboard render."""
        self._logger.info(
            "dashboard_built",
            as_of=as_of.isoformat(),
            elapsed_days=elapsed_days,
            total_saved=total_saved,
            check_in_count=check_in_count,
            trend_shown=trend_shown,
        )

    def log_feature_gated(self, as_of: date, feature: str, reason: str) -> None:
        """Log a dashboard section hidden for lack of data."""
        self._logger.info(
            "feature_gated",
            as_of=as_of.isoformat(),
            feature=feature,
            reason=reason,
        )

    def log_validation_issues(self, as_of: date, result: ValidationResult) -> None:
        """
        Log validator findings.

        Errors log at warning level, anything milder at info. A clean result
        logs nothing.
        """
        if not result.issues:
            return

        issues = [issue.model_dump() for issue in result.issues]
        log = self._logger.warning if result.has_errors else self._logger.info
        log(
            "validation_issues",
            as_of=as_of.isoformat(),
            error_count=result.error_count,
            issue_count=len(issues),
            issues=issues,
        )
