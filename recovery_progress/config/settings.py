"""
Configuration Management for Recovery Progress

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Engine functions take their constants as keyword arguments
with the product defaults. Only the dashboard builder reads these settings
and passes them down, so the engine itself never touches the environment.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Tunables for the progress calculations."""

    model_config = SettingsConfigDict(
        env_prefix="RECOVERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    upcoming_milestone_count: int = Field(
        default=3,
        ge=1,
        le=13,
        description="How many unachieved milestones the 'coming up' list shows"
    )
    missed_lookback_days: int = Field(
        default=31,
        ge=1,
        le=366,
        description="Trailing window used for missed check-in counts and graphs"
    )
    trend_window_days: int = Field(
        default=7,
        ge=1,
        le=31,
        description="Length of each window in the week-over-week comparison"
    )

    # Savings model
    carousel_visibility_ratio: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Fraction of an item's minimum cost saved before it is shown"
    )
    interest_surcharge_rate: float = Field(
        default=0.34,
        ge=0.0,
        description="Flat surcharge modelling 20% APR on money spent using"
    )
    health_cost_per_day: int = Field(
        default=4,
        ge=0,
        description="Flat per-day health cost estimate in the reality check"
    )

    # Validation thresholds
    max_daily_cost: float = Field(
        default=1000.0,
        gt=0,
        description="Daily cost above which a profile is flagged for review"
    )
    future_date_tolerance_days: int = Field(
        default=0,
        ge=0,
        description="How many days in the future a sobriety date may be"
    )


class LoggingSettings(BaseSettings):
    """structlog output configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RECOVERY_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Standard library log level name"
    )
    json_output: bool = Field(
        default=True,
        description="Render JSON lines (False renders for a console)"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Accept any case, store upper case."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.strip().upper()
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def engine(self) -> EngineSettings:
        return EngineSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings(settings: Optional[Settings] = None) -> dict[str, object]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid} plus an
    "<name>_error" entry for every section that failed to load.
    """
    results: dict[str, object] = {}

    settings = settings or get_settings()

    for name in ("engine", "logging"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
