"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key used to verify JWT access tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used for the current time and naive database datetimes",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )
    alert_fee_lookahead_days: int = Field(
        default=7,
        description="Days ahead of today in which a pending fee produces an alert",
        ge=0,
    )
    alert_homework_warning_days: int = Field(
        default=2,
        description="Days ahead of today in which pending homework produces an alert",
        ge=0,
    )
    alert_exam_recent_days: int = Field(
        default=7,
        description="Age in days after which an exam result no longer produces an alert",
        ge=0,
    )
    alert_attendance_lookback_days: int = Field(
        default=7,
        description="Days back searched for the latest attendance record",
        ge=0,
    )
    alert_source_limit: int = Field(
        default=5,
        description="Maximum number of records fetched per dependent and source",
        gt=0,
    )
    currency_symbol: str = Field(
        default="₹",
        description="Symbol prefixed to fee amounts in alert messages",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
