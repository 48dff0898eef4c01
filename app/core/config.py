"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Training Analytics & Booking API"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Training Analytics Team"]
    PROJECT_URL: str = "https://example.com/training-analytics"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Record files (profiles.json, trainingSessions.json, appointments.json)
    DATA_DIR: str = "data"

    # Operating-hour grid for trainer schedules
    SCHEDULE_START_HOUR: int = 9
    SCHEDULE_END_HOUR: int = 17
    SCHEDULE_TIMEZONE: str = "UTC"

    # Trailing window of the dashboard summary
    SUMMARY_WINDOW_DAYS: int = 30

    # Reject bookings that overlap an existing appointment of the same trainer
    PREVENT_DOUBLE_BOOKING: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
