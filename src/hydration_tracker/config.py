"""Application configuration."""

import calendar
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    first_weekday: str = "sunday"
    default_goal_oz: float | None = Field(default=None, gt=0)
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_first_weekday(raw: str | None) -> int:
    """Parse the calendar's first weekday, defaulting to Sunday."""
    if raw is None:
        return calendar.SUNDAY
    cleaned = raw.strip().lower()
    if cleaned.isdigit():
        value = int(cleaned)
        return value if value < len(calendar.day_name) else calendar.SUNDAY
    for index, name in enumerate(calendar.day_name):
        if cleaned and cleaned in {name.lower(), calendar.day_abbr[index].lower()}:
            return index
    return calendar.SUNDAY
