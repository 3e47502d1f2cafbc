"""Domain models for intake entries."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class TimeOfDay(StrEnum):
    """Descriptive bucket chosen when logging an entry."""

    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    NIGHT = "Night"


@dataclass(frozen=True)
class IntakeEntry:
    """A single logged drink."""

    id: UUID
    volume_oz: float
    time_of_day: TimeOfDay
    created_at: datetime
