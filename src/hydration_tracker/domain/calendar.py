"""Domain models for summaries and the month calendar."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


@dataclass(frozen=True)
class DayCell:
    """A real day in a month grid."""

    day_number: int
    date_key: str
    total_oz: float
    fill_fraction: float


# Leading placeholders are None; real days follow in order.
MonthGrid = list[DayCell | None]


@dataclass(frozen=True)
class GoalProgress:
    """Days in a month that met the goal."""

    reached: int
    total_days: int


@dataclass(frozen=True)
class MonthView:
    """Everything the calendar screen needs for one month."""

    month: date
    label: str
    grid: MonthGrid
    reached_count: int | None
    total_days: int


@dataclass(frozen=True)
class TodaySummary:
    """Running total for the current local day."""

    date_key: str
    total_oz: float
    remaining_oz: float | None
    goal_oz: float | None
    entry_count: int

    @property
    def goal_reached(self) -> bool | None:
        """Return None without a goal, else whether nothing remains."""
        if self.remaining_oz is None:
            return None
        return self.remaining_oz == 0


class ViewMode(StrEnum):
    """Screen currently selected by the front end."""

    HOME = "home"
    CALENDAR = "calendar"


@dataclass(frozen=True)
class ViewState:
    """Selected screen plus the month shown on the calendar."""

    mode: ViewMode
    displayed_month: date
