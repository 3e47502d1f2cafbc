"""In-memory session store for the tracker state."""

from dataclasses import dataclass

from hydration_tracker.domain.calendar import ViewState
from hydration_tracker.domain.entries import IntakeEntry
from hydration_tracker.services.goals import GoalRepository
from hydration_tracker.services.intake import EntryRepository
from hydration_tracker.services.navigation import ViewStateRepository


@dataclass
class InMemoryTrackerStore(EntryRepository, GoalRepository, ViewStateRepository):
    """Session-scoped state; nothing survives a restart."""

    entries: tuple[IntakeEntry, ...] = ()
    goal_oz: float | None = None
    view_state: ViewState | None = None

    def list_entries(self) -> list[IntakeEntry]:
        return list(self.entries)

    def replace_entries(self, entries: list[IntakeEntry]) -> None:
        self.entries = tuple(entries)

    def get_goal(self) -> float | None:
        return self.goal_oz

    def set_goal(self, goal: float) -> None:
        self.goal_oz = goal

    def get_view_state(self) -> ViewState | None:
        return self.view_state

    def save_view_state(self, state: ViewState) -> None:
        self.view_state = state
