"""Shared test fixtures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import pytest

from hydration_tracker.adapters.in_memory_tracker_store import InMemoryTrackerStore
from hydration_tracker.config import Settings
from hydration_tracker.containers import AppContainer
from hydration_tracker.domain.entries import IntakeEntry, TimeOfDay
from hydration_tracker.services.goals import GoalService
from hydration_tracker.services.intake import IntakeService
from hydration_tracker.services.navigation import NavigationService
from hydration_tracker.services.summary import SummaryService

NOW = datetime(2024, 3, 15, 9, 30)


@dataclass
class FixedClock:
    """Clock returning a settable local time."""

    now: datetime = NOW

    def __call__(self) -> datetime:
        return self.now


def make_entry(
    volume_oz: float,
    created_at: datetime = NOW,
    time_of_day: TimeOfDay = TimeOfDay.MORNING,
) -> IntakeEntry:
    return IntakeEntry(
        id=uuid4(),
        volume_oz=volume_oz,
        time_of_day=time_of_day,
        created_at=created_at,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(first_weekday="sunday", environment="test")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def store() -> InMemoryTrackerStore:
    return InMemoryTrackerStore()


@pytest.fixture
def intake_service(store: InMemoryTrackerStore, clock: FixedClock) -> IntakeService:
    return IntakeService(store, clock=clock)


@pytest.fixture
def goal_service(store: InMemoryTrackerStore) -> GoalService:
    return GoalService(store)


@pytest.fixture
def summary_service(store: InMemoryTrackerStore, clock: FixedClock) -> SummaryService:
    return SummaryService(entry_repository=store, goal_repository=store, clock=clock)


@pytest.fixture
def navigation_service(
    store: InMemoryTrackerStore, clock: FixedClock
) -> NavigationService:
    return NavigationService(store, clock=clock)


@pytest.fixture
def container(
    settings: Settings,
    store: InMemoryTrackerStore,
    intake_service: IntakeService,
    goal_service: GoalService,
    summary_service: SummaryService,
    navigation_service: NavigationService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        store=store,
        intake_service=intake_service,
        goal_service=goal_service,
        summary_service=summary_service,
        navigation_service=navigation_service,
    )
