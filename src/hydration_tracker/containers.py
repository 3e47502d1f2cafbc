"""Dependency container wiring for the application."""

from dataclasses import dataclass

from hydration_tracker.adapters.in_memory_tracker_store import InMemoryTrackerStore
from hydration_tracker.config import Settings, parse_first_weekday
from hydration_tracker.services.goals import GoalService
from hydration_tracker.services.intake import IntakeService
from hydration_tracker.services.navigation import NavigationService
from hydration_tracker.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: InMemoryTrackerStore
    intake_service: IntakeService
    goal_service: GoalService
    summary_service: SummaryService
    navigation_service: NavigationService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = InMemoryTrackerStore(goal_oz=resolved_settings.default_goal_oz)
    return AppContainer(
        settings=resolved_settings,
        store=store,
        intake_service=IntakeService(store),
        goal_service=GoalService(store),
        summary_service=SummaryService(
            entry_repository=store,
            goal_repository=store,
            first_weekday=parse_first_weekday(resolved_settings.first_weekday),
        ),
        navigation_service=NavigationService(store),
    )
