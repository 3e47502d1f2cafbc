"""Daily goal management."""

import logging
from dataclasses import dataclass
from typing import Protocol

from hydration_tracker.services.parsing import GOAL_MESSAGE, parse_positive_number

_logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Storage interface for the daily goal."""

    def get_goal(self) -> float | None:
        """Return the goal in ounces, if set."""

    def set_goal(self, goal: float) -> None:
        """Replace the goal."""


@dataclass
class GoalService:
    """Service for reading and replacing the daily goal."""

    repository: GoalRepository

    def get_goal(self) -> float | None:
        """Return the goal in ounces, or None when unset."""
        return self.repository.get_goal()

    def set_goal(self, goal_input: object) -> float:
        """Parse and store a new goal, returning it."""
        goal = parse_positive_number(goal_input, "goal", GOAL_MESSAGE)
        self.repository.set_goal(goal)
        _logger.info("Goal set: goal_oz=%s", goal)
        return goal
