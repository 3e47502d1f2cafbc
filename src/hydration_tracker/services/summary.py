"""Read-side queries: today's running total and the month view."""

import calendar
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from hydration_tracker.domain.calendar import MonthView, TodaySummary
from hydration_tracker.services.aggregation import (
    aggregate_by_date,
    daily_total,
    date_key,
    local_now,
    remaining_to_goal,
)
from hydration_tracker.services.calendar import (
    days_in_month,
    goal_reached_count,
    month_grid,
    month_label,
)
from hydration_tracker.services.goals import GoalRepository
from hydration_tracker.services.intake import EntryRepository


@dataclass
class SummaryService:
    """Service recomputing summaries from the entry log on every call."""

    entry_repository: EntryRepository
    goal_repository: GoalRepository
    clock: Callable[[], datetime] = local_now
    first_weekday: int = calendar.SUNDAY

    def get_today_summary(self) -> TodaySummary:
        """Return today's total and the distance to the goal."""
        today = date_key(self.clock())
        todays_entries = [
            entry
            for entry in self.entry_repository.list_entries()
            if date_key(entry.created_at) == today
        ]
        goal = self.goal_repository.get_goal()
        total = daily_total(todays_entries)
        return TodaySummary(
            date_key=today,
            total_oz=total,
            remaining_oz=remaining_to_goal(total, goal),
            goal_oz=goal,
            entry_count=len(todays_entries),
        )

    def get_month_view(self, displayed_month: date, goal: float | None) -> MonthView:
        """Return the grid, label and goal count for a month."""
        month = displayed_month.replace(day=1)
        totals = aggregate_by_date(self.entry_repository.list_entries())
        progress = goal_reached_count(month, totals, goal)
        return MonthView(
            month=month,
            label=month_label(month),
            grid=month_grid(month, totals, goal, self.first_weekday),
            reached_count=progress.reached if progress else None,
            total_days=days_in_month(month),
        )
