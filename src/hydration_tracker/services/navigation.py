"""Screen selection and calendar month navigation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Protocol

from hydration_tracker.domain.calendar import ViewMode, ViewState
from hydration_tracker.services.aggregation import local_now
from hydration_tracker.services.calendar import month_anchor, shift_month

_logger = logging.getLogger(__name__)


class ViewStateRepository(Protocol):
    """Storage interface for the front end's view state."""

    def get_view_state(self) -> ViewState | None:
        """Return the saved view state, if any."""

    def save_view_state(self, state: ViewState) -> None:
        """Replace the saved view state."""


@dataclass
class NavigationService:
    """Service tracking the selected screen and displayed month."""

    repository: ViewStateRepository
    clock: Callable[[], datetime] = local_now

    def current(self) -> ViewState:
        """Return the view state, starting on the home screen this month."""
        state = self.repository.get_view_state()
        if state is None:
            state = ViewState(mode=ViewMode.HOME, displayed_month=self._this_month())
            self.repository.save_view_state(state)
        return state

    def show(self, mode: ViewMode) -> ViewState:
        """Switch to another screen, keeping the displayed month."""
        return self._save(replace(self.current(), mode=mode))

    def next_month(self) -> ViewState:
        """Advance the calendar one month."""
        return self._shift(1)

    def previous_month(self) -> ViewState:
        """Step the calendar back one month."""
        return self._shift(-1)

    def go_to(self, year: int, month: int) -> ViewState:
        """Display a specific month; month overflow rolls into the year."""
        return self._save(
            replace(self.current(), displayed_month=month_anchor(year, month))
        )

    def go_to_today(self) -> ViewState:
        """Display the current local month."""
        return self._save(replace(self.current(), displayed_month=self._this_month()))

    def _this_month(self) -> date:
        now = self.clock()
        return month_anchor(now.year, now.month)

    def _shift(self, months: int) -> ViewState:
        state = self.current()
        try:
            month = shift_month(state.displayed_month, months)
        except ValueError:
            # Stays put at the first and last months a date can hold.
            _logger.info(
                "Month navigation out of range: month=%s months=%s",
                state.displayed_month.isoformat(),
                months,
            )
            return state
        return self._save(replace(state, displayed_month=month))

    def _save(self, state: ViewState) -> ViewState:
        self.repository.save_view_state(state)
        _logger.info(
            "View changed: mode=%s month=%s",
            state.mode.value,
            state.displayed_month.isoformat(),
        )
        return state
