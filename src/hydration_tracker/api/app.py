"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, HTTPException, Query, Request, status

from hydration_tracker.api.schemas import (
    EntryPayload,
    EntryUpdatePayload,
    GoalPayload,
    ViewModePayload,
)
from hydration_tracker.app_logging import configure_logging
from hydration_tracker.containers import AppContainer
from hydration_tracker.domain.calendar import (
    DayCell,
    MonthView,
    TodaySummary,
    ViewState,
)
from hydration_tracker.domain.entries import IntakeEntry
from hydration_tracker.domain.errors import InvalidInputError
from hydration_tracker.services.aggregation import date_key
from hydration_tracker.services.calendar import month_anchor, month_label


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Hydration tracker started: environment=%s",
            app.state.container.settings.environment,
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/entries")
    async def list_entries(request: Request) -> dict[str, object]:
        """Return all entries, newest first."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.intake_service.list_entries()
        return {"entries": [_entry_payload(entry) for entry in entries]}

    @app.post("/entries", status_code=status.HTTP_201_CREATED)
    async def add_or_update_entry(
        payload: EntryPayload, request: Request
    ) -> dict[str, object]:
        """Add an entry, or edit one when ``editing_id`` is given."""
        state_container: AppContainer = request.app.state.container
        try:
            entry = state_container.intake_service.add_or_update_entry(
                payload.volume, payload.time_of_day, payload.editing_id
            )
        except InvalidInputError as exc:
            raise _bad_request(exc) from exc
        return {"entry": _entry_payload(entry) if entry else None}

    @app.put("/entries/{entry_id}")
    async def update_entry(
        entry_id: UUID, payload: EntryUpdatePayload, request: Request
    ) -> dict[str, object]:
        """Edit an entry's volume and time of day."""
        state_container: AppContainer = request.app.state.container
        try:
            entry = state_container.intake_service.add_or_update_entry(
                payload.volume, payload.time_of_day, entry_id
            )
        except InvalidInputError as exc:
            raise _bad_request(exc) from exc
        return {"entry": _entry_payload(entry) if entry else None}

    @app.delete("/entries/{entry_id}")
    async def delete_entry(entry_id: UUID, request: Request) -> dict[str, str]:
        """Delete an entry; unknown ids are ignored."""
        state_container: AppContainer = request.app.state.container
        state_container.intake_service.delete_entry(entry_id)
        return {"status": "ok"}

    @app.get("/goal")
    async def get_goal(request: Request) -> dict[str, float | None]:
        """Return the current goal."""
        state_container: AppContainer = request.app.state.container
        return {"goal_oz": state_container.goal_service.get_goal()}

    @app.put("/goal")
    async def set_goal(payload: GoalPayload, request: Request) -> dict[str, float]:
        """Replace the daily goal."""
        state_container: AppContainer = request.app.state.container
        try:
            goal = state_container.goal_service.set_goal(payload.goal)
        except InvalidInputError as exc:
            raise _bad_request(exc) from exc
        return {"goal_oz": goal}

    @app.get("/summary/today")
    async def today_summary(request: Request) -> dict[str, object]:
        """Return today's total and the distance to the goal."""
        state_container: AppContainer = request.app.state.container
        return _summary_payload(state_container.summary_service.get_today_summary())

    @app.get("/calendar")
    async def month_view(
        request: Request,
        year: int | None = Query(default=None, ge=1, le=9999),
        month: int | None = None,
    ) -> dict[str, object]:
        """Return the calendar for a month, defaulting to the displayed one."""
        state_container: AppContainer = request.app.state.container
        displayed = state_container.navigation_service.current().displayed_month
        if year is not None or month is not None:
            try:
                displayed = month_anchor(
                    year if year is not None else displayed.year,
                    month if month is not None else displayed.month,
                )
            except (OverflowError, ValueError) as exc:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail={"field": "month", "message": "Month is out of range."},
                ) from exc
        view = state_container.summary_service.get_month_view(
            displayed, state_container.goal_service.get_goal()
        )
        return _month_payload(view)

    @app.get("/view")
    async def get_view(request: Request) -> dict[str, str]:
        """Return the selected screen and displayed month."""
        state_container: AppContainer = request.app.state.container
        return _view_payload(state_container.navigation_service.current())

    @app.put("/view/mode")
    async def set_view_mode(
        payload: ViewModePayload, request: Request
    ) -> dict[str, str]:
        """Switch between the home and calendar screens."""
        state_container: AppContainer = request.app.state.container
        return _view_payload(state_container.navigation_service.show(payload.mode))

    @app.post("/view/next-month")
    async def next_month(request: Request) -> dict[str, str]:
        """Advance the calendar one month."""
        state_container: AppContainer = request.app.state.container
        return _view_payload(state_container.navigation_service.next_month())

    @app.post("/view/previous-month")
    async def previous_month(request: Request) -> dict[str, str]:
        """Step the calendar back one month."""
        state_container: AppContainer = request.app.state.container
        return _view_payload(state_container.navigation_service.previous_month())

    @app.post("/view/today")
    async def current_month(request: Request) -> dict[str, str]:
        """Return the calendar to the current month."""
        state_container: AppContainer = request.app.state.container
        return _view_payload(state_container.navigation_service.go_to_today())

    return app


def _bad_request(exc: InvalidInputError) -> HTTPException:
    """Map a rejected input to a 400 response."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"field": exc.field, "message": exc.message},
    )


def _entry_payload(entry: IntakeEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "volume_oz": entry.volume_oz,
        "time_of_day": entry.time_of_day.value,
        "created_at": entry.created_at.isoformat(),
        "date_key": date_key(entry.created_at),
    }


def _summary_payload(summary: TodaySummary) -> dict[str, object]:
    return {
        "date_key": summary.date_key,
        "total_oz": summary.total_oz,
        "remaining_oz": summary.remaining_oz,
        "goal_oz": summary.goal_oz,
        "goal_reached": summary.goal_reached,
        "entry_count": summary.entry_count,
    }


def _cell_payload(cell: DayCell | None) -> dict[str, object] | None:
    if cell is None:
        return None
    return {
        "day_number": cell.day_number,
        "date_key": cell.date_key,
        "total_oz": cell.total_oz,
        "fill_fraction": cell.fill_fraction,
    }


def _month_payload(view: MonthView) -> dict[str, object]:
    return {
        "month": view.month.isoformat(),
        "label": view.label,
        "grid": [_cell_payload(cell) for cell in view.grid],
        "reached_count": view.reached_count,
        "total_days": view.total_days,
    }


def _view_payload(state: ViewState) -> dict[str, str]:
    return {
        "mode": state.mode.value,
        "displayed_month": state.displayed_month.isoformat(),
        "label": month_label(state.displayed_month),
    }
