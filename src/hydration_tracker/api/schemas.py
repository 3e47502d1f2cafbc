"""Pydantic models for front-end request payloads."""

from uuid import UUID

from pydantic import BaseModel

from hydration_tracker.domain.calendar import ViewMode


class EntryPayload(BaseModel):
    """Add-or-edit form submission."""

    volume: str | float
    time_of_day: str = "Morning"
    editing_id: UUID | None = None


class EntryUpdatePayload(BaseModel):
    """Edit form submission for a known entry."""

    volume: str | float
    time_of_day: str = "Morning"


class GoalPayload(BaseModel):
    """Goal form submission."""

    goal: str | float


class ViewModePayload(BaseModel):
    """Screen switch request."""

    mode: ViewMode
