"""Intake entry lifecycle: add, edit and delete."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol
from uuid import UUID, uuid4

from hydration_tracker.domain.entries import IntakeEntry, TimeOfDay
from hydration_tracker.services.aggregation import local_now
from hydration_tracker.services.parsing import (
    VOLUME_MESSAGE,
    parse_positive_number,
    parse_time_of_day,
)

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Storage interface for the entry log."""

    def list_entries(self) -> list[IntakeEntry]:
        """Return all entries, newest first."""

    def replace_entries(self, entries: list[IntakeEntry]) -> None:
        """Replace the whole entry log in one step."""


@dataclass
class IntakeService:
    """Application service owning every mutation of the entry log."""

    repository: EntryRepository
    clock: Callable[[], datetime] = local_now

    def list_entries(self) -> list[IntakeEntry]:
        """Return all entries, newest first."""
        return self.repository.list_entries()

    def get_entry(self, entry_id: UUID) -> IntakeEntry | None:
        """Return one entry by id, if present."""
        for entry in self.repository.list_entries():
            if entry.id == entry_id:
                return entry
        return None

    def add_or_update_entry(
        self,
        volume_input: object,
        time_of_day: TimeOfDay | str = TimeOfDay.MORNING,
        editing_id: UUID | None = None,
    ) -> IntakeEntry | None:
        """Validate input, then append a new entry or edit an existing one.

        Raises InvalidInputError before touching the log. When ``editing_id``
        matches nothing the call is a no-op and returns None.
        """
        volume = parse_positive_number(volume_input, "volume", VOLUME_MESSAGE)
        slot = parse_time_of_day(time_of_day)
        entries = self.repository.list_entries()

        if editing_id is None:
            entry = IntakeEntry(
                id=uuid4(),
                volume_oz=volume,
                time_of_day=slot,
                created_at=self.clock(),
            )
            self.repository.replace_entries([entry, *entries])
            _logger.info("Entry added: id=%s volume_oz=%s", entry.id, volume)
            return entry

        updated: IntakeEntry | None = None
        result = []
        for entry in entries:
            if entry.id == editing_id:
                updated = replace(entry, volume_oz=volume, time_of_day=slot)
                result.append(updated)
            else:
                result.append(entry)
        if updated is None:
            _logger.info("Entry not found for edit: id=%s", editing_id)
            return None
        self.repository.replace_entries(result)
        _logger.info("Entry updated: id=%s volume_oz=%s", editing_id, volume)
        return updated

    def delete_entry(self, entry_id: UUID) -> None:
        """Remove an entry; unknown ids are ignored."""
        entries = self.repository.list_entries()
        remaining = [entry for entry in entries if entry.id != entry_id]
        if len(remaining) == len(entries):
            _logger.info("Entry not found for delete: id=%s", entry_id)
            return
        self.repository.replace_entries(remaining)
        _logger.info("Entry deleted: id=%s", entry_id)
