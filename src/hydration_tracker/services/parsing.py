"""Parsing of raw front-end input."""

import logging
import math

from hydration_tracker.domain.entries import TimeOfDay
from hydration_tracker.domain.errors import InvalidInputError

_logger = logging.getLogger(__name__)

VOLUME_MESSAGE = "Please enter a positive number of ounces."
GOAL_MESSAGE = "Please enter a positive number of ounces for your goal."
TIME_OF_DAY_MESSAGE = "Please choose Morning, Afternoon, Evening or Night."

# Larger than any single drink or daily goal a person could log.
MAX_OUNCES = 1_000_000.0


def parse_positive_number(raw: object, field: str, message: str) -> float:
    """Parse a finite, strictly positive number or raise InvalidInputError."""
    value = _parse_float(raw)
    if value is None or not math.isfinite(value) or not 0 < value <= MAX_OUNCES:
        _logger.warning("Rejected %s input: %r", field, raw)
        raise InvalidInputError(field, message)
    return value


def parse_time_of_day(raw: object) -> TimeOfDay:
    """Resolve a time-of-day member from its name or value in any case."""
    if isinstance(raw, TimeOfDay):
        return raw
    if isinstance(raw, str):
        wanted = raw.strip().lower()
        for member in TimeOfDay:
            if wanted in {member.value.lower(), member.name.lower()}:
                return member
    _logger.warning("Rejected time_of_day input: %r", raw)
    raise InvalidInputError("time_of_day", TIME_OF_DAY_MESSAGE)


def _parse_float(raw: object) -> float | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
    if isinstance(raw, int | float | str):
        try:
            return float(raw)
        except (OverflowError, ValueError):
            return None
    return None
