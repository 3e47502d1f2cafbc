"""Aggregation of the intake log into daily figures."""

import math
import sys
from collections.abc import Iterable
from datetime import date, datetime

INVALID_DATE_KEY = "invalid"


def local_now() -> datetime:
    """Return the current time in the device's local timezone."""
    return datetime.now().astimezone()


def date_key(timestamp: object) -> str:
    """Normalize a timestamp to a ``YYYY-MM-DD`` key on the local calendar.

    Aware datetimes are converted to local time before the calendar fields
    are read; naive datetimes are taken as already local. ISO strings are
    accepted. Anything unreadable maps to ``INVALID_DATE_KEY``.
    """
    day = _local_day(timestamp)
    if day is None:
        return INVALID_DATE_KEY
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def daily_total(entries: Iterable[object]) -> float:
    """Sum entry volumes, counting unreadable volumes as zero."""
    return _sum_volumes([_volume_of(entry) for entry in entries])


def remaining_to_goal(total: float, goal: float | None) -> float | None:
    """Return ounces left to reach the goal, or None when no goal is set."""
    if goal is None:
        return None
    return max(goal - total, 0.0)


def aggregate_by_date(entries: Iterable[object]) -> dict[str, float]:
    """Group entries by local calendar day and sum their volumes."""
    volumes: dict[str, list[float]] = {}
    for entry in entries:
        key = date_key(getattr(entry, "created_at", None))
        volumes.setdefault(key, []).append(_volume_of(entry))
    return {key: _sum_volumes(values) for key, values in volumes.items()}


def _local_day(timestamp: object) -> date | None:
    if isinstance(timestamp, str):
        try:
            timestamp = datetime.fromisoformat(timestamp.strip())
        except ValueError:
            return None
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is not None:
            try:
                timestamp = timestamp.astimezone()
            except (OverflowError, ValueError):
                return None
        return timestamp.date()
    if isinstance(timestamp, date):
        return timestamp
    return None


def _sum_volumes(values: list[float]) -> float:
    try:
        total = math.fsum(values)
    except OverflowError:
        return sys.float_info.max
    return min(total, sys.float_info.max)


def _volume_of(entry: object) -> float:
    value = _to_float(getattr(entry, "volume_oz", None))
    if not math.isfinite(value) or value <= 0:
        return 0.0
    return value


def _to_float(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float | str):
        try:
            return float(value)
        except (OverflowError, ValueError):
            return 0.0
    return 0.0
