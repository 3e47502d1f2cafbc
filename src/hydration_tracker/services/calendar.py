"""Month calendar grid construction and month navigation."""

import calendar
from collections.abc import Mapping
from datetime import date

from hydration_tracker.domain.calendar import DayCell, GoalProgress, MonthGrid
from hydration_tracker.services.aggregation import date_key

MONTHS_PER_YEAR = 12


def month_anchor(year: int, month: int) -> date:
    """Return day 1 of the month, rolling month overflow into the year."""
    year += (month - 1) // MONTHS_PER_YEAR
    month = (month - 1) % MONTHS_PER_YEAR + 1
    return date(year, month, 1)


def shift_month(displayed_month: date, months: int) -> date:
    """Move the displayed month forward or back, anchored to day 1."""
    return month_anchor(displayed_month.year, displayed_month.month + months)


def days_in_month(displayed_month: date) -> int:
    """Return the number of days in the displayed month."""
    return calendar.monthrange(displayed_month.year, displayed_month.month)[1]


def leading_blanks(displayed_month: date, first_weekday: int = calendar.SUNDAY) -> int:
    """Return how many placeholder cells precede day 1."""
    first = displayed_month.replace(day=1)
    return (first.weekday() - first_weekday) % 7


def month_label(displayed_month: date) -> str:
    """Return a "Month Year" label using the locale's month names."""
    return f"{calendar.month_name[displayed_month.month]} {displayed_month.year}"


def month_grid(
    displayed_month: date,
    totals_by_date: Mapping[str, float],
    goal: float | None,
    first_weekday: int = calendar.SUNDAY,
) -> MonthGrid:
    """Build the calendar cells for a month.

    Fill fractions are goal-relative when a positive goal is set. Without
    one they are relative to the largest daily total in this month, so the
    scale is not comparable between months.
    """
    first = displayed_month.replace(day=1)
    days = [
        (day, date_key(first.replace(day=day)))
        for day in range(1, days_in_month(first) + 1)
    ]
    totals = [totals_by_date.get(key, 0.0) for _, key in days]

    if goal is not None and goal > 0:
        basis = goal
    else:
        basis = max(totals, default=0.0)

    grid: MonthGrid = [None] * leading_blanks(first, first_weekday)
    for (day, key), total in zip(days, totals, strict=True):
        grid.append(
            DayCell(
                day_number=day,
                date_key=key,
                total_oz=total,
                fill_fraction=_fill_fraction(total, basis),
            )
        )
    return grid


def goal_reached_count(
    displayed_month: date,
    totals_by_date: Mapping[str, float],
    goal: float | None,
) -> GoalProgress | None:
    """Count the month's days whose total met the goal."""
    if goal is None:
        return None
    first = displayed_month.replace(day=1)
    total_days = days_in_month(first)
    reached = sum(
        1
        for day in range(1, total_days + 1)
        if totals_by_date.get(date_key(first.replace(day=day)), 0.0) >= goal
    )
    return GoalProgress(reached=reached, total_days=total_days)


def _fill_fraction(total: float, basis: float) -> float:
    if basis <= 0:
        return 0.0
    return min(total / basis, 1.0)
