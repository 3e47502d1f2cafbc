"""Tests for aggregation of the entry log."""

import random
import sys
from datetime import UTC, date, datetime, timedelta
from types import SimpleNamespace

from hydration_tracker.services.aggregation import (
    INVALID_DATE_KEY,
    aggregate_by_date,
    daily_total,
    date_key,
    local_now,
    remaining_to_goal,
)
from tests.conftest import NOW, make_entry


def test_daily_total_sums_volumes() -> None:
    entries = [make_entry(8), make_entry(6)]

    assert daily_total(entries) == 14
    assert remaining_to_goal(daily_total(entries), None) is None


def test_daily_total_is_order_independent() -> None:
    entries = [make_entry(volume) for volume in (0.1, 0.2, 0.3, 1e16, 1.5, 7.25)]
    expected = daily_total(entries)

    shuffled = list(entries)
    random.Random(7).shuffle(shuffled)

    assert daily_total(shuffled) == expected
    assert daily_total(reversed(entries)) == expected


def test_daily_total_ignores_unreadable_volumes() -> None:
    entries = [
        make_entry(8),
        make_entry(float("nan")),
        make_entry(float("inf")),
        SimpleNamespace(volume_oz="abc"),
        SimpleNamespace(volume_oz="4"),
        SimpleNamespace(volume_oz=None),
        SimpleNamespace(volume_oz=True),
        SimpleNamespace(volume_oz=-3),
        SimpleNamespace(),
    ]

    assert daily_total(entries) == 12


def test_daily_total_of_nothing_is_zero() -> None:
    assert daily_total([]) == 0


def test_remaining_to_goal_saturates_at_zero() -> None:
    assert remaining_to_goal(14, 20) == 6
    assert remaining_to_goal(14, 10) == 0
    assert remaining_to_goal(14, 14) == 0
    assert remaining_to_goal(0, None) is None


def test_date_key_ignores_time_of_day() -> None:
    morning = datetime(2024, 3, 15, 0, 0)
    night = datetime(2024, 3, 15, 23, 59, 59)

    assert date_key(morning) == date_key(night) == "2024-03-15"


def test_date_key_differs_for_adjacent_days() -> None:
    late = datetime(2024, 3, 15, 23, 59)

    assert date_key(late) != date_key(late + timedelta(minutes=2))
    assert date_key(late + timedelta(minutes=2)) == "2024-03-16"


def test_date_key_is_fixed_width_and_sortable() -> None:
    keys = [
        date_key(date(2024, 1, 9)),
        date_key(date(2024, 10, 1)),
        date_key(date(999, 12, 31)),
    ]

    assert keys == ["2024-01-09", "2024-10-01", "0999-12-31"]
    assert sorted(keys) == ["0999-12-31", "2024-01-09", "2024-10-01"]


def test_date_key_uses_local_calendar_for_aware_timestamps() -> None:
    stamp = datetime(2024, 3, 15, 23, 30, tzinfo=UTC)

    assert date_key(stamp) == date_key(stamp.astimezone().replace(tzinfo=None))


def test_date_key_accepts_iso_strings() -> None:
    assert date_key("2024-03-15T08:00:00") == "2024-03-15"


def test_date_key_returns_sentinel_for_malformed_input() -> None:
    assert date_key("not a date") == INVALID_DATE_KEY
    assert date_key(None) == INVALID_DATE_KEY
    assert date_key(12345) == INVALID_DATE_KEY
    assert date_key(date(2024, 3, 15)) != INVALID_DATE_KEY


def test_local_now_is_timezone_aware() -> None:
    assert local_now().tzinfo is not None


def test_aggregate_by_date_groups_per_day() -> None:
    day_one = datetime(2024, 3, 1, 8)
    day_two = datetime(2024, 3, 2, 21)
    entries = [
        make_entry(8, day_one),
        make_entry(6, day_one.replace(hour=20)),
        make_entry(10, day_two),
    ]

    totals = aggregate_by_date(entries)

    assert totals == {"2024-03-01": 14, "2024-03-02": 10}
    assert "2024-03-03" not in totals


def test_aggregate_by_date_matches_per_day_totals_for_any_order() -> None:
    rng = random.Random(11)
    entries = [
        make_entry(rng.uniform(0.5, 40), NOW + timedelta(hours=rng.randint(-96, 96)))
        for _ in range(60)
    ]
    expected: dict[str, list[object]] = {}
    for entry in entries:
        expected.setdefault(date_key(entry.created_at), []).append(entry)

    for _ in range(5):
        rng.shuffle(entries)
        totals = aggregate_by_date(entries)
        assert totals == {key: daily_total(group) for key, group in expected.items()}


def test_aggregate_by_date_buckets_malformed_timestamps_separately() -> None:
    entries = [make_entry(8), SimpleNamespace(volume_oz=5, created_at="garbage")]

    totals = aggregate_by_date(entries)

    assert totals[date_key(NOW)] == 8
    assert totals[INVALID_DATE_KEY] == 5


def test_totals_saturate_instead_of_overflowing() -> None:
    entries = [make_entry(1e308), make_entry(1e308), make_entry(8)]

    assert daily_total(entries) == sys.float_info.max
    assert aggregate_by_date(entries) == {date_key(NOW): sys.float_info.max}
    assert remaining_to_goal(daily_total(entries), 64) == 0
