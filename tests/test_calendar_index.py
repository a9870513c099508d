"""Tests for timeline and calendar date bucketing."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, timezone

import pytest

from voicejournal.services import calendar_index
from voicejournal.services.calendar_index import (
    date_range,
    days_in_month_grid,
    entries_for_date,
    entry_counts_by_day,
    has_entries,
    month_overview,
    start_of_day,
)


def test_start_of_day_truncates_naive_datetime():
    assert start_of_day(datetime(2025, 10, 3, 17, 45, 12, 99)) == datetime(2025, 10, 3)


def test_start_of_day_accepts_date():
    assert start_of_day(date(2025, 10, 3)) == datetime(2025, 10, 3)


def test_start_of_day_converts_aware_into_zone():
    tz = timezone(timedelta(hours=9))
    value = datetime(2025, 10, 3, 20, 0, tzinfo=timezone.utc)
    assert start_of_day(value, tz) == datetime(2025, 10, 4)


class TestEntriesForDate:
    def test_filters_to_same_day_newest_first(self, entry_factory):
        morning = entry_factory(datetime(2025, 10, 3, 8, 0), "Morning Reflection")
        evening = entry_factory(datetime(2025, 10, 3, 21, 0), "Evening Thoughts")
        other = entry_factory(datetime(2025, 10, 2, 12, 0), "A Calm Day")

        result = entries_for_date(date(2025, 10, 3), [morning, other, evening])

        assert [e.title for e in result] == ["Evening Thoughts", "Morning Reflection"]

    def test_equal_timestamps_keep_input_order(self, entry_factory):
        ts = datetime(2025, 9, 25, 10, 0)
        entries = [entry_factory(ts, f"Sept 25 Entry #{i}") for i in range(1, 6)]

        result = entries_for_date(datetime(2025, 9, 25, 23, 0), entries)

        assert [e.title for e in result] == [e.title for e in entries]

    def test_empty_day(self, entry_factory):
        entries = [entry_factory(datetime(2025, 10, 3, 8, 0))]
        assert entries_for_date(date(2025, 10, 4), entries) == []

    def test_has_entries_agrees_with_entries_for_date(self, entry_factory):
        entries = [
            entry_factory(datetime(2025, 10, 3, 8, 0)),
            entry_factory(datetime(2025, 10, 1, 23, 59)),
            entry_factory(datetime(2025, 9, 25, 0, 0)),
        ]
        start = date(2025, 9, 20)
        for offset in range(20):
            day = start + timedelta(days=offset)
            assert has_entries(day, entries) == (len(entries_for_date(day, entries)) > 0)


class TestDateRange:
    def test_empty_entries_gives_trailing_window(self):
        days = date_range([], datetime(2025, 10, 3, 15, 30), trailing_days=90)

        assert len(days) == 91
        assert days[0] == date(2025, 10, 3)
        assert days[-1] == date(2025, 7, 5)
        assert days == sorted(days, reverse=True)

    def test_default_window_is_ninety_days(self):
        assert len(date_range([], date(2025, 10, 3))) == calendar_index.DEFAULT_TRAILING_DAYS + 1

    def test_old_entry_outside_window_is_included(self, entry_factory):
        old = entry_factory(datetime(2025, 1, 1, 12, 0))

        days = date_range([old], datetime(2025, 10, 3, 9, 0))

        assert date(2025, 1, 1) in days
        assert days[-1] == date(2025, 1, 1)
        assert len(days) == 92

    def test_entries_inside_window_do_not_duplicate_days(self, entry_factory):
        entries = [entry_factory(datetime(2025, 10, 3, h, 0)) for h in (8, 12, 20)]
        assert len(date_range(entries, datetime(2025, 10, 3, 22, 0))) == 91

    def test_no_future_days_synthesized(self):
        days = date_range([], datetime(2025, 10, 3, 9, 0), trailing_days=3)
        assert days == [date(2025, 10, 3), date(2025, 10, 2), date(2025, 10, 1), date(2025, 9, 30)]

    def test_zero_trailing_days_is_just_today(self):
        assert date_range([], datetime(2025, 10, 3, 9, 0), trailing_days=0) == [date(2025, 10, 3)]

    def test_negative_trailing_days_rejected(self):
        with pytest.raises(ValueError):
            date_range([], datetime(2025, 10, 3), trailing_days=-1)


class TestMonthGrid:
    def test_thirty_day_month_starting_wednesday(self):
        # October 2025 has 31 days; April 2026 has 30 and starts on a Wednesday.
        assert date(2026, 4, 1).weekday() == calendar.WEDNESDAY

        grid = days_in_month_grid(date(2026, 4, 15))

        assert grid[:3] == [None, None, None]
        assert grid[3] == date(2026, 4, 1)
        assert [d for d in grid if d is not None] == [date(2026, 4, d) for d in range(1, 31)]
        assert len(grid) == 35
        assert grid[33:] == [None, None]

    def test_monday_first_weekday(self):
        grid = days_in_month_grid(date(2026, 4, 1), first_weekday=calendar.MONDAY)
        assert grid[:2] == [None, None]
        assert grid[2] == date(2026, 4, 1)
        assert len(grid) % 7 == 0

    def test_february_starting_on_first_weekday_needs_no_padding(self):
        # February 2026 starts on a Sunday and has 28 days.
        grid = days_in_month_grid(date(2026, 2, 10))
        assert len(grid) == 28
        assert None not in grid

    def test_leap_february(self):
        grid = days_in_month_grid(date(2024, 2, 1))
        assert date(2024, 2, 29) in grid
        assert len(grid) % 7 == 0


class TestMonthOverview:
    def test_counts_and_today_flag(self, entry_factory):
        entries = [
            entry_factory(datetime(2026, 4, 2, 8, 0)),
            entry_factory(datetime(2026, 4, 2, 18, 0)),
            entry_factory(datetime(2026, 4, 9, 8, 0)),
            entry_factory(datetime(2026, 5, 1, 8, 0)),
        ]

        cells = month_overview(date(2026, 4, 1), entries, today=datetime(2026, 4, 9, 12, 0))
        filled = {cell.day: cell for cell in cells if cell is not None}

        assert cells[:3] == [None, None, None]
        assert filled[date(2026, 4, 2)].entry_count == 2
        assert filled[date(2026, 4, 9)].is_today
        assert filled[date(2026, 4, 9)].has_entries
        assert not filled[date(2026, 4, 10)].has_entries
        assert sum(cell.entry_count for cell in filled.values()) == 3

    def test_entry_counts_by_day(self, entry_factory):
        entries = [entry_factory(datetime(2025, 9, 25, h, 0)) for h in range(5)]
        assert entry_counts_by_day(entries) == {date(2025, 9, 25): 5}
