"""Date bucketing for the timeline and the month calendar.

Everything here is a pure function of its arguments: the entry collection is
passed in on every call and nothing is cached between calls.
"""

from __future__ import annotations

import calendar
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Iterable, Optional, Protocol, Sequence, TypeVar

DEFAULT_TRAILING_DAYS = 90


class Dated(Protocol):
    """Anything stamped with a creation time (``JournalEntry`` in practice)."""

    created_at: datetime


E = TypeVar("E", bound=Dated)


def start_of_day(value: date | datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Truncate to local midnight.

    Naive datetimes are taken to be local already. Aware datetimes are
    converted to ``tz`` (or the system zone when ``tz`` is None) and returned
    naive so they compare with stored naive timestamps.
    """
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    if value.tzinfo is not None:
        value = value.astimezone(tz).replace(tzinfo=None)
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def day_of(value: date | datetime, tz: Optional[tzinfo] = None) -> date:
    """Calendar day a timestamp falls on."""
    return start_of_day(value, tz).date()


def has_entries(day: date | datetime, entries: Iterable[Dated], tz: Optional[tzinfo] = None) -> bool:
    """True when at least one entry falls on the same calendar day as ``day``."""
    target = day_of(day, tz)
    return any(day_of(entry.created_at, tz) == target for entry in entries)


def entries_for_date(
    day: date | datetime, entries: Iterable[E], tz: Optional[tzinfo] = None
) -> list[E]:
    """Entries on ``day``, most recent first (stable for equal timestamps)."""
    target = day_of(day, tz)
    matching = [entry for entry in entries if day_of(entry.created_at, tz) == target]
    return sorted(matching, key=lambda entry: _local_timestamp(entry.created_at, tz), reverse=True)


def _local_timestamp(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Sort key that keeps aware and naive timestamps comparable."""
    if value.tzinfo is not None:
        return value.astimezone(tz).replace(tzinfo=None)
    return value


def date_range(
    entries: Iterable[Dated],
    now: date | datetime,
    trailing_days: int = DEFAULT_TRAILING_DAYS,
    tz: Optional[tzinfo] = None,
) -> list[date]:
    """Days shown on the scrollable timeline, newest first.

    Always today plus ``trailing_days`` days before it, together with every
    day that holds an entry, however old.
    """
    if trailing_days < 0:
        raise ValueError("trailing_days must not be negative")

    today = day_of(now, tz)
    days = {today - timedelta(days=offset) for offset in range(trailing_days + 1)}
    days.update(day_of(entry.created_at, tz) for entry in entries)
    return sorted(days, reverse=True)


def days_in_month_grid(month: date | datetime, first_weekday: int = calendar.SUNDAY) -> list[Optional[date]]:
    """Month laid out in weeks of seven slots; ``None`` marks a blank slot.

    ``first_weekday`` uses :mod:`calendar` numbering (Monday=0, Sunday=6).
    """
    year, month_number = month.year, month.month
    first_day_weekday, days_in_month = calendar.monthrange(year, month_number)
    leading = (first_day_weekday - first_weekday) % 7

    cells: list[Optional[date]] = [None] * leading
    cells.extend(date(year, month_number, day) for day in range(1, days_in_month + 1))
    while len(cells) % 7:
        cells.append(None)
    return cells


def entry_counts_by_day(entries: Iterable[Dated], tz: Optional[tzinfo] = None) -> dict[date, int]:
    """Number of entries per calendar day."""
    return dict(Counter(day_of(entry.created_at, tz) for entry in entries))


@dataclass(frozen=True, slots=True)
class CalendarCell:
    """One filled slot of the month grid."""

    day: date
    entry_count: int
    is_today: bool

    @property
    def has_entries(self) -> bool:
        return self.entry_count > 0


def month_overview(
    month: date | datetime,
    entries: Sequence[Dated],
    today: date | datetime,
    first_weekday: int = calendar.SUNDAY,
    tz: Optional[tzinfo] = None,
) -> list[Optional[CalendarCell]]:
    """Month grid joined with per-day entry counts."""
    counts = entry_counts_by_day(entries, tz)
    current = day_of(today, tz)
    return [
        None if slot is None else CalendarCell(slot, counts.get(slot, 0), slot == current)
        for slot in days_in_month_grid(month, first_weekday)
    ]


__all__ = [
    "CalendarCell",
    "DEFAULT_TRAILING_DAYS",
    "date_range",
    "day_of",
    "days_in_month_grid",
    "entries_for_date",
    "entry_counts_by_day",
    "has_entries",
    "month_overview",
    "start_of_day",
]
