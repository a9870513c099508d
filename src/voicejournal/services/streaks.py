"""Streak bookkeeping for journal entries.

A streak day is any local calendar day holding at least one entry. The state
is only recomputed forward, when an entry is created; deleting old entries
lowers the entry count but leaves the streak counters alone.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, tzinfo
from typing import Optional

from .calendar_index import start_of_day


@dataclass(frozen=True, slots=True)
class StreakState:
    """Counters shown on the streak card."""

    number_of_entries: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    last_entry_date: Optional[datetime] = None


ZERO_STATE = StreakState()


def on_entry_created(
    state: Optional[StreakState], now: datetime, *, tz: Optional[tzinfo] = None
) -> StreakState:
    """Return the state after an entry is created at ``now``.

    ``state`` of None means no streak record exists yet.
    """
    state = state or ZERO_STATE
    today = start_of_day(now, tz)

    if state.last_entry_date is None:
        current = 1
    else:
        last_day = start_of_day(state.last_entry_date, tz)
        if last_day == today:
            current = state.current_streak
        elif last_day == today - timedelta(days=1):
            current = state.current_streak + 1
        else:
            # Missed a day, or the last entry is dated in the future.
            current = 1

    return StreakState(
        number_of_entries=state.number_of_entries + 1,
        current_streak=current,
        longest_streak=max(state.longest_streak, current),
        last_entry_date=now,
    )


def on_entry_deleted(state: Optional[StreakState]) -> StreakState:
    """Return the state after an entry is deleted."""
    state = state or ZERO_STATE
    return replace(state, number_of_entries=max(0, state.number_of_entries - 1))


@dataclass(frozen=True, slots=True)
class StreakSnapshot:
    """Numbers pushed to the home-screen widget and Live Activity."""

    current_streak: int
    longest_streak: int

    @property
    def progress(self) -> float:
        return min(self.current_streak / max(1, self.longest_streak), 1.0)


def streak_snapshot(state: Optional[StreakState]) -> StreakSnapshot:
    state = state or ZERO_STATE
    return StreakSnapshot(current_streak=state.current_streak, longest_streak=state.longest_streak)


__all__ = [
    "StreakSnapshot",
    "StreakState",
    "ZERO_STATE",
    "on_entry_created",
    "on_entry_deleted",
    "streak_snapshot",
]
