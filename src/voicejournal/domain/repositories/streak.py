"""Streak record repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ...services.streaks import StreakState


@runtime_checkable
class StreakRepository(Protocol):
    """Loads and stores the single streak record."""

    def load(self) -> Optional[StreakState]:
        """Current state, or None before the first entry."""
        ...

    def save(self, state: StreakState) -> StreakState:
        """Persist ``state`` as the streak record."""
        ...
