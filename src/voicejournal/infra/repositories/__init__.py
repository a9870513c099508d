"""Concrete repository implementations using SQLModel."""

from .journal import SQLModelJournalRepository
from .streak import SQLModelStreakRepository

__all__ = ["SQLModelJournalRepository", "SQLModelStreakRepository"]
