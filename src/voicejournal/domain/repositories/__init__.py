"""Repository protocol definitions for domain layer."""

from .journal import JournalRepository
from .streak import StreakRepository

__all__ = ["JournalRepository", "StreakRepository"]
