"""SQLModel table exports."""

from .journal import JournalEntry
from .streak import Streak

__all__ = ["JournalEntry", "Streak"]
