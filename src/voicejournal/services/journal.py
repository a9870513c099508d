"""Journal entry workflows: create, edit, delete and timeline queries.

Creating an entry and advancing the streak happen in one session, so either
both land or neither does. Listeners registered with ``on_saved`` receive an
``EntrySaved`` event after the commit.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Callable, Optional, Union
from uuid import UUID

from ..clock import Clock, SystemClock
from ..constants.palette import DEFAULT_MOOD, JOURNAL_COLORS
from ..domain.document import RichDocument
from ..errors import EntryNotFoundError, InvalidEntryError
from ..infra.database import SessionFactory
from ..infra.repositories import SQLModelJournalRepository, SQLModelStreakRepository
from ..logging_config import get_logger
from ..models.journal import JournalEntry
from . import calendar_index, streaks
from .streaks import StreakState

logger = get_logger(__name__)

Body = Union[str, RichDocument]


@dataclass(frozen=True)
class EntrySaved:
    """Result of saving a new entry, handed to listeners that show the celebration."""

    entry: JournalEntry
    streak: StreakState
    previous_streak: StreakState

    @property
    def streak_advanced(self) -> bool:
        return self.streak.current_streak > self.previous_streak.current_streak


@dataclass(frozen=True)
class TimelineDay:
    day: date
    entries: list[JournalEntry]

    @property
    def has_entries(self) -> bool:
        return bool(self.entries)


SavedListener = Callable[[EntrySaved], None]


def _as_document(body: Body) -> RichDocument:
    if isinstance(body, RichDocument):
        return body
    return RichDocument.plain(body)


def _checked_mood(mood: str) -> str:
    mood = (mood or "").strip()
    if not mood:
        raise InvalidEntryError("mood must be a non-empty symbol")
    return mood


class JournalService:
    """Application-facing operations over entries and the streak record."""

    def __init__(
        self,
        session_factory: SessionFactory,
        *,
        clock: Optional[Clock] = None,
        trailing_days: int = calendar_index.DEFAULT_TRAILING_DAYS,
        tz: Optional[tzinfo] = None,
        rng: Optional[random.Random] = None,
    ):
        self.session_factory = session_factory
        self.entries = SQLModelJournalRepository(session_factory)
        self.streaks = SQLModelStreakRepository(session_factory)
        self.clock = clock or SystemClock()
        self.trailing_days = trailing_days
        self.tz = tz
        self._rng = rng or random.Random()
        self._listeners: list[SavedListener] = []

    def on_saved(self, listener: SavedListener) -> SavedListener:
        """Register a callback for new entries. Usable as a decorator."""
        self._listeners.append(listener)
        return listener

    def create_entry(
        self,
        body: Body,
        *,
        mood: str = DEFAULT_MOOD,
        title: str = "",
        color_tag: Optional[str] = None,
    ) -> EntrySaved:
        """Save a new entry and advance the streak in the same transaction."""
        document = _as_document(body)
        mood = _checked_mood(mood)
        title = title.strip() or document.smart_title()
        if color_tag is None:
            color_tag = self._rng.choice(list(JOURNAL_COLORS))

        now = self.clock.now()
        entry = JournalEntry(
            created_at=now,
            title=title,
            content=document.to_json(),
            mood=mood,
            color_tag=color_tag,
        )

        try:
            with self.session_factory() as session:
                SQLModelJournalRepository.insert_in(session, entry)
                previous = SQLModelStreakRepository.load_in(session) or streaks.ZERO_STATE
                updated = streaks.on_entry_created(previous, now, tz=self.tz)
                SQLModelStreakRepository.save_in(session, updated)
                session.commit()
                session.refresh(entry)
                session.expunge(entry)
        except Exception:
            logger.exception("Failed to save journal entry", extra={"title": title})
            raise

        logger.info(
            "Journal entry saved",
            extra={
                "entry_id": str(entry.id),
                "current_streak": updated.current_streak,
                "longest_streak": updated.longest_streak,
                "number_of_entries": updated.number_of_entries,
            },
        )
        event = EntrySaved(entry=entry, streak=updated, previous_streak=previous)
        for listener in list(self._listeners):
            listener(event)
        return event

    def update_entry(
        self,
        entry_id: UUID,
        *,
        title: Optional[str] = None,
        body: Optional[Body] = None,
        mood: Optional[str] = None,
        color_tag: Optional[str] = None,
    ) -> JournalEntry:
        """Edit an entry in place. The creation time and the streak are untouched."""
        fields: dict[str, str] = {}
        document = _as_document(body) if body is not None else None
        if document is not None:
            fields["content"] = document.to_json()
        if title is not None:
            title = title.strip()
            if not title:
                title = (document or self._require(entry_id).document).smart_title()
            fields["title"] = title
        if mood is not None:
            fields["mood"] = _checked_mood(mood)
        if color_tag is not None:
            fields["color_tag"] = color_tag

        if not fields:
            return self._require(entry_id)

        entry = self.entries.update(entry_id, **fields)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        logger.info("Journal entry updated", extra={"entry_id": str(entry_id), "fields": sorted(fields)})
        return entry

    def delete_entry(self, entry_id: UUID) -> StreakState:
        """Delete an entry and decrement the entry count."""
        with self.session_factory() as session:
            if not SQLModelJournalRepository.delete_in(session, entry_id):
                raise EntryNotFoundError(entry_id)
            updated = streaks.on_entry_deleted(SQLModelStreakRepository.load_in(session))
            SQLModelStreakRepository.save_in(session, updated)
            session.commit()

        logger.info(
            "Journal entry deleted",
            extra={"entry_id": str(entry_id), "number_of_entries": updated.number_of_entries},
        )
        return updated

    def get_entry(self, entry_id: UUID) -> JournalEntry:
        return self._require(entry_id)

    def list_entries(self) -> list[JournalEntry]:
        return self.entries.list_all()

    def streak(self) -> StreakState:
        return self.streaks.load() or streaks.ZERO_STATE

    def entries_on(self, day: date) -> list[JournalEntry]:
        return calendar_index.entries_for_date(day, self.entries.list_all(), self.tz)

    def timeline(self, trailing_days: Optional[int] = None) -> list[TimelineDay]:
        """Every timeline day, newest first, with that day's entries."""
        entries = self.entries.list_all()
        days = calendar_index.date_range(
            entries,
            self.clock.now(),
            self.trailing_days if trailing_days is None else trailing_days,
            self.tz,
        )
        by_day: dict[date, list[JournalEntry]] = {}
        for entry in entries:
            by_day.setdefault(calendar_index.day_of(entry.created_at, self.tz), []).append(entry)
        return [
            TimelineDay(day, calendar_index.entries_for_date(day, by_day.get(day, []), self.tz))
            for day in days
        ]

    def _require(self, entry_id: UUID) -> JournalEntry:
        entry = self.entries.get_by_id(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry


__all__ = ["EntrySaved", "JournalService", "TimelineDay"]
