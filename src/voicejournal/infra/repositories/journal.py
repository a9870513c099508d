"""SQLModel implementation of the journal entry repository."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from sqlmodel import Session, select

from ...infra.database import SessionFactory
from ...models.journal import JournalEntry

EDITABLE_FIELDS = frozenset({"title", "content", "mood", "color_tag"})


class SQLModelJournalRepository:
    """SQLModel-based journal entry repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, entry_id: UUID) -> Optional[JournalEntry]:
        """Retrieve an entry by ID."""
        with self.session_factory() as session:
            obj = session.get(JournalEntry, entry_id)
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self) -> list[JournalEntry]:
        """List every entry, newest first."""
        with self.session_factory() as session:
            statement = select(JournalEntry).order_by(JournalEntry.created_at.desc())  # type: ignore[attr-defined]
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def list_between(self, start: datetime, end: datetime) -> list[JournalEntry]:
        """Entries created in ``[start, end)``, oldest first."""
        with self.session_factory() as session:
            statement = (
                select(JournalEntry)
                .where(JournalEntry.created_at >= start)
                .where(JournalEntry.created_at < end)
                .order_by(JournalEntry.created_at)  # type: ignore[arg-type]
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def insert(self, entry: JournalEntry) -> JournalEntry:
        """Persist a new entry."""
        with self.session_factory() as session:
            self.insert_in(session, entry)
            session.commit()
            session.refresh(entry)
            session.expunge(entry)
            return entry

    def update(self, entry_id: UUID, **fields: Any) -> Optional[JournalEntry]:
        """Apply field changes; None when the entry does not exist."""
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        with self.session_factory() as session:
            entry = session.get(JournalEntry, entry_id)
            if entry is None:
                return None
            for name, value in fields.items():
                setattr(entry, name, value)
            session.add(entry)
            session.commit()
            session.refresh(entry)
            session.expunge(entry)
            return entry

    def delete(self, entry_id: UUID) -> bool:
        """Delete an entry; False when it did not exist."""
        with self.session_factory() as session:
            deleted = self.delete_in(session, entry_id)
            session.commit()
            return deleted

    # In-session helpers for callers that combine writes in one transaction
    @staticmethod
    def insert_in(session: Session, entry: JournalEntry) -> JournalEntry:
        session.add(entry)
        session.flush()
        return entry

    @staticmethod
    def delete_in(session: Session, entry_id: UUID) -> bool:
        entry = session.get(JournalEntry, entry_id)
        if entry is None:
            return False
        session.delete(entry)
        session.flush()
        return True


__all__ = ["SQLModelJournalRepository"]
