"""Streak repository backed by the singleton ``streak`` row."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Session, select

from ...infra.database import SessionFactory
from ...models.streak import Streak
from ...services.streaks import StreakState


class SQLModelStreakRepository:
    """SQLModel-based streak repository."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def load(self) -> Optional[StreakState]:
        with self.session_factory() as session:
            return self.load_in(session)

    def save(self, state: StreakState) -> StreakState:
        with self.session_factory() as session:
            self.save_in(session, state)
            session.commit()
            return state

    @staticmethod
    def _row(session: Session) -> Optional[Streak]:
        return session.exec(select(Streak).order_by(Streak.id).limit(1)).first()  # type: ignore[arg-type]

    @classmethod
    def load_in(cls, session: Session) -> Optional[StreakState]:
        row = cls._row(session)
        if row is None:
            return None
        return StreakState(
            number_of_entries=row.number_of_entries,
            current_streak=row.current_streak,
            longest_streak=row.longest_streak,
            last_entry_date=row.last_entry_date,
        )

    @classmethod
    def save_in(cls, session: Session, state: StreakState) -> Streak:
        row = cls._row(session)
        if row is None:
            row = Streak()
        row.number_of_entries = state.number_of_entries
        row.current_streak = state.current_streak
        row.longest_streak = max(state.longest_streak, state.current_streak)
        row.last_entry_date = state.last_entry_date
        session.add(row)
        session.flush()
        return row


__all__ = ["SQLModelStreakRepository"]
