"""Singleton streak record."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class Streak(SQLModel, table=True):
    """Persisted counters behind the streak card. Only one row ever exists."""

    __tablename__: ClassVar[str] = "streak"

    id: Optional[int] = Field(default=None, primary_key=True)
    number_of_entries: int = Field(default=0, nullable=False)
    current_streak: int = Field(default=0, nullable=False)
    longest_streak: int = Field(default=0, nullable=False)
    last_entry_date: Optional[datetime] = Field(default=None, sa_type=DateTime)
