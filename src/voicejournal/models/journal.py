"""Journal entry table."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import ClassVar

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from ..constants.palette import DEFAULT_MOOD, resolve_color
from ..domain.document import RichDocument


class JournalEntry(SQLModel, table=True):
    """One journal note; ``created_at`` decides which calendar day it counts toward."""

    __tablename__: ClassVar[str] = "journal_entry"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime, nullable=False, index=True)
    title: str = Field(default="", max_length=120)
    content: str = Field(default="", description="JSON-encoded RichDocument")
    mood: str = Field(default=DEFAULT_MOOD, nullable=False, max_length=16)
    color_tag: str = Field(default="vibrantPurple", nullable=False, max_length=32)

    @property
    def document(self) -> RichDocument:
        return RichDocument.from_json(self.content)

    @property
    def preview(self) -> str:
        return self.document.preview()

    @property
    def color(self) -> str:
        """Palette name, or ``gray`` when the stored tag is unknown."""
        return resolve_color(self.color_tag)
