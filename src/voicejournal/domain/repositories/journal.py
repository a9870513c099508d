"""Journal entry repository protocol."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol, runtime_checkable
from uuid import UUID

from ...models.journal import JournalEntry


@runtime_checkable
class JournalRepository(Protocol):
    """Repository for journal entries."""

    def get_by_id(self, entry_id: UUID) -> Optional[JournalEntry]:
        """Retrieve an entry by ID."""
        ...

    def list_all(self) -> list[JournalEntry]:
        """List every entry, newest first."""
        ...

    def list_between(self, start: datetime, end: datetime) -> list[JournalEntry]:
        """Entries created in ``[start, end)``, oldest first."""
        ...

    def insert(self, entry: JournalEntry) -> JournalEntry:
        """Persist a new entry."""
        ...

    def update(self, entry_id: UUID, **fields: Any) -> Optional[JournalEntry]:
        """Apply field changes; None when the entry does not exist."""
        ...

    def delete(self, entry_id: UUID) -> bool:
        """Delete an entry; False when it did not exist."""
        ...
