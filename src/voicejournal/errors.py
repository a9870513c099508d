"""Exception types raised by the journal services."""

from __future__ import annotations

from uuid import UUID


class VoiceJournalError(Exception):
    """Base class for application errors."""


class ConfigError(VoiceJournalError, ValueError):
    """An environment setting could not be interpreted."""


class InvalidDocumentError(VoiceJournalError, ValueError):
    """A rich-text document or style span is malformed."""


class InvalidEntryError(VoiceJournalError, ValueError):
    """An entry field such as the mood has an unusable value."""


class EntryNotFoundError(VoiceJournalError, LookupError):
    """No journal entry exists with the requested id."""

    def __init__(self, entry_id: UUID):
        super().__init__(f"Journal entry {entry_id} not found")
        self.entry_id = entry_id


__all__ = [
    "ConfigError",
    "EntryNotFoundError",
    "InvalidDocumentError",
    "InvalidEntryError",
    "VoiceJournalError",
]
