"""Pytest configuration and shared fixtures for VoiceJournal tests.

Provides an isolated SQLite database per test, a controllable clock, and
factories for entries so services and repositories can be tested without
touching the real app database.
"""

from __future__ import annotations

import random
import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from voicejournal.clock import FixedClock
from voicejournal.infra.database import create_session_factory
from voicejournal.models import JournalEntry, Streak  # noqa: F401
from voicejournal.services.journal import JournalService


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep config from reading or creating anything outside the test dir."""
    monkeypatch.setenv("VOICEJOURNAL_DATA_DIR", str(tmp_path / "data"))
    for name in (
        "VOICEJOURNAL_DATABASE_URL",
        "VOICEJOURNAL_TRAILING_DAYS",
        "VOICEJOURNAL_FIRST_WEEKDAY",
        "VOICEJOURNAL_TIMEZONE",
        "VOICEJOURNAL_DEV_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the app context builds."""
    return create_session_factory(db_engine)


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def clock():
    """Clock parked at 2025-10-03 09:00 local time."""
    return FixedClock(datetime(2025, 10, 3, 9, 0))


@pytest.fixture
def journal_service(session_factory, clock):
    return JournalService(session_factory, clock=clock, rng=random.Random(7))


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def entry_factory():
    """Build unsaved entries for pure calendar tests.

    Returns:
        Callable: Function returning JournalEntry instances
    """

    def _create_entry(created_at: datetime, title: str = "Entry", mood: str = "😊") -> JournalEntry:
        return JournalEntry(created_at=created_at, title=title, content="", mood=mood)

    return _create_entry
