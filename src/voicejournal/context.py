"""Application context for dependency injection."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine

from .clock import Clock, SystemClock
from .config import BaseConfig
from .infra.database import SessionFactory, create_db_engine, create_session_factory, init_database
from .domain.repositories import JournalRepository, StreakRepository
from .services.journal import JournalService


@dataclass
class AppContext:
    """Everything a front end needs, wired once at startup."""

    config: BaseConfig
    engine: Engine
    session_factory: SessionFactory
    clock: Clock

    journal_repo: JournalRepository
    streak_repo: StreakRepository
    journal: JournalService

    def dispose(self) -> None:
        self.engine.dispose()


def create_app_context(
    config: Optional[BaseConfig] = None,
    *,
    clock: Optional[Clock] = None,
    rng: Optional[random.Random] = None,
) -> AppContext:
    """Create and initialize the application context."""

    if config is None:
        config = BaseConfig()
    clock = clock or SystemClock()

    engine = create_db_engine(config)
    init_database(engine)
    session_factory = create_session_factory(engine)

    journal = JournalService(
        session_factory,
        clock=clock,
        trailing_days=config.TRAILING_DAYS,
        tz=config.TIMEZONE,
        rng=rng,
    )

    return AppContext(
        config=config,
        engine=engine,
        session_factory=session_factory,
        clock=clock,
        journal_repo=journal.entries,
        streak_repo=journal.streaks,
        journal=journal,
    )
