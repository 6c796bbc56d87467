"""Wire the layers together for whatever presentation layer sits on top (web app, bot, CLI, ...)."""

from typing import Optional

from sqlalchemy.orm import Session

from src.core.config import Settings, get_settings
from src.core.log_config import configure_logging
from src.db.memory_repository import InMemoryGameRepository
from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository
from src.services.game_service import GameService


def create_service(
    settings: Optional[Settings] = None, db_session: Optional[Session] = None
) -> GameService:
    """
    Build a GameService.
    ----

    With a database session, games are persisted through SQLAlchemy, otherwise they live in memory.
    NOTE a SQLAlchemy Session is not thread-safe: share a service built on one only within a single thread.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    repository: GameRepository = (
        SQLGameRepository(db_session)
        if db_session is not None
        else InMemoryGameRepository()
    )
    return GameService(repository)
