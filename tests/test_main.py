"""Unit tests for src/main.py"""

import logging

from sqlalchemy.orm import Session

from src.core.config import Settings
from src.db.memory_repository import InMemoryGameRepository
from src.db.sql_repository import SQLGameRepository
from src.main import create_service
from src.services.game_service import CreateGameRequest, GameService


def test_in_memory_service() -> None:
    service = create_service(Settings(log_level="WARNING"))
    assert isinstance(service, GameService)
    assert isinstance(service.repo, InMemoryGameRepository)
    assert logging.getLogger().level == logging.WARNING


def test_sql_backed_service(db_session_repo: Session) -> None:
    service = create_service(Settings(), db_session=db_session_repo)
    assert isinstance(service.repo, SQLGameRepository)

    created = service.create_game(CreateGameRequest(player_name="Alice"))
    assert [summary.game_id for summary in service.list_games()] == [created.game_id]
