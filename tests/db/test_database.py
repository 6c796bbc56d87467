"""Unit tests for src/db/database.py"""

from sqlalchemy import inspect

from src.core.config import Settings
from src.db.database import build_engine, get_db, init_db


def test_build_engine_from_settings() -> None:
    engine = build_engine(Settings(database_url="sqlite:///:memory:"))
    assert engine.url.drivername == "sqlite"
    assert engine.echo is False


def test_init_db_creates_games_table() -> None:
    engine = build_engine(Settings(database_url="sqlite:///:memory:"))
    init_db(engine)
    assert "games" in inspect(engine).get_table_names()


def test_get_db_closes_session() -> None:
    generator = get_db()
    session = next(generator)
    assert session.is_active
    generator.close()
