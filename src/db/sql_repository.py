"""Implementation of (Game)Repository using SQLAlchemy"""

import logging
from itertools import count
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame

logger = logging.getLogger(__name__)


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: int) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> GameModel:
        """Store a new game under game.id and return the stored data."""
        game_db = DBGame(
            id=game.id,
            players=list(game.players),
            rounds=[dict(guesses) for guesses in game.rounds],
            current_round=(
                dict(game.current_round) if game.current_round is not None else None
            ),
            state=game.state,
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        logger.debug("Inserted game %s", game.id)
        return self._to_model(game_db)

    def update_game(self, game_id: int, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        # assign fresh containers, so the JSON columns are flagged as changed
        game_db.players = list(game.players)
        game_db.rounds = [dict(guesses) for guesses in game.rounds]
        game_db.current_round = (
            dict(game.current_round) if game.current_round is not None else None
        )
        game_db.state = game.state
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def delete_game(self, game_id: int) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def list_games(self, state: Optional[str] = None) -> list[GameModel]:
        query = select(DBGame).order_by(DBGame.id)
        if state is not None:
            query = query.where(DBGame.state == state)
        return [self._to_model(game_db) for game_db in self.db.scalars(query)]

    def next_game_id(self) -> int:
        """Lowest free positive ID (fills up gaps left by deleted games)."""
        taken = set(self.db.scalars(select(DBGame.id)))
        return next(game_id for game_id in count(1) if game_id not in taken)

    def _fetch_game(self, game_id: int) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            id=game_db.id,
            players=list(game_db.players),
            state=game_db.state,
            rounds=[dict(guesses) for guesses in game_db.rounds],
            current_round=(
                dict(game_db.current_round)
                if game_db.current_round is not None
                else None
            ),
        )
