"""Implementation of (Game)Repository keeping everything in a dictionary. Handy for tests and single-process setups."""

import logging
from copy import deepcopy
from typing import Optional

from src.core.exceptions import RepositoryError
from src.core.models import GameModel

logger = logging.getLogger(__name__)


class InMemoryGameRepository:
    """Game models stored by ID. Copies go in and come out, so nobody outside shares the stored state."""

    def __init__(self) -> None:
        self._games: dict[int, GameModel] = {}

    def get_game(self, game_id: int) -> GameModel | None:
        """Get game by ID, if record exists."""
        game = self._games.get(game_id)
        return deepcopy(game) if game is not None else None

    def create_game(self, game: GameModel) -> GameModel:
        """Store a new game under game.id and return the stored data."""
        if game.id in self._games:
            raise RepositoryError(f"Game with game_id={game.id} already exists.")
        self._games[game.id] = deepcopy(game)
        logger.debug("Stored new game %s", game.id)
        return deepcopy(game)

    def update_game(self, game_id: int, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        if game_id not in self._games:
            return None
        self._games[game_id] = deepcopy(game)
        return deepcopy(game)

    def delete_game(self, game_id: int) -> GameModel | None:
        """Remove a game's record."""
        return self._games.pop(game_id, None)

    def list_games(self, state: Optional[str] = None) -> list[GameModel]:
        return [
            deepcopy(game)
            for game_id, game in sorted(self._games.items())
            if state is None or game.state == state
        ]

    def next_game_id(self) -> int:
        game_id = 1
        while game_id in self._games:
            game_id += 1
        return game_id

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._games.clear()
