"""Protocol repository (implemented in memory and with SQLAlchemy)"""

from typing import Optional, Protocol

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: int) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> GameModel:
        """Store a new game under game.id and return the stored data."""
        ...

    def update_game(self, game_id: int, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        ...

    def delete_game(self, game_id: int) -> GameModel | None:
        """Remove a game's record."""
        ...

    def list_games(self, state: Optional[str] = None) -> list[GameModel]:
        """All recorded games (optionally only those in the given state), ordered by ID."""
        ...

    def next_game_id(self) -> int:
        """Lowest positive ID not taken by any recorded game."""
        ...
