"""Orchestration of communication from API layer to business logic and persistence layers (and the reverse direction)."""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from src.api.models import (
    CreateGameRequest,
    GameRequest,
    GameResponse,
    GameSummary,
    GuessRequest,
    GuessResponse,
    JoinGameRequest,
    JoinGameResponse,
    RoundResponse,
)
from src.core.exceptions import GameError, GameNotFoundError
from src.core.models import GameModel
from src.core.shared_types import GameState
from src.db.repository import GameRepository
from src.guessing.game import Game

logger = logging.getLogger(__name__)


class GameService:
    """
    Orchestration of layers for the guessing game.
    ----

    Every change to a game is a read-modify-write against the repository. One lock per game ID makes sure those
    never interleave for the same game, while different games do not wait on each other.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository
        self._lock = threading.Lock()  # guards the lock registry and ID allocation
        # game_id -> (lock, number of calls using or waiting for it)
        self._game_locks: dict[int, tuple[threading.Lock, int]] = {}

    # -- API logic ---
    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """Open a new game. The creator joins right away when they supplied a name."""
        with self._lock:
            game = Game.new_game(self.repo.next_game_id())
            if request.player_name is not None:
                game.add_player(request.player_name)
            stored_game = self.repo.create_game(game.to_model())

        logger.info("Created game %s", game.id)
        return self._create_game_response(stored_game)

    def join_game(self, request: JoinGameRequest) -> JoinGameResponse:
        """A player requested to join a game."""
        with self._locked_game(request.game_id) as game:
            player_id = game.add_player(request.player_name)

        logger.info(
            "Player %r joined game %s (state: %s)", player_id, game.id, game.state
        )
        return JoinGameResponse(game_id=game.id, player_id=player_id, state=game.state)

    def start_game(self, request: GameRequest) -> GameResponse:
        """Start playing before both players joined."""
        with self._locked_game(request.game_id) as game:
            game.start_game()
        return self._create_game_response(game.to_model())

    def start_round(self, request: GameRequest) -> GameResponse:
        with self._locked_game(request.game_id) as game:
            if game.current_round is not None:
                logger.warning(
                    "Game %s: starting a new round replaces the open round %s without archiving it",
                    game.id,
                    game.round_number,
                )
            game.start_round()
        return self._create_game_response(game.to_model())

    def end_round(self, request: GameRequest) -> GameResponse:
        with self._locked_game(request.game_id) as game:
            game.end_round()
        return self._create_game_response(game.to_model())

    def end_game(self, request: GameRequest) -> GameResponse:
        with self._locked_game(request.game_id) as game:
            game.end_game()
        logger.info("Game %s ended after %s round(s)", game.id, len(game.rounds))
        return self._create_game_response(game.to_model())

    def submit_guess(self, request: GuessRequest) -> GuessResponse:
        """Hand in a guess. game_over tells whether this guess matched the other player's."""
        with self._locked_game(request.game_id) as game:
            game_over = game.submit_guess(request.player, request.guess)

        if game_over:
            logger.info(
                "Game %s won in round %s: both players guessed the same word",
                game.id,
                game.round_number,
            )
        return GuessResponse(
            game_id=game.id,
            player=request.player,
            game_over=game_over,
            state=game.state,
        )

    def get_game_state(self, request: GameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check whether the other player guessed already for instance.
        """
        return self._create_game_response(self._fetch_game(request.game_id))

    def get_current_round_guesses(self, request: GameRequest) -> RoundResponse:
        """All guesses of the open round (e.g. to reveal them once both players guessed)."""
        game = Game.from_model(self._fetch_game(request.game_id))
        guesses = game.get_current_round_guesses()
        return RoundResponse(
            game_id=game.id, round_number=game.round_number, guesses=dict(guesses)
        )

    def list_games(self, state: Optional[GameState] = None) -> list[GameSummary]:
        """Show all recorded games, optionally only those in the given state."""
        models = self.repo.list_games(state.value if state is not None else None)
        return [self._create_game_summary(model) for model in models]

    def list_live_games(self) -> list[GameSummary]:
        """Games that can still be joined or played."""
        return [
            summary
            for summary in self.list_games()
            if summary.state != GameState.FINISHED
        ]

    def delete_game(self, request: GameRequest) -> None:
        """Handle a request to delete a Game record."""
        with self._game_lock(request.game_id):
            deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise GameNotFoundError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    @contextmanager
    def _locked_game(self, game_id: int) -> Iterator[Game]:
        """
        Exclusive access to one game.
        ----

        Yields the Game rebuilt from the repository and stores it again afterwards.
        When the body raises, nothing is stored: the persisted game stays exactly as it was.
        """
        with self._game_lock(game_id):
            game = Game.from_model(self._fetch_game(game_id))
            try:
                yield game
            except GameError as exc:
                logger.debug("Game %s: request rejected: %s", game_id, exc)
                raise
            self.repo.update_game(game_id, game.to_model())

    @contextmanager
    def _game_lock(self, game_id: int) -> Iterator[None]:
        """
        Hold the lock of one game.
        The entry is dropped again once the last call using it is done, so unknown or deleted IDs leave nothing behind.
        """
        with self._lock:
            lock, users = self._game_locks.get(game_id, (threading.Lock(), 0))
            self._game_locks[game_id] = (lock, users + 1)
        try:
            with lock:
                yield
        finally:
            with self._lock:
                lock, users = self._game_locks[game_id]
                if users == 1:
                    del self._game_locks[game_id]
                else:
                    self._game_locks[game_id] = (lock, users - 1)

    def _fetch_game(self, game_id: int) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model

    def _create_game_response(self, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse."""
        game = Game.from_model(model)
        guessed = list(game.current_round.guesses) if game.current_round else []
        return GameResponse(
            game_id=game.id,
            players=game.players,
            state=game.state,
            round_number=game.round_number,
            round_open=game.current_round is not None,
            guessed_this_round=guessed,
            past_rounds=[round_.to_guesses() for round_ in game.rounds],
        )

    def _create_game_summary(self, model: GameModel) -> GameSummary:
        return GameSummary(
            game_id=model.id,
            player_count=len(model.players),
            state=GameState(model.state),
            players=model.players,
        )
