"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameState

PlayerName = str
Guess = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """Optionally let the creator join straight away."""

    player_name: Optional[str] = None

    @field_validator("player_name")
    @classmethod
    def validate_player_name(cls, value: Optional[str]) -> Optional[str]:
        return _validate_optional_name(value)


class JoinGameRequest(BaseModel):
    """Without a player name, the game hands out a slot label ("Player1" / "Player2")."""

    game_id: int
    player_name: Optional[str] = None

    @field_validator("player_name")
    @classmethod
    def validate_player_name(cls, value: Optional[str]) -> Optional[str]:
        return _validate_optional_name(value)


class GameRequest(BaseModel):
    """Any request that only needs to know which game (get, start, end, delete, ...)."""

    game_id: int


class GuessRequest(BaseModel):
    game_id: int
    player: str
    guess: str

    @field_validator("guess")
    @classmethod
    def validate_guess(cls, value: str) -> str:
        # NOTE the guess is passed on untouched. Matching is exact, so stripping/lowering here would change the game.
        if not value.strip():
            raise InvalidRequestError("A guess cannot be empty.")
        return value


def _validate_optional_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    if not value.strip():
        raise InvalidRequestError("Player name cannot be blank.")
    return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    """
    Game state as shown to the players.
    NOTE only WHO guessed in the open round is shown, not WHAT. Otherwise the second player could simply copy.
    """

    game_id: int
    players: list[PlayerName]
    state: GameState
    round_number: int
    round_open: bool
    guessed_this_round: list[PlayerName]
    past_rounds: list[dict[PlayerName, Guess]]


class JoinGameResponse(BaseModel):
    game_id: int
    player_id: PlayerName
    state: GameState


class GuessResponse(BaseModel):
    game_id: int
    player: PlayerName
    game_over: bool
    state: GameState


class RoundResponse(BaseModel):
    game_id: int
    round_number: int
    guesses: dict[PlayerName, Guess]


class GameSummary(BaseModel):
    """Overview entry for a list of games."""

    game_id: int
    player_count: int
    state: GameState
    players: list[PlayerName]
