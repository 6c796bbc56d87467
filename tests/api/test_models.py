import pytest

from src.api.models import (
    CreateGameRequest,
    GameSummary,
    GuessRequest,
    JoinGameRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameState


# -- Validation - CreateGameRequest / JoinGameRequest --
def test_player_name_is_optional() -> None:
    """Should be able to not supply a name, and validator just returns None."""
    assert CreateGameRequest().player_name is None
    assert JoinGameRequest(game_id=1).player_name is None


def test_valid_player_name() -> None:
    request = JoinGameRequest(game_id=1, player_name="don't hate the player")
    assert request.player_name == "don't hate the player"


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_blank_player_name(name: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = JoinGameRequest(game_id=1, player_name=name)
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(player_name=name)


# -- Validation - GuessRequest --
def test_guess_is_kept_exactly() -> None:
    """Matching is exact, so the request must not normalise the guess."""
    request = GuessRequest(game_id=1, player="Alice", guess=" Orange ")
    assert request.guess == " Orange "


@pytest.mark.parametrize("guess", ["", "  "])
def test_empty_guess(guess: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = GuessRequest(game_id=1, player="Alice", guess=guess)


# -- Response models --
def test_game_summary_accepts_state_value() -> None:
    """Repository models carry the state as plain string."""
    summary = GameSummary(
        game_id=1, player_count=1, state="waiting for players", players=["Alice"]
    )
    assert summary.state == GameState.WAITING_FOR_PLAYERS
