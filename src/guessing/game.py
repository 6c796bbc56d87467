"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the lifecycle of one two-player guessing game: admitting players, opening and archiving rounds,
accepting guesses and detecting the moment both players think of the same word.

NOTE the Game performs no I/O and holds no locks. Serialising access to one Game is the job of the service layer.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Self

from src.core.exceptions import (
    GameFinishedError,
    GameFullError,
    GameNotInProgressError,
    GameStateError,
    NoActiveRoundError,
    PlayerNotFoundError,
)
from src.core.models import GameModel, PlayerName
from src.core.shared_types import MAX_PLAYERS, SLOT_LABEL_PREFIX, GameState
from src.guessing.round import Round


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    id: int
    players: list[PlayerName] = field(default_factory=list)
    rounds: list[Round] = field(default_factory=list)
    current_round: Optional[Round] = None
    state: GameState = GameState.WAITING_FOR_PLAYERS

    @classmethod
    def new_game(cls, game_id: int) -> Self:
        """Fresh game: nobody joined yet, no rounds played."""
        return cls(id=game_id)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.state not in {state.value for state in GameState}:
            raise GameStateError(
                f"Invalid game state: {model.state!r}. \nPick one from {','.join([state.value for state in GameState])}"
            )
        if len(model.players) > MAX_PLAYERS:
            raise GameStateError(
                f"A game has at most {MAX_PLAYERS} players, got {len(model.players)}."
            )

        current_round = (
            Round.from_guesses(model.current_round)
            if model.current_round is not None
            else None
        )
        return cls(
            id=model.id,
            players=list(model.players),
            rounds=[Round.from_guesses(guesses) for guesses in model.rounds],
            current_round=current_round,
            state=GameState(model.state),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            id=self.id,
            players=list(self.players),
            state=self.state.value,
            rounds=[round_.to_guesses() for round_ in self.rounds],
            current_round=(
                self.current_round.to_guesses() if self.current_round else None
            ),
        )

    @property
    def round_number(self) -> int:
        """Number of the round being played (or the last one played when no round is open)."""
        if self.current_round is not None:
            return len(self.rounds) + 1
        return len(self.rounds)

    def add_player(self, player: Optional[PlayerName] = None) -> PlayerName:
        """
        Admit a player and return the identifier they got.
        ----

        Without an identifier, the player gets the next free slot label ("Player1" / "Player2").
        The game starts by itself once the second player is in (unless it was already started by hand).
        """
        if self.player_count() >= MAX_PLAYERS:
            raise GameFullError()
        if self.has_ended():
            raise GameFinishedError()

        new_player = player if player is not None else self._next_slot_label()
        self.players.append(new_player)

        if (
            self.player_count() == MAX_PLAYERS
            and self.state == GameState.WAITING_FOR_PLAYERS
        ):
            self.start_game()

        return new_player

    def start_game(self) -> None:
        """
        Administrative override: play may start before both players joined.
        NOTE a finished game stays finished.
        """
        if self.has_ended():
            return
        self._change_state(GameState.IN_PROGRESS)

    def start_round(self) -> None:
        """
        Open a new, empty round.

        NOTE a round that is still open gets replaced, NOT archived. Call end_round() first to keep it.
        """
        if self.has_ended():
            return
        self.current_round = Round()

    def end_round(self) -> None:
        """Move the open round into the history. Nothing happens when no round is open."""
        if self.current_round is None:
            return
        self.rounds.append(self.current_round)
        self.current_round = None

    def end_game(self) -> None:
        """Finish the game. A round still being played is archived, not dropped."""
        self._change_state(GameState.FINISHED)
        self.end_round()

    def submit_guess(self, player: PlayerName, guess: str) -> bool:
        """
        Record a guess for the player in the open round.
        ----

        1. The game must be in progress
        2. The player must have joined the game
        3. A round must be open
        4. Both players guessed and the guesses are identical? --> the game is over, return True (on THIS call)

        Different guesses leave the round open. Starting the next round is up to the caller.
        """
        if self.state != GameState.IN_PROGRESS:
            raise GameNotInProgressError()

        if player not in self.players:
            raise PlayerNotFoundError()

        if self.current_round is None:
            raise NoActiveRoundError()

        self.current_round.record(player, guess)

        if self.current_round.is_match():
            self.end_game()
            return True
        return False

    # -- READ ACCESS --
    def has_ended(self) -> bool:
        return self.state == GameState.FINISHED

    def get_state(self) -> GameState:
        return self.state

    def player_count(self) -> int:
        return len(self.players)

    def get_current_round_guesses(self) -> Mapping[PlayerName, str]:
        """Read-only view on the guesses of the open round."""
        if self.current_round is None:
            raise NoActiveRoundError()
        return self.current_round.view()

    # -- PRIVATE HELPERS ---
    def _next_slot_label(self) -> PlayerName:
        return f"{SLOT_LABEL_PREFIX}{self.player_count() + 1}"

    def _change_state(self, new_state: GameState) -> None:
        self.state = new_state
