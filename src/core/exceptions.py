"""
Custom exceptions shared by all layers.

Everything raised on purpose by this project derives from GameError, so the layer talking to the outside world
only needs to catch that one to turn it into a user-facing message.

Game.add_player raises GameFullError, or GameFinishedError when a game that is not full has already ended.
Game.submit_guess raises GameNotInProgressError, PlayerNotFoundError or NoActiveRoundError.
"""


class GameError(Exception):
    """Top-level exception of the project."""


# --- DOMAIN ---
class GameStateError(GameError):
    """The requested action is not possible in the current state of the game."""


class GameFullError(GameStateError):
    """A game only has room for two players."""

    def __init__(self, message: str = "Game is full - only 2 players are allowed") -> None:
        super().__init__(message)


class GameNotInProgressError(GameStateError):
    def __init__(self, message: str = "Game is not in progress") -> None:
        super().__init__(message)


class PlayerNotFoundError(GameStateError):
    def __init__(self, message: str = "Player not found in game") -> None:
        super().__init__(message)


class NoActiveRoundError(GameStateError):
    def __init__(self, message: str = "No active round") -> None:
        super().__init__(message)


class GameFinishedError(GameStateError):
    """A finished game takes no new players (raised only when the game is not full, a full game is GameFullError)."""

    def __init__(
        self, message: str = "Cannot join this game. Game has already finished."
    ) -> None:
        super().__init__(message)


# --- PERSISTENCE ---
class RepositoryError(GameError):
    """Something went wrong storing or retrieving a game."""


class GameNotFoundError(RepositoryError):
    """No record for the requested game ID."""


# --- API ---
class InvalidRequestError(GameError):
    """Request data cannot be interpreted (raised from within the request model validators)."""
