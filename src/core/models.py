"""
Boundary layer data model(s).

The Service loads a GameModel from the repository, turns it into a Game to apply a request, and stores the resulting GameModel again.
Keeping it free of domain classes means the DB layer never has to know about Game or Round.
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerName = str
Guess = str
RoundGuesses = dict[PlayerName, Guess]


@dataclass
class GameModel:
    """Transport-safe representation of a guessing game used between API, Service, DB, and Game layers."""

    id: int
    players: list[PlayerName]
    state: str
    rounds: list[RoundGuesses] = field(default_factory=list)
    current_round: Optional[RoundGuesses] = None
