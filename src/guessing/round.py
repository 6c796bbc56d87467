"""
A single guessing round

(placed in its own module as both the Game and the tests need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from src.core.models import RoundGuesses
from src.core.shared_types import MAX_PLAYERS


@dataclass
class Round:
    guesses: RoundGuesses = field(default_factory=dict)

    @classmethod
    def from_guesses(cls, guesses: Mapping[str, str]) -> Round:
        return cls(guesses=dict(guesses))

    def to_guesses(self) -> RoundGuesses:
        return dict(self.guesses)

    def record(self, player: str, guess: str) -> None:
        """A later guess of the same player overwrites the earlier one."""
        self.guesses[player] = guess

    def view(self) -> Mapping[str, str]:
        """Read-only view, so callers cannot slip guesses past the Game."""
        return MappingProxyType(self.guesses)

    def has_guessed(self, player: str) -> bool:
        return player in self.guesses

    def is_complete(self) -> bool:
        """Both seats have guessed this round."""
        return len(self.guesses) == MAX_PLAYERS

    def is_match(self) -> bool:
        """
        Both guesses are exactly the same (case-sensitive).
        There is no first or second guesser here, it is a plain value comparison.
        """
        if not self.is_complete():
            return False
        first, second = self.guesses.values()
        return first == second
