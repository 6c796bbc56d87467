"""
Type definitions used across layers
"""

from enum import StrEnum


class GameState(StrEnum):
    WAITING_FOR_PLAYERS = "waiting for players"
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


# Server-assigned identifiers look like "Player1" / "Player2"
SLOT_LABEL_PREFIX = "Player"

# The game is hard-capped at two players
MAX_PLAYERS = 2
