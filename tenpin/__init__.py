"""Ten-pin bowling game tracking and scoring."""

from .exceptions import BowlingError, GameOver, InvalidRoll
from .scoring.bowling import Frame, Game, new_game
from .schemas import FrameOut, GameSummary, ProblemDetail

__all__ = [
    "BowlingError",
    "Frame",
    "FrameOut",
    "Game",
    "GameOver",
    "GameSummary",
    "InvalidRoll",
    "ProblemDetail",
    "new_game",
]
