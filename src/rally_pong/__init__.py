"""
Rally Pong: a ball-and-paddle simulation core.
"""

from __future__ import annotations

from .difficulty import Difficulty
from .match import MatchController, MatchIntent, MatchSnapshot, MatchState
from .settings import BallSpeed, GameMode, MatchSettings, PaddleSize

__all__ = [
    "BallSpeed",
    "Difficulty",
    "GameMode",
    "MatchController",
    "MatchIntent",
    "MatchSettings",
    "MatchSnapshot",
    "MatchState",
    "PaddleSize",
]
