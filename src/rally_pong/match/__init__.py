"""
Match package: controller, systems, commands and models for one match.
"""

from __future__ import annotations

from .commands import (
    PauseCommand,
    QuitToMenuCommand,
    RestartCommand,
    ResumeCommand,
    StartMatchCommand,
    TogglePauseCommand,
)
from .controller import MatchController
from .models import (
    BallView,
    MatchIntent,
    MatchSnapshot,
    MatchState,
    PaddleView,
    Player,
)

__all__ = [
    "BallView",
    "MatchController",
    "MatchIntent",
    "MatchSnapshot",
    "MatchState",
    "PaddleView",
    "PauseCommand",
    "Player",
    "QuitToMenuCommand",
    "RestartCommand",
    "ResumeCommand",
    "StartMatchCommand",
    "TogglePauseCommand",
]
