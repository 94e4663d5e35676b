"""
Entities package for Rally Pong.
This package contains all entity definitions used in the simulation.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import ControllerKind, Paddle, Side

__all__ = [
    "Ball",
    "ControllerKind",
    "Paddle",
    "Side",
]
