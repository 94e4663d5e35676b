"""
Shared fixtures for the Rally Pong tests.
"""

from __future__ import annotations

import random

import pytest
from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from rally_pong.difficulty import Difficulty
from rally_pong.entities import Ball, ControllerKind, Paddle, Side
from rally_pong.events import EventLog
from rally_pong.match import MatchController
from rally_pong.settings import GameMode


class FixedRng:
    """random.Random stand-in returning fixed values."""

    def __init__(self, value: float = 0.9, spread: float = 0.0):
        self.value = value
        self.spread = spread

    def random(self) -> float:
        return self.value

    def uniform(self, low: float, high: float) -> float:
        return max(low, min(high, self.spread))


def make_ball(x=400.0, y=200.0, vx=0.0, vy=0.0) -> Ball:
    return Ball(
        position=Position2D(x, y),
        velocity=Velocity2D(vx, vy),
        start=Position2D(400.0, 200.0),
    )


def make_paddle(
    x=30.0,
    y=160.0,
    height=80.0,
    side=Side.LEFT,
    controller=ControllerKind.HUMAN,
) -> Paddle:
    return Paddle(
        position=Position2D(x, y),
        size=Size2D(10.0, height),
        side=side,
        controller=controller,
        court_height=400.0,
    )


@pytest.fixture
def events():
    return EventLog()


@pytest.fixture
def left_paddle():
    return make_paddle()


@pytest.fixture
def match():
    return MatchController(rng=random.Random(1234), clock=lambda: 0.0)


@pytest.fixture
def playing(match):
    match.start(GameMode.SINGLE, Difficulty.MEDIUM)
    return match


@pytest.fixture
def two_player(match):
    match.start(GameMode.TWO_PLAYER)
    return match
