from __future__ import annotations

import pytest

from rally_pong.difficulty import DIFFICULTY_PRESETS, Difficulty
from rally_pong.settings import (
    BALL_SPEEDS,
    PADDLE_HEIGHTS,
    BallSpeed,
    MatchSettings,
    PaddleSize,
)


def test_tables_cover_every_tier():
    assert set(BALL_SPEEDS) == set(BallSpeed)
    assert set(PADDLE_HEIGHTS) == set(PaddleSize)
    assert set(DIFFICULTY_PRESETS) == set(Difficulty)


def test_defaults():
    settings = MatchSettings()
    assert settings.serve_speed == 5.0
    assert settings.paddle_height == 80.0
    assert settings.sound_enabled


@pytest.mark.parametrize("name", ["very-fast", "very_fast", "VERY-FAST"])
def test_from_names_accepts_variants(name):
    settings = MatchSettings.from_names(ball_speed=name, paddle_size="small")
    assert settings.ball_speed is BallSpeed.VERY_FAST
    assert settings.serve_speed == 9.0
    assert settings.paddle_height == 60.0


def test_unknown_option_raises():
    with pytest.raises(ValueError, match="ludicrous"):
        MatchSettings.from_names(ball_speed="ludicrous")


def test_difficulty_from_name():
    assert Difficulty.from_name(" Hard ") is Difficulty.HARD
    with pytest.raises(ValueError):
        Difficulty.from_name("insane")
