from __future__ import annotations

import pytest
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from rally_pong.physics import (
    clamp,
    clamp_velocity,
    fold_into_range,
    scale_velocity,
    sign,
)


def test_clamp():
    assert clamp(5.0, 0.0, 10.0) == 5.0
    assert clamp(-1.0, 0.0, 10.0) == 0.0
    assert clamp(11.0, 0.0, 10.0) == 10.0


def test_sign():
    assert sign(3.2) == 1.0
    assert sign(-0.1) == -1.0
    assert sign(0.0) == 0.0


def test_velocity_helpers():
    velocity = Velocity2D(10.0, -20.0)
    scale_velocity(velocity, 1.5)
    assert velocity.to_tuple() == (15.0, -30.0)
    clamp_velocity(velocity, 12.0)
    assert velocity.to_tuple() == (12.0, -12.0)


@pytest.mark.parametrize(
    "value, expected",
    [
        (250.0, 250.0),
        (-30.0, 30.0),
        (430.0, 370.0),
        (800.0, 0.0),
        (1210.0, 390.0),
        (-2410.0, 10.0),
    ],
)
def test_fold_into_range(value, expected):
    assert fold_into_range(value, 400.0) == pytest.approx(expected)


def test_fold_into_empty_range():
    assert fold_into_range(50.0, 0.0) == 0.0
