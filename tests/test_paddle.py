from __future__ import annotations

import random

import pytest

from conftest import make_paddle


@pytest.mark.parametrize(
    "target, expected",
    [(-50.0, 0.0), (0.0, 0.0), (100.0, 100.0), (320.0, 320.0), (1e6, 320.0)],
)
def test_move_to_clamps_inside_court(target, expected):
    paddle = make_paddle()
    paddle.move_to(target)
    assert paddle.position.y == expected


def test_move_by_is_relative_and_clamped():
    paddle = make_paddle(y=160.0)
    paddle.move_by(8.0)
    assert paddle.position.y == 168.0
    paddle.move_by(-1000.0)
    assert paddle.position.y == 0.0


@pytest.mark.parametrize("height", [60.0, 80.0, 100.0])
def test_paddle_never_leaves_court(height):
    rng = random.Random(42)
    paddle = make_paddle(height=height)
    for _ in range(500):
        if rng.random() < 0.5:
            paddle.move_by(rng.uniform(-600, 600))
        else:
            paddle.move_to(rng.uniform(-600, 1000))
        assert 0.0 <= paddle.position.y <= 400.0 - height


def test_taller_than_court_paddle_sticks_to_top():
    paddle = make_paddle(height=500.0)
    paddle.move_to(30.0)
    assert paddle.position.y == 0.0


def test_center_and_collider(left_paddle):
    assert left_paddle.center_y == 200.0
    collider = left_paddle.collider
    assert collider.position.to_tuple() == (30.0, 160.0)
    assert collider.size.to_tuple() == (10.0, 80.0)
