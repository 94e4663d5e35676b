from __future__ import annotations

import random

import pytest

from conftest import FixedRng, make_ball, make_paddle
from rally_pong.controllers.cpu import AIController
from rally_pong.difficulty import CpuConfig, Difficulty
from rally_pong.entities import ControllerKind, Side


def cpu_paddle(y=160.0):
    return make_paddle(
        x=750.0, y=y, side=Side.RIGHT, controller=ControllerKind.AI
    )


@pytest.fixture
def cpu():
    return AIController(400.0, rng=FixedRng(spread=0.0))


@pytest.mark.parametrize(
    "level, reaction, accuracy, multiplier",
    [
        (Difficulty.EASY, 200.0, 0.6, 0.7),
        (Difficulty.MEDIUM, 100.0, 0.8, 1.0),
        (Difficulty.HARD, 50.0, 0.95, 1.3),
    ],
)
def test_difficulty_presets(cpu, level, reaction, accuracy, multiplier):
    cpu.set_difficulty(level)
    assert cpu.difficulty is level
    assert cpu.reaction_time_ms == reaction
    assert cpu.accuracy == accuracy
    assert cpu.speed_multiplier == multiplier


def test_no_prediction_without_horizontal_speed(cpu):
    ball = make_ball(y=123.0, vx=0.0, vy=4.0)
    assert cpu.predict_impact_y(ball, cpu_paddle()) == 123.0


def test_no_prediction_when_ball_moves_away(cpu):
    ball = make_ball(y=123.0, vx=-5.0, vy=4.0)
    assert cpu.predict_impact_y(ball, cpu_paddle()) == 123.0


def test_straight_line_prediction(cpu):
    ball = make_ball(x=400.0, y=200.0, vx=5.0, vy=1.0)
    # 70 ticks to reach x=750
    assert cpu.predict_impact_y(ball, cpu_paddle()) == pytest.approx(270.0)


@pytest.mark.parametrize(
    "vy, expected",
    [(5.0, 250.0), (-5.0, 150.0), (20.0, 0.0), (-12.0, 160.0)],
)
def test_prediction_folds_off_walls(cpu, vy, expected):
    ball = make_ball(x=400.0, y=200.0, vx=5.0, vy=vy)
    assert cpu.predict_impact_y(ball, cpu_paddle()) == pytest.approx(expected)


def test_reaction_time_gates_decisions(cpu):
    cpu.set_difficulty(Difficulty.HARD)
    ball = make_ball(x=400.0, y=300.0, vx=5.0)
    paddle = cpu_paddle()

    assert cpu.decide(ball, paddle, 1000.0) != 0.0
    assert cpu.decide(ball, paddle, 1030.0) == 0.0
    assert cpu.last_decision_ms == 1000.0
    assert cpu.decide(ball, paddle, 1050.0) != 0.0
    assert cpu.last_decision_ms == 1050.0


def test_move_is_capped_and_directional(cpu):
    paddle = cpu_paddle(y=160.0)  # center 200

    down = cpu.decide(make_ball(y=300.0, vx=5.0), paddle, 0.0)
    assert down == 8.0

    cpu.set_difficulty(Difficulty.HARD)
    up = cpu.decide(make_ball(y=20.0, vx=5.0), paddle, 1000.0)
    assert up == pytest.approx(-10.4)


def test_small_gap_is_closed_exactly(cpu):
    paddle = cpu_paddle(y=160.0)
    assert cpu.decide(make_ball(y=203.0, vx=-5.0), paddle, 0.0) == 3.0


def test_aiming_error_scales_with_accuracy():
    cpu = AIController(
        400.0, difficulty=Difficulty.EASY, rng=FixedRng(spread=0.5)
    )
    paddle = cpu_paddle(y=160.0)
    # 0.5 * (1 - 0.6) * 100 = 20px below a target at the paddle center
    move = cpu.decide(make_ball(y=200.0, vx=-5.0), paddle, 0.0)
    assert move == pytest.approx(0.7 * 8.0)

    cpu.config = CpuConfig(
        reaction_time_ms=0.0, accuracy=0.6, speed_multiplier=10.0
    )
    move = cpu.decide(make_ball(y=200.0, vx=-5.0), paddle, 1.0)
    assert move == pytest.approx(20.0)


@pytest.mark.parametrize("level", list(Difficulty))
def test_decisions_never_exceed_speed_cap(level):
    rng = random.Random(99)
    cpu = AIController(400.0, difficulty=level, rng=random.Random(7))
    cap = 8.0 * cpu.speed_multiplier
    now = 0.0

    for _ in range(300):
        now += rng.uniform(0, 300)
        ball = make_ball(
            x=rng.uniform(0, 800),
            y=rng.uniform(0, 400),
            vx=rng.uniform(-12, 12),
            vy=rng.uniform(-12, 12),
        )
        paddle = cpu_paddle(y=rng.uniform(0, 320))
        move = cpu.decide(ball, paddle, now)
        assert abs(move) <= cap + 1e-9
