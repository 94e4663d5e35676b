"""
Systems run by the match controller, one pass per tick.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.utils import logger

from rally_pong.entities import ControllerKind, Paddle
from rally_pong.events import MatchEvent
from rally_pong.match.models import MatchTickContext, Player


@dataclass
class ServeSystem:
    """
    Re-arm the ball once its serve delay is over.
    """

    name: str = "match_serve"
    order: int = 5

    def step(self, ctx: MatchTickContext):
        """Give the ball its velocity if a serve fell due."""
        if ctx.serves.poll(ctx.now_ms):
            ctx.world.ball.serve(ctx.world.serve_speed, ctx.world.rng)


@dataclass
class BallMovementSystem:
    """
    Move the ball one tick along its velocity.
    """

    name: str = "match_ball_move"
    order: int = 10

    def step(self, ctx: MatchTickContext):
        """Move the ball and record its trail."""
        ctx.world.ball.advance()


@dataclass
class PointerPaddleSystem:
    """
    Player 1: the paddle center follows an absolute target (the pointer).
    """

    name: str = "match_pointer_paddle"
    order: int = 20

    def step(self, ctx: MatchTickContext):
        """Move the left paddle toward the intent's target."""
        if ctx.intent is None or ctx.intent.paddle1_target_y is None:
            return

        paddle = ctx.world.left_paddle
        paddle.move_to(ctx.intent.paddle1_target_y - paddle.size.height / 2)


@dataclass
class KeyboardPaddleSystem:
    """
    Player 2 in two-player mode: discrete up/down steps.
    """

    name: str = "match_keyboard_paddle"
    order: int = 21

    def step(self, ctx: MatchTickContext):
        """Apply the intent's delta to the right paddle."""
        if ctx.intent is None or not ctx.intent.paddle2_delta:
            return
        ctx.world.right_paddle.move_by(ctx.intent.paddle2_delta)


@dataclass
class CpuPaddleSystem:
    """
    Player 2 in single mode: the CPU decides the move.
    """

    name: str = "match_cpu_paddle"
    order: int = 21

    def step(self, ctx: MatchTickContext):
        """Ask the CPU for a move and apply it."""
        paddle = ctx.world.right_paddle
        move = ctx.world.cpu.decide(ctx.world.ball, paddle, ctx.now_ms)
        if move:
            paddle.move_by(move)


@dataclass
class CollisionSystem:
    """
    Handle ball collisions with both paddles, then the walls.
    """

    name: str = "match_collision"
    order: int = 40

    def step(self, ctx: MatchTickContext):
        """Resolve paddle and wall collisions."""
        world = ctx.world
        world.collisions.resolve_paddle(world.ball, world.left_paddle)
        world.collisions.resolve_paddle(world.ball, world.right_paddle)
        world.collisions.resolve_walls(world.ball)


@dataclass
class ScoringSystem:
    """
    Award a point when the ball leaves the court, then recenter it and
    schedule the next serve.
    """

    name: str = "match_scoring"
    order: int = 50

    def step(self, ctx: MatchTickContext):
        """Apply scoring rules."""
        world = ctx.world
        x = world.ball.position.x

        if x < 0:
            scorer = Player.PLAYER2
        elif x > world.width:
            scorer = Player.PLAYER1
        else:
            return

        world.score.award(scorer)
        logger.info(
            f"{scorer.name} scores: "
            f"{world.score.player1}-{world.score.player2}"
        )
        world.ball.reset()
        ctx.events.emit(MatchEvent.SCORE)
        ctx.serves.schedule(ctx.now_ms)


@dataclass
class WinConditionSystem:
    """
    Record the winner once a player reaches the winning score.
    """

    name: str = "match_win_condition"
    order: int = 60

    def step(self, ctx: MatchTickContext):
        """Check the win condition."""
        world = ctx.world
        if world.winner is not None:
            return
        world.winner = world.score.leader_at(world.winning_score)


def paddle_driver(paddle: Paddle):
    """
    Pick the system that drives the right paddle from its controller kind.

    :param paddle: The right paddle.
    :type paddle: Paddle

    :return: CpuPaddleSystem for AI paddles, KeyboardPaddleSystem otherwise.
    """
    if paddle.controller is ControllerKind.AI:
        return CpuPaddleSystem()
    return KeyboardPaddleSystem()


def default_systems(right_paddle: Paddle) -> list:
    """Systems of a match tick, in the order they run."""
    return [
        ServeSystem(),
        BallMovementSystem(),
        PointerPaddleSystem(),
        paddle_driver(right_paddle),
        CollisionSystem(),
        ScoringSystem(),
        WinConditionSystem(),
    ]
