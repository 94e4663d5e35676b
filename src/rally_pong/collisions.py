"""
Ball versus paddle collision detection and response.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rally_pong.constants import BALL_MAX_VELOCITY, SPEEDUP_FACTOR, SPIN_FACTOR
from rally_pong.entities import Ball, Paddle, Side
from rally_pong.events import EventSink, MatchEvent
from rally_pong.physics import clamp_velocity, scale_velocity


@dataclass
class CollisionResolver:
    """
    Resolves ball collisions against paddles and walls.

    :ivar court_height (float): Height of the court for wall bounces.
    :ivar events (EventSink | None): Where paddle and wall hits are reported.
    :ivar max_velocity (float): Per-axis speed cap after a paddle hit.
    """

    court_height: float
    events: Optional[EventSink] = None
    max_velocity: float = BALL_MAX_VELOCITY

    @staticmethod
    def overlaps(ball: Ball, paddle: Paddle) -> bool:
        """Whether the ball's bounding square touches the paddle."""
        return ball.collider.intersects(paddle.collider)

    @staticmethod
    def collision_point(ball: Ball, paddle: Paddle) -> float:
        """
        Offset of the ball from the paddle center, the spin proxy.

        Normalized by half the paddle *width*, which is how the original
        game tunes its spin strength.
        """
        half_width = paddle.size.width / 2
        if half_width <= 0:
            return 0.0
        return (ball.position.y - paddle.center_y) / half_width

    def resolve_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        """
        Bounce the ball off the paddle if they overlap.

        :param ball: The ball.
        :type ball: Ball

        :param paddle: The paddle to test against.
        :type paddle: Paddle

        :return: True if the ball was hit.
        :rtype: bool
        """
        if not self.overlaps(ball, paddle):
            return False

        spin = self.collision_point(ball, paddle)
        ball.velocity.vx = -ball.velocity.vx
        ball.velocity.vy += spin * SPIN_FACTOR
        scale_velocity(ball.velocity, SPEEDUP_FACTOR)
        clamp_velocity(ball.velocity, self.max_velocity)

        # push the ball out so the next tick doesn't hit again
        if paddle.side is Side.LEFT:
            right_edge = paddle.position.x + paddle.size.width
            ball.position.x = right_edge + ball.radius
        else:
            ball.position.x = paddle.position.x - ball.radius

        if self.events is not None:
            self.events.emit(MatchEvent.PADDLE_HIT)
        return True

    def resolve_walls(self, ball: Ball) -> bool:
        """Bounce the ball off the top/bottom walls."""
        return ball.resolve_wall_collision(self.court_height, self.events)
