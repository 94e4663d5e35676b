"""
Ball entity for Rally Pong.
"""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from rally_pong.constants import (
    BALL_RADIUS,
    BALL_TRAIL_LENGTH,
    SERVE_VY_SPREAD,
)
from rally_pong.events import EventSink, MatchEvent


@dataclass
class Ball:
    """
    Ball entity. Unlike the paddles its position is the ball's center.

    :ivar position (Position2D): Center of the ball.
    :ivar velocity (Velocity2D): Per-tick displacement.
    :ivar start (Position2D): Where reset() puts the ball back.
    :ivar radius (float): Ball radius.
    :ivar trail (Deque[tuple[float, float]]): Recent positions, oldest first.
    """

    position: Position2D
    velocity: Velocity2D
    start: Position2D
    radius: float = BALL_RADIUS
    trail: Deque[tuple[float, float]] = field(
        default_factory=lambda: deque(maxlen=BALL_TRAIL_LENGTH)
    )

    @classmethod
    def spawn(
        cls,
        center: Position2D,
        speed: float,
        rng: Optional[random.Random] = None,
    ) -> Ball:
        """
        Create a ball at center, already served in a random direction.

        :param center: Court center.
        :type center: Position2D

        :param speed: Horizontal serve speed.
        :type speed: float

        :param rng: Random source, defaults to the module-level one.
        :type rng: random.Random, optional

        :return: The new ball.
        :rtype: Ball
        """
        ball = cls(
            position=Position2D(center.x, center.y),
            velocity=Velocity2D(0.0, 0.0),
            start=Position2D(center.x, center.y),
        )
        ball.serve(speed, rng)
        return ball

    @property
    def size(self) -> Size2D:
        """Size of the ball's bounding square."""
        return Size2D(self.radius * 2, self.radius * 2)

    @property
    def collider(self) -> RectCollider:
        """Bounding-square collider for the ball."""
        return RectCollider(
            Position2D(
                self.position.x - self.radius, self.position.y - self.radius
            ),
            self.size,
        )

    @property
    def is_moving(self) -> bool:
        """False while the ball waits for its serve."""
        return self.velocity.vx != 0.0 or self.velocity.vy != 0.0

    def advance(self):
        """Move one fixed tick along the velocity and record the trail."""
        x, y = self.velocity.advance(self.position.x, self.position.y, 1.0)
        self.position = Position2D(x, y)
        self.trail.append((x, y))

    def resolve_wall_collision(
        self, court_height: float, events: Optional[EventSink] = None
    ) -> bool:
        """
        Bounce off the top or bottom wall.

        The ball is snapped so its edge touches the wall exactly, which
        keeps it from sticking or tunnelling out of the court.

        :param court_height: Height of the court.
        :type court_height: float

        :param events: Where to report the wall hit.
        :type events: EventSink, optional

        :return: True if the ball bounced.
        :rtype: bool
        """
        r = self.radius
        hit_top = self.position.y - r <= 0
        hit_bottom = self.position.y + r >= court_height
        if not (hit_top or hit_bottom):
            return False

        self.velocity.vy = -self.velocity.vy
        self.position.y = r if hit_top else court_height - r

        if events is not None:
            events.emit(MatchEvent.WALL_HIT)
        return True

    def reset(self, start: Optional[Position2D] = None):
        """
        Put the ball back at its start position, motionless, with no trail.

        The velocity stays at zero until serve() re-arms it.
        """
        if start is not None:
            self.start = Position2D(start.x, start.y)
        self.position = Position2D(self.start.x, self.start.y)
        self.velocity.stop()
        self.trail.clear()

    def serve(self, speed: float, rng: Optional[random.Random] = None):
        """
        Give the ball a fresh velocity: a random horizontal direction at
        speed and a small random vertical component.
        """
        rng = rng or random
        direction = 1.0 if rng.random() > 0.5 else -1.0
        self.velocity = Velocity2D(
            direction * speed, rng.uniform(-SERVE_VY_SPREAD, SERVE_VY_SPREAD)
        )
