"""
Paddle entity for Rally Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from rally_pong.constants import PADDLE_SPEED
from rally_pong.physics import clamp


class ControllerKind(Enum):
    """What drives a paddle. The match controller dispatches on it."""

    HUMAN = "human"
    AI = "ai"


class Side(Enum):
    """Court side the paddle defends."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Paddle:
    """
    Paddle entity.

    :ivar position (Position2D): Top-left position of the paddle.
    :ivar size (Size2D): Size of the paddle.
    :ivar side (Side): Which goal it defends.
    :ivar controller (ControllerKind): Human input or CPU.
    :ivar court_height (float): Height of the court it moves in.
    :ivar speed (float): Maximum move per tick for keyboard and CPU moves.
    """

    position: Position2D
    size: Size2D
    side: Side
    controller: ControllerKind
    court_height: float
    speed: float = PADDLE_SPEED

    @property
    def collider(self) -> RectCollider:
        """Collider for the paddle."""
        return RectCollider(self.position, self.size)

    @property
    def center_y(self) -> float:
        """Vertical center of the paddle."""
        return self.position.y + self.size.height / 2

    @property
    def max_y(self) -> float:
        """Lowest valid top coordinate."""
        return max(0.0, self.court_height - self.size.height)

    def move_to(self, target_y: float):
        """
        Move the paddle's top edge to target_y, clamped inside the court.

        :param target_y: Requested top coordinate.
        :type target_y: float
        """
        self.position.y = clamp(target_y, 0.0, self.max_y)

    def move_by(self, delta_y: float):
        """Move the paddle by delta_y, clamped inside the court."""
        self.move_to(self.position.y + delta_y)
