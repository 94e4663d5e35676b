"""
Match models: world state, player intent, tick context and snapshots.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from rally_pong.collisions import CollisionResolver
from rally_pong.constants import PADDLE_SPEED
from rally_pong.controllers.cpu import AIController
from rally_pong.difficulty import Difficulty
from rally_pong.entities import Ball, Paddle
from rally_pong.events import EventLog, MatchEvent
from rally_pong.match.serve import ServeScheduler
from rally_pong.settings import GameMode


class MatchState(Enum):
    """Lifecycle of a match."""

    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Player(Enum):
    """Scoring side. PLAYER1 defends the left goal."""

    PLAYER1 = 1
    PLAYER2 = 2


@dataclass
class ScoreState:
    """
    Score state for a match.

    :ivar player1 (int): Points of the left player.
    :ivar player2 (int): Points of the right player.
    """

    player1: int = 0
    player2: int = 0

    def award(self, player: Player):
        """Give player one point."""
        if player is Player.PLAYER1:
            self.player1 += 1
        else:
            self.player2 += 1

    def leader_at(self, target: int) -> Optional[Player]:
        """The player who has reached target points, if any."""
        if self.player1 >= target:
            return Player.PLAYER1
        if self.player2 >= target:
            return Player.PLAYER2
        return None


# Justification: many attributes needed for world state
# pylint: disable=too-many-instance-attributes
@dataclass
class MatchWorld(BaseWorld):
    """
    Everything one match owns. Rebuilt on every start and restart.

    :ivar court (tuple[float, float]): Court size (width, height).
    :ivar ball (Ball): Ball entity.
    :ivar left_paddle (Paddle): Player 1 paddle.
    :ivar right_paddle (Paddle): Player 2 or CPU paddle.
    :ivar cpu (AIController): CPU driver, only consulted for AI paddles.
    :ivar collisions (CollisionResolver): Collision resolver for this court.
    :ivar score (ScoreState): Current score.
    :ivar serve_speed (float): Horizontal speed used to re-arm the ball.
    :ivar winning_score (int): Points needed to win.
    :ivar rng (random.Random): Random source for serves.
    :ivar winner (Player | None): Set once a player reaches winning_score.
    """

    court: tuple[float, float]
    ball: Ball
    left_paddle: Paddle
    right_paddle: Paddle
    cpu: AIController
    collisions: CollisionResolver
    score: ScoreState
    serve_speed: float
    winning_score: int
    rng: random.Random
    winner: Optional[Player] = None

    @property
    def width(self) -> float:
        """Court width."""
        return self.court[0]

    @property
    def height(self) -> float:
        """Court height."""
        return self.court[1]


# pylint: enable=too-many-instance-attributes


@dataclass(frozen=True)
class MatchIntent(BaseIntent):
    """
    Player intent for a single tick.

    :ivar paddle1_target_y (float | None): Where player 1 wants the paddle
        center (e.g. the mouse y). None keeps the paddle where it is.
    :ivar paddle2_delta (float): Keyboard move for player 2 in two-player
        mode, ignored when the CPU drives the right paddle.
    """

    paddle1_target_y: Optional[float] = None
    paddle2_delta: float = 0.0

    @classmethod
    def from_controls(
        cls,
        pointer_y: Optional[float] = None,
        up: bool = False,
        down: bool = False,
        step: float = PADDLE_SPEED,
    ) -> MatchIntent:
        """
        Build an intent from raw controls: a pointer for player 1 and
        held up/down keys for player 2.
        """
        delta = (step if down else 0.0) - (step if up else 0.0)
        return cls(paddle1_target_y=pointer_y, paddle2_delta=delta)


@dataclass
class MatchTickContext(BaseTickContext[MatchWorld, MatchIntent]):
    """
    Context for a match tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Fixed step, one tick.
    :ivar world (MatchWorld): Current match world.
    :ivar commands (CommandQueue): Command queue.
    :ivar intent (MatchIntent | None): Player intent for this tick.

    :ivar now_ms (float): Clock reading for this tick in milliseconds.
    :ivar events (EventLog): Sink for paddle, wall and score events.
    :ivar serves (ServeScheduler): Delayed ball re-arms.
    """

    now_ms: float = 0.0
    events: EventLog = field(default_factory=EventLog)
    serves: ServeScheduler = field(default_factory=ServeScheduler)


@dataclass(frozen=True)
class BallView:
    """Read-only ball state for renderers."""

    x: float
    y: float
    radius: float
    trail: tuple[tuple[float, float], ...]


@dataclass(frozen=True)
class PaddleView:
    """Read-only paddle rectangle for renderers."""

    x: float
    y: float
    width: float
    height: float


# Justification: snapshot mirrors everything a renderer needs
# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class MatchSnapshot:
    """
    What the presentation layer sees after a tick.

    :ivar state (MatchState): Match state.
    :ivar mode (GameMode): Game mode of the current match.
    :ivar difficulty (Difficulty): CPU difficulty of the current match.
    :ivar ball (BallView): Ball position, radius and trail.
    :ivar left_paddle (PaddleView): Player 1 paddle.
    :ivar right_paddle (PaddleView): Player 2 or CPU paddle.
    :ivar scores (tuple[int, int]): (player1, player2).
    :ivar winner (Player | None): Winner once the match is over.
    :ivar events (tuple[MatchEvent, ...]): Events emitted by this tick.
    """

    state: MatchState
    mode: GameMode
    difficulty: Difficulty
    ball: BallView
    left_paddle: PaddleView
    right_paddle: PaddleView
    scores: tuple[int, int]
    winner: Optional[Player] = None
    events: tuple[MatchEvent, ...] = ()

    @classmethod
    def capture(
        cls,
        world: MatchWorld,
        *,
        state: MatchState,
        mode: GameMode,
        difficulty: Difficulty,
        events: tuple[MatchEvent, ...] = (),
    ) -> MatchSnapshot:
        """
        Copy the renderable parts of world into a snapshot.

        :param world: World to copy from.
        :type world: MatchWorld

        :return: Snapshot detached from the live entities.
        :rtype: MatchSnapshot
        """
        ball = world.ball
        return cls(
            state=state,
            mode=mode,
            difficulty=difficulty,
            ball=BallView(
                x=ball.position.x,
                y=ball.position.y,
                radius=ball.radius,
                trail=tuple(ball.trail),
            ),
            left_paddle=_paddle_view(world.left_paddle),
            right_paddle=_paddle_view(world.right_paddle),
            scores=(world.score.player1, world.score.player2),
            winner=world.winner,
            events=events,
        )


# pylint: enable=too-many-instance-attributes


def _paddle_view(paddle: Paddle) -> PaddleView:
    return PaddleView(
        x=paddle.position.x,
        y=paddle.position.y,
        width=paddle.size.width,
        height=paddle.size.height,
    )
