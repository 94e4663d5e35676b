"""
Match controller: owns one match and advances it one tick at a time.
"""

from __future__ import annotations

import random
import time
from typing import Callable, Optional

from mini_arcade_core.engine.commands import (
    Command,
    CommandContext,
    CommandQueue,
)
from mini_arcade_core.runtime.input_frame import InputFrame
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline
from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.utils import logger

from rally_pong.collisions import CollisionResolver
from rally_pong.constants import (
    COURT_SIZE,
    PADDLE_MARGIN,
    PADDLE_WIDTH,
    WINNING_SCORE,
)
from rally_pong.controllers.cpu import AIController
from rally_pong.difficulty import Difficulty
from rally_pong.entities import Ball, ControllerKind, Paddle, Side
from rally_pong.events import EventLog, EventListener
from rally_pong.match.models import (
    MatchIntent,
    MatchSnapshot,
    MatchState,
    MatchTickContext,
    MatchWorld,
    Player,
    ScoreState,
)
from rally_pong.match.serve import ServeScheduler
from rally_pong.match.systems import default_systems
from rally_pong.settings import GameMode, MatchSettings

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Default clock, in milliseconds."""
    return time.monotonic() * 1000.0


# Justification: the controller is the single owner of match state
# pylint: disable=too-many-instance-attributes
class MatchController:
    """
    Runs a Pong match.

    The caller drives it: call tick() once per frame while the match is
    playing, and start()/pause()/resume()/restart()/quit_to_menu() (or
    submit() the matching commands) from the presentation layer.
    """

    def __init__(
        self,
        settings: Optional[MatchSettings] = None,
        *,
        court: tuple[float, float] = COURT_SIZE,
        winning_score: int = WINNING_SCORE,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ):
        """
        :param settings: Ball speed and paddle size, read on each start.
        :type settings: MatchSettings, optional

        :param court: Court size (width, height).
        :type court: tuple[float, float]

        :param winning_score: Points needed to win.
        :type winning_score: int

        :param rng: Random source for serves and CPU aiming error.
        :type rng: random.Random, optional

        :param clock: Millisecond clock used when tick() gets no now_ms.
        :type clock: Callable[[], float], optional
        """
        self.settings = settings or MatchSettings()
        self.court = (float(court[0]), float(court[1]))
        self.winning_score = winning_score
        self.rng = rng or random.Random()
        self.clock = clock or monotonic_ms

        self.state = MatchState.MENU
        self.mode = GameMode.SINGLE
        self.difficulty = Difficulty.MEDIUM

        self.events = EventLog()
        self.serves = ServeScheduler()
        self.commands = CommandQueue()
        self._frame_index = 0

        self.world = self._build_world()
        self.systems = self._build_systems()

    # --- queries ---
    @property
    def is_running(self) -> bool:
        """Whether ticks advance the simulation."""
        return self.state is MatchState.PLAYING

    @property
    def is_paused(self) -> bool:
        """Whether the match is paused."""
        return self.state is MatchState.PAUSED

    @property
    def winner(self) -> Optional[Player]:
        """Winner of the current match, once it is over."""
        return self.world.winner

    @property
    def scores(self) -> ScoreState:
        """Live score of the current match."""
        return self.world.score

    def winner_name(self) -> Optional[str]:
        """Display name of the winner, "Computer" for a CPU win."""
        if self.world.winner is Player.PLAYER1:
            return "Player 1"
        if self.world.winner is Player.PLAYER2:
            return "Computer" if self.mode is GameMode.SINGLE else "Player 2"
        return None

    def snapshot(self, events: tuple = ()) -> MatchSnapshot:
        """
        Read-only view of the match for renderers.

        :param events: Events to attach, usually the ones of the last tick.
        :type events: tuple[MatchEvent, ...]

        :return: Snapshot of the current state.
        :rtype: MatchSnapshot
        """
        return MatchSnapshot.capture(
            self.world,
            state=self.state,
            mode=self.mode,
            difficulty=self.difficulty,
            events=events,
        )

    def subscribe(self, listener: EventListener):
        """Forward every emitted event to listener (e.g. a SoundBoard)."""
        self.events.subscribe(listener)

    # --- lifecycle commands ---
    def start(
        self,
        mode: GameMode = GameMode.SINGLE,
        difficulty: Difficulty = Difficulty.MEDIUM,
    ) -> bool:
        """
        Start a fresh match from the menu or the game over screen.

        :param mode: Single player or two players.
        :type mode: GameMode

        :param difficulty: CPU difficulty, unused in two-player mode.
        :type difficulty: Difficulty

        :return: False if a match is already in progress.
        :rtype: bool
        """
        if self.state not in (MatchState.MENU, MatchState.GAME_OVER):
            return self._ignore("start")

        self.mode = mode
        self.difficulty = difficulty
        self._new_match()
        logger.info(
            f"Starting match: mode={mode.value} difficulty={difficulty.value}"
        )
        return True

    def pause(self) -> bool:
        """Suspend ticking. Entities are left untouched."""
        if self.state is not MatchState.PLAYING:
            return self._ignore("pause")
        self.state = MatchState.PAUSED
        logger.info("Match paused")
        return True

    def resume(self) -> bool:
        """Resume a paused match."""
        if self.state is not MatchState.PAUSED:
            return self._ignore("resume")
        self.state = MatchState.PLAYING
        logger.info("Resuming match from pause")
        return True

    def restart(self) -> bool:
        """Start over with the same mode and difficulty."""
        if self.state is MatchState.MENU:
            return self._ignore("restart")
        self._new_match()
        logger.info("Match restarted")
        return True

    def quit_to_menu(self) -> bool:
        """Abandon the match and go back to the menu."""
        if self.state is MatchState.MENU:
            return self._ignore("quit_to_menu")
        self.serves.invalidate()
        self.state = MatchState.MENU
        logger.info("Back to menu")
        return True

    def submit(self, cmd: Command):
        """Queue a command; it runs at the start of the next tick."""
        self.commands.push(cmd)

    def process_commands(self):
        """Execute every queued command against this controller."""
        context = CommandContext(
            services=None, managers=None, settings=self.settings, world=self
        )
        for cmd in self.commands.drain():
            cmd.execute(context)

    # --- simulation ---
    def tick(
        self,
        intent: Optional[MatchIntent] = None,
        now_ms: Optional[float] = None,
        input_frame: Optional[InputFrame] = None,
    ) -> MatchSnapshot:
        """
        Advance the match by one fixed step.

        Does nothing but process queued commands unless the match is
        playing.

        :param intent: Player input for this tick.
        :type intent: MatchIntent, optional

        :param now_ms: Clock reading in milliseconds, defaults to the clock.
        :type now_ms: float, optional

        :param input_frame: Raw input frame, if the caller has one.
        :type input_frame: InputFrame, optional

        :return: Snapshot after the tick, with this tick's events.
        :rtype: MatchSnapshot
        """
        self.process_commands()
        if self.state is not MatchState.PLAYING:
            return self.snapshot()

        now = self.clock() if now_ms is None else now_ms
        self._frame_index += 1
        ctx = MatchTickContext(
            input_frame=input_frame
            or InputFrame(frame_index=self._frame_index, dt=1.0),
            dt=1.0,
            world=self.world,
            commands=self.commands,
            intent=intent,
            now_ms=now,
            events=self.events,
            serves=self.serves,
        )
        self.systems.step(ctx)

        if self.world.winner is not None:
            self.state = MatchState.GAME_OVER
            logger.info(
                f"Game over: {self.winner_name()} wins "
                f"{self.world.score.player1}-{self.world.score.player2}"
            )

        return self.snapshot(self.events.drain())

    # --- internals ---
    def _ignore(self, command: str) -> bool:
        logger.debug(f"Ignoring {command} while {self.state.value}")
        return False

    def _new_match(self):
        self.serves.invalidate()
        self.events.drain()
        self.world = self._build_world()
        self.systems = self._build_systems()
        self.state = MatchState.PLAYING

    def _build_world(self) -> MatchWorld:
        width, height = self.court
        paddle_h = self.settings.paddle_height
        paddle_y = height / 2 - paddle_h / 2
        right_kind = (
            ControllerKind.AI
            if self.mode is GameMode.SINGLE
            else ControllerKind.HUMAN
        )

        return MatchWorld(
            court=self.court,
            ball=Ball.spawn(
                Position2D(width / 2, height / 2),
                self.settings.serve_speed,
                self.rng,
            ),
            left_paddle=Paddle(
                position=Position2D(PADDLE_MARGIN, paddle_y),
                size=Size2D(PADDLE_WIDTH, paddle_h),
                side=Side.LEFT,
                controller=ControllerKind.HUMAN,
                court_height=height,
            ),
            right_paddle=Paddle(
                position=Position2D(
                    width - PADDLE_MARGIN - PADDLE_WIDTH, paddle_y
                ),
                size=Size2D(PADDLE_WIDTH, paddle_h),
                side=Side.RIGHT,
                controller=right_kind,
                court_height=height,
            ),
            cpu=AIController(height, difficulty=self.difficulty, rng=self.rng),
            collisions=CollisionResolver(height, events=self.events),
            score=ScoreState(),
            serve_speed=self.settings.serve_speed,
            winning_score=self.winning_score,
            rng=self.rng,
        )

    def _build_systems(self) -> SystemPipeline[MatchTickContext]:
        pipeline: SystemPipeline[MatchTickContext] = SystemPipeline()
        pipeline.extend(default_systems(self.world.right_paddle))
        return pipeline


# pylint: enable=too-many-instance-attributes
