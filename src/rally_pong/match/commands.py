"""
Module defining match commands for Rally Pong.

Commands follow mini_arcade_core's Command protocol. They are executed
with a CommandContext whose ``world`` is the MatchController.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from mini_arcade_core.engine.commands import Command, CommandContext
from mini_arcade_core.utils import logger

from rally_pong.difficulty import Difficulty
from rally_pong.settings import GameMode

if TYPE_CHECKING:
    from rally_pong.match.controller import MatchController


def _controller(context: CommandContext) -> Optional[MatchController]:
    world = context.world
    if world is None:
        logger.debug("Command executed without a match, ignoring")
    return world


@dataclass(frozen=True)
class StartMatchCommand(Command):
    """
    Command to start a new match.

    :ivar mode (GameMode): Single player or two players.
    :ivar difficulty (Difficulty): CPU difficulty, unused in two-player mode.
    """

    mode: GameMode = GameMode.SINGLE
    difficulty: Difficulty = Difficulty.MEDIUM

    def execute(self, context: CommandContext):
        match = _controller(context)
        if match is not None:
            match.start(self.mode, self.difficulty)


class PauseCommand(Command):
    """
    Command to pause a running match.
    """

    def execute(self, context: CommandContext):
        match = _controller(context)
        if match is not None:
            match.pause()


class ResumeCommand(Command):
    """
    Command to resume a paused match.
    """

    def execute(self, context: CommandContext):
        match = _controller(context)
        if match is not None:
            match.resume()


class TogglePauseCommand(Command):
    """Pause when playing, resume when paused (the ESC key)."""

    def execute(self, context: CommandContext):
        match = _controller(context)
        if match is None:
            return
        if match.is_paused:
            match.resume()
        else:
            match.pause()


class RestartCommand(Command):
    """
    Command to restart with the same mode and difficulty.
    """

    def execute(self, context: CommandContext):
        match = _controller(context)
        if match is not None:
            match.restart()


class QuitToMenuCommand(Command):
    """
    Command to leave the match and return to the menu.
    """

    def execute(self, context: CommandContext):
        match = _controller(context)
        if match is not None:
            match.quit_to_menu()
