from __future__ import annotations

from mini_arcade_core.engine.commands import CommandContext

from rally_pong.difficulty import Difficulty
from rally_pong.match import (
    MatchState,
    PauseCommand,
    QuitToMenuCommand,
    RestartCommand,
    ResumeCommand,
    StartMatchCommand,
    TogglePauseCommand,
)
from rally_pong.settings import GameMode


def context_for(match):
    return CommandContext(services=None, managers=None, world=match)


def test_submitted_commands_run_on_next_tick(match):
    match.submit(StartMatchCommand(GameMode.TWO_PLAYER, Difficulty.HARD))
    assert match.state is MatchState.MENU

    snapshot = match.tick(now_ms=0.0)
    assert snapshot.state is MatchState.PLAYING
    assert snapshot.mode is GameMode.TWO_PLAYER
    assert snapshot.difficulty is Difficulty.HARD


def test_pause_resume_commands(playing):
    ctx = context_for(playing)
    PauseCommand().execute(ctx)
    assert playing.state is MatchState.PAUSED
    ResumeCommand().execute(ctx)
    assert playing.state is MatchState.PLAYING


def test_toggle_pause(playing):
    ctx = context_for(playing)
    TogglePauseCommand().execute(ctx)
    assert playing.is_paused
    TogglePauseCommand().execute(ctx)
    assert playing.is_running


def test_restart_and_quit_commands(playing):
    playing.world.score.player1 = 4
    ctx = context_for(playing)

    RestartCommand().execute(ctx)
    assert playing.scores.player1 == 0

    QuitToMenuCommand().execute(ctx)
    assert playing.state is MatchState.MENU


def test_incompatible_commands_are_noops(match):
    ctx = context_for(match)
    for cmd in (PauseCommand(), ResumeCommand(), RestartCommand()):
        cmd.execute(ctx)
    assert match.state is MatchState.MENU


def test_commands_without_match_do_nothing():
    ctx = CommandContext(services=None, managers=None)
    for cmd in (
        StartMatchCommand(),
        PauseCommand(),
        ResumeCommand(),
        TogglePauseCommand(),
        RestartCommand(),
        QuitToMenuCommand(),
    ):
        cmd.execute(ctx)
