"""
Maps match events onto sound effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from rally_pong.events import MatchEvent

DEFAULT_SOUNDS: dict[MatchEvent, str] = {
    MatchEvent.PADDLE_HIT: "paddle_hit",
    MatchEvent.WALL_HIT: "wall_hit",
    MatchEvent.SCORE: "score",
}


class SoundPlayer(Protocol):
    """Same shape as mini_arcade_core's AudioPort.play."""

    def play(self, sound_id: str, loops: int = 0):
        """Play the sound registered under sound_id."""


@dataclass
class SoundBoard:
    """
    Event listener that plays a sound per match event.

    Subscribe it with ``controller.events.subscribe(board)``. Muting is
    handled here, the simulation never knows about it.

    :ivar player (SoundPlayer): Audio backend.
    :ivar enabled (bool): When False events are dropped silently.
    :ivar sounds (dict[MatchEvent, str]): Event to sound id mapping.
    """

    player: SoundPlayer
    enabled: bool = True
    sounds: dict[MatchEvent, str] = field(
        default_factory=lambda: dict(DEFAULT_SOUNDS)
    )

    def __call__(self, event: MatchEvent):
        if not self.enabled:
            return
        sound_id = self.sounds.get(event)
        if sound_id is not None:
            self.player.play(sound_id)
