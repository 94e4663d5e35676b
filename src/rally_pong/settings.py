"""
Match configuration read at the start of every match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GameMode(Enum):
    """Who drives the right paddle."""

    SINGLE = "single"
    TWO_PLAYER = "two-player"


class BallSpeed(Enum):
    """Serve speed tier."""

    NORMAL = "normal"
    FAST = "fast"
    VERY_FAST = "very-fast"


class PaddleSize(Enum):
    """Paddle height tier."""

    SMALL = "small"
    NORMAL = "normal"
    LARGE = "large"


BALL_SPEEDS: dict[BallSpeed, float] = {
    BallSpeed.NORMAL: 5.0,
    BallSpeed.FAST: 7.0,
    BallSpeed.VERY_FAST: 9.0,
}

PADDLE_HEIGHTS: dict[PaddleSize, float] = {
    PaddleSize.SMALL: 60.0,
    PaddleSize.NORMAL: 80.0,
    PaddleSize.LARGE: 100.0,
}


def parse_option(enum_type: type[Enum], name: str) -> Enum:
    """
    Resolve a user-facing option name into an enum member.

    Names are matched case-insensitively and "_" is accepted in place of
    "-", so both "very-fast" and "VERY_FAST" resolve to BallSpeed.VERY_FAST.

    :param enum_type: Enum to look the name up in.
    :type enum_type: type[Enum]

    :param name: Option name.
    :type name: str

    :return: The matching enum member.
    :rtype: Enum

    :raises ValueError: If no member matches.
    """
    key = name.strip().lower().replace("_", "-")
    for member in enum_type:
        if member.value == key:
            return member
    raise ValueError(f"Unknown {enum_type.__name__} option: {name!r}")


@dataclass
class MatchSettings:
    """
    Settings the presentation layer can change between matches.

    :ivar ball_speed (BallSpeed): Serve speed tier.
    :ivar paddle_size (PaddleSize): Paddle height tier.
    :ivar sound_enabled (bool): Only consumed by the audio collaborator.
    """

    ball_speed: BallSpeed = BallSpeed.NORMAL
    paddle_size: PaddleSize = PaddleSize.NORMAL
    sound_enabled: bool = True

    @property
    def serve_speed(self) -> float:
        """Horizontal serve speed for the selected tier."""
        return BALL_SPEEDS[self.ball_speed]

    @property
    def paddle_height(self) -> float:
        """Paddle height for the selected tier."""
        return PADDLE_HEIGHTS[self.paddle_size]

    @classmethod
    def from_names(
        cls,
        ball_speed: str = "normal",
        paddle_size: str = "normal",
        sound_enabled: bool = True,
    ) -> MatchSettings:
        """Build settings from the option names a settings menu uses."""
        return cls(
            ball_speed=parse_option(BallSpeed, ball_speed),
            paddle_size=parse_option(PaddleSize, paddle_size),
            sound_enabled=sound_enabled,
        )
