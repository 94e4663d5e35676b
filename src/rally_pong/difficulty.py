"""
AI difficulty presets for Rally Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Difficulty(Enum):
    """Difficulty of the computer-controlled paddle."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def from_name(cls, name: str) -> Difficulty:
        """
        Look up a difficulty by its (case-insensitive) name.

        :param name: Difficulty name, e.g. "hard".
        :type name: str

        :return: Matching difficulty.
        :rtype: Difficulty

        :raises ValueError: If the name is unknown.
        """
        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown difficulty: {name!r}") from exc


@dataclass(frozen=True)
class CpuConfig:
    """
    CPU paddle tuning.

    - reaction_time_ms: minimum time between two decisions
    - accuracy: 1.0 = aims at the predicted impact point, lower adds noise
    - speed_multiplier: scales the paddle speed cap per decision
    """

    reaction_time_ms: float = 100.0
    accuracy: float = 0.8
    speed_multiplier: float = 1.0


DIFFICULTY_PRESETS: dict[Difficulty, CpuConfig] = {
    Difficulty.EASY: CpuConfig(
        reaction_time_ms=200.0, accuracy=0.6, speed_multiplier=0.7
    ),
    Difficulty.MEDIUM: CpuConfig(
        reaction_time_ms=100.0, accuracy=0.8, speed_multiplier=1.0
    ),
    Difficulty.HARD: CpuConfig(
        reaction_time_ms=50.0, accuracy=0.95, speed_multiplier=1.3
    ),
}
