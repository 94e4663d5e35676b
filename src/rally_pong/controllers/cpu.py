"""
CPU paddle controller for Rally Pong.
"""

from __future__ import annotations

import random
from typing import Optional

from rally_pong.difficulty import DIFFICULTY_PRESETS, CpuConfig, Difficulty
from rally_pong.entities import Ball, Paddle
from rally_pong.physics import fold_into_range, sign

# spread of the aiming error, scaled by (1 - accuracy)
AIM_NOISE_RANGE = 100.0


class AIController:
    """
    Predictive CPU:
    - Waits at least reaction_time_ms between two decisions.
    - Projects the ball's straight-line path to the paddle, folding it
      off the top and bottom walls.
    - Aims at that point with some noise and moves toward it, capped
      at paddle.speed * speed_multiplier per decision.
    """

    def __init__(
        self,
        court_height: float,
        *,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: Optional[random.Random] = None,
    ):
        """
        :param court_height: Height of the court, for wall folding.
        :type court_height: float

        :param difficulty: Initial difficulty preset.
        :type difficulty: Difficulty

        :param rng: Random source for the aiming error.
        :type rng: random.Random, optional
        """
        self.court_height = court_height
        self.rng = rng or random.Random()
        self.difficulty = difficulty
        self.config: CpuConfig = DIFFICULTY_PRESETS[difficulty]
        self.last_decision_ms: Optional[float] = None

    @property
    def reaction_time_ms(self) -> float:
        """Minimum delay between two decisions."""
        return self.config.reaction_time_ms

    @property
    def accuracy(self) -> float:
        """Aiming accuracy in [0, 1]."""
        return self.config.accuracy

    @property
    def speed_multiplier(self) -> float:
        """Scale applied to the paddle speed cap."""
        return self.config.speed_multiplier

    def set_difficulty(self, level: Difficulty):
        """
        Load the preset for level.

        :param level: Difficulty to switch to.
        :type level: Difficulty
        """
        self.difficulty = level
        self.config = DIFFICULTY_PRESETS[level]

    def predict_impact_y(self, ball: Ball, paddle: Paddle) -> float:
        """
        Where the ball will cross the paddle's x, ignoring paddle hits.

        Falls back to the ball's current y when the ball is not heading
        toward the paddle (or is not moving horizontally at all).

        :param ball: The ball to track.
        :type ball: Ball

        :param paddle: The paddle to predict for.
        :type paddle: Paddle

        :return: Predicted y inside [0, court_height].
        :rtype: float
        """
        vx = ball.velocity.vx
        if vx == 0:
            return ball.position.y

        time_to_paddle = (paddle.position.x - ball.position.x) / vx
        if time_to_paddle <= 0:
            return ball.position.y

        projected = ball.position.y + ball.velocity.vy * time_to_paddle
        return fold_into_range(projected, self.court_height)

    def decide(self, ball: Ball, paddle: Paddle, now_ms: float) -> float:
        """
        Decide the paddle's vertical move for this tick.

        :param ball: The ball to track.
        :type ball: Ball

        :param paddle: The paddle being driven.
        :type paddle: Paddle

        :param now_ms: Current time in milliseconds.
        :type now_ms: float

        :return: Vertical delta to apply, 0.0 while still "reacting".
        :rtype: float
        """
        if (
            self.last_decision_ms is not None
            and now_ms - self.last_decision_ms < self.reaction_time_ms
        ):
            return 0.0
        self.last_decision_ms = now_ms

        predicted_y = self.predict_impact_y(ball, paddle)
        noise = self.rng.uniform(-0.5, 0.5) * (1 - self.accuracy)
        target_y = predicted_y + noise * AIM_NOISE_RANGE

        diff = target_y - paddle.center_y
        max_step = paddle.speed * self.speed_multiplier
        return sign(diff) * min(abs(diff), max_step)
