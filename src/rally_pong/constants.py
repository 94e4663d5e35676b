"""
Constants for Rally Pong.
"""

from __future__ import annotations

COURT_SIZE = (800, 400)

BALL_RADIUS = 8.0
BALL_MAX_VELOCITY = 12.0
BALL_TRAIL_LENGTH = 10
# vertical serve velocity is drawn from [-SERVE_VY_SPREAD, SERVE_VY_SPREAD]
SERVE_VY_SPREAD = 2.0
SERVE_DELAY_MS = 1000

PADDLE_WIDTH = 10.0
PADDLE_SPEED = 8.0
# left paddle x; the right paddle mirrors it at width - margin - paddle width
PADDLE_MARGIN = 30.0

SPIN_FACTOR = 2.0
SPEEDUP_FACTOR = 1.05

WINNING_SCORE = 11
