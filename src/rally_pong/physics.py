"""
Small numeric helpers shared by the entities, collisions and the CPU.
"""

from __future__ import annotations

from mini_arcade_core.spaces.d2.physics2d import Velocity2D


def clamp(value: float, low: float, high: float) -> float:
    """
    Clamp value into [low, high].

    If the range is inverted (high < low) low wins, so the result is
    always a finite number inside or at the lower edge.
    """
    return max(low, min(high, value))


def sign(value: float) -> float:
    """Return -1.0, 0.0 or +1.0."""
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def clamp_velocity(velocity: Velocity2D, limit: float):
    """
    Clamp both velocity components into [-limit, limit] in place.

    :param velocity: Velocity to clamp.
    :type velocity: Velocity2D

    :param limit: Maximum absolute value per axis.
    :type limit: float
    """
    velocity.vx = clamp(velocity.vx, -limit, limit)
    velocity.vy = clamp(velocity.vy, -limit, limit)


def scale_velocity(velocity: Velocity2D, factor: float):
    """Multiply both velocity components by factor in place."""
    velocity.vx *= factor
    velocity.vy *= factor


def fold_into_range(value: float, upper: float) -> float:
    """
    Mirror value back into [0, upper] as if it bounced off both ends.

    Used to approximate wall bounces along a straight-line trajectory.

    :param value: Projected coordinate.
    :type value: float

    :param upper: Upper bound of the range (the lower bound is 0).
    :type upper: float

    :return: Coordinate inside [0, upper].
    :rtype: float
    """
    if upper <= 0:
        return 0.0

    # Whole round trips leave the coordinate unchanged, drop them first
    # so very long projections don't loop for ages.
    period = 2 * upper
    value = value % period if abs(value) > period else value

    while value < 0 or value > upper:
        if value < 0:
            value = -value
        if value > upper:
            value = period - value
    return value
