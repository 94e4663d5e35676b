"""
Paddle controllers for Rally Pong.
"""

from __future__ import annotations

from .cpu import AIController

__all__ = ["AIController"]
