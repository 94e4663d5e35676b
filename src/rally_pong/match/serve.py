"""
Delayed ball re-arm after a point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from mini_arcade_core.utils import logger

from rally_pong.constants import SERVE_DELAY_MS


@dataclass(frozen=True)
class PendingServe:
    """
    A re-arm waiting for its time.

    :ivar due_ms (float): Clock time at which the ball gets its velocity.
    :ivar generation (int): Session generation it was scheduled in.
    """

    due_ms: float
    generation: int


@dataclass
class ServeScheduler:
    """
    One-shot re-arm timers, polled once per tick.

    Every timer carries the generation it was scheduled in. Starting a new
    match bumps the generation, so a timer left over from the previous
    match is dropped when it falls due instead of serving the new ball.

    :ivar delay_ms (float): Delay between a point and the next serve.
    :ivar generation (int): Current session generation.
    :ivar pending (list[PendingServe]): Timers not yet due.
    """

    delay_ms: float = SERVE_DELAY_MS
    generation: int = 0
    pending: List[PendingServe] = field(default_factory=list)

    def schedule(self, now_ms: float) -> PendingServe:
        """
        Schedule a serve delay_ms after now_ms.

        :param now_ms: Current clock time.
        :type now_ms: float

        :return: The scheduled timer.
        :rtype: PendingServe
        """
        serve = PendingServe(
            due_ms=now_ms + self.delay_ms, generation=self.generation
        )
        self.pending.append(serve)
        return serve

    def invalidate(self) -> int:
        """Start a new generation, orphaning every pending timer."""
        self.generation += 1
        return self.generation

    def poll(self, now_ms: float) -> bool:
        """
        Fire due timers.

        :param now_ms: Current clock time.
        :type now_ms: float

        :return: True if at least one timer of the current generation fired.
        :rtype: bool
        """
        due = [s for s in self.pending if s.due_ms <= now_ms]
        if not due:
            return False
        self.pending = [s for s in self.pending if s.due_ms > now_ms]

        fired = False
        for serve in due:
            if serve.generation != self.generation:
                logger.debug(
                    f"Dropping stale serve from generation {serve.generation}"
                )
                continue
            fired = True
        return fired
