"""
Events the simulation emits for the audio and rendering collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Protocol


class MatchEvent(Enum):
    """Discrete things that happened during a tick."""

    PADDLE_HIT = "paddle_hit"
    WALL_HIT = "wall_hit"
    SCORE = "score"


class EventSink(Protocol):
    """Anything entities can report events to."""

    def emit(self, event: MatchEvent):
        """
        Report an event.

        :param event: The event that happened.
        :type event: MatchEvent
        """


EventListener = Callable[[MatchEvent], None]


@dataclass
class EventLog:
    """
    Collects the events of the current tick and fans them out to listeners.

    :ivar events (list[MatchEvent]): Events emitted since the last drain.
    :ivar listeners (list[EventListener]): Callbacks invoked on every emit.
    """

    events: List[MatchEvent] = field(default_factory=list)
    listeners: List[EventListener] = field(default_factory=list)

    def emit(self, event: MatchEvent):
        """Record the event and notify listeners."""
        self.events.append(event)
        for listener in self.listeners:
            listener(event)

    def subscribe(self, listener: EventListener):
        """Register a callback for every future event."""
        self.listeners.append(listener)

    def drain(self) -> tuple[MatchEvent, ...]:
        """
        Return and clear the recorded events.

        :return: Events in emission order.
        :rtype: tuple[MatchEvent, ...]
        """
        items = tuple(self.events)
        self.events.clear()
        return items
