"""
Event bus for flapper.

Game logic publishes what happened (jumps, spawns, deaths, restarts)
and the presentation side listens: the audio engine plays sounds and
the window's debug overlay shows the most recent event.
"""

import logging
import time
from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Deque, Dict, List, Optional, Union

logger = logging.getLogger(__name__)


class EventType(Enum):
    # Game
    JUMP = auto()
    PIPES_SPAWNED = auto()
    SCORE_CHANGED = auto()
    BIRD_DIED = auto()
    RESTART = auto()

    # Audio
    SOUND_PLAY = auto()


@dataclass
class Event:
    """Something that happened, with an optional payload."""
    type: Union[EventType, str]
    data: Dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]

HISTORY_LIMIT = 100


class EventBus:
    """Synchronous publish/subscribe hub with a bounded history."""

    def __init__(self) -> None:
        self._subscribers: Dict[Union[EventType, str], List[Handler]] = defaultdict(list)
        self._history: Deque[Event] = deque(maxlen=HISTORY_LIMIT)

    def subscribe(self, event_type: Union[EventType, str], handler: Handler) -> Callable[[], None]:
        """Register ``handler`` for ``event_type``.

        Returns:
            A function that removes the subscription; calling it twice is harmless
        """
        handlers = self._subscribers[event_type]
        handlers.append(handler)

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Record ``event`` and dispatch it to every handler right away.

        A failing handler is logged and does not stop the others.
        """
        self._history.append(event)
        for handler in list(self._subscribers.get(event.type, ())):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Handler for {event.type} failed: {e}")

    def get_history(
        self,
        event_type: Optional[Union[EventType, str]] = None,
        limit: int = 10,
    ) -> List[Event]:
        """Most recent events, oldest first, optionally of one type."""
        events = [e for e in self._history if event_type is None or e.type == event_type]
        return events[-limit:]


def sound_event(name: str, source: str = "game") -> Event:
    return Event(EventType.SOUND_PLAY, data={"sound": name}, source=source)
