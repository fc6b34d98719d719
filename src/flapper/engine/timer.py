"""Repeating timer events driven by frame time."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TimerEvent:
    """Handle for a scheduled repeating callback."""
    delay_ms: float
    callback: Callable[[], None]
    elapsed_ms: float = 0.0
    pending_delete: bool = field(default=False, repr=False)


class TimerEvents:
    """Schedules repeating callbacks against accumulated frame time."""

    def __init__(self) -> None:
        self._events: List[TimerEvent] = []

    def loop(self, delay_ms: float, callback: Callable[[], None]) -> TimerEvent:
        """Call ``callback`` every ``delay_ms`` milliseconds."""
        if delay_ms <= 0:
            raise ValueError(f"Timer delay must be positive, got {delay_ms}")
        event = TimerEvent(delay_ms=delay_ms, callback=callback)
        self._events.append(event)
        logger.debug(f"Timer loop scheduled every {delay_ms:.0f}ms")
        return event

    def remove(self, event: Optional[TimerEvent]) -> bool:
        """Cancel a timer. Removing an absent or already removed timer is a no-op."""
        if event is None or event not in self._events:
            return False
        event.pending_delete = True
        self._events.remove(event)
        logger.debug("Timer removed")
        return True

    def remove_all(self) -> None:
        for event in self._events:
            event.pending_delete = True
        self._events.clear()

    def update(self, delta_ms: float) -> None:
        """Advance every timer, firing each as many times as its delay fits."""
        for event in list(self._events):
            event.elapsed_ms += delta_ms
            while event.elapsed_ms >= event.delay_ms and not event.pending_delete:
                event.elapsed_ms -= event.delay_ms
                event.callback()

    def __len__(self) -> int:
        return len(self._events)
