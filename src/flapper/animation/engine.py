"""Plays timelines and reports their values once per frame."""

import logging
from typing import Callable, Dict, Optional, Tuple

from flapper.animation.timeline import Timeline

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[Dict[str, float]], None]


class AnimationEngine:
    """Runs any number of timelines side by side.

    Finished timelines deliver their final values and are then dropped.
    """

    def __init__(self) -> None:
        self._active: Dict[str, Tuple[Timeline, Optional[UpdateCallback]]] = {}
        self._serial = 0

    def play(
        self,
        timeline: Timeline,
        name: Optional[str] = None,
        on_update: Optional[UpdateCallback] = None,
    ) -> str:
        """Start ``timeline`` from the beginning, replacing any animation called ``name``.

        Returns:
            The animation id
        """
        if name is None:
            self._serial += 1
            name = f"{timeline.name}#{self._serial}"

        self.stop(name)
        timeline.play()
        self._active[name] = (timeline, on_update)
        logger.debug(f"Playing {name} for {timeline.duration:.0f}ms")
        return name

    def stop(self, name: str) -> bool:
        entry = self._active.pop(name, None)
        if entry is None:
            return False
        entry[0].stop()
        return True

    def stop_all(self) -> int:
        count = len(self._active)
        for timeline, _ in self._active.values():
            timeline.stop()
        self._active.clear()
        return count

    def update(self, delta_ms: float) -> None:
        for name, entry in list(self._active.items()):
            # A callback may have stopped this one already
            if self._active.get(name) is not entry:
                continue

            timeline, on_update = entry
            values = timeline.advance(delta_ms)
            if on_update is not None:
                on_update(values)

            if timeline.is_finished:
                self._active.pop(name, None)

    @property
    def animation_count(self) -> int:
        return len(self._active)
