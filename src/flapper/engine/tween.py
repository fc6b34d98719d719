"""Property tweens on top of the animation engine."""

from typing import Any, Dict

from flapper.animation.engine import AnimationEngine
from flapper.animation.timeline import Timeline


class Tween:
    """Animates numeric attributes of ``target`` linearly toward fixed values.

    Usage:
        tweens.tween(bird).to({"angle": -20}, 100).start()
    """

    def __init__(self, target: Any, engine: AnimationEngine) -> None:
        self.target = target
        self._engine = engine
        self._properties: Dict[str, float] = {}
        self._duration = 0.0

    def to(self, properties: Dict[str, float], duration: float = 1000.0) -> "Tween":
        self._properties = dict(properties)
        self._duration = duration
        return self

    def start(self) -> str:
        """Snapshot the current values and begin playing.

        Returns:
            The animation id
        """
        timeline = Timeline(name=f"tween_{type(self.target).__name__}", duration=self._duration)
        for attr, end in self._properties.items():
            timeline.add_track(attr, float(getattr(self.target, attr)), float(end))
        return self._engine.play(timeline, on_update=self._apply)

    def _apply(self, values: Dict[str, float]) -> None:
        for attr, value in values.items():
            setattr(self.target, attr, value)


class TweenManager:
    """Creates tweens and advances them each frame."""

    def __init__(self) -> None:
        self.engine = AnimationEngine()

    def tween(self, target: Any) -> Tween:
        return Tween(target, self.engine)

    def update(self, delta_ms: float) -> None:
        self.engine.update(delta_ms)

    def remove_all(self) -> None:
        self.engine.stop_all()

    @property
    def active_count(self) -> int:
        return self.engine.animation_count
