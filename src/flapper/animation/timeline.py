"""Fixed-length timelines that move numeric properties between two values."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List


class PlayState(Enum):
    STOPPED = auto()
    PLAYING = auto()
    FINISHED = auto()


@dataclass
class Track:
    """One property going linearly from ``start`` to ``end``."""

    name: str
    start: float
    end: float

    def value_at(self, t: float) -> float:
        t = min(1.0, max(0.0, t))
        return self.start + (self.end - self.start) * t


@dataclass
class Timeline:
    """A set of tracks sharing one duration.

    Attributes:
        name: Used to build the animation id
        duration: Length in milliseconds; zero or less finishes on the first update
    """

    name: str
    duration: float = 1000.0
    tracks: List[Track] = field(default_factory=list)

    state: PlayState = field(default=PlayState.STOPPED, init=False)
    elapsed: float = field(default=0.0, init=False, repr=False)

    def add_track(self, name: str, start: float, end: float) -> Track:
        track = Track(name, start, end)
        self.tracks.append(track)
        return track

    def play(self) -> None:
        self.elapsed = 0.0
        self.state = PlayState.PLAYING

    def stop(self) -> None:
        self.state = PlayState.STOPPED

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, self.elapsed / self.duration)

    @property
    def is_finished(self) -> bool:
        return self.state == PlayState.FINISHED

    def advance(self, delta_ms: float) -> Dict[str, float]:
        """Move the playhead and return every track's value at the new position."""
        if self.state == PlayState.PLAYING:
            self.elapsed += delta_ms
            if self.progress >= 1.0:
                self.state = PlayState.FINISHED

        t = self.progress
        return {track.name: track.value_at(t) for track in self.tracks}
