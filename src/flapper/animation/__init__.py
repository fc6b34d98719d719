"""Tweening support: timelines and the animation engine."""

from .timeline import PlayState, Timeline, Track
from .engine import AnimationEngine

__all__ = [
    "PlayState",
    "Timeline",
    "Track",
    "AnimationEngine",
]
