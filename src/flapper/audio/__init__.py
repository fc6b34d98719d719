"""Sound effects for flapper."""

from .engine import AudioEngine, get_audio_engine

__all__ = ["AudioEngine", "get_audio_engine"]
