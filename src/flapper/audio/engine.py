"""
Sound effects for flapper.

Three short blips (jump, hit, score) are synthesized with numpy when
the mixer comes up and played on SOUND_PLAY events. If the mixer
cannot be opened the game simply runs silent.
"""

import logging
from typing import Dict, Optional

import numpy as np
import pygame

from flapper.core.events import Event

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def _timebase(seconds: float) -> np.ndarray:
    return np.arange(int(SAMPLE_RATE * seconds)) / SAMPLE_RATE


def _square(phase: np.ndarray) -> np.ndarray:
    return np.where(phase % 1.0 < 0.5, 1.0, -1.0)


def jump_wave() -> np.ndarray:
    """Rising square chirp, 120ms."""
    t = _timebase(0.12)
    # Phase of a sweep from 300Hz climbing 4kHz per second
    phase = 300 * t + 2000 * t * t
    envelope = np.clip(1 - t * 8, 0, 1)
    return _square(phase) * 0.25 * envelope


def hit_wave() -> np.ndarray:
    """Falling thud with a sine sub, 250ms."""
    t = _timebase(0.25)
    freq = np.maximum(60, 220 - t * 600)
    phase = np.cumsum(freq) / SAMPLE_RATE
    envelope = np.clip(1 - t * 4, 0, 1)
    return (_square(phase) * 0.3 + np.sin(2 * np.pi * 80 * t) * 0.2) * envelope


def score_wave() -> np.ndarray:
    """Two-tone blip, 100ms."""
    t = _timebase(0.1)
    freq = np.where(t < 0.05, 880, 1320)
    phase = np.cumsum(freq) / SAMPLE_RATE
    envelope = np.clip(1 - t * 10, 0, 1)
    return _square(phase) * 0.2 * envelope


WAVES = {
    "jump": jump_wave,
    "hit": hit_wave,
    "score": score_wave,
}


def to_pcm(wave: np.ndarray) -> np.ndarray:
    """Float mono wave in [-1, 1] to interleaved 16-bit stereo frames."""
    mono = (np.clip(wave, -1.0, 1.0) * 32767).astype(np.int16)
    return np.ascontiguousarray(np.column_stack((mono, mono)))


class AudioEngine:
    """Owns the mixer and the synthesized effects."""

    def __init__(self) -> None:
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._volume = 0.6

    def init(self) -> bool:
        """Open the mixer and build every sound. Returns False when audio is unavailable."""
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=1024)
            for name, make_wave in WAVES.items():
                self._sounds[name] = pygame.sndarray.make_sound(to_pcm(make_wave()))
        except (pygame.error, ValueError) as e:
            logger.error(f"Audio unavailable, running silent: {e}")
            self._sounds.clear()
            return False

        self._initialized = True
        logger.info(f"Audio ready with {len(self._sounds)} sounds")
        return True

    def play(self, sound_name: str) -> Optional[pygame.mixer.Channel]:
        if not self._initialized:
            return None

        sound = self._sounds.get(sound_name)
        if sound is None:
            logger.warning(f"No sound named {sound_name}")
            return None

        sound.set_volume(self._volume)
        return sound.play()

    def handle_sound_event(self, event: Event) -> None:
        """SOUND_PLAY handler."""
        name = event.data.get("sound")
        if name:
            self.play(name)

    def cleanup(self) -> None:
        if not self._initialized:
            return
        self._sounds.clear()
        pygame.mixer.quit()
        self._initialized = False


_engine: Optional[AudioEngine] = None


def get_audio_engine() -> AudioEngine:
    """Process-wide audio engine."""
    global _engine
    if _engine is None:
        _engine = AudioEngine()
    return _engine
