"""
Game settings using Pydantic.

Settings are loaded from environment variables (prefix ``FLAPPER_``)
with .env file support. Defaults reproduce the classic 400x490 board.
"""

import re
from enum import Enum, auto
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from flapper.core.errors import ConfigError

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")

MIN_SPAWN_INTERVAL_MS = 500
MAX_SPAWN_INTERVAL_MS = 5000


class ConfigField(Enum):
    """Which group of settings failed validation."""
    DIMENSIONS = auto()
    BIRD_POSITION = auto()
    GAP_ORDER = auto()
    ROW_COUNT = auto()
    BACKGROUND_COLOR = auto()


class GameSettings(BaseSettings):
    """Main game settings."""

    model_config = SettingsConfigDict(
        env_prefix="FLAPPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # World
    world_width: int = 400
    world_height: int = 490
    background_color: str = "#FF6A5E"
    fps: int = 60

    # Bird
    bird_x: float = 100
    bird_y: float = 245
    bird_anchor: tuple[float, float] = (-0.2, 0.5)
    gravity: float = 1000.0
    jump_velocity: float = -350.0
    max_angle: float = 20.0
    min_angle: float = -20.0
    rotation_step: float = 1.0
    jump_tween_ms: float = 100.0

    # Pipes
    pipe_velocity: float = -200.0
    row_spacing: int = 60
    row_offset: int = 10
    gap_min: int = 1
    gap_max: int = 5
    row_count: int = 8
    pool_size: int = 20
    spawn_interval_ms: int = 1500

    # Score label
    score_x: int = 20
    score_y: int = 20
    score_font: str = "30px Arial"
    score_color: str = "#ffffff"

    # Input
    jump_key: str = "space"

    # Runtime
    debug: bool = False
    sound_enabled: bool = True
    log_file: Optional[Path] = None
    window_scale: int = Field(default=1, ge=1, le=4)


def validate_config(settings: GameSettings) -> None:
    """Reject nonsensical settings.

    Checks run in a fixed order and the first failure wins.

    Raises:
        ConfigError: with ``reason`` set to the offending ConfigField
    """
    if settings.world_width <= 0 or settings.world_height <= 0:
        raise ConfigError(
            ConfigField.DIMENSIONS,
            f"world size must be positive, got {settings.world_width}x{settings.world_height}",
        )

    if settings.bird_x < 0 or settings.bird_y < 0:
        raise ConfigError(
            ConfigField.BIRD_POSITION,
            f"bird start must be non-negative, got ({settings.bird_x}, {settings.bird_y})",
        )

    if settings.gap_min >= settings.gap_max:
        raise ConfigError(
            ConfigField.GAP_ORDER,
            f"gap_min ({settings.gap_min}) must be below gap_max ({settings.gap_max})",
        )

    if settings.row_count <= settings.gap_max:
        raise ConfigError(
            ConfigField.ROW_COUNT,
            f"row_count ({settings.row_count}) must exceed gap_max ({settings.gap_max})",
        )

    if not HEX_COLOR_PATTERN.match(settings.background_color):
        raise ConfigError(
            ConfigField.BACKGROUND_COLOR,
            f"background_color must look like #RRGGBB, got {settings.background_color!r}",
        )


def clamp_spawn_interval(interval_ms: float) -> float:
    """Clamp a spawn interval to the playable range."""
    return max(MIN_SPAWN_INTERVAL_MS, min(MAX_SPAWN_INTERVAL_MS, interval_ms))


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Convert ``#RRGGBB`` to an RGB tuple."""
    value = color.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


@lru_cache
def get_settings() -> GameSettings:
    """Get cached settings instance."""
    return GameSettings()
