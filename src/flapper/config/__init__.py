"""Configuration for flapper."""

from .settings import (
    ConfigField,
    GameSettings,
    clamp_spawn_interval,
    get_settings,
    hex_to_rgb,
    validate_config,
)

__all__ = [
    "ConfigField",
    "GameSettings",
    "clamp_spawn_interval",
    "get_settings",
    "hex_to_rgb",
    "validate_config",
]
