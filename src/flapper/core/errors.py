"""Error taxonomy for flapper.

Every fatal condition raised while starting a run derives from
FlapperError. Missing objects on ordinary operation calls are not
errors; they are absorbed by the game logic.
"""

from enum import Enum, auto
from typing import Any


class FlapperError(Exception):
    """Base class for all flapper errors."""


class ConfigError(FlapperError):
    """Settings failed validation. Fatal at load."""

    def __init__(self, reason: Any, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class AssetError(FlapperError):
    """An embedded image payload is malformed. Fatal during preload."""

    def __init__(self, asset_key: str, message: str) -> None:
        super().__init__(f"{asset_key}: {message}")
        self.asset_key = asset_key


class SetupComponent(Enum):
    """Engine objects a run cannot start without."""
    SPRITE = auto()
    PHYSICS = auto()
    GROUP = auto()
    KEYBOARD = auto()


class SetupError(FlapperError):
    """A required engine object could not be constructed. Fatal for the run."""

    def __init__(self, component: SetupComponent, message: str) -> None:
        super().__init__(f"{component.name.lower()}: {message}")
        self.component = component
