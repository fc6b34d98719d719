"""Core framework components for flapper."""

from .state import State, StateMachine
from .events import EventBus, Event, EventType
from .errors import FlapperError, ConfigError, AssetError, SetupError, SetupComponent

__all__ = [
    "State",
    "StateMachine",
    "EventBus",
    "Event",
    "EventType",
    "FlapperError",
    "ConfigError",
    "AssetError",
    "SetupError",
    "SetupComponent",
]
