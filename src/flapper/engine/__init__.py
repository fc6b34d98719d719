"""Arcade engine the game logic runs on: physics, pooling, timers, input and text."""

from .game import Game, GameObjectFactory, StateManager, World
from .group import Group
from .input import Key, Keyboard, Signal, KEY_CODES, KEY_NAMES
from .loader import AssetLoader, decode_data_uri
from .physics import ArcadePhysics, touches
from .sprite import ArcadeBody, Sprite, Vector
from .text import Label
from .timer import TimerEvent, TimerEvents
from .tween import Tween, TweenManager

__all__ = [
    "Game",
    "GameObjectFactory",
    "StateManager",
    "World",
    "Group",
    "Key",
    "Keyboard",
    "Signal",
    "KEY_CODES",
    "KEY_NAMES",
    "AssetLoader",
    "decode_data_uri",
    "ArcadePhysics",
    "touches",
    "ArcadeBody",
    "Sprite",
    "Vector",
    "Label",
    "TimerEvent",
    "TimerEvents",
    "Tween",
    "TweenManager",
]
