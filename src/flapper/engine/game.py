"""
The host engine: world, object factory, per-frame stepping and state switching.

A game state is any object with ``preload()``, ``create()`` and
``update()`` methods. ``StateManager.start`` is deferred to the next
``Game.step`` so a state can request its own restart from inside
``update`` without tearing the world down underneath itself.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from flapper.engine.group import Group
from flapper.engine.input import Keyboard
from flapper.engine.loader import AssetLoader
from flapper.engine.physics import ArcadePhysics
from flapper.engine.sprite import Sprite
from flapper.engine.text import Label
from flapper.engine.timer import TimerEvents
from flapper.engine.tween import Tween, TweenManager

logger = logging.getLogger(__name__)


class GameState(Protocol):
    def preload(self) -> None: ...
    def create(self) -> None: ...
    def update(self) -> None: ...


@dataclass
class World:
    """Everything created by the running state; discarded on state switch."""
    sprites: List[Sprite] = field(default_factory=list)
    groups: List[Group] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)

    def all_sprites(self) -> List[Sprite]:
        result = list(self.sprites)
        for group in self.groups:
            result.extend(group.members)
        return result

    def clear(self) -> None:
        self.sprites.clear()
        self.groups.clear()
        self.labels.clear()


class GameObjectFactory:
    """Creates game objects and registers them with the world."""

    def __init__(self, game: "Game") -> None:
        self._game = game

    def group(self, enable_body: bool = True) -> Group:
        group = Group(self._game.load, enable_body=enable_body)
        self._game.world.groups.append(group)
        return group

    def sprite(self, x: float, y: float, key: str) -> Optional[Sprite]:
        """Create a sprite, or None when texture ``key`` was never loaded."""
        texture = self._game.load.get_texture(key)
        if texture is None:
            logger.error(f"No texture loaded for key '{key}'")
            return None
        sprite = Sprite(x, y, key, texture)
        self._game.world.sprites.append(sprite)
        return sprite

    def text(self, x: int, y: int, text: str, style: Optional[Dict[str, str]] = None) -> Label:
        label = Label(x, y, text, dict(style or {}))
        self._game.world.labels.append(label)
        return label

    def tween(self, target) -> Tween:
        return self._game.tweens.tween(target)


class StateManager:
    """Registry of named states with deferred switching."""

    def __init__(self, game: "Game") -> None:
        self._game = game
        self._states: Dict[str, GameState] = {}
        self._pending: Optional[str] = None
        self.current_key: Optional[str] = None

    @property
    def current(self) -> Optional[GameState]:
        if self.current_key is None:
            return None
        return self._states.get(self.current_key)

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def add(self, key: str, state: GameState) -> None:
        self._states[key] = state

    def start(self, key: str) -> None:
        """Request ``key`` to be (re)started at the beginning of the next step."""
        if key not in self._states:
            raise KeyError(f"Unknown state: {key}")
        self._pending = key

    def _switch(self) -> None:
        key = self._pending
        self._pending = None
        if key is None:
            return

        self._game.reset_world()
        self.current_key = key
        state = self._states[key]

        logger.info(f"Starting state '{key}'")
        state.preload()
        state.create()


class Game:
    """Owns the world and advances it one frame at a time."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.stage_color = "#000000"

        self.load = AssetLoader()
        self.physics = ArcadePhysics(width, height)
        self.time = TimerEvents()
        self.keyboard = Keyboard()
        self.tweens = TweenManager()
        self.world = World()
        self.add = GameObjectFactory(self)
        self.state = StateManager(self)

        self.frame = 0
        self.elapsed_ms = 0.0

    def reset_world(self) -> None:
        """Discard every object, timer, tween and key binding of the previous state."""
        self.time.remove_all()
        self.tweens.remove_all()
        self.keyboard.reset()
        self.world.clear()

    def step(self, delta_ms: float) -> None:
        """Advance one frame: state switch, timers, physics, tweens, then state update."""
        if self.state.has_pending:
            self.state._switch()

        current = self.state.current
        if current is None:
            return

        self.time.update(delta_ms)

        dt = delta_ms / 1000.0
        for sprite in self.world.all_sprites():
            self.physics.step(sprite, dt)

        self.tweens.update(delta_ms)

        current.update()

        self.frame += 1
        self.elapsed_ms += delta_ms
