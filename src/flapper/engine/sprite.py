"""Sprites and their arcade physics bodies."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import pygame
from numpy.typing import NDArray


@dataclass
class Vector:
    """Mutable 2D vector."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class ArcadeBody:
    """Axis-aligned physics body attached to a sprite.

    Velocities are in pixels per second, gravity in pixels per second squared.
    """
    velocity: Vector = field(default_factory=Vector)
    gravity: Vector = field(default_factory=Vector)


class Sprite:
    """A textured game object positioned by its anchor point.

    ``alive`` is the game-level flag (a dead bird still falls and still
    draws); ``exists`` controls whether the engine updates, draws and
    collides the sprite at all. ``kill()`` clears both.
    """

    def __init__(
        self,
        x: float,
        y: float,
        key: str,
        texture: Optional[NDArray[np.uint8]] = None,
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.key = key
        self.texture = texture
        if texture is not None:
            self.height, self.width = texture.shape[:2]
        else:
            self.width = self.height = 0

        self.anchor = Vector(0.0, 0.0)
        self.angle = 0.0
        self.alive = True
        self.exists = True
        self.body: Optional[ArcadeBody] = None

        self.in_world = False
        self.check_world_bounds = False
        self.out_of_bounds_kill = False
        self._out_of_bounds_fired = False

    @property
    def left(self) -> float:
        return self.x - self.anchor.x * self.width

    @property
    def top(self) -> float:
        return self.y - self.anchor.y * self.height

    @property
    def bounds(self) -> pygame.Rect:
        """Unrotated bounding box in world coordinates."""
        return pygame.Rect(int(self.left), int(self.top), self.width, self.height)

    def set_anchor(self, x: float, y: float) -> None:
        self.anchor.x = x
        self.anchor.y = y

    def reset(self, x: float, y: float) -> "Sprite":
        """Revive the sprite at a new position with zeroed motion."""
        self.x = float(x)
        self.y = float(y)
        self.alive = True
        self.exists = True
        self._out_of_bounds_fired = False
        if self.body is not None:
            self.body.velocity.x = 0.0
            self.body.velocity.y = 0.0
        return self

    def kill(self) -> "Sprite":
        self.alive = False
        self.exists = False
        return self

    def __repr__(self) -> str:
        return (
            f"Sprite({self.key!r}, x={self.x:.1f}, y={self.y:.1f}, "
            f"alive={self.alive}, exists={self.exists})"
        )
