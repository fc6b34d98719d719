"""Arcade physics: gravity and velocity integration, bounds and overlap checks."""

import logging
from typing import Callable, Optional

import pygame

from flapper.engine.group import Group
from flapper.engine.sprite import ArcadeBody, Sprite

logger = logging.getLogger(__name__)

OverlapCallback = Callable[[Sprite, Sprite], None]


def touches(a: pygame.Rect, b: pygame.Rect) -> bool:
    """Rectangle intersection where shared edges count."""
    return not (a.right < b.left or a.bottom < b.top or a.left > b.right or a.top > b.bottom)


class ArcadePhysics:
    """Moves bodies and answers overlap queries against the world rectangle."""

    def __init__(self, width: int, height: int) -> None:
        self.bounds = pygame.Rect(0, 0, width, height)

    def enable(self, sprite: Optional[Sprite]) -> bool:
        """Attach a body to ``sprite``. Returns False when there is nothing to enable."""
        if sprite is None:
            return False
        if sprite.body is None:
            sprite.body = ArcadeBody()
        sprite.in_world = touches(sprite.bounds, self.bounds)
        return True

    def step(self, sprite: Sprite, dt: float) -> None:
        """Integrate one sprite over ``dt`` seconds."""
        if not sprite.exists:
            return

        body = sprite.body
        if body is not None:
            body.velocity.x += body.gravity.x * dt
            body.velocity.y += body.gravity.y * dt
            sprite.x += body.velocity.x * dt
            sprite.y += body.velocity.y * dt

        sprite.in_world = touches(sprite.bounds, self.bounds)

        if not sprite.check_world_bounds:
            return
        if sprite._out_of_bounds_fired and sprite.in_world:
            sprite._out_of_bounds_fired = False
        elif not sprite._out_of_bounds_fired and not sprite.in_world:
            sprite._out_of_bounds_fired = True
            if sprite.out_of_bounds_kill:
                sprite.kill()

    def overlap(
        self,
        sprite: Sprite,
        group: Group,
        callback: Optional[OverlapCallback] = None,
    ) -> bool:
        """Test ``sprite`` against every living member of ``group``.

        ``callback(sprite, member)`` runs once per overlapping pair.
        """
        if not sprite.exists or sprite.body is None:
            return False

        rect = sprite.bounds
        hit = False
        for member in list(group.members):
            if not member.alive or not member.exists or member.body is None:
                continue
            if rect.colliderect(member.bounds):
                hit = True
                if callback is not None:
                    callback(sprite, member)
        return hit
