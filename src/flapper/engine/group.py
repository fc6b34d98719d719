"""Fixed-capacity recyclable sprite groups."""

import logging
from typing import Callable, Iterator, List, Optional

from flapper.engine.loader import AssetLoader
from flapper.engine.sprite import Sprite, ArcadeBody

logger = logging.getLogger(__name__)


class Group:
    """A pool of sprites that are revived instead of allocated.

    Members are created dead by ``create_multiple`` and brought back
    with ``Sprite.reset``; nothing is ever removed from the pool.
    """

    def __init__(self, loader: AssetLoader, enable_body: bool = True) -> None:
        self._loader = loader
        self.enable_body = enable_body
        self.members: List[Sprite] = []

    def create_multiple(self, quantity: int, key: str) -> List[Sprite]:
        """Add ``quantity`` dead sprites using texture ``key``."""
        texture = self._loader.get_texture(key)
        created = []
        for _ in range(quantity):
            sprite = Sprite(0, 0, key, texture)
            if self.enable_body:
                sprite.body = ArcadeBody()
            sprite.kill()
            created.append(sprite)
        self.members.extend(created)
        logger.debug(f"Group grew by {quantity} '{key}' sprites to {len(self.members)}")
        return created

    def get_first_dead(self) -> Optional[Sprite]:
        for sprite in self.members:
            if not sprite.alive:
                return sprite
        return None

    def for_each_alive(self, callback: Callable[[Sprite], None]) -> None:
        for sprite in list(self.members):
            if sprite.alive:
                callback(sprite)

    def count_living(self) -> int:
        return sum(1 for sprite in self.members if sprite.alive)

    def __iter__(self) -> Iterator[Sprite]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)
