"""Scene renderer: draws the engine world into an RGB numpy buffer."""

import logging
from typing import Dict, Tuple

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from flapper.config.settings import hex_to_rgb
from flapper.engine.game import Game
from flapper.engine.sprite import Sprite
from flapper.graphics.primitives import Buffer, draw_image, fill

logger = logging.getLogger(__name__)


class Renderer:
    """Draws sprites over the stage colour.

    Rotated textures are cached per sprite key and whole-degree angle.
    """

    def __init__(self) -> None:
        self._rotated: Dict[Tuple[str, int], NDArray[np.uint8]] = {}

    def create_buffer(self, game: Game) -> Buffer:
        return np.zeros((game.height, game.width, 3), dtype=np.uint8)

    def render(self, buffer: Buffer, game: Game) -> None:
        fill(buffer, hex_to_rgb(game.stage_color))

        for sprite in game.world.all_sprites():
            if sprite.exists and sprite.texture is not None:
                self._draw_sprite(buffer, sprite)

    def _draw_sprite(self, buffer: Buffer, sprite: Sprite) -> None:
        angle = int(round(sprite.angle))
        if angle == 0:
            draw_image(buffer, sprite.texture, int(sprite.left), int(sprite.top))
            return

        image = self._rotate(sprite, angle)
        # Keep the rotated image centred where the unrotated one was
        cx = sprite.left + sprite.width / 2
        cy = sprite.top + sprite.height / 2
        ih, iw = image.shape[:2]
        draw_image(buffer, image, int(cx - iw / 2), int(cy - ih / 2))

    def _rotate(self, sprite: Sprite, angle: int) -> NDArray[np.uint8]:
        cache_key = (sprite.key, angle)
        cached = self._rotated.get(cache_key)
        if cached is None:
            # Screen y grows downward, so a positive angle turns clockwise
            image = Image.fromarray(sprite.texture)
            cached = np.array(image.rotate(-angle, resample=Image.Resampling.BILINEAR, expand=True))
            self._rotated[cache_key] = cached
        return cached
