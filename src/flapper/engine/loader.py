"""Texture loading for embedded image payloads."""

import base64
import binascii
import io
import logging
from typing import Dict, Optional

import numpy as np
from numpy.typing import NDArray
from PIL import Image

logger = logging.getLogger(__name__)

Texture = NDArray[np.uint8]

DATA_URI_PREFIX = "data:image/png;base64,"


def decode_data_uri(data: str) -> Image.Image:
    """Decode a base64 PNG data URI into an RGBA Pillow image.

    Raises:
        ValueError: If the payload is not base64 or not a decodable image
    """
    payload = data[len(DATA_URI_PREFIX):] if data.startswith(DATA_URI_PREFIX) else data
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"payload is not valid base64: {e}") from e

    try:
        with Image.open(io.BytesIO(raw)) as image:
            image.verify()
        # verify() leaves the image unusable, reopen for the pixels
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (OSError, SyntaxError) as e:
        raise ValueError(f"payload is not a readable image: {e}") from e

    return image.convert("RGBA")


class AssetLoader:
    """Keeps decoded textures by key."""

    def __init__(self) -> None:
        self._textures: Dict[str, Texture] = {}

    def image(self, key: str, data: str) -> Texture:
        """Decode ``data`` and register it under ``key``."""
        texture = np.array(decode_data_uri(data), dtype=np.uint8)
        self._textures[key] = texture
        logger.debug(f"Loaded texture '{key}' ({texture.shape[1]}x{texture.shape[0]})")
        return texture

    def get_texture(self, key: str) -> Optional[Texture]:
        return self._textures.get(key)
