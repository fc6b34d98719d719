"""Embedded sprite payloads and their validation."""

import logging
import re
from typing import Dict, Mapping

from flapper.core.errors import AssetError
from flapper.engine.loader import AssetLoader, decode_data_uri

logger = logging.getLogger(__name__)

PNG_DATA_URI_PATTERN = re.compile(r"data:image/png;base64,[A-Za-z0-9+/]+={0,2}")

# 50x50 single-colour squares
BIRD_PNG = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAADIAAAAyAQMAAAAk8RryAAAABlBMVEXSvicAAABogyUZ"
    "AAAAGUlEQVR4AWP4DwYHMOgHDEDASCN6lMYV7gChf3AJ/eB/pQAAAABJRU5ErkJggg=="
)
PIPE_PNG = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAADIAAAAyAQMAAAAk8RryAAAABlBMVEV0vy4AAADnrrHQ"
    "AAAAGUlEQVR4AWP4DwYHMOgHDEDASCN6lMYV7gChf3AJ/eB/pQAAAABJRU5ErkJggg=="
)

DEFAULT_ASSETS: Dict[str, str] = {
    "bird": BIRD_PNG,
    "pipe": PIPE_PNG,
}


def validate_image_payload(key: str, data: object) -> None:
    """Fail fast on anything that is not a decodable PNG data URI.

    Raises:
        AssetError: If the payload is not a string, does not match the
            strict data URI pattern, or does not decode to an image
    """
    if not isinstance(data, str):
        raise AssetError(key, f"expected a PNG data URI string, got {type(data).__name__}")
    if not PNG_DATA_URI_PATTERN.fullmatch(data):
        raise AssetError(key, "payload is not a base64 PNG data URI")
    try:
        decode_data_uri(data)
    except ValueError as e:
        raise AssetError(key, str(e)) from e


def load_assets(loader: AssetLoader, assets: Mapping[str, str]) -> None:
    """Validate every payload, then register them all with the loader."""
    for key, data in assets.items():
        validate_image_payload(key, data)

    for key, data in assets.items():
        loader.image(key, data)

    logger.info(f"Loaded {len(assets)} assets: {', '.join(assets)}")
