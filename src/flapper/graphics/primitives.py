"""Basic drawing primitives for numpy frame buffers."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_image(buffer: Buffer, image: NDArray[np.uint8], x: int, y: int) -> None:
    """Alpha-blend an RGBA image onto the buffer with its top-left at (x, y).

    Parts of the image outside the buffer are clipped.
    """
    h, w = buffer.shape[:2]
    ih, iw = image.shape[:2]

    x1, y1 = max(0, x), max(0, y)
    x2, y2 = min(w, x + iw), min(h, y + ih)
    if x1 >= x2 or y1 >= y2:
        return

    src = image[y1 - y:y2 - y, x1 - x:x2 - x]
    dst = buffer[y1:y2, x1:x2]

    if src.shape[2] == 4:
        alpha = src[:, :, 3:4].astype(np.float32) / 255.0
        blended = src[:, :, :3].astype(np.float32) * alpha + dst.astype(np.float32) * (1.0 - alpha)
        dst[:] = blended.astype(np.uint8)
    else:
        dst[:] = src[:, :, :3]
