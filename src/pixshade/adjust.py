import logging
import math

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

# Width / height of a typical monospace glyph
FONT_ASPECT_RATIO = 8 / 17


def target_size(
    width: int, height: int, scale: float, aspect_ratio: float, height_multiplier: int = 1
) -> tuple[int, int]:
    """Pixel size that maps one pixel onto one terminal cell (or half a cell vertically)."""
    new_width = int(width * scale)
    new_height = int(height * aspect_ratio * scale * height_multiplier)
    return new_width, new_height


def fit_to_terminal(
    image: Image.Image,
    scale: float = 1.0,
    aspect_ratio: float = FONT_ASPECT_RATIO,
    height_multiplier: int = 1,
) -> Image.Image:
    size = target_size(image.width, image.height, scale, aspect_ratio, height_multiplier)
    if size == image.size:
        return image
    if size[0] <= 0 or size[1] <= 0:
        raise ValueError(f"Image of {image.width}x{image.height} scales to an empty {size[0]}x{size[1]}")
    logger.debug("Resizing %dx%d -> %dx%d", image.width, image.height, *size)
    return image.resize(size, Image.NEAREST)


def _apply_rgb(image: Image.Image, func) -> Image.Image:
    """Run ``func`` on the float RGB channels of an RGBA image, keeping alpha."""
    arr = np.array(image.convert("RGBA"), dtype=np.float64)
    arr[..., :3] = func(arr[..., :3])
    return Image.fromarray(np.rint(arr).clip(0, 255).astype(np.uint8))


def brighten(image: Image.Image, value: int) -> Image.Image:
    """Add ``value`` to every colour channel."""
    return _apply_rgb(image, lambda rgb: rgb + value)


def adjust_contrast(image: Image.Image, value: float) -> Image.Image:
    """Scale channels away from (positive) or towards (negative) mid-grey.

    ``value`` is a percentage: 0 leaves the image unchanged, -100 flattens it.
    """
    percent = ((100.0 + value) / 100.0) ** 2
    return _apply_rgb(image, lambda rgb: ((rgb / 255.0 - 0.5) * percent + 0.5) * 255.0)


def hue_matrix(degrees: float) -> np.ndarray:
    """Luminance-preserving hue rotation matrix (rows are output R, G, B)."""
    cosv = math.cos(math.radians(degrees))
    sinv = math.sin(math.radians(degrees))
    return np.array(
        [
            [0.213 + cosv * 0.787 - sinv * 0.213, 0.715 - cosv * 0.715 - sinv * 0.715, 0.072 - cosv * 0.072 + sinv * 0.928],
            [0.213 - cosv * 0.213 + sinv * 0.143, 0.715 + cosv * 0.285 + sinv * 0.140, 0.072 - cosv * 0.072 - sinv * 0.283],
            [0.213 - cosv * 0.213 - sinv * 0.787, 0.715 - cosv * 0.715 + sinv * 0.715, 0.072 + cosv * 0.928 + sinv * 0.072],
        ]
    )


def hue_rotate(image: Image.Image, degrees: float) -> Image.Image:
    matrix = hue_matrix(degrees)
    return _apply_rgb(image, lambda rgb: rgb @ matrix.T)
