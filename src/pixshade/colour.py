import math

import numpy as np
from PIL import Image

Pixel = tuple[int, int, int, int]
Colour = tuple[int, int, int]

TRANSPARENT: Pixel = (0, 0, 0, 0)

# Rec. 709 luma weights in ten-thousandths, so halves can be rounded exactly
LUMA_WEIGHTS = (2126, 7152, 722)
LUMA_SCALE = 10000


def luminance(pixel: Pixel) -> int:
    """Perceptual brightness of a pixel in the range 0-255."""
    r, g, b = pixel[:3]
    weighted = r * LUMA_WEIGHTS[0] + g * LUMA_WEIGHTS[1] + b * LUMA_WEIGHTS[2]
    # Halves round up
    return (weighted + LUMA_SCALE // 2) // LUMA_SCALE


def invert(pixel: Pixel) -> Pixel:
    r, g, b, a = pixel
    return (255 - r, 255 - g, 255 - b, a)


def grayscale(pixel: Pixel) -> Pixel:
    gray = luminance(pixel)
    return (gray, gray, gray, pixel[3])


def colour_distance(a: Colour, b: Colour) -> float:
    """Euclidean distance in RGB space. A similarity threshold, not a perceptual metric."""
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a[:3], b[:3])))


def premultiply_alpha(pixel: Pixel) -> Colour:
    r, g, b, a = pixel
    alpha = a / 255
    return (int(r * alpha), int(g * alpha), int(b * alpha))


def is_transparent(pixel: Pixel) -> bool:
    return pixel[3] == 0


def _premultiplied_array(arr: np.ndarray) -> np.ndarray:
    """Premultiply an (h, w, 4) uint8 array, returning (h, w, 3) truncated integers."""
    alpha = arr[..., 3:4].astype(np.float64) / 255
    return np.trunc(arr[..., :3] * alpha)


def remove_background(image: Image.Image, key: Colour, tolerance: float) -> None:
    """Make every pixel within ``tolerance`` of ``key`` fully transparent, in place.

    Pixels are premultiplied by their alpha before comparison so that pixels
    which are already transparent never match a solid key colour.
    """
    if image.mode != "RGBA":
        raise ValueError(f"Background removal needs an RGBA image, got {image.mode}")
    arr = np.array(image, dtype=np.uint8)
    diff = _premultiplied_array(arr) - np.asarray(key[:3], dtype=np.float64)
    mask = np.sqrt((diff**2).sum(axis=-1)) < tolerance
    arr[mask] = TRANSPARENT
    image.paste(Image.fromarray(arr))


def invert_image(image: Image.Image) -> Image.Image:
    arr = np.array(image.convert("RGBA"), dtype=np.uint8)
    arr[..., :3] = 255 - arr[..., :3]
    return Image.fromarray(arr)


def grayscale_image(image: Image.Image) -> Image.Image:
    arr = np.array(image.convert("RGBA"), dtype=np.uint8)
    rgb = arr[..., :3].astype(np.int64)
    weighted = rgb[..., 0] * LUMA_WEIGHTS[0] + rgb[..., 1] * LUMA_WEIGHTS[1] + rgb[..., 2] * LUMA_WEIGHTS[2]
    gray = ((weighted + LUMA_SCALE // 2) // LUMA_SCALE).clip(0, 255).astype(np.uint8)
    arr[..., 0] = gray
    arr[..., 1] = gray
    arr[..., 2] = gray
    return Image.fromarray(arr)
