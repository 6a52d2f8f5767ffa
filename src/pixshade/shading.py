from pixshade.charsets import ShadeKind, ShadeMethod
from pixshade.colour import Pixel, luminance


def ramp_index(gray: int, ramp_length: int) -> int:
    """Position of a 0-255 luminance on a ramp, clamped to the last character."""
    return min(int(gray / 255 * ramp_length), ramp_length - 1)


def shade(pixel: Pixel, method: ShadeMethod) -> str:
    """Pick the ramp character for a single pixel's luminance."""
    if method.kind is ShadeKind.HALF:
        raise ValueError("Half-block shading works on pixel pairs, not single pixels")
    ramp = method.ramp
    return ramp[ramp_index(luminance(pixel), len(ramp))]
