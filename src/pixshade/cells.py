from dataclasses import dataclass

from pixshade.charsets import ShadeMethod
from pixshade.colour import Colour, Pixel, colour_distance, is_transparent, premultiply_alpha
from pixshade.shading import shade

FULL_BLOCK = "█"
UPPER_HALF = "▀"
LOWER_HALF = "▄"
EMPTY = " "

# Upper and lower pixels closer than this render as one flat colour
NEAR_COLOUR_THRESHOLD = 10.0


@dataclass(frozen=True)
class RenderedCell:
    glyph: str
    foreground: Colour
    background: Colour | None = None


def simple_cell(pixel: Pixel, method: ShadeMethod) -> RenderedCell:
    """One pixel to one cell; glyph and colour both come from the premultiplied pixel."""
    rgb = premultiply_alpha(pixel)
    return RenderedCell(shade((*rgb, pixel[3]), method), rgb)


def half_block_cell(upper: Pixel, lower: Pixel) -> RenderedCell:
    """Pack two vertically stacked pixels into one cell.

    Rules are checked in order:

    1. both transparent: blank cell
    2. colours nearly identical: full block in the upper colour
    3. lower transparent: upper half block
    4. upper transparent: lower half block
    5. otherwise: upper half block on a background of the lower colour
    """
    upper_transparent = is_transparent(upper)
    lower_transparent = is_transparent(lower)
    upper_rgb = premultiply_alpha(upper)
    lower_rgb = premultiply_alpha(lower)

    if upper_transparent and lower_transparent:
        return RenderedCell(EMPTY, upper_rgb)
    if colour_distance(upper_rgb, lower_rgb) < NEAR_COLOUR_THRESHOLD:
        return RenderedCell(FULL_BLOCK, upper_rgb)
    if lower_transparent:
        return RenderedCell(UPPER_HALF, upper_rgb)
    if upper_transparent:
        return RenderedCell(LOWER_HALF, lower_rgb)
    return RenderedCell(UPPER_HALF, upper_rgb, lower_rgb)
