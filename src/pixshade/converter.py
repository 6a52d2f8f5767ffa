import logging
import sys
from io import StringIO
from pathlib import Path
from typing import TextIO

from PIL import Image

from pixshade.adjust import adjust_contrast, brighten, fit_to_terminal, hue_rotate, target_size
from pixshade.charsets import ShadeMethod
from pixshade.colour import grayscale_image, invert_image, remove_background
from pixshade.display import display
from pixshade.options import RenderOptions

logger = logging.getLogger(__name__)


def prepare_image(
    image: Image.Image | str | Path,
    method: ShadeMethod,
    options: RenderOptions | None = None,
) -> Image.Image | None:
    """Load, resize and colour-adjust an image ready for display.

    Returns None when the scaled image would have no rows or columns.
    """
    if options is None:
        options = RenderOptions()
    options.validate()

    if not isinstance(image, Image.Image):
        image = Image.open(image)
    image = image.convert("RGBA")

    width, height = target_size(
        image.width, image.height, options.scale, options.aspect_ratio, method.height_multiplier
    )
    if width == 0 or height == 0:
        logger.warning("Image of %dx%d is too small to render at scale %s", image.width, image.height, options.scale)
        return None
    image = fit_to_terminal(image, options.scale, options.aspect_ratio, method.height_multiplier)

    if options.remove_bg is not None:
        remove_background(image, options.remove_bg, options.tolerance)
        logger.info("Removed background %s (tolerance %s)", options.remove_bg, options.tolerance)
    if options.brightness:
        image = brighten(image, options.brightness)
    if options.contrast:
        image = adjust_contrast(image, options.contrast)
    if options.hue_rotation:
        image = hue_rotate(image, options.hue_rotation)
    if options.grayscale:
        image = grayscale_image(image)
    if options.invert:
        image = invert_image(image)

    logger.info("Rendering %dx%d pixels with %s shading", image.width, image.height, method)
    return image


def render_image(
    image: Image.Image | str | Path,
    method: ShadeMethod,
    options: RenderOptions | None = None,
    out: TextIO | None = None,
) -> None:
    if out is None:
        out = sys.stdout
    prepared = prepare_image(image, method, options)
    if prepared is not None:
        display(prepared, method, out)


def image_to_ansi(
    image: Image.Image | str | Path,
    method: ShadeMethod,
    options: RenderOptions | None = None,
) -> str:
    buffer = StringIO()
    render_image(image, method, options, buffer)
    return buffer.getvalue()
