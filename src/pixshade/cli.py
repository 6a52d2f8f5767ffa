import argparse
import logging
import sys
from pathlib import Path

from PIL import ImageColor, UnidentifiedImageError

from pixshade.adjust import FONT_ASPECT_RATIO
from pixshade.charsets import RAMPS, ShadeMethod
from pixshade.converter import render_image
from pixshade.logging_conf import setup_logging
from pixshade.options import RenderOptions

logger = logging.getLogger(__name__)

EPILOG = "Shade maps:\n" + "\n".join(f"  {kind.value}: '{ramp}'" for kind, ramp in RAMPS.items()) + (
    "\n  anything else: used literally as a custom ramp, darkest first"
    "\n\nExamples:\n  pixshade photo.png -s 0.15 -m \" -:!|#@\"\n  pixshade logo.png -m half --remove-bg white"
)


def _shade_method(value: str) -> ShadeMethod:
    try:
        return ShadeMethod.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _colour(value: str) -> tuple[int, int, int]:
    try:
        return ImageColor.getrgb(value)[:3]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Unknown colour: {value}") from e


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Must be positive: {value}")
    return number


def _non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"Must not be negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixshade",
        description="Render an image as coloured text in the terminal",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-m",
        "--shade-method",
        type=_shade_method,
        default=ShadeMethod.parse("blocks"),
        help="Shading method: ascii, blocks, half, or a literal ramp of characters (default: blocks)",
    )
    parser.add_argument("-s", "--scale", type=_positive_float, default=1.0, help="Scale of the image (default: 1)")
    parser.add_argument("-g", "--grayscale", action="store_true", default=False, help="Convert the image to grayscale")
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert the image colours")
    parser.add_argument(
        "-a",
        "--adjust-aspect-ratio",
        type=_positive_float,
        default=FONT_ASPECT_RATIO,
        help=f"Font cell width/height ratio (default: {FONT_ASPECT_RATIO:.4f})",
    )
    parser.add_argument("-b", "--brightness", type=int, default=0, help="Add to every colour channel (default: 0)")
    parser.add_argument("-c", "--contrast", type=float, default=0.0, help="Contrast change in percent (default: 0)")
    parser.add_argument("-r", "--hue-rotation", type=int, default=0, help="Rotate the hue by degrees (default: 0)")
    parser.add_argument("--remove-bg", type=_colour, default=None, help="Make this colour transparent, e.g. white or #00ff00")
    parser.add_argument(
        "-t",
        "--tolerance",
        type=_non_negative_float,
        default=10.0,
        help="RGB distance below which a pixel counts as the background colour (default: 10)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress to stderr (-vv for debug)")
    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    options = RenderOptions(
        scale=args.scale,
        aspect_ratio=args.adjust_aspect_ratio,
        grayscale=args.grayscale,
        invert=args.invert,
        brightness=args.brightness,
        contrast=args.contrast,
        hue_rotation=args.hue_rotation,
        remove_bg=args.remove_bg,
        tolerance=args.tolerance,
    )
    logger.debug("Options: %s", options)

    try:
        render_image(image_path, args.shade_method, options)
    except UnidentifiedImageError:
        print(f"Cannot read image: {image_path}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Failed to render {image_path}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
