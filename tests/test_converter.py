import io

import pytest
from PIL import Image

from pixshade.charsets import ShadeKind, ShadeMethod
from pixshade.converter import image_to_ansi, prepare_image, render_image
from pixshade.line import RESET, fg_escape
from pixshade.options import RenderOptions
from tests.conftest import make_image

ASCII = ShadeMethod(ShadeKind.ASCII)
BLOCKS = ShadeMethod(ShadeKind.BLOCKS)
HALF = ShadeMethod(ShadeKind.HALF)
UNSCALED = RenderOptions(aspect_ratio=1.0)


def test_solid_white_maps_to_densest():
    img = Image.new("RGB", (3, 2), (255, 255, 255))
    result = image_to_ansi(img, ASCII, UNSCALED)
    assert result == (fg_escape((255, 255, 255)) + "@@@" + RESET + "\n") * 2


def test_default_aspect_ratio_squashes_rows():
    img = Image.new("RGB", (10, 20), (255, 255, 255))
    lines = image_to_ansi(img, BLOCKS).splitlines()
    assert len(lines) == 9


def test_half_keeps_row_count_close_to_source_aspect():
    img = Image.new("RGB", (10, 20), (255, 255, 255))
    lines = image_to_ansi(img, HALF).splitlines()
    # 20 * 8/17 * 2 = 18.8, so 18 pixel rows, two per line
    assert len(lines) == 9


def test_scale_parameter():
    img = Image.new("RGB", (20, 20), (0, 0, 0))
    lines = image_to_ansi(img, ASCII, RenderOptions(scale=0.5, aspect_ratio=1.0)).splitlines()
    assert len(lines) == 10
    assert all(line == fg_escape((0, 0, 0)) + " " * 10 + RESET for line in lines)


def test_accepts_file_path(tmp_path):
    img = Image.new("RGB", (4, 4), (255, 0, 0))
    path = tmp_path / "red.png"
    img.save(path)
    result = image_to_ansi(path, BLOCKS, UNSCALED)
    assert result.count("\n") == 4
    assert fg_escape((255, 0, 0)) in result


def test_too_small_image_renders_nothing():
    img = Image.new("RGB", (4, 1), (255, 255, 255))
    assert image_to_ansi(img, BLOCKS) == ""


def test_invert_option():
    img = Image.new("RGB", (2, 1), (0, 0, 0))
    result = image_to_ansi(img, ASCII, RenderOptions(aspect_ratio=1.0, invert=True))
    assert result == fg_escape((255, 255, 255)) + "@@" + RESET + "\n"


def test_grayscale_option():
    img = Image.new("RGB", (1, 1), (255, 0, 0))
    prepared = prepare_image(img, ASCII, RenderOptions(aspect_ratio=1.0, grayscale=True))
    assert prepared.getpixel((0, 0)) == (54, 54, 54, 255)


def test_remove_background_option():
    img = make_image([[(10, 10, 10), (255, 255, 255)], [(10, 10, 10), (255, 255, 255)]])
    options = RenderOptions(aspect_ratio=0.5, remove_bg=(0, 0, 0), tolerance=80)
    prepared = prepare_image(img, HALF, options)
    assert prepared.getpixel((0, 0)) == (0, 0, 0, 0)
    assert prepared.getpixel((1, 1)) == (255, 255, 255, 255)
    result = image_to_ansi(img, HALF, options)
    assert result == fg_escape((0, 0, 0)) + " " + RESET + fg_escape((255, 255, 255)) + "█" + RESET + "\n"
    # The caller's image is left untouched
    assert img.getpixel((0, 0)) == (10, 10, 10, 255)


def test_brightness_option():
    img = Image.new("RGB", (1, 1), (100, 100, 100))
    prepared = prepare_image(img, ASCII, RenderOptions(aspect_ratio=1.0, brightness=50))
    assert prepared.getpixel((0, 0)) == (150, 150, 150, 255)


def test_render_image_writes_to_stream():
    img = Image.new("RGB", (2, 2), (255, 255, 255))
    out = io.StringIO()
    render_image(img, BLOCKS, UNSCALED, out)
    assert out.getvalue().count("\n") == 2


@pytest.mark.parametrize(
    "options",
    [RenderOptions(scale=0), RenderOptions(aspect_ratio=-1.0), RenderOptions(tolerance=-5)],
)
def test_invalid_options_rejected(options):
    img = Image.new("RGB", (2, 2))
    with pytest.raises(ValueError):
        image_to_ansi(img, BLOCKS, options)
