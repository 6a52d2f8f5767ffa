import pytest
from PIL import Image

ESC = "\033["


def make_image(rows):
    """Build an RGBA image from rows of (r, g, b) or (r, g, b, a) tuples."""
    height = len(rows)
    width = len(rows[0])
    img = Image.new("RGBA", (width, height))
    pixels = img.load()
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            pixels[x, y] = value if len(value) == 4 else (*value, 255)
    return img


@pytest.fixture
def checkerboard():
    white = (255, 255, 255)
    black = (0, 0, 0)
    return make_image([[white, black], [black, white]])
