import sys
from collections.abc import Iterator
from typing import TextIO

from PIL import Image

from pixshade.cells import RenderedCell, half_block_cell, simple_cell
from pixshade.charsets import ShadeKind, ShadeMethod
from pixshade.line import LineEmitter


def _simple_rows(image: Image.Image, method: ShadeMethod) -> Iterator[Iterator[RenderedCell]]:
    pixels = image.load()
    w, h = image.size
    for y in range(h):
        yield (simple_cell(pixels[x, y], method) for x in range(w))


def _half_block_rows(image: Image.Image) -> Iterator[Iterator[RenderedCell]]:
    pixels = image.load()
    w, h = image.size
    # An odd trailing row has no partner and is dropped
    for y in range(h // 2):
        yield (half_block_cell(pixels[x, 2 * y], pixels[x, 2 * y + 1]) for x in range(w))


def render_lines(image: Image.Image, method: ShadeMethod) -> Iterator[str]:
    """Yield one styled text line per output row, top to bottom."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    if method.kind is ShadeKind.HALF:
        rows = _half_block_rows(image)
    else:
        rows = _simple_rows(image, method)

    emitter = LineEmitter()
    for row in rows:
        for cell in row:
            emitter.add(cell.glyph, cell.foreground, cell.background)
        yield emitter.finish()
        emitter.clear()


def display(image: Image.Image, method: ShadeMethod, out: TextIO | None = None) -> None:
    """Write the rendered image to ``out`` (stdout by default), one line per row."""
    if out is None:
        out = sys.stdout
    for line in render_lines(image, method):
        out.write(line + "\n")
