"""
.. Sixel encoding

Sixel encodes an image as bands of 6 rows. Within a band, each color present is
drawn as one line of "sixels", each a printable character whose 6 low bits select
the rows of a column that take the color.

See https://vt100.net/docs/vt3xx-gp/chapter14.html
"""

from __future__ import annotations

__all__ = ("encode",)

from typing import Dict, Iterator, List, TextIO

from PIL import Image

from .compositor import is_opaque
from .ctlseqs import (
    SIXEL_COLOR_DEFINE,
    SIXEL_COLOR_SELECT,
    SIXEL_CR,
    SIXEL_END,
    SIXEL_NL,
    SIXEL_RASTER,
    SIXEL_REPEAT,
    SIXEL_START,
)
from .exceptions import EncodeError

BAND_HEIGHT = 6
MAX_COLORS = 256
SIXEL_OFFSET = 63  # "?", a column with no bit set

# Runs shorter than this are cheaper to spell out
_MIN_REPEAT = 4


def _quantize(img: Image.Image, colors: int, dither: bool) -> Image.Image:
    img = img.convert("RGB")
    paletted = img.quantize(colors, dither=Image.Dither.NONE)
    if dither:
        # `quantize()` only dithers when mapping onto an existing palette
        paletted = img.quantize(palette=paletted, dither=Image.Dither.FLOYDSTEINBERG)

    return paletted


def _rle(columns: bytearray) -> Iterator[str]:
    i = 0
    end = len(columns)
    while i < end:
        value = columns[i]
        n = 1
        while i + n < end and columns[i + n] == value:
            n += 1
        char = chr(value + SIXEL_OFFSET)
        yield SIXEL_REPEAT % (n, char) if n >= _MIN_REPEAT else char * n
        i += n


def _palette(paletted: Image.Image, used: List[int]) -> Iterator[str]:
    palette = paletted.getpalette() or []
    for index in used:
        r, g, b = palette[index * 3 : index * 3 + 3] or (0, 0, 0)
        # Channels are given in percent
        yield SIXEL_COLOR_DEFINE % (
            index,
            round(r * 100 / 255),
            round(g * 100 / 255),
            round(b * 100 / 255),
        )


def _bands(paletted: Image.Image) -> Iterator[str]:
    width, height = paletted.size
    indices = paletted.tobytes()  # one byte per pixel
    for top in range(0, height, BAND_HEIGHT):
        # color index -> per-column bit masks
        band: Dict[int, bytearray] = {}
        for bit, y in enumerate(range(top, min(top + BAND_HEIGHT, height))):
            row = indices[y * width : (y + 1) * width]
            mask = 1 << bit
            for x, index in enumerate(row):
                try:
                    band[index][x] |= mask
                except KeyError:
                    band[index] = columns = bytearray(width)
                    columns[x] = mask

        if top:
            yield SIXEL_NL
        for index, columns in sorted(band.items()):
            yield SIXEL_COLOR_SELECT % index
            yield from _rle(columns)
            yield SIXEL_CR


def encode(
    img: Image.Image,
    output: TextIO,
    *,
    dither: bool = True,
    colors: int = MAX_COLORS,
) -> None:
    """Writes a complete sixel frame for an image.

    Args:
        img: A fully opaque image.
        output: The text stream to write to.
        dither: Whether to apply Floyd-Steinberg dithering when reducing colors.
        colors: The maximum number of colors to reduce the image to.

    Raises:
        term_crt.exceptions.EncodeError: The image is not fully opaque,
          color reduction failed or the frame could not be written.
    """
    if not is_opaque(img):
        raise EncodeError("Sixel images cannot be transparent")
    if not 1 <= colors <= MAX_COLORS:
        raise EncodeError(f"Sixel supports 1 to {MAX_COLORS} colors (got: {colors})")

    try:
        paletted = _quantize(img, colors, dither)
    except (ValueError, OSError) as e:
        raise EncodeError(f"Color reduction failed: {e}") from e

    used = sorted({index for _, index in paletted.getcolors(MAX_COLORS)})
    try:
        output.write(SIXEL_START)
        output.write(SIXEL_RASTER % paletted.size)
        for chunk in _palette(paletted, used):
            output.write(chunk)
        for chunk in _bands(paletted):
            output.write(chunk)
        output.write(SIXEL_END)
    except OSError as e:
        raise EncodeError(f"Writing the sixel frame failed: {e}") from e
