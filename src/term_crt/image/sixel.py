from __future__ import annotations

__all__ = ("render_sixel",)

from typing import TextIO

from PIL import Image

from .. import sixel
from ..ctlseqs import CURSOR_FORWARD


def render_sixel(
    img: Image.Image, padding: int, output: TextIO, *, dither: bool = True
) -> None:
    """Writes an image as a sixel frame.

    Args:
        img: A fully opaque image, such as returned by
          :py:func:`~term_crt.compositor.flatten`.
        padding: The number of columns to move the cursor forward by, before the
          frame.
        output: The text stream to write to.
        dither: Whether to dither when reducing the image's colors.

    Raises:
        term_crt.exceptions.EncodeError: Propagated from
          :py:func:`term_crt.sixel.encode`.

    The frame is followed by a newline, so that whatever comes next starts below it.
    """
    if padding > 0:
        output.write(CURSOR_FORWARD % padding)
    sixel.encode(img, output, dither=dither)
    output.write("\n")
