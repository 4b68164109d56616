from __future__ import annotations

__all__ = ("render_block",)

import io
from typing import Callable, Dict, TextIO, Tuple

from PIL import Image

from ..ctlseqs import SGR_BG_RGB, SGR_FG_RGB, SGR_NORMAL

UPPER_PIXEL = "▀"  # upper-half block element

_Pixel = Tuple[int, int, int]

# (upper is visible, lower is visible) -> (upper RGB, lower RGB) -> cell
CELLS: Dict[Tuple[bool, bool], Callable[[_Pixel, _Pixel], str]] = {
    (False, False): lambda upper, lower: " ",
    # Only the background (lower half) is colored
    (False, True): lambda upper, lower: f"{SGR_BG_RGB % lower} {SGR_NORMAL}",
    # Only the foreground (upper half) is colored
    (True, False): lambda upper, lower: (
        f"{SGR_FG_RGB % upper}{UPPER_PIXEL}{SGR_NORMAL}"
    ),
    (True, True): lambda upper, lower: (
        f"{SGR_FG_RGB % upper}{SGR_BG_RGB % lower}{UPPER_PIXEL}{SGR_NORMAL}"
    ),
}


def render_cell(upper: bytes, lower: bytes) -> str:
    """Renders two vertically adjacent RGBA pixels as a single cell.

    Args:
        upper: The upper pixel, as 4 bytes.
        lower: The lower pixel, as 4 bytes.

    A fully transparent half is left uncolored, letting the terminal's background
    show through.
    """
    return CELLS[upper[3] > 0, lower[3] > 0](tuple(upper[:3]), tuple(lower[:3]))


def render_block(img: Image.Image, padding: int, output: TextIO) -> None:
    """Writes an image using unicode half blocks and direct-color escape sequences.

    Args:
        img: An RGBA image. Each column becomes a column of cells and each pair of
          rows becomes a row of cells.
        padding: The number of spaces written before each row.
        output: The text stream to write to.

    Every colored cell is followed by a color reset and every row by a newline.
    """
    width, height = img.size
    data = img.tobytes()
    stride = width * 4
    margin = " " * padding

    # It's more efficient to write separate strings to a buffer than to the
    # output stream, which might be line-buffered.
    buffer = io.StringIO()
    buf_write = buffer.write  # Eliminate attribute resolution cost
    for top in range(0, height - height % 2, 2):
        upper_row = data[top * stride : (top + 1) * stride]
        lower_row = data[(top + 1) * stride : (top + 2) * stride]
        buf_write(margin)
        for x in range(0, stride, 4):
            buf_write(render_cell(upper_row[x : x + 4], lower_row[x : x + 4]))
        buf_write("\n")

    with buffer:
        output.write(buffer.getvalue())
