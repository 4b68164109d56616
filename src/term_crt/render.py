"""
.. Rendering images to the terminal
"""

from __future__ import annotations

__all__ = ("RenderMode", "open_image", "render")

import io
import logging as _logging
import sys
from enum import Enum
from functools import partial
from typing import Optional, TextIO, Union
from urllib.parse import urlparse

import requests
from PIL import Image, UnidentifiedImageError

from . import fit
from .color import BLACK, Color
from .compositor import composite
from .exceptions import DecodeError, FileOpenError
from .image import render_block, render_sixel
from .terminal import GeometryProvider, get_terminal_size


class RenderMode(Enum):
    """Render mode enumeration"""

    BLOCK = "block"
    """Unicode half blocks with direct-color escape sequences"""

    SIXEL = "sixel"
    """The sixel graphics protocol"""


# mode -> (planner, composite eagerly, renderer)
_PIPELINES = {
    RenderMode.BLOCK: (fit.plan_block, False, render_block),
    RenderMode.SIXEL: (fit.plan_sixel, True, render_sixel),
}


def _decode(fp) -> Image.Image:
    """Decodes the first frame of an image, reading all its data."""
    try:
        img = Image.open(fp)
        img.load()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        SyntaxError,
        OSError,
    ) as e:
        raise DecodeError(str(e)) from e

    return img


def _download(url: str) -> bytes:
    try:
        response = requests.get(url, timeout=30)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FileOpenError(f"Could not download {url!r}: {e}") from e

    return response.content


def open_image(source: str) -> Image.Image:
    """Opens and decodes an image.

    Args:
        source: A file path or an HTTP(S) URL.

    Returns:
        The decoded image. For animated images, only the first frame.

    Raises:
        term_crt.exceptions.FileOpenError: The source could not be read.
        term_crt.exceptions.DecodeError: The image format is unsupported or the
          data is corrupt.
    """
    if urlparse(source).scheme in {"http", "https"}:
        _logger.info(f"Downloading {source!r}")
        return _decode(io.BytesIO(_download(source)))

    try:
        fp = open(source, "rb")
    except OSError as e:
        raise FileOpenError(f"Could not open {source!r}: {e}") from e

    with fp:
        return _decode(fp)


def render(
    img: Image.Image,
    mode: Union[RenderMode, str] = RenderMode.BLOCK,
    center: bool = False,
    *,
    output: Optional[TextIO] = None,
    get_geometry: GeometryProvider = get_terminal_size,
    background: Color = BLACK,
    dither: bool = True,
) -> None:
    """Renders an image to fit the terminal.

    Args:
        img: The image.
        mode: The render mode.
        center: Whether to horizontally center the image.
        output: The text stream to write to. Defaults to STDOUT.
        get_geometry: Supplies the terminal size. It's called exactly once.
        background: The color transparent areas are composited onto, when the mode
          cannot express transparency.
        dither: Whether to dither when reducing colors (sixel mode only).

    Raises:
        ValueError: *mode* is not a valid render mode.
        term_crt.exceptions.EncodeError: The sixel frame could not be produced.

    The image is fitted into the terminal while preserving its aspect ratio,
    resampled, composited according to the mode's transparency policy and then
    written out. *img* itself is never modified.
    """
    mode = RenderMode(mode)
    if output is None:
        output = sys.stdout

    planner, eager, renderer = _PIPELINES[mode]
    geometry = get_geometry()
    plan = planner(*img.size, geometry, center)
    _logger.debug(
        f"Fitted {img.size[0]}x{img.size[1]} into {geometry.columns}x{geometry.rows} "
        f"cells ({mode.value}): {plan}"
    )

    # Resampling paletted images would use the nearest neighbour
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    resized = img.resize(plan.size, Image.Resampling.LANCZOS)
    composited = composite(resized, eager, background)

    if mode is RenderMode.SIXEL:
        renderer = partial(renderer, dither=dither)
    renderer(composited, plan.padding, output)
    output.flush()


_logger = _logging.getLogger(__name__)
