"""
.. Transparency handling

Two policies exist:

* **eager** (:py:func:`flatten`), for output that cannot express transparency at
  all. Every translucent pixel is blended onto a background color before rendering.
* **deferred** (:py:func:`defer`), for half-block output, where each half of a cell
  can be left transparent independently. Nothing is blended; the renderer inspects
  the alpha of each pixel pair itself.
"""

from __future__ import annotations

__all__ = ("composite", "defer", "flatten")

import logging as _logging
from typing import Callable, Dict, Tuple

from PIL import Image

from .color import BLACK, Color

MAX_ALPHA = 255

# Alpha classes
TRANSPARENT = 0
TRANSLUCENT = 1
OPAQUE = 2

_RGB = Tuple[int, int, int]


def alpha_class(alpha: int) -> int:
    return (
        TRANSPARENT if alpha == 0 else OPAQUE if alpha == MAX_ALPHA else TRANSLUCENT
    )


def blend(src: _RGB, alpha: int, bg: _RGB) -> _RGB:
    """Linearly blends *src* over *bg*, truncating each resulting channel."""
    ratio = alpha / MAX_ALPHA
    return tuple(int(s * ratio + b * (1 - ratio)) for s, b in zip(src, bg))


# alpha class -> (source, alpha, background) -> RGB
# `flatten()` applies this with Pillow, rounding translucent blends instead of
# truncating them.
BLEND_POLICY: Dict[int, Callable[[_RGB, int, _RGB], _RGB]] = {
    TRANSPARENT: lambda src, alpha, bg: bg,
    TRANSLUCENT: blend,
    OPAQUE: lambda src, alpha, bg: src,
}


def is_opaque(img: Image.Image) -> bool:
    """Checks if no pixel of *img* carries any transparency."""
    if "A" not in img.getbands():
        # Palette-based transparency is resolved by conversion
        return "transparency" not in img.info

    return img.getchannel("A").getextrema()[0] == MAX_ALPHA


def flatten(img: Image.Image, background: Color = BLACK) -> Image.Image:
    """Removes all transparency from an image.

    Args:
        img: The image.
        background: The color transparent areas are composited onto.

    Returns:
        *img* itself, if it's already fully opaque. Otherwise, a new RGB image in
        which every pixel is:

        - *background*, where fully transparent
        - a blend of the source color and *background*, where translucent
        - the source color, where fully opaque

    *img* is never modified.
    """
    if is_opaque(img):
        _logger.debug("Image is fully opaque, nothing to flatten")
        return img

    if img.mode != "RGBA":
        img = img.convert("RGBA")

    canvas = Image.new("RGBA", img.size, (*background.rgb, MAX_ALPHA))
    canvas.alpha_composite(img)
    _logger.debug(f"Flattened transparency onto {background.hex}")

    return canvas.convert("RGB")


def defer(img: Image.Image) -> Image.Image:
    """Prepares an image for per-pixel transparency decisions at render time.

    Returns:
        *img* itself if it's already in RGBA mode. Otherwise, an RGBA copy.
    """
    return img if img.mode == "RGBA" else img.convert("RGBA")


def composite(img: Image.Image, eager: bool, background: Color = BLACK) -> Image.Image:
    """Applies the eager (:py:func:`flatten`) or deferred (:py:func:`defer`) policy."""
    return flatten(img, background) if eager else defer(img)


_logger = _logging.getLogger(__name__)
