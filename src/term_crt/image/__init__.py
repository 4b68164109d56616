"""
.. Render Styles

Each render style writes an already fitted and composited image to a text stream.
"""

from __future__ import annotations

__all__ = ("render_block", "render_sixel")

from .block import render_block
from .sixel import render_sixel
