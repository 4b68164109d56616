"""
term-crt

Render images in the terminal

Copyright (c) 2026, The term-crt developers
"""

from __future__ import annotations

__all__ = (
    "Color",
    "FitPlan",
    "RenderMode",
    "TerminalGeometry",
    "open_image",
    "render",
)
__author__ = "The term-crt developers"

from .color import Color
from .geometry import FitPlan, TerminalGeometry
from .render import RenderMode, open_image, render

version_info = (0, 1, 0)

# Follows https://semver.org/spec/v2.0.0.html
__version__ = ".".join(map(str, version_info[:3]))
if version_info[3:]:
    __version__ += "-" + ".".join(map(str, version_info[3:]))
