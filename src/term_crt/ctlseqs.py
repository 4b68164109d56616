"""
..
   Control Sequences

   See https://invisible-island.net/xterm/ctlseqs/ctlseqs.html
"""

from __future__ import annotations

__all__ = []  # Updated later on

# Parameters
C = "%c"
Ps = "%d"
Pm = lambda n: ";".join((Ps,) * n)  # noqa: E731

_START = None  # Marks the beginning control sequence definitions

# C0
ESC = "\x1b"

# C1
CSI = f"{ESC}["
DCS = f"{ESC}P"
ST = f"{ESC}\\"

# Cursor Movement
CURSOR_FORWARD = f"{CSI}{Ps}C"

# Select Graphic Rendition
SGR_NORMAL = f"{CSI}m"
SGR_FG_RGB = f"{CSI}38;2;{Pm(3)}m"
SGR_BG_RGB = f"{CSI}48;2;{Pm(3)}m"
SGR_FG_RED = f"{CSI}31m"
SGR_FG_YELLOW = f"{CSI}33m"

# Sixel Graphics
# See https://vt100.net/docs/vt3xx-gp/chapter14.html
SIXEL_START = f"{DCS}q"
SIXEL_RASTER = f'"1;1;{Ps};{Ps}'  # pan; pad; width; height
SIXEL_COLOR_DEFINE = f"#{Ps};2;{Pm(3)}"  # RGB, in percent
SIXEL_COLOR_SELECT = f"#{Ps}"
SIXEL_REPEAT = f"!{Ps}{C}"
SIXEL_CR = "$"
SIXEL_NL = "-"
SIXEL_END = ST


module_items = tuple(globals().items())
__all__.extend(
    name for name, _ in module_items[module_items.index(("_START", None)) + 1 :]
)

del _START, module_items
