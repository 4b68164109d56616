"""
.. Terminal Utilities
"""

from __future__ import annotations

__all__ = (
    "FALLBACK_TERMINAL_SIZE",
    "GeometryProvider",
    "get_terminal_size",
)

import logging as _logging
import struct
import sys
from typing import Callable, Optional

from .geometry import TerminalGeometry

OS_IS_UNIX: bool
try:
    import fcntl
    import termios
except ImportError:
    OS_IS_UNIX = False
else:
    OS_IS_UNIX = True

#: Any callable returning the terminal size, such as :py:func:`get_terminal_size`
GeometryProvider = Callable[[], TerminalGeometry]

#: Size assumed when the terminal cannot be queried
FALLBACK_TERMINAL_SIZE = TerminalGeometry(80, 24)


def get_terminal_size(fd: Optional[int] = None) -> TerminalGeometry:
    """Returns the size of the terminal connected to *fd*.

    Args:
        fd: The file descriptor to query. Defaults to that of STDIN.

    Returns:
        The terminal size in columns and rows.

    This never fails. If the platform has no ``TIOCGWINSZ`` ioctl, *fd* is not
    connected to a terminal or the terminal reports a zero dimension,
    :py:data:`FALLBACK_TERMINAL_SIZE` is returned.
    """
    if not OS_IS_UNIX:
        _logger.debug("Not on a Unix platform, using the fallback terminal size")
        return FALLBACK_TERMINAL_SIZE

    if fd is None:
        try:
            fd = sys.stdin.fileno()
        except (AttributeError, ValueError, OSError):
            _logger.debug("STDIN has no file descriptor, using the fallback size")
            return FALLBACK_TERMINAL_SIZE

    try:
        # struct winsize {rows, columns, x-pixels, y-pixels}
        rows, columns, *_ = struct.unpack(
            "HHHH", fcntl.ioctl(fd, termios.TIOCGWINSZ, bytes(8))
        )
    except OSError as e:
        _logger.debug(f"Terminal size query failed ({e}), using the fallback size")
        return FALLBACK_TERMINAL_SIZE

    if not (columns and rows):
        _logger.debug("Terminal reported a zero dimension, using the fallback size")
        return FALLBACK_TERMINAL_SIZE

    return TerminalGeometry(columns, rows)


_logger = _logging.getLogger(__name__)
