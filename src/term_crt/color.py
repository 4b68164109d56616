"""
.. The Color API
"""

from __future__ import annotations

__all__ = ("Color",)

import re

from typing_extensions import NamedTuple, Self

from .utils import arg_value_error_msg, arg_value_error_range

# Allows mixture of letter case to simplify parsing.
XX = "[0-9a-f]{2}"
_RGB_HEX_RE = re.compile(rf"#?({XX})({XX})({XX})({XX})?", re.A | re.I)
del XX


# To bypass `NamedTuple`'s `__new__()` override limitation
class _DummyColor(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


class Color(_DummyColor):
    """A color.

    Args:
        r: The red channel.
        g: The green channel.
        b: The blue channel.
        a: The alpha channel (opacity).

    Raises:
        ValueError: The value of a channel is not within the valid range.

    NOTE:
        The valid value range for all channels is 0 to 255, both inclusive.
    """

    __slots__ = ()

    def __new__(cls, r: int, g: int, b: int, a: int = 255) -> Self:
        # Any bit above the lowest 8 being set implies the value is out of range.
        if (r | g | b | a) & ~255:
            for name, value in zip("rgba", (r, g, b, a)):
                if value & ~255:
                    raise arg_value_error_range(name, value)

        return tuple.__new__(cls, (r, g, b, a))

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Returns the red, green and blue channels only."""
        return self[:3]

    @property
    def hex(self) -> str:
        """Converts the color to its RGB hexadecimal representation.

        Returns:
            The RGB hex color string, in the form ``#rrggbb``.
        """
        return "#%02x%02x%02x" % self[:3]

    @classmethod
    def from_hex(cls, color: str) -> Self:
        """Creates a new instance from a hex color string.

        Args:
            color: A hex color string of the form ``[#]rrggbb[aa]``.

        Returns:
            A new instance.

        Raises:
            ValueError: Invalid hex color string.

        NOTE:
            For the value of the *color* argument, case doesn't matter.
        """
        match = _RGB_HEX_RE.fullmatch(color)
        if not match:
            raise arg_value_error_msg("Invalid hex color string", color)

        return cls(*[int(x, 16) for x in match.groups() if x])


#: The color transparent regions are composited onto when a render mode
#: cannot express transparency.
BLACK = Color(0, 0, 0)
