"""
.. The Geometry API
"""

from __future__ import annotations

__all__ = ("CellPixelModel", "FitPlan", "TerminalGeometry")

from typing_extensions import NamedTuple, Self

from .utils import arg_value_error_range


# To bypass `NamedTuple`'s `__new__()` override limitation
class _DummyTerminalGeometry(NamedTuple):
    columns: int
    rows: int


class TerminalGeometry(_DummyTerminalGeometry):
    """The dimensions of a terminal, in character cells.

    Args:
        columns: The horizontal dimension
        rows: The vertical dimension

    Raises:
        ValueError: Either dimension is non-positive.

    NOTE:
        This is a subclass of :py:class:`tuple`. Hence, instances can be used anyway
        and anywhere tuples can.
    """

    __slots__ = ()

    def __new__(cls, columns: int, rows: int) -> Self:
        if columns < 1:
            raise arg_value_error_range("columns", columns)
        if rows < 1:
            raise arg_value_error_range("rows", rows)

        # Using `tuple` directly instead of `super()` for performance
        return tuple.__new__(cls, (columns, rows))


class CellPixelModel(NamedTuple):
    """The number of pixels a single character cell is assumed to span.

    Args:
        width: Pixels per cell, horizontally
        height: Pixels per cell, vertically
    """

    width: int
    height: int


class _DummyFitPlan(NamedTuple):
    width: int
    height: int
    padding: int = 0


class FitPlan(_DummyFitPlan):
    """The outcome of fitting an image into a terminal.

    Args:
        width: Target width of the resampled image, in pixels
        height: Target height of the resampled image, in pixels
        padding: Number of blank cells to the left of every rendered row

    Raises:
        ValueError: *width* or *height* is non-positive or *padding* is negative.
    """

    __slots__ = ()

    def __new__(cls, width: int, height: int, padding: int = 0) -> Self:
        if width < 1:
            raise arg_value_error_range("width", width)
        if height < 1:
            raise arg_value_error_range("height", height)
        if padding < 0:
            raise arg_value_error_range("padding", padding)

        return tuple.__new__(cls, (width, height, padding))

    @property
    def size(self) -> tuple[int, int]:
        """The target size, in pixels"""
        return self[:2]


#: Assumed cell size for sixel output; one cell row spans exactly one sixel band.
SIXEL_CELL = CellPixelModel(8, 6)

#: Half-block output; one pixel per column and two per row.
BLOCK_CELL = CellPixelModel(1, 2)
