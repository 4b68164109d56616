"""
.. Fitting images into the terminal

Both render modes fit an image by width first and only refit by height when the
first fit overflows vertically. What differs is the unit of the budget:

* block mode plans in character cells, one pixel per column and two per row, with
  a 2x horizontal correction since cells are about twice as tall as they're wide.
* sixel mode plans in pixels, estimating each cell as :py:data:`SIXEL_CELL`.
"""

from __future__ import annotations

__all__ = ("plan_block", "plan_sixel")

from math import ceil
from typing import Tuple

from .geometry import BLOCK_CELL, SIXEL_CELL, FitPlan, TerminalGeometry
from .utils import arg_value_error_range

# Cells left unused, to avoid line-wrap and scrolling
BLOCK_MARGIN = (1, 2)
SIXEL_MARGIN = (1, 4)  # sixel frames can be padded by the terminal


def _check_source_size(width: int, height: int) -> None:
    if width < 1:
        raise arg_value_error_range("width", width)
    if height < 1:
        raise arg_value_error_range("height", height)


def _fit(aspect: float, max_width: int, max_height: int) -> Tuple[int, int]:
    """Fits a box of aspect ratio *aspect* into the given bounds.

    Returns:
        ``(width, height)``, each at least ``1``.
    """
    width = max_width
    height = int(width / aspect)
    if height > max_height:
        height = max_height
        width = int(height * aspect)

    return max(width, 1), max(height, 1)


def _left_padding(columns: int, occupied: int) -> int:
    # Clamped, in case the occupied width exceeds the terminal's
    return max(0, (columns - occupied) // 2)


def plan_block(
    width: int, height: int, geometry: TerminalGeometry, center: bool = False
) -> FitPlan:
    """Plans a half-block render.

    Args:
        width: Source image width, in pixels.
        height: Source image height, in pixels.
        geometry: Terminal size.
        center: Whether to horizontally center the image.

    Returns:
        The plan. Its width equals the number of columns covered and its height is
        twice the number of rows covered.

    Raises:
        ValueError: *width* or *height* is non-positive.
    """
    _check_source_size(width, height)

    columns, rows = geometry
    margin_x, margin_y = BLOCK_MARGIN
    cols, lines = _fit(
        # Aspect ratio in cells
        width / height * BLOCK_CELL.height / BLOCK_CELL.width,
        columns - margin_x,
        rows - margin_y,
    )
    padding = _left_padding(columns, cols * BLOCK_CELL.width) if center else 0

    return FitPlan(cols * BLOCK_CELL.width, lines * BLOCK_CELL.height, padding)


def plan_sixel(
    width: int, height: int, geometry: TerminalGeometry, center: bool = False
) -> FitPlan:
    """Plans a sixel render.

    Args:
        width: Source image width, in pixels.
        height: Source image height, in pixels.
        geometry: Terminal size.
        center: Whether to horizontally center the image.

    Returns:
        The plan, in pixels.

    Raises:
        ValueError: *width* or *height* is non-positive.
    """
    _check_source_size(width, height)

    columns, rows = geometry
    margin_x, margin_y = SIXEL_MARGIN
    target_width, target_height = _fit(
        width / height,
        (columns - margin_x) * SIXEL_CELL.width,
        (rows - margin_y) * SIXEL_CELL.height,
    )
    padding = (
        _left_padding(columns, ceil(target_width / SIXEL_CELL.width)) if center else 0
    )

    return FitPlan(target_width, target_height, padding)
