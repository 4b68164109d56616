from math import ceil

import pytest

from term_crt.fit import plan_block, plan_sixel
from term_crt.geometry import FitPlan, TerminalGeometry

SIZES = [(100, 50), (50, 100), (1920, 1080), (640, 480), (300, 1000), (1, 1), (3, 7)]
GEOMETRIES = [(80, 24), (200, 60), (40, 40), (132, 43)]


class TestBlock:
    def test_fit_by_width(self):
        plan = plan_block(100, 50, TerminalGeometry(80, 24))
        # 79 columns, int(79 / (2 * 2)) = 19 rows
        assert plan == FitPlan(79, 38, 0)

    def test_fit_by_height(self):
        plan = plan_block(50, 100, TerminalGeometry(80, 24))
        # int(79 / (0.5 * 2)) = 79 rows overflow; 22 rows, int(22 * 0.5 * 2) columns
        assert plan == FitPlan(22, 44, 0)

    def test_center(self):
        assert plan_block(100, 50, TerminalGeometry(80, 24), True).padding == 0
        assert plan_block(50, 100, TerminalGeometry(80, 24), True).padding == 29
        assert plan_block(100, 50, TerminalGeometry(100, 24), True) == (88, 44, 6)

    def test_no_center(self):
        assert plan_block(50, 100, TerminalGeometry(80, 24)).padding == 0

    def test_height_is_even(self):
        for size in SIZES:
            for geometry in GEOMETRIES:
                assert plan_block(*size, TerminalGeometry(*geometry)).height % 2 == 0

    def test_minimum_size(self):
        assert plan_block(1000, 1, TerminalGeometry(80, 24)) == (79, 2, 0)
        assert plan_block(10, 10, TerminalGeometry(1, 1), True) == (1, 2, 0)

    @pytest.mark.parametrize("geometry", GEOMETRIES)
    @pytest.mark.parametrize("size", SIZES)
    def test_within_budget(self, size, geometry):
        columns, rows = geometry
        plan = plan_block(*size, TerminalGeometry(columns, rows))
        assert plan.width <= columns - 1
        assert plan.height <= (rows - 2) * 2

    @pytest.mark.parametrize("geometry", GEOMETRIES)
    @pytest.mark.parametrize("size", SIZES)
    def test_aspect_ratio(self, size, geometry):
        width, height = size
        plan = plan_block(width, height, TerminalGeometry(*geometry))
        cols, lines = plan.width, plan.height // 2
        aspect = width / height * 2  # in cells
        # Only the dimension computed from the other is truncated
        by_width = lines * aspect <= cols + 1e-9 and cols < (lines + 1) * aspect
        by_height = cols <= lines * aspect + 1e-9 and lines * aspect < cols + 1
        assert by_width or by_height

    @pytest.mark.parametrize("geometry", GEOMETRIES + [(1, 1), (3, 3)])
    @pytest.mark.parametrize("size", SIZES)
    def test_padding(self, size, geometry):
        columns, _ = geometry
        plan = plan_block(*size, TerminalGeometry(*geometry), True)
        assert plan.padding >= 0
        assert plan.padding + plan.width <= columns + 1


class TestSixel:
    def test_fit_by_width(self):
        plan = plan_sixel(1000, 100, TerminalGeometry(80, 24))
        # 79 * 8 = 632 pixels wide, int(632 / 10) = 63 <= 20 * 6
        assert plan == FitPlan(632, 63, 0)

    def test_fit_by_height(self):
        plan = plan_sixel(100, 50, TerminalGeometry(80, 24))
        # int(632 / 2) = 316 overflows 120
        assert plan == FitPlan(240, 120, 0)

    def test_center(self):
        # ceil(240 / 8) = 30 cells
        assert plan_sixel(100, 50, TerminalGeometry(80, 24), True).padding == 25
        # ceil(632 / 8) = 79 cells
        assert plan_sixel(1000, 100, TerminalGeometry(80, 24), True).padding == 0

    def test_center_partial_cell(self):
        # 20 * 6 = 120 pixels high, 60 wide, ceil(60 / 8) = 8 cells
        assert plan_sixel(50, 100, TerminalGeometry(80, 24), True) == (60, 120, 36)

    def test_minimum_size(self):
        assert plan_sixel(1, 1000, TerminalGeometry(1, 1)) == (1, 1, 0)
        assert plan_sixel(1000, 1, TerminalGeometry(80, 24)) == (632, 1, 0)

    @pytest.mark.parametrize("geometry", GEOMETRIES)
    @pytest.mark.parametrize("size", SIZES)
    def test_within_budget(self, size, geometry):
        columns, rows = geometry
        plan = plan_sixel(*size, TerminalGeometry(columns, rows))
        assert plan.width <= (columns - 1) * 8
        assert plan.height <= (rows - 4) * 6

    @pytest.mark.parametrize("geometry", GEOMETRIES)
    @pytest.mark.parametrize("size", SIZES)
    def test_aspect_ratio(self, size, geometry):
        width, height = size
        plan = plan_sixel(width, height, TerminalGeometry(*geometry))
        aspect = width / height
        by_width = (
            plan.height * aspect <= plan.width + 1e-9
            and plan.width < (plan.height + 1) * aspect
        )
        by_height = (
            plan.width <= plan.height * aspect + 1e-9
            and plan.height * aspect < plan.width + 1
        )
        assert by_width or by_height

    @pytest.mark.parametrize("geometry", GEOMETRIES + [(1, 1), (3, 5)])
    @pytest.mark.parametrize("size", SIZES)
    def test_padding(self, size, geometry):
        columns, _ = geometry
        plan = plan_sixel(*size, TerminalGeometry(*geometry), True)
        assert plan.padding >= 0
        assert plan.padding + ceil(plan.width / 8) <= columns + 1


@pytest.mark.parametrize("planner", [plan_block, plan_sixel])
@pytest.mark.parametrize("size", [(0, 1), (1, 0), (-1, 1)])
def test_invalid_source_size(planner, size):
    with pytest.raises(ValueError, match="out of range"):
        planner(*size, TerminalGeometry(80, 24))
