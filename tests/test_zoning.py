"""Tests for grid zoning."""

import itertools

import pytest

from zonewm.core.errors import InvalidGridSpec
from zonewm.geometry.rect import Rect
from zonewm.geometry.topology import build_topology
from zonewm.geometry.zoning import union_zones, zone_at, zone_span, zones

from conftest import display_record


def assert_exact_tiling(rects, area):
    assert sum(r.area for r in rects) == area.area
    for r in rects:
        assert area.contains(r)
    for a, b in itertools.combinations(rects, 2):
        assert not a.overlaps(b)


class TestZones:

    def test_scenario_five_columns_two_rows(self, main_display):
        grid = zones(main_display, rows=2, cols=5)
        assert len(grid) == 10
        first = grid[0]
        assert first.rect == Rect(0, 25, 384, 527)
        assert first.id == "zone_0_0"
        # 1055 = 527 + 528
        assert grid[5].rect == Rect(0, 552, 384, 528)

    def test_row_major_indexing(self, main_display):
        grid = zones(main_display, rows=2, cols=5)
        assert [(z.row, z.col) for z in grid[:6]] == [
            (0, 0), (0, 1), (0, 2), (0, 3), (0, 4), (1, 0),
        ]
        assert zone_at(grid, 5, 1, 3) is grid[8]

    @pytest.mark.parametrize("width,height,reserved", [
        (1920, 1080, 25),
        (1001, 777, 0),
        (2560, 1440, 37),
    ])
    def test_zones_tile_usable_area_exactly(self, width, height, reserved):
        display = build_topology(
            [display_record("d", -width, 100, width, height, reserved_top=reserved)]
        ).main
        for rows, cols in itertools.product(range(1, 5), range(1, 7)):
            grid = zones(display, rows, cols)
            assert len(grid) == rows * cols
            assert_exact_tiling([z.rect for z in grid], display.usable)

    def test_last_column_absorbs_remainder(self):
        display = build_topology([display_record("d", 0, 0, 1000, 600, reserved_top=0)]).main
        widths = [z.w for z in zones(display, 1, 3)]
        assert widths == [333, 333, 334]

    @pytest.mark.parametrize("rows,cols", [(0, 1), (1, 0), (-2, 3)])
    def test_invalid_grid(self, main_display, rows, cols):
        with pytest.raises(InvalidGridSpec):
            zones(main_display, rows, cols)

    def test_grid_finer_than_usable_area(self):
        display = build_topology([display_record("d", 0, 0, 4, 4, reserved_top=1)]).main
        assert len(zones(display, 3, 4)) == 12
        with pytest.raises(InvalidGridSpec):
            zones(display, 4, 4)
        with pytest.raises(InvalidGridSpec):
            zones(display, 1, 5)


class TestUnion:

    def test_three_of_five_columns_full_height(self, main_display):
        grid = zones(main_display, 2, 5)
        left = union_zones([grid[i] for i in (0, 1, 2, 5, 6, 7)])
        assert left == Rect(0, 25, 1152, 1055)

    def test_unioned_and_single_zones_still_tile(self, main_display):
        grid = zones(main_display, 2, 5)
        pieces = [
            union_zones([grid[i] for i in (0, 1, 2, 5, 6, 7)]),
            union_zones([grid[3], grid[4]]),
            grid[8].rect,
            grid[9].rect,
        ]
        assert pieces[1] == Rect(1152, 25, 768, 527)
        assert_exact_tiling(pieces, main_display.usable)

    def test_non_contiguous_union_is_rejected(self, main_display):
        grid = zones(main_display, 2, 5)
        with pytest.raises(InvalidGridSpec):
            union_zones([grid[0], grid[2]])
        with pytest.raises(InvalidGridSpec):
            union_zones([grid[0], grid[1], grid[5]])

    def test_zone_span(self, main_display):
        assert zone_span(main_display, 2, 5, 1, 3, col_span=2) == Rect(1152, 552, 768, 528)

    def test_zone_span_out_of_range(self, main_display):
        with pytest.raises(InvalidGridSpec):
            zone_span(main_display, 2, 5, 0, 4, col_span=2)
        with pytest.raises(InvalidGridSpec):
            zone_span(main_display, 2, 5, 2, 0)
