"""Tests for the display topology model."""

import pytest

from zonewm.core.errors import EmptyTopology, InvalidTopology
from zonewm.geometry.rect import Rect
from zonewm.geometry.topology import build_topology

from conftest import LEFT, MAIN, RIGHT, display_record


class TestBuildTopology:

    def test_empty_input_is_fatal(self):
        with pytest.raises(EmptyTopology):
            build_topology([])

    def test_primary_first_then_ascending_x(self, triple_topology):
        assert [d.id for d in triple_topology] == ["main", "left", "right"]
        assert triple_topology.main.id == "main"

    def test_without_primary_main_is_leftmost(self):
        topo = build_topology([
            display_record("b", 1920, 0, 1920, 1080),
            display_record("a", 0, 0, 1920, 1080),
        ])
        assert [d.id for d in topo] == ["a", "b"]
        assert not topo.main.is_primary

    def test_defaults_for_missing_fields(self):
        topo = build_topology([{"x": 0, "y": 0, "width": 800, "height": 600}])
        d = topo.main
        assert d.id == "display_0"
        assert d.is_primary is False
        assert d.reserved_top == 0
        assert d.usable == Rect(0, 0, 800, 600)

    def test_usable_area_excludes_reserved_top(self, main_display):
        assert main_display.usable == Rect(0, 25, 1920, 1055)

    def test_missing_size_is_rejected(self):
        with pytest.raises(InvalidTopology):
            build_topology([{"id": "x", "origin": {"x": 0, "y": 0}}])

    def test_non_numeric_reserved_top_is_rejected(self):
        record = display_record("x", 0, 0, 800, 600)
        record["reservedTop"] = "abc"
        with pytest.raises(InvalidTopology):
            build_topology([record])

    def test_primary_flag_text_is_parsed(self):
        a = display_record("a", 0, 0, 1920, 1080)
        a["isPrimary"] = "false"
        b = display_record("b", 1920, 0, 1920, 1080)
        b["isPrimary"] = "Yes"
        topo = build_topology([a, b])
        assert topo.main.id == "b"
        assert not topo["a"].is_primary

    @pytest.mark.parametrize("flag", ["maybe", 1, 2.5])
    def test_unrecognised_primary_flag_is_rejected(self, flag):
        record = display_record("x", 0, 0, 800, 600)
        record["isPrimary"] = flag
        with pytest.raises(InvalidTopology):
            build_topology([record])

    def test_duplicate_ids_are_rejected(self):
        with pytest.raises(InvalidTopology):
            build_topology([MAIN, display_record("main", 1920, 0, 800, 600)])

    def test_reserved_top_must_fit(self):
        with pytest.raises(InvalidTopology):
            build_topology([display_record("x", 0, 0, 800, 600, reserved_top=600)])

    def test_extra_primaries_are_demoted(self):
        topo = build_topology([
            display_record("first", 0, 0, 800, 600, primary=True),
            display_record("second", -800, 0, 800, 600, primary=True),
        ])
        assert topo.main.id == "first"
        assert not topo["second"].is_primary


class TestNeighbours:

    def test_left_and_right_of_main(self, triple_topology):
        main = triple_topology.main
        assert triple_topology.display_left_of(main).id == "left"
        assert triple_topology.display_right_of(main).id == "right"

    def test_no_neighbour_at_the_ends(self, triple_topology):
        assert triple_topology.display_left_of(triple_topology["left"]) is None
        assert triple_topology.display_right_of(triple_topology["right"]) is None

    def test_left_picks_closest_right_edge(self):
        topo = build_topology([
            MAIN,
            display_record("far", -3000, 0, 1000, 800),
            display_record("near", -1440, 0, 1440, 900),
        ])
        assert topo.display_left_of(topo.main).id == "near"

    def test_display_overlapping_the_origin_is_not_left(self):
        topo = build_topology([MAIN, display_record("odd", -100, 0, 500, 400)])
        assert topo.display_left_of(topo.main) is None

    def test_single_display_has_no_neighbours(self, single_topology):
        main = single_topology.main
        assert single_topology.display_left_of(main) is None
        assert single_topology.display_right_of(main) is None

    def test_right_and_left_are_symmetric(self):
        topo = build_topology([LEFT, MAIN, RIGHT])
        assert topo.display_right_of(topo["left"]).id == "main"
        assert topo.display_left_of(topo["right"]).id == "main"
