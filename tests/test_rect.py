"""Tests for the Rect value object."""

import pytest

from zonewm.geometry.rect import Rect


class TestRect:

    def test_rejects_empty_dimensions(self):
        with pytest.raises(ValueError):
            Rect(0, 0, 0, 10)
        with pytest.raises(ValueError):
            Rect(0, 0, 10, -1)

    def test_edges(self):
        r = Rect(10, 20, 300, 200)
        assert r.to_ltrb() == (10, 20, 310, 220)
        assert Rect.from_ltrb(10, 20, 310, 220) == r

    def test_structural_equality(self):
        assert Rect(1, 2, 3, 4) == Rect(1, 2, 3, 4)
        assert len({Rect(1, 2, 3, 4), Rect(1, 2, 3, 4)}) == 1

    def test_touching_edges_do_not_overlap(self):
        a = Rect(0, 0, 100, 100)
        assert not a.overlaps(Rect(100, 0, 50, 50))
        assert not a.overlaps(Rect(0, 100, 50, 50))

    def test_overlap_is_symmetric(self):
        a = Rect(0, 0, 100, 100)
        b = Rect(99, 99, 10, 10)
        assert a.overlaps(b)
        assert b.overlaps(a)

    def test_move_to_keeps_size(self):
        r = Rect(5, 5, 40, 30).move_to(x=100)
        assert r == Rect(100, 5, 40, 30)

    def test_slices_absorb_remainder_in_last(self):
        cols = Rect(0, 0, 10, 5).slice_columns(3)
        assert [c.w for c in cols] == [3, 3, 4]
        rows = Rect(0, 0, 5, 11).slice_rows(2)
        assert [r.h for r in rows] == [5, 6]
        assert rows[1].y == 5

    def test_bounding(self):
        box = Rect.bounding([Rect(0, 0, 10, 10), Rect(20, 5, 10, 10)])
        assert box == Rect(0, 0, 30, 15)
        with pytest.raises(ValueError):
            Rect.bounding([])
