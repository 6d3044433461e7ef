"""Tests for boxes, bounds, and overlap detection."""
from __future__ import annotations

import pytest
from depot_field import Field, Rect, aabb_overlap, within_reach


# ── aabb_overlap ──────────────────────────────────────────────────


class TestAABBOverlap:
    def test_overlapping(self) -> None:
        assert aabb_overlap((0.0, 0.0), (1.0, 1.0), (1.5, 0.0), (1.0, 1.0)) is True

    def test_touching_is_no_overlap(self) -> None:
        assert aabb_overlap((0.0, 0.0), (1.0, 1.0), (2.0, 0.0), (1.0, 1.0)) is False

    def test_separated_on_one_axis(self) -> None:
        assert aabb_overlap((0.0, 0.0), (1.0, 1.0), (0.5, 5.0), (1.0, 1.0)) is False

    def test_contained(self) -> None:
        assert aabb_overlap((0.0, 0.0), (10.0, 10.0), (1.0, 1.0), (0.5, 0.5)) is True


class TestWithinReach:
    def test_both_axes_must_be_close(self) -> None:
        assert within_reach((0.0, 0.0), (29.0, -29.0), 30.0) is True
        assert within_reach((0.0, 0.0), (30.0, 0.0), 30.0) is False
        assert within_reach((0.0, 0.0), (5.0, 31.0), 30.0) is False


# ── Rect ──────────────────────────────────────────────────────────


class TestRect:
    def test_center_and_half_extents(self) -> None:
        rect = Rect(80, 80, 120, 90)
        assert rect.center == (140.0, 125.0)
        assert rect.half_extents == (60.0, 45.0)

    def test_around(self) -> None:
        box = Rect.around((400.0, 300.0), 15.0)
        assert box == Rect(385.0, 285.0, 30.0, 30.0)

    def test_overlaps(self) -> None:
        wall = Rect(100, 100, 50, 50)
        assert Rect(140, 140, 20, 20).overlaps(wall)
        assert not Rect(150, 100, 20, 20).overlaps(wall)

    def test_gap_to(self) -> None:
        rect = Rect(100, 100, 50, 50)
        assert rect.gap_to((120.0, 120.0)) == 0.0
        assert rect.gap_to((90.0, 120.0)) == 10.0
        assert rect.gap_to((170.0, 80.0)) == 20.0

    def test_non_positive_size_raises(self) -> None:
        with pytest.raises(ValueError, match="Rect size must be positive"):
            Rect(0, 0, 0, 10)


# ── Field ─────────────────────────────────────────────────────────


class TestField:
    def test_clamp_inside_is_identity(self) -> None:
        assert Field(800, 600).clamp((400.0, 300.0), 15.0) == (400.0, 300.0)

    def test_clamp_each_axis(self) -> None:
        field = Field(800, 600)
        assert field.clamp((-50.0, 300.0), 15.0) == (15.0, 300.0)
        assert field.clamp((900.0, 700.0), 15.0) == (785.0, 585.0)

    def test_non_positive_size_raises(self) -> None:
        with pytest.raises(ValueError, match="Field size must be positive"):
            Field(0, 600)
