"""Tests for the analysis composition and overlay values."""

import pytest

from tower_hdop.analysis import analyze, cell_bounds, cell_opacity, coverage_stats, heat_weight
from tower_hdop.core.types import GridPoint, LatLng, Tower


@pytest.fixture
def block_towers():
    return [
        Tower(lat=37.7740, lng=-122.4205, id=1),
        Tower(lat=37.7740, lng=-122.4190, id=2),
        Tower(lat=37.7752, lng=-122.4190, id=3),
        Tower(lat=37.7752, lng=-122.4205, id=4),
    ]


class TestAnalyze:
    def test_center_and_grid(self, block_towers):
        result = analyze(block_towers, 0.0005)
        assert result.center.lat == pytest.approx(37.7746)
        assert result.center.lng == pytest.approx(-122.41975)
        assert result.grid
        assert result.resolution == 0.0005

    def test_two_towers(self, block_towers):
        result = analyze(block_towers[:2], 0.001)
        assert result.grid == []
        assert isinstance(result.center, LatLng)

    def test_no_towers(self):
        result = analyze([], 0.001)
        assert result.center is None
        assert result.grid == []

    def test_legacy_lng_delta_reaches_locate(self):
        towers = [
            Tower(lat=0.0, lng=5.0), Tower(lat=0.0, lng=5.001), Tower(lat=0.001, lng=5.0005),
        ]
        assert analyze(towers, 0.001).center.lng == pytest.approx(5.0005)
        # legacy delta splits every pair, so the first tower is its own largest group
        assert analyze(towers, 0.001, legacy_lng_delta=True).center == LatLng(0.0, 5.0)

    def test_accepts_generator(self, block_towers):
        result = analyze((t for t in block_towers), 0.0005)
        assert result.center is not None
        assert result.grid


class TestCoverageStats:
    def test_empty(self):
        stats = coverage_stats([])
        assert stats["total_points"] == 0
        assert stats["good_pct"] == 0.0
        assert stats["mean_hdop"] is None

    def test_counts(self):
        grid = [
            GridPoint(lat=0.0, lng=0.0, hdop=1.0, res=0.1),
            GridPoint(lat=0.0, lng=0.1, hdop=3.0, res=0.1),
            GridPoint(lat=0.1, lng=0.0, hdop=100.0, res=0.1, determined=False),
            GridPoint(lat=0.1, lng=0.1, hdop=2.0, res=0.1),
        ]
        stats = coverage_stats(grid, good_hdop=2.0)
        assert stats["total_points"] == 4
        assert stats["determined_points"] == 3
        assert stats["good_points"] == 2
        assert stats["good_pct"] == 50.0
        assert stats["mean_hdop"] == pytest.approx(2.0)
        assert stats["min_hdop"] == 1.0
        assert stats["max_hdop"] == 3.0


class TestOverlayValues:
    def test_heat_weight(self):
        assert heat_weight(GridPoint(lat=0.0, lng=0.0, hdop=4.0, res=0.1)) == 0.25

    def test_opacity_capped(self):
        assert cell_opacity(GridPoint(lat=0.0, lng=0.0, hdop=0.5, res=0.1)) == 1.0
        assert cell_opacity(GridPoint(lat=0.0, lng=0.0, hdop=2.0, res=0.1)) == 0.5

    def test_sentinel_is_faint(self):
        assert cell_opacity(GridPoint(lat=0.0, lng=0.0, hdop=100.0, res=0.1, determined=False)) == 0.01

    def test_cell_bounds(self):
        (s, w), (n, e) = cell_bounds(GridPoint(lat=10.0, lng=20.0, hdop=1.0, res=0.5))
        assert (s, w, n, e) == (9.75, 19.75, 10.25, 20.25)
