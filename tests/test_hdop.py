"""Tests for the HDOP estimator."""

import math

import numpy as np
import pytest

from tower_hdop.config import HDOP_UNDETERMINED
from tower_hdop.core.hdop import estimate, estimate_hdop, line_of_sight_matrix
from tower_hdop.core.types import LatLng, Tower


def ring(n, radius=0.001, lat0=0.0, lng0=0.0, phase_deg=90.0):
    """*n* towers evenly spaced on a circle around (lat0, lng0)."""
    towers = []
    for k in range(n):
        theta = math.radians(phase_deg + 360.0 * k / n)
        towers.append(Tower(lat=lat0 + radius * math.sin(theta),
                            lng=lng0 + radius * math.cos(theta), id=k))
    return towers


class TestInsufficientTowers:
    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_sentinel(self, n):
        towers = ring(n) if n else []
        assert estimate(LatLng(0.0, 0.0), towers) == HDOP_UNDETERMINED
        assert not estimate_hdop(LatLng(0.0, 0.0), towers).determined

    def test_sentinel_everywhere(self):
        towers = ring(2)
        for lat, lng in [(0.0, 0.0), (1.0, 1.0), (-45.0, 120.0)]:
            assert estimate(LatLng(lat, lng), towers) == 100.0


class TestGoodGeometry:
    def test_equilateral_triangle(self):
        # G = 1.5·I  →  HDOP = sqrt(4/3)
        hdop = estimate(LatLng(0.0, 0.0), ring(3))
        assert hdop == pytest.approx(math.sqrt(4.0 / 3.0))

    def test_square(self):
        towers = [
            Tower(lat=1.0, lng=1.0), Tower(lat=1.0, lng=-1.0),
            Tower(lat=-1.0, lng=-1.0), Tower(lat=-1.0, lng=1.0),
        ]
        assert estimate(LatLng(0.0, 0.0), towers) == pytest.approx(1.0)

    def test_finite_non_negative(self):
        towers = [Tower(lat=0.0, lng=0.0), Tower(lat=0.002, lng=0.0005), Tower(lat=0.0007, lng=0.003)]
        est = estimate_hdop(LatLng(0.001, 0.001), towers)
        assert est.determined
        assert math.isfinite(est.value)
        assert est.value >= 0.0

    def test_returns_python_float(self):
        assert isinstance(estimate(LatLng(0.0, 0.0), ring(3)), float)

    def test_scale_invariant(self):
        small = estimate(LatLng(0.0, 0.0), ring(5, radius=0.0001))
        large = estimate(LatLng(0.0, 0.0), ring(5, radius=0.01))
        assert small == pytest.approx(large)


class TestDegenerateGeometry:
    def test_collinear_through_point(self):
        towers = [Tower(lat=1.0, lng=0.0), Tower(lat=2.0, lng=0.0), Tower(lat=-1.0, lng=0.0)]
        assert estimate(LatLng(0.0, 0.0), towers) == HDOP_UNDETERMINED
        assert not estimate_hdop(LatLng(0.0, 0.0), towers).determined

    def test_point_on_tower(self):
        towers = ring(3)
        on_tower = LatLng(towers[0].lat, towers[0].lng)
        assert estimate_hdop(on_tower, towers).value is None
        assert estimate(on_tower, towers) == 100.0

    def test_line_of_sight_none_on_tower(self):
        towers = ring(3)
        assert line_of_sight_matrix(LatLng(towers[1].lat, towers[1].lng), towers) is None


class TestLineOfSight:
    def test_unit_rows(self):
        towers = [Tower(lat=0.0, lng=3.0), Tower(lat=4.0, lng=0.0), Tower(lat=-3.0, lng=-4.0)]
        a = line_of_sight_matrix(LatLng(0.0, 0.0), towers)
        assert a.shape == (3, 2)
        # columns are (dlng, dlat)
        assert a[0].tolist() == pytest.approx([1.0, 0.0])
        assert a[1].tolist() == pytest.approx([0.0, 1.0])
        assert a[2].tolist() == pytest.approx([-0.8, -0.6])
        assert np.linalg.norm(a, axis=1) == pytest.approx(np.ones(3))


class TestDeterminism:
    def test_idempotent(self):
        towers = [Tower(lat=0.0, lng=0.0), Tower(lat=0.002, lng=0.0005), Tower(lat=0.0007, lng=0.003)]
        p = LatLng(0.0011, 0.0013)
        assert estimate(p, towers) == estimate(p, towers)

    def test_input_not_mutated(self):
        towers = ring(4)
        before = list(towers)
        estimate(LatLng(0.0, 0.0), towers)
        assert towers == before


class TestMonotonicity:
    @pytest.mark.parametrize("seed", range(25))
    def test_centroid_beats_far_point(self, seed):
        rng = np.random.default_rng(seed)
        lat0 = rng.uniform(-60.0, 60.0)
        lng0 = rng.uniform(-170.0, 170.0)
        radius = rng.uniform(0.0005, 0.01)
        rotation = rng.uniform(0.0, 360.0)

        towers = []
        for k in range(3):
            theta = math.radians(rotation + 120.0 * k + rng.uniform(-20.0, 20.0))
            r = radius * rng.uniform(0.7, 1.3)
            towers.append(Tower(lat=lat0 + r * math.sin(theta), lng=lng0 + r * math.cos(theta)))

        centroid = LatLng(
            sum(t.lat for t in towers) / 3.0,
            sum(t.lng for t in towers) / 3.0,
        )
        phi = rng.uniform(0.0, 2.0 * math.pi)
        far = LatLng(centroid.lat + 50.0 * radius * math.sin(phi),
                     centroid.lng + 50.0 * radius * math.cos(phi))

        assert estimate(centroid, towers) < estimate(far, towers)
