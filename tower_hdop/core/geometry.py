"""Small linear-algebra helpers and great-circle distance."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from ..config import EARTH_RADIUS_KM


def transpose(matrix: np.ndarray | Sequence[Sequence[float]]) -> np.ndarray:
    """Swap rows and columns; works for non-square (N×2) input."""
    return np.asarray(matrix, dtype=np.float64).T


def multiply(
    a: np.ndarray | Sequence[Sequence[float]],
    b: np.ndarray | Sequence[Sequence[float]],
) -> np.ndarray:
    """Matrix product ``a · b``.

    Raises
    ------
    ValueError
        If the inner dimensions do not match.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.ndim != 2 or b.ndim != 2 or a.shape[1] != b.shape[0]:
        raise ValueError(f"Cannot multiply matrices of shape {a.shape} and {b.shape}")
    return a @ b


def determinant2x2(m: np.ndarray | Sequence[Sequence[float]]) -> float:
    m = np.asarray(m, dtype=np.float64)
    return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])


def invert2x2(m: np.ndarray | Sequence[Sequence[float]]) -> Optional[np.ndarray]:
    """Closed-form inverse of a 2×2 matrix.

    Returns *None* when the determinant is exactly zero. No tolerance is
    applied: a nearly singular matrix still inverts (to large values).
    """
    m = np.asarray(m, dtype=np.float64)
    if m.shape != (2, 2):
        raise ValueError(f"Expected a 2x2 matrix, got shape {m.shape}")
    det = determinant2x2(m)
    if det == 0.0:
        return None
    return np.array(
        [
            [m[1, 1] / det, -m[0, 1] / det],
            [-m[1, 0] / det, m[0, 0] / det],
        ]
    )


def haversine_distance_km(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    legacy_lng_delta: bool = False,
) -> float:
    """Great-circle distance (km) on a sphere of radius 6371 km.

    Parameters
    ----------
    legacy_lng_delta : bool
        Use ``lat2 - lng1`` as the longitude delta, reproducing the
        distances computed by the first browser release of the planner.
        Off by default (textbook ``lng2 - lng1``).
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians((lat2 if legacy_lng_delta else lng2) - lng1)
    a = (
        math.sin(d_lat / 2.0) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2.0) ** 2
    )
    a = min(a, 1.0)
    return EARTH_RADIUS_KM * 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
