"""Horizontal Dilution of Precision from tower geometry.

Line-of-sight vectors are plain differences of degrees (``dx`` in
longitude, ``dy`` in latitude), i.e. lat/lng is treated as a flat plane.
This holds for tower spacings far below a degree; no map projection is
applied.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from ..config import MIN_TOWERS_FOR_FIX
from .geometry import invert2x2, multiply, transpose
from .types import UNDETERMINED, HdopEstimate, LatLng, Tower


def line_of_sight_matrix(point: LatLng, towers: Sequence[Tower]) -> Optional[np.ndarray]:
    """Design matrix A (N×2): one unit vector per tower, pointing from *point* to the tower.

    Returns *None* if *point* sits exactly on a tower.
    """
    rows = []
    for tower in towers:
        dx = tower.lng - point.lng
        dy = tower.lat - point.lat
        norm = math.sqrt(dx * dx + dy * dy)
        if norm == 0.0:
            return None
        rows.append((dx / norm, dy / norm))
    return np.array(rows, dtype=np.float64).reshape(-1, 2)


def geometry_matrix(a: np.ndarray) -> np.ndarray:
    """G = Aᵗ·A."""
    return multiply(transpose(a), a)


def estimate_hdop(point: LatLng, towers: Sequence[Tower]) -> HdopEstimate:
    """HDOP at *point*, or :data:`UNDETERMINED` for unusable geometry.

    Undetermined covers fewer than three towers, a point on top of a
    tower, and a geometry matrix with an exactly zero determinant
    (collinear towers through the point).
    """
    if len(towers) < MIN_TOWERS_FOR_FIX:
        return UNDETERMINED

    a = line_of_sight_matrix(point, towers)
    if a is None:
        return UNDETERMINED

    g_inv = invert2x2(geometry_matrix(a))
    if g_inv is None:
        return UNDETERMINED

    trace = float(g_inv[0, 0] + g_inv[1, 1])
    # Round-off on a near-singular G can flip the determinant's sign
    if not (math.isfinite(trace) and trace >= 0.0):
        return UNDETERMINED
    return HdopEstimate(math.sqrt(trace))


def estimate(point: LatLng, towers: Sequence[Tower]) -> float:
    """HDOP as a plain float; undetermined geometry reports 100."""
    return estimate_hdop(point, towers).as_float()
