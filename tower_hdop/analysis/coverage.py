"""One-shot coverage analysis: map focus plus scored grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from ..config import DEFAULT_CLUSTER_THRESHOLD_KM, GOOD_HDOP
from ..core.cluster import locate
from ..core.grid import build
from ..core.types import GridPoint, LatLng, Tower

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Holds the output of one :func:`analyze` call."""

    center: Optional[LatLng] = None
    """Centroid of the largest tower cluster (None without towers)."""
    grid: List[GridPoint] = field(default_factory=list)
    """Scored grid points; empty for fewer than three towers."""
    resolution: float = 0.0


def analyze(
    towers: Sequence[Tower],
    resolution: float,
    threshold_km: float = DEFAULT_CLUSTER_THRESHOLD_KM,
    legacy_lng_delta: bool = False,
) -> AnalysisResult:
    """Locate the map focus and build the coverage grid for a tower snapshot.

    *legacy_lng_delta* is passed to :func:`~tower_hdop.core.cluster.locate`.
    """
    snapshot = tuple(towers)
    center = locate(snapshot, threshold_km, legacy_lng_delta=legacy_lng_delta)
    grid = build(snapshot, resolution)
    logger.info("Analyzed %d towers: %d grid points at %g deg",
                len(snapshot), len(grid), resolution)
    return AnalysisResult(center=center, grid=grid, resolution=resolution)


def coverage_stats(grid: Sequence[GridPoint], good_hdop: float = GOOD_HDOP) -> Dict[str, Any]:
    """Summary statistics over the determined points of a grid."""
    total = len(grid)
    hdops = np.array([p.hdop for p in grid if p.determined], dtype=np.float64)
    determined = int(hdops.size)
    good = int(np.sum(hdops <= good_hdop)) if determined else 0
    return {
        "total_points": total,
        "determined_points": determined,
        "good_points": good,
        "good_pct": round(100.0 * good / total, 2) if total else 0.0,
        "mean_hdop": round(float(np.mean(hdops)), 3) if determined else None,
        "min_hdop": round(float(np.min(hdops)), 3) if determined else None,
        "max_hdop": round(float(np.max(hdops)), 3) if determined else None,
    }
