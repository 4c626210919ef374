"""Shared constants for the tower planner."""

from __future__ import annotations

from typing import Dict, Tuple

# ---------------------------------------------------------------------------
# Grid precision presets: cell size in degrees → approximate ground size
# ---------------------------------------------------------------------------
PRECISION_OPTIONS: Dict[float, str] = {
    0.01: "~1 km",
    0.001: "~100 m",
    0.0001: "~10 m",
    0.00001: "~1 m",
}

DEFAULT_PRECISION: float = 0.001

# Towers closer than this (haversine, km) share a cluster
DEFAULT_CLUSTER_THRESHOLD_KM: float = 0.3

EARTH_RADIUS_KM: float = 6371.0

# Out-of-band HDOP reported for insufficient or degenerate geometry
HDOP_UNDETERMINED: float = 100.0

MIN_TOWERS_FOR_FIX: int = 3

# HDOP at or below this counts as good coverage in the stats
GOOD_HDOP: float = 2.0

DEFAULT_MAP_CENTER: Tuple[float, float] = (37.7749, -122.4194)

OVERLAY_TYPES: Tuple[str, ...] = ("heatmap", "pixel_grid")
