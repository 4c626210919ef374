"""Per-cell display values for map overlays."""

from __future__ import annotations

from typing import Tuple

from ..core.types import GridPoint


def heat_weight(point: GridPoint) -> float:
    """Heatmap intensity: lower HDOP glows brighter."""
    return 1.0 / point.hdop


def cell_opacity(point: GridPoint) -> float:
    """Pixel-grid fill alpha, capped at 1."""
    return min(1.0, 1.0 / point.hdop)


def cell_bounds(point: GridPoint) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """``((lat_south, lng_west), (lat_north, lng_east))`` of the cell centred on *point*."""
    half = point.res / 2.0
    return (
        (point.lat - half, point.lng - half),
        (point.lat + half, point.lng + half),
    )
