"""Coverage grid over the towers' bounding box."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from ..config import MIN_TOWERS_FOR_FIX
from .hdop import estimate_hdop
from .types import GridPoint, LatLng, Tower

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned lat/lng box (degrees, inclusive)."""

    lat_min: float
    lat_max: float
    lng_min: float
    lng_max: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.lat_min <= lat <= self.lat_max and self.lng_min <= lng <= self.lng_max


def bounding_box(towers: Sequence[Tower]) -> BoundingBox:
    """Smallest box holding every tower.

    Raises
    ------
    ValueError
        If *towers* is empty.
    """
    if not towers:
        raise ValueError("Cannot compute a bounding box of zero towers")
    lats = [t.lat for t in towers]
    lngs = [t.lng for t in towers]
    return BoundingBox(min(lats), max(lats), min(lngs), max(lngs))


def _steps(start: float, stop: float, step: float) -> Iterator[float]:
    # Plain accumulation; the last value may land on or just short of *stop*.
    value = start
    while value <= stop:
        nxt = value + step
        if nxt == value:
            raise ValueError(
                f"Grid resolution {step!r} is below the float spacing at {value!r}"
            )
        yield value
        value = nxt


def grid_coordinates(box: BoundingBox, resolution: float) -> List[Tuple[float, float]]:
    """All ``(lat, lng)`` sample positions in *box*, row by row (lat outer)."""
    lngs = list(_steps(box.lng_min, box.lng_max, resolution))
    return [(lat, lng) for lat in _steps(box.lat_min, box.lat_max, resolution) for lng in lngs]


def build(towers: Sequence[Tower], resolution: float) -> List[GridPoint]:
    """Score every grid point in the towers' bounding box with its HDOP.

    Parameters
    ----------
    towers : Sequence[Tower]
        Snapshot of tower positions; not modified.
    resolution : float
        Cell size in degrees. Halving it roughly quadruples the work.

    Returns an empty list for fewer than three towers.

    Raises
    ------
    ValueError
        If *resolution* is not a positive finite number.
    """
    if not (math.isfinite(resolution) and resolution > 0):
        raise ValueError(f"Grid resolution must be a positive number of degrees, got {resolution!r}")
    if len(towers) < MIN_TOWERS_FOR_FIX:
        return []

    towers = tuple(towers)
    box = bounding_box(towers)
    coords = grid_coordinates(box, resolution)
    logger.debug(
        "Building %d grid points for %d towers at %g deg resolution",
        len(coords), len(towers), resolution,
    )

    points: List[GridPoint] = []
    for lat, lng in coords:
        est = estimate_hdop(LatLng(lat, lng), towers)
        points.append(GridPoint(lat=lat, lng=lng, hdop=est.as_float(), res=resolution,
                                determined=est.determined))
    return points


def grid_to_arrays(points: Sequence[GridPoint]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split a grid into ``(lats, lngs, hdops)`` arrays."""
    lats = np.array([p.lat for p in points], dtype=np.float64)
    lngs = np.array([p.lng for p in points], dtype=np.float64)
    hdops = np.array([p.hdop for p in points], dtype=np.float64)
    return lats, lngs, hdops
