"""Pick a map focus: centroid of the largest group of nearby towers."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..config import DEFAULT_CLUSTER_THRESHOLD_KM
from .geometry import haversine_distance_km
from .types import LatLng, Tower

logger = logging.getLogger(__name__)


def group_towers(
    towers: Sequence[Tower],
    threshold_km: float = DEFAULT_CLUSTER_THRESHOLD_KM,
    legacy_lng_delta: bool = False,
) -> List[List[Tower]]:
    """Greedy single-link grouping in input order.

    Each tower joins the first existing group (in creation order) that has
    a member strictly closer than *threshold_km*; otherwise it starts a new
    group. The result depends on the order of *towers*.
    """
    groups: List[List[Tower]] = []
    for tower in towers:
        for group in groups:
            if any(
                haversine_distance_km(m.lat, m.lng, tower.lat, tower.lng,
                                      legacy_lng_delta=legacy_lng_delta) < threshold_km
                for m in group
            ):
                group.append(tower)
                break
        else:
            groups.append([tower])
    return groups


def largest_group(groups: Sequence[List[Tower]]) -> List[Tower]:
    """First group to reach the maximum size."""
    best: List[Tower] = []
    for group in groups:
        if len(group) > len(best):
            best = group
    return best


def locate(
    towers: Sequence[Tower],
    threshold_km: float = DEFAULT_CLUSTER_THRESHOLD_KM,
    legacy_lng_delta: bool = False,
) -> Optional[LatLng]:
    """Mean position of the largest tower cluster, or *None* with no towers."""
    if not towers:
        return None
    groups = group_towers(towers, threshold_km, legacy_lng_delta=legacy_lng_delta)
    best = largest_group(groups)
    logger.debug("Grouped %d towers into %d clusters; largest has %d",
                 len(towers), len(groups), len(best))
    lat = sum(t.lat for t in best) / len(best)
    lng = sum(t.lng for t in best) / len(best)
    return LatLng(lat, lng)
