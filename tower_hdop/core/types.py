"""Value types: Tower, LatLng, GridPoint, HdopEstimate."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from ..config import HDOP_UNDETERMINED

TowerId = Union[int, str]


def _new_tower_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class LatLng:
    """A point in degrees."""

    lat: float
    lng: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lng)


@dataclass(frozen=True)
class Tower:
    """Signal-emitting tower placed on the map.

    Parameters
    ----------
    lat : float
        Latitude in degrees.
    lng : float
        Longitude in degrees.
    id : int | str
        Opaque identifier; a random hex string when omitted.
    """

    lat: float
    lng: float
    id: TowerId = field(default_factory=_new_tower_id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tower":
        """Build a tower from ``{"id": ..., "lat": ..., "lng": ...}``; ``id`` is optional."""
        if "id" in data and data["id"] is not None:
            return cls(lat=float(data["lat"]), lng=float(data["lng"]), id=data["id"])
        return cls(lat=float(data["lat"]), lng=float(data["lng"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "lat": self.lat, "lng": self.lng}

    @property
    def position(self) -> LatLng:
        return LatLng(self.lat, self.lng)


@dataclass(frozen=True)
class HdopEstimate:
    """HDOP value, or ``None`` when the geometry cannot produce one."""

    value: Optional[float] = None

    @property
    def determined(self) -> bool:
        return self.value is not None

    def as_float(self) -> float:
        """Numeric view; undetermined maps to :data:`HDOP_UNDETERMINED`."""
        return HDOP_UNDETERMINED if self.value is None else self.value


UNDETERMINED = HdopEstimate()


@dataclass(frozen=True)
class GridPoint:
    """One scored sample of the coverage grid.

    ``res`` is the cell size (degrees) the grid was built with, so a
    renderer can size the cell without recomputing it.
    """

    lat: float
    lng: float
    hdop: float
    res: float
    determined: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lat": self.lat,
            "lng": self.lng,
            "hdop": self.hdop,
            "res": self.res,
            "determined": self.determined,
        }
