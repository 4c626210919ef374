from .types import Tower, LatLng, GridPoint, HdopEstimate, UNDETERMINED
from .geometry import transpose, multiply, invert2x2, haversine_distance_km
from .hdop import estimate, estimate_hdop
from .grid import BoundingBox, bounding_box, build, grid_to_arrays
from .cluster import group_towers, locate

__all__ = [
    "Tower", "LatLng", "GridPoint", "HdopEstimate", "UNDETERMINED",
    "transpose", "multiply", "invert2x2", "haversine_distance_km",
    "estimate", "estimate_hdop",
    "BoundingBox", "bounding_box", "build", "grid_to_arrays",
    "group_towers", "locate",
]
