"""Great-circle distance between GPS coordinates."""

from __future__ import annotations

import math

from route_summary.constants import EARTH_RADIUS_KM


def haversine_distance_m(lat1, lon1, lat2, lon2) -> float:
    """Haversine distance in meters between two (lat, lon) points given in degrees."""
    r = EARTH_RADIUS_KM * 1000.0
    dp = math.radians(lat2 - lat1)
    dl = math.radians(lon2 - lon1)
    a = (
        math.sin(dp / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dl / 2) ** 2
    )
    # Rounding can push a a hair above 1 for antipodal points
    return r * 2 * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1 - a)))
