"""Great-circle distance helpers."""

from __future__ import annotations

import math
from typing import Any

# Equatorial radius (WGS84 semi-major axis) used by the haversine formula.
EARTH_RADIUS_M = 6378137.0

METERS_PER_MILE = 1609.34


def haversine_m_coords(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two lat/lng pairs in metres."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat, dlng = math.radians(lat2 - lat1), math.radians(lng2 - lng1)
    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(min(1.0, h)))


def haversine_m(a: Any, b: Any) -> float:
    """Great-circle distance in metres between two objects with ``lat``/``lng``.

    Accepts :class:`~clustermap.spatial.points.Point`, pydantic ``LatLng``
    models or anything else exposing the two attributes. Ranges are not
    validated.
    """
    return haversine_m_coords(a.lat, a.lng, b.lat, b.lng)


def miles_to_meters(miles: float) -> float:
    return miles * METERS_PER_MILE
