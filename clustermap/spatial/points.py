"""Point records consumed by the clustering engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd


POINT_COLUMNS = ["lat", "lng", "name", "address"]


@dataclass(frozen=True)
class Point:
    """A geolocated client record.

    Points are created by the input feed and never mutated by the core.
    """

    lat: float
    lng: float
    name: str = ""
    address: str = ""


def points_to_frame(points: Iterable[Point]) -> pd.DataFrame:
    """Return ``points`` as a dataframe, one row per point in input order."""

    rows = [
        dict(lat=p.lat, lng=p.lng, name=p.name, address=p.address)
        for p in points
    ]
    return pd.DataFrame(rows, columns=POINT_COLUMNS)
