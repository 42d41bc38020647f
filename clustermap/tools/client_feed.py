"""Load client records from a dialer export and turn them into points."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, Field

from ..spatial.points import Point


logger = logging.getLogger(__name__)


class Geolocation(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None


class ClientRecord(BaseModel):
    """One row of the dialer export. Only the name, address and location are used."""

    empi: Optional[Union[int, str]] = Field(default=None, alias="EMPI")
    first_name: Optional[str] = Field(default=None, alias="FirstName")
    last_name: Optional[str] = Field(default=None, alias="LastName")
    address: Optional[str] = Field(default=None, alias="Address")
    city: Optional[str] = Field(default=None, alias="City")
    county: Optional[str] = Field(default=None, alias="County")
    state: Optional[str] = Field(default=None, alias="State")
    zip: Optional[Union[int, str]] = Field(default=None, alias="Zip")
    geolocation: Optional[Geolocation] = None

    model_config = {"populate_by_name": True}

    # Null or blank parts are left out rather than rendered.
    @property
    def display_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def display_address(self) -> str:
        return ", ".join(part for part in (self.address, self.city, self.state) if part)


def record_to_point(record: ClientRecord) -> Optional[Point]:
    """Return a :class:`Point` for ``record``, or None without a usable location."""

    geo = record.geolocation
    if geo is None or geo.lat is None or geo.lng is None:
        return None
    if not (math.isfinite(geo.lat) and math.isfinite(geo.lng)):
        return None
    return Point(
        lat=geo.lat,
        lng=geo.lng,
        name=record.display_name,
        address=record.display_address,
    )


def points_from_records(rows: Iterable[Union[Mapping[str, Any], ClientRecord]]) -> List[Point]:
    """Convert export rows to points, keeping order and dropping ungeolocated rows."""

    points: List[Point] = []
    skipped = 0
    for row in rows:
        record = row if isinstance(row, ClientRecord) else ClientRecord.model_validate(row)
        point = record_to_point(record)
        if point is None:
            skipped += 1
            continue
        points.append(point)

    if skipped:
        logger.warning("Skipped %d client records without a usable geolocation", skipped)
    return points


def load_client_export(path: Union[str, Path]) -> List[Point]:
    """
    Read a JSON client export (a list of records) into points.

    Raises:
        FileNotFoundError: If ``path`` does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    export_path = Path(path)
    with export_path.open("r", encoding="utf-8") as export_file:
        rows = json.load(export_file)

    points = points_from_records(rows)
    logger.info("Loaded %d geolocated clients from %s", len(points), export_path)
    return points
