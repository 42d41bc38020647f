"""Pydantic models for the client cluster map server."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class LatLng(BaseModel):
    """Simple latitude/longitude container."""

    lat: float = Field(..., description="Latitude in decimal degrees")
    lng: float = Field(..., description="Longitude in decimal degrees")


class MarkerLabel(BaseModel):
    text: str
    color: str = "white"
    font_size: str = Field("12px", alias="fontSize")

    model_config = {"populate_by_name": True}


class MarkerIcon(BaseModel):
    url: str
    size: int


class ClusterMarker(BaseModel):
    """One map marker per cluster."""

    cluster_id: int = Field(..., alias="clusterId")
    centroid: LatLng
    size: int
    tier: int
    label: MarkerLabel
    icon: MarkerIcon

    model_config = {"populate_by_name": True}


class ClustersResponse(BaseModel):
    radius_miles: float = Field(..., alias="radiusMiles")
    clusters: List[ClusterMarker]
    num_points: int = Field(..., alias="numPoints")

    model_config = {"populate_by_name": True}


class RadiusRequest(BaseModel):
    radius_miles: float = Field(..., gt=0, alias="radiusMiles")

    model_config = {"populate_by_name": True}


class SelectRequest(BaseModel):
    cluster_id: int = Field(..., ge=0, alias="clusterId")

    model_config = {"populate_by_name": True}


class SelectionRowModel(BaseModel):
    index: int = Field(..., ge=1, description="1-based row number")
    name: str
    address: str


class SelectionResponse(BaseModel):
    cluster_id: Optional[int] = Field(default=None, alias="clusterId")
    rows: List[SelectionRowModel] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class MapOptions(BaseModel):
    center: LatLng
    zoom: int
    min_zoom: int = Field(..., alias="minZoom")
    max_zoom: int = Field(..., alias="maxZoom")

    model_config = {"populate_by_name": True}


class MapConfigResponse(BaseModel):
    radius_options: List[float] = Field(..., alias="radiusOptions")
    default_radius: float = Field(..., alias="defaultRadius")
    map: MapOptions

    model_config = {"populate_by_name": True}
