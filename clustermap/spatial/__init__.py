"""
clustermap/spatial: Distance, greedy radius clustering and cluster aggregation.

This module groups geolocated points around anchors within a radius in miles.
"""

from .aggregation import (
    ClusterInfo,
    SizeTier,
    aggregate_groups,
    centroid,
    clusters_to_frame,
    size_tier,
)
from .clustering import (
    ClusteringConfig,
    ClusteringDiagnostics,
    InvalidRadius,
    cluster,
    cluster_points,
    greedy_radius_groups,
    validate_radius,
)
from .distance import (
    EARTH_RADIUS_M,
    METERS_PER_MILE,
    haversine_m,
    haversine_m_coords,
    miles_to_meters,
)
from .points import Point, points_to_frame

__all__ = [
    "ClusterInfo",
    "SizeTier",
    "aggregate_groups",
    "centroid",
    "clusters_to_frame",
    "size_tier",
    "ClusteringConfig",
    "ClusteringDiagnostics",
    "InvalidRadius",
    "cluster",
    "cluster_points",
    "greedy_radius_groups",
    "validate_radius",
    "EARTH_RADIUS_M",
    "METERS_PER_MILE",
    "haversine_m",
    "haversine_m_coords",
    "miles_to_meters",
    "Point",
    "points_to_frame",
]
