"""
Cluster aggregation: centroids, sizes and size tiers.

Centroids are the plain arithmetic mean of member latitudes and longitudes,
computed once after the clustering engine has finished assigning points.
This is only a sound approximation for clusters of modest geographic extent.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from .points import Point


# Size breakpoints for marker styling
TIER_MEDIUM_MIN_SIZE = 10
TIER_LARGE_MIN_SIZE = 100


class SizeTier(Enum):
    """Three-tier size classification used to style cluster markers."""
    SMALL = 1
    MEDIUM = 2
    LARGE = 3


def size_tier(size: int) -> SizeTier:
    """Return the styling tier for a cluster of ``size`` members."""
    if size < TIER_MEDIUM_MIN_SIZE:
        return SizeTier.SMALL
    if size < TIER_LARGE_MIN_SIZE:
        return SizeTier.MEDIUM
    return SizeTier.LARGE


@dataclass(frozen=True)
class ClusterInfo:
    """Aggregate for a single cluster."""

    cluster_id: int
    """Index of the cluster in creation order (0-based)."""

    members: Tuple[Point, ...]
    """Member points in assignment order. The first one is the anchor."""

    centroid_lat: float
    """Mean latitude of the members."""

    centroid_lng: float
    """Mean longitude of the members."""

    size: int = 0
    """Number of members."""

    @property
    def anchor(self) -> Point:
        return self.members[0]

    @property
    def tier(self) -> SizeTier:
        return size_tier(self.size)


def centroid(members: Sequence[Point]) -> Tuple[float, float]:
    """
    Arithmetic mean of member coordinates.

    Args:
        members: Non-empty sequence of points

    Returns:
        (lat, lng) of the centroid

    Raises:
        ValueError: If ``members`` is empty
    """
    if len(members) == 0:
        raise ValueError("Cannot compute the centroid of an empty cluster")

    lats = np.array([p.lat for p in members], dtype=float)
    lngs = np.array([p.lng for p in members], dtype=float)
    return float(lats.mean()), float(lngs.mean())


def aggregate_groups(groups: Sequence[Sequence[Point]]) -> List[ClusterInfo]:
    """Build one :class:`ClusterInfo` per group, keeping creation order."""
    clusters: List[ClusterInfo] = []
    for cid, group in enumerate(groups):
        lat, lng = centroid(group)
        clusters.append(ClusterInfo(
            cluster_id=cid,
            members=tuple(group),
            centroid_lat=lat,
            centroid_lng=lng,
            size=len(group),
        ))
    return clusters


def clusters_to_frame(clusters: Sequence[ClusterInfo]) -> pd.DataFrame:
    """Tabular summary with one row per cluster."""
    rows = [
        dict(
            cluster_id=c.cluster_id,
            centroid_lat=c.centroid_lat,
            centroid_lng=c.centroid_lng,
            size=c.size,
            tier=c.tier.value,
            anchor_name=c.anchor.name,
        )
        for c in clusters
    ]
    return pd.DataFrame(
        rows,
        columns=["cluster_id", "centroid_lat", "centroid_lng", "size", "tier", "anchor_name"],
    )
