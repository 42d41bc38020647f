"""
Greedy radius clustering of geolocated points.

This module provides:
1. Radius validation (miles, converted with a fixed 1609.34 m/mile factor)
2. Single-pass, first-fit, anchor-based grouping
3. Aggregation of each group into a :class:`ClusterInfo`
4. Diagnostics describing the run

Membership is tested against a cluster's anchor (its first-assigned member),
never against the centroid, so a cluster's diameter can reach twice the
radius. Results depend on input order; the same input always yields the same
clusters.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import List, Optional, Sequence, Tuple

from .aggregation import ClusterInfo, aggregate_groups
from .distance import haversine_m, miles_to_meters
from .points import Point


logger = logging.getLogger(__name__)


class InvalidRadius(ValueError):
    """Raised when a clustering radius is not a positive, finite number."""


@dataclass
class ClusteringConfig:
    """Configuration for a clustering run."""

    radius_miles: float = 20.0
    """Maximum distance from a cluster's anchor, in miles."""


@dataclass
class ClusteringDiagnostics:
    """Summary of a clustering run."""

    num_points: int
    """Total number of points provided."""

    num_clusters: int
    """Number of clusters formed."""

    radius_miles: float
    """Radius used for the run."""

    radius_m: float
    """Radius converted to metres."""

    cluster_sizes: List[int] = field(default_factory=list)
    """Size of each cluster, in creation order."""

    singleton_clusters: int = 0
    """Number of clusters with a single member."""

    max_anchor_distance_m: float = 0.0
    """Largest member-to-anchor distance over all clusters."""

    suggestions: List[str] = field(default_factory=list)
    """Hints about the chosen radius."""


def validate_radius(radius_miles) -> float:
    """
    Return ``radius_miles`` as a float, rejecting unusable values.

    Raises:
        InvalidRadius: If the radius is not a real number, not finite, or <= 0
    """
    if isinstance(radius_miles, bool) or not isinstance(radius_miles, Real):
        raise InvalidRadius(f"Radius must be a number, got {radius_miles!r}")

    value = float(radius_miles)
    if not math.isfinite(value) or value <= 0:
        raise InvalidRadius(f"Radius must be a positive finite number of miles, got {radius_miles!r}")
    return value


def greedy_radius_groups(points: Sequence[Point], radius_miles: float) -> List[List[Point]]:
    """
    Group ``points`` greedily around anchors.

    Each point joins the first group (in creation order) whose anchor lies
    within the radius; otherwise it starts a new group and becomes its
    anchor. Groups are returned in creation order with members in
    assignment order.

    Args:
        points: Points in the order they should be considered
        radius_miles: Positive radius in miles

    Returns:
        List of non-empty groups
    """
    max_distance = miles_to_meters(radius_miles)
    groups: List[List[Point]] = []

    for p in points:
        for group in groups:
            if haversine_m(p, group[0]) <= max_distance:
                group.append(p)
                break
        else:
            groups.append([p])

    return groups


def _max_anchor_distance(groups: Sequence[Sequence[Point]]) -> float:
    distances = [haversine_m(m, g[0]) for g in groups for m in g[1:]]
    return max(distances) if distances else 0.0


def _radius_suggestions(num_points: int, cluster_sizes: Sequence[int], radius_miles: float) -> List[str]:
    suggestions = []
    if num_points == 0:
        return suggestions

    if len(cluster_sizes) == num_points and num_points > 1:
        suggestions.append(
            f"Every point is its own cluster at {radius_miles:g} miles. "
            "Consider a larger radius."
        )
    elif len(cluster_sizes) == 1 and num_points > 1:
        suggestions.append(
            f"All {num_points} points fall into one cluster at {radius_miles:g} miles. "
            "Consider a smaller radius."
        )
    return suggestions


def cluster_points(
    points: Sequence[Point],
    config: Optional[ClusteringConfig] = None,
) -> Tuple[List[ClusterInfo], ClusteringDiagnostics]:
    """
    Cluster ``points`` and aggregate every cluster.

    Args:
        points: Well-formed points (filtering happens in the input feed)
        config: Clustering configuration (uses defaults if None)

    Returns:
        (clusters, diagnostics)

    Raises:
        InvalidRadius: If ``config.radius_miles`` is unusable
    """
    if config is None:
        config = ClusteringConfig()

    radius_miles = validate_radius(config.radius_miles)
    groups = greedy_radius_groups(points, radius_miles)
    clusters = aggregate_groups(groups)

    cluster_sizes = [c.size for c in clusters]
    diagnostics = ClusteringDiagnostics(
        num_points=len(points),
        num_clusters=len(clusters),
        radius_miles=radius_miles,
        radius_m=miles_to_meters(radius_miles),
        cluster_sizes=cluster_sizes,
        singleton_clusters=sum(1 for s in cluster_sizes if s == 1),
        max_anchor_distance_m=_max_anchor_distance(groups),
        suggestions=_radius_suggestions(len(points), cluster_sizes, radius_miles),
    )

    logger.info(
        "Clustered %d points into %d clusters at %g miles",
        diagnostics.num_points, diagnostics.num_clusters, radius_miles,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Cluster sizes=%s singletons=%d max_anchor_distance_m=%.1f",
            cluster_sizes, diagnostics.singleton_clusters, diagnostics.max_anchor_distance_m,
        )

    return clusters, diagnostics


def cluster(points: Sequence[Point], radius_miles: float) -> List[ClusterInfo]:
    """Cluster ``points`` at ``radius_miles`` and return the aggregates."""
    clusters, _diagnostics = cluster_points(points, ClusteringConfig(radius_miles=radius_miles))
    return clusters
