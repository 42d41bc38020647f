"""Conversions from :mod:`clustermap` records to server response models."""

from __future__ import annotations

from typing import Iterable, List

from clustermap.selection import ClusterMapController, SelectionRow
from clustermap.spatial import ClusterInfo

from ..schemas.models import (
    ClusterMarker,
    ClustersResponse,
    LatLng,
    MarkerLabel,
    SelectionResponse,
    SelectionRowModel,
)
from .markers import cluster_icon


def cluster_markers(clusters: Iterable[ClusterInfo]) -> List[ClusterMarker]:
    """One marker per cluster, placed at the centroid and labelled with the size."""

    return [
        ClusterMarker(
            cluster_id=c.cluster_id,
            centroid=LatLng(lat=c.centroid_lat, lng=c.centroid_lng),
            size=c.size,
            tier=c.tier.value,
            label=MarkerLabel(text=str(c.size)),
            icon=cluster_icon(c.size),
        )
        for c in clusters
    ]


def clusters_response(controller: ClusterMapController) -> ClustersResponse:
    return ClustersResponse(
        radius_miles=controller.radius_miles,
        clusters=cluster_markers(controller.clusters),
        num_points=len(controller.points),
    )


def selection_response(controller: ClusterMapController, rows: List[SelectionRow]) -> SelectionResponse:
    return SelectionResponse(
        cluster_id=controller.state.selected_cluster_id,
        rows=[SelectionRowModel(index=r.index, name=r.name, address=r.address) for r in rows],
    )
