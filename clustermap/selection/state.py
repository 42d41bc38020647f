"""
Map state and cluster selection.

The map state bundles the selected radius, the clusters of the latest run and
the active selection. Transitions are pure functions returning a new state;
:class:`ClusterMapController` is the single owner that applies them.

Changing the radius always clears the selection and reclusters from scratch,
since cluster ids from an earlier run are meaningless afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from ..spatial.aggregation import ClusterInfo
from ..spatial.clustering import cluster
from ..spatial.points import Point


logger = logging.getLogger(__name__)


class UnknownCluster(KeyError):
    """Raised when selecting a cluster id that the current run did not produce."""


@dataclass(frozen=True)
class SelectionRow:
    """One row of the selection table."""
    index: int
    name: str
    address: str


@dataclass(frozen=True)
class MapState:
    """Immutable snapshot of the map: radius, clusters and selection."""

    radius_miles: float
    clusters: Tuple[ClusterInfo, ...] = ()
    selected_cluster_id: Optional[int] = None

    @property
    def selected_cluster(self) -> Optional[ClusterInfo]:
        if self.selected_cluster_id is None:
            return None
        return self.clusters[self.selected_cluster_id]

    @property
    def selection(self) -> Tuple[Point, ...]:
        """Members of the selected cluster, or an empty tuple."""
        selected = self.selected_cluster
        return selected.members if selected is not None else ()


def initial_state(points: Sequence[Point], radius_miles: float) -> MapState:
    """Cluster ``points`` at ``radius_miles`` with nothing selected."""
    return MapState(radius_miles=radius_miles, clusters=tuple(cluster(points, radius_miles)))


def change_radius(state: MapState, points: Sequence[Point], new_radius: float) -> MapState:
    """
    Return the state after the user picks ``new_radius``.

    The previous clusters and selection are discarded and ``points`` are
    clustered again from scratch, even when the radius is unchanged.
    """
    if state.selected_cluster_id is not None:
        logger.debug("Clearing selection of cluster %d on radius change", state.selected_cluster_id)
    return initial_state(points, new_radius)


def select_cluster(state: MapState, cluster_id: int) -> MapState:
    """Make ``cluster_id`` the active selection, replacing any previous one."""
    if isinstance(cluster_id, bool) or not 0 <= cluster_id < len(state.clusters):
        raise UnknownCluster(cluster_id)
    return replace(state, selected_cluster_id=cluster_id)


def clear_selection(state: MapState) -> MapState:
    return replace(state, selected_cluster_id=None)


def selection_rows(state: MapState) -> List[SelectionRow]:
    """Rows for the member table, numbered from 1."""
    return [
        SelectionRow(index=i, name=p.name, address=p.address)
        for i, p in enumerate(state.selection, start=1)
    ]


class ClusterMapController:
    """
    Owner of the point list and the current :class:`MapState`.

    All calls are synchronous; a radius change runs to completion before
    the next selection request is served.
    """

    def __init__(self, points: Sequence[Point], radius_miles: float = 20.0):
        self._points: Tuple[Point, ...] = tuple(points)
        self._state = initial_state(self._points, radius_miles)

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def state(self) -> MapState:
        return self._state

    @property
    def radius_miles(self) -> float:
        return self._state.radius_miles

    @property
    def clusters(self) -> Tuple[ClusterInfo, ...]:
        return self._state.clusters

    @property
    def selection(self) -> Tuple[Point, ...]:
        return self._state.selection

    def set_radius(self, radius_miles: float) -> MapState:
        self._state = change_radius(self._state, self._points, radius_miles)
        return self._state

    def select(self, cluster_id: int) -> List[SelectionRow]:
        self._state = select_cluster(self._state, cluster_id)
        return selection_rows(self._state)

    def clear(self) -> None:
        self._state = clear_selection(self._state)

    def rows(self) -> List[SelectionRow]:
        return selection_rows(self._state)
