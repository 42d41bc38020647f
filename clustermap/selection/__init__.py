"""clustermap/selection: Map state transitions and the active cluster selection."""

from .state import (
    ClusterMapController,
    MapState,
    SelectionRow,
    UnknownCluster,
    change_radius,
    clear_selection,
    initial_state,
    select_cluster,
    selection_rows,
)

__all__ = [
    "ClusterMapController",
    "MapState",
    "SelectionRow",
    "UnknownCluster",
    "change_radius",
    "clear_selection",
    "initial_state",
    "select_cluster",
    "selection_rows",
]
