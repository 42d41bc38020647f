"""FastAPI server exposing client clusters and the cluster selection to the map UI."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from clustermap.selection import ClusterMapController, UnknownCluster
from clustermap.tools.client_feed import load_client_export
from clustermap.tools.config_loader import MapSettings, get_settings

from .schemas.models import (
    ClustersResponse,
    LatLng,
    MapConfigResponse,
    MapOptions,
    RadiusRequest,
    SelectionResponse,
    SelectRequest,
)
from .tools.clusters import clusters_response, selection_response

load_dotenv()

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[2]

app = FastAPI(title="Client Cluster Map Server", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_controller: Optional[ClusterMapController] = None
_controller_lock = threading.Lock()


def _client_export_path(settings: MapSettings) -> Path:
    raw = os.getenv("CLIENT_EXPORT_PATH") or settings.client_export
    if not raw:
        raise HTTPException(status_code=503, detail="No client export configured.")
    path = Path(raw)
    return path if path.is_absolute() else REPO_ROOT / path


def get_controller(settings: MapSettings = Depends(get_settings)) -> ClusterMapController:
    """Return the process-wide controller, loading the client export on first use."""

    global _controller
    if _controller is not None:
        return _controller

    # Concurrent first requests must share one controller.
    with _controller_lock:
        if _controller is None:
            path = _client_export_path(settings)
            try:
                points = load_client_export(path)
            except FileNotFoundError as exc:
                raise HTTPException(status_code=503, detail=f"Client export not found: {path}") from exc
            logger.info("Clustering %d clients at %g miles", len(points), settings.default_radius)
            _controller = ClusterMapController(points, radius_miles=settings.default_radius)
    return _controller


def reset_controller() -> None:
    """Drop the cached controller so the next request reloads the client export."""

    global _controller
    with _controller_lock:
        _controller = None


@app.get("/health")
async def health_check() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/config")
async def map_config(settings: MapSettings = Depends(get_settings)) -> Dict[str, Any]:
    response = MapConfigResponse(
        radius_options=settings.radius_options,
        default_radius=settings.default_radius,
        map=MapOptions(
            center=LatLng(lat=settings.center_lat, lng=settings.center_lng),
            zoom=settings.zoom,
            min_zoom=settings.min_zoom,
            max_zoom=settings.max_zoom,
        ),
    )
    return response.model_dump(by_alias=True)


@app.get("/clusters")
async def get_clusters(controller: ClusterMapController = Depends(get_controller)) -> Dict[str, Any]:
    response: ClustersResponse = clusters_response(controller)
    return response.model_dump(by_alias=True)


@app.post("/actions/radius")
async def change_radius_action(
    request: RadiusRequest,
    settings: MapSettings = Depends(get_settings),
    controller: ClusterMapController = Depends(get_controller),
) -> Dict[str, Any]:
    if request.radius_miles not in settings.radius_options:
        options = ", ".join(f"{r:g}" for r in settings.radius_options)
        raise HTTPException(
            status_code=422,
            detail=f"Radius {request.radius_miles:g} is not one of the options: {options}",
        )
    controller.set_radius(request.radius_miles)
    return clusters_response(controller).model_dump(by_alias=True)


@app.post("/actions/select")
async def select_action(
    request: SelectRequest,
    controller: ClusterMapController = Depends(get_controller),
) -> Dict[str, Any]:
    try:
        rows = controller.select(request.cluster_id)
    except UnknownCluster as exc:
        raise HTTPException(status_code=404, detail=f"Unknown cluster {request.cluster_id}") from exc

    response: SelectionResponse = selection_response(controller, rows)
    return response.model_dump(by_alias=True)


@app.post("/actions/clear")
async def clear_action(controller: ClusterMapController = Depends(get_controller)) -> Dict[str, Any]:
    controller.clear()
    return selection_response(controller, []).model_dump(by_alias=True)


@app.get("/selection")
async def selection(controller: ClusterMapController = Depends(get_controller)) -> Dict[str, Any]:
    return selection_response(controller, controller.rows()).model_dump(by_alias=True)


__all__ = ["app", "get_controller", "get_settings", "reset_controller"]
