"""Marker styling for cluster icons."""

from __future__ import annotations

from typing import Dict
from urllib.parse import quote

from clustermap.spatial import SizeTier, size_tier

from ..schemas.models import MarkerIcon

ICON_SIZE = 44

TIER_COLORS: Dict[SizeTier, str] = {
    SizeTier.SMALL: "#024948",
    SizeTier.MEDIUM: "#392fef",
    SizeTier.LARGE: "#e52323",
}

# Alpha suffixes for the inner, middle and outer rings
RING_ALPHAS = ("dd", "66", "33")


def ring_colors(cluster_size: int) -> tuple[str, str, str]:
    """Return (inner, middle, outer) ring colours for a cluster of ``cluster_size``."""

    base = TIER_COLORS[size_tier(cluster_size)]
    inner, middle, outer = (f"{base}{alpha}" for alpha in RING_ALPHAS)
    return inner, middle, outer


def cluster_icon_svg(cluster_size: int) -> str:
    inner, middle, outer = ring_colors(cluster_size)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" height="{ICON_SIZE}" width="{ICON_SIZE}" viewBox="0 0 44 44">'
        f'<circle cx="22" cy="22" r="22" fill="{outer}" />'
        f'<circle cx="22" cy="22" r="19" fill="{middle}" />'
        f'<circle cx="22" cy="22" r="16" fill="{inner}" />'
        "</svg>"
    )


def cluster_icon(cluster_size: int) -> MarkerIcon:
    """Concentric-circle icon encoded as an SVG data URL."""

    encoded = quote(cluster_icon_svg(cluster_size), safe="!'()*")
    return MarkerIcon(
        url=f"data:image/svg+xml;charset=UTF-8,{encoded}",
        size=ICON_SIZE,
    )
