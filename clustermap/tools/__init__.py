"""Configuration and input-feed utilities."""

from .client_feed import (
    ClientRecord,
    load_client_export,
    points_from_records,
    record_to_point,
)
from .config_loader import ConfigLoader, MapSettings, get_config, get_settings

__all__ = [
    "ClientRecord",
    "load_client_export",
    "points_from_records",
    "record_to_point",
    "ConfigLoader",
    "MapSettings",
    "get_config",
    "get_settings",
]
