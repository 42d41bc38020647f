"""
Map profiles: YAML files under ``configs/`` selected by ``MAP_PROFILE``.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional
import yaml

from ..spatial.clustering import InvalidRadius, validate_radius


DEFAULT_PROFILE = "default"
PROFILE_ENV_VAR = "MAP_PROFILE"


class ConfigLoader:
    """Find, parse and select map profiles."""

    CONFIG_DIR = Path(__file__).parent.parent.parent / "configs"

    @classmethod
    def available_profiles(cls) -> List[str]:
        return sorted(p.stem for p in cls.CONFIG_DIR.glob("*.yaml"))

    @classmethod
    def load_map_profile(cls, profile_name: str = DEFAULT_PROFILE) -> Dict[str, Any]:
        """
        Parse ``configs/<profile_name>.yaml``. An empty file is an empty profile.

        Raises:
            FileNotFoundError: If there is no such profile
            ValueError: If the file holds something other than a mapping
        """
        path = cls.CONFIG_DIR / f"{profile_name}.yaml"
        if not path.is_file():
            raise FileNotFoundError(
                f"Map profile '{profile_name}' not found in {cls.CONFIG_DIR}. "
                f"Available profiles: {', '.join(cls.available_profiles())}"
            )

        profile = yaml.safe_load(path.read_text(encoding="utf-8"))
        if profile is None:
            return {}
        if not isinstance(profile, dict):
            raise ValueError(
                f"Map profile '{profile_name}' must be a mapping, got {type(profile).__name__}"
            )
        return profile

    @classmethod
    def get_profile_from_env(cls) -> Optional[str]:
        return os.getenv(PROFILE_ENV_VAR) or None

    @classmethod
    def load_default_or_env_profile(cls) -> Dict[str, Any]:
        """The profile named by ``MAP_PROFILE``, falling back to ``default``."""
        return cls.load_map_profile(cls.get_profile_from_env() or DEFAULT_PROFILE)


@dataclass
class MapSettings:
    """Typed view over a map profile."""

    radius_options: List[float] = field(default_factory=lambda: [20.0, 30.0, 50.0])
    default_radius: float = 20.0
    center_lat: float = 44.8
    center_lng: float = -90.0
    zoom: int = 6
    min_zoom: int = 4
    max_zoom: int = 12
    client_export: Optional[str] = None

    @classmethod
    def from_profile(cls, profile: Dict[str, Any]) -> "MapSettings":
        """
        Build settings from a loaded profile, filling in defaults.

        Raises:
            InvalidRadius: If an option is unusable or the default radius
                is not one of the options
        """
        defaults = cls()
        radius_cfg = profile.get("radius", {})
        map_cfg = profile.get("map", {})
        center = map_cfg.get("center", {})
        data_cfg = profile.get("data", {})

        options = [validate_radius(r) for r in radius_cfg.get("options", defaults.radius_options)]
        default_radius = validate_radius(radius_cfg.get("default", options[0] if options else defaults.default_radius))
        if default_radius not in options:
            raise InvalidRadius(
                f"Default radius {default_radius:g} is not one of the options {options}"
            )

        return cls(
            radius_options=options,
            default_radius=default_radius,
            center_lat=float(center.get("lat", defaults.center_lat)),
            center_lng=float(center.get("lng", defaults.center_lng)),
            zoom=int(map_cfg.get("zoom", defaults.zoom)),
            min_zoom=int(map_cfg.get("min_zoom", defaults.min_zoom)),
            max_zoom=int(map_cfg.get("max_zoom", defaults.max_zoom)),
            client_export=data_cfg.get("client_export"),
        )


def get_config() -> Dict[str, Any]:
    """Convenience function to get current configuration."""
    return ConfigLoader.load_default_or_env_profile()


def get_settings() -> MapSettings:
    """Current profile as :class:`MapSettings`."""
    return MapSettings.from_profile(get_config())
