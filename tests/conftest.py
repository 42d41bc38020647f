"""
Pytest configuration and shared fixtures for client-cluster-map tests.

This file provides:
- Sample point sets (hand-crafted and Wisconsin client locations)
- Client export records and files
- Common test utilities
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, List

import pytest

from clustermap.spatial import EARTH_RADIUS_M, Point, miles_to_meters


# ==============================================================================
# Test Data Paths
# ==============================================================================

@pytest.fixture
def repo_root() -> Path:
    return Path(__file__).resolve().parent.parent


@pytest.fixture
def sample_export_path(repo_root) -> Path:
    """Path to the bundled sample client export."""
    return repo_root / "data" / "client_export.json"


# ==============================================================================
# Sample Points
# ==============================================================================

def degrees_for_miles(miles: float) -> float:
    """Arc length in degrees along a great circle covering ``miles``."""
    return miles_to_meters(miles) / (EARTH_RADIUS_M * math.pi / 180.0)


@pytest.fixture
def scenario_points() -> List[Point]:
    """Two points ~111 m apart on the equator plus one far away."""
    return [
        Point(lat=0.0, lng=0.0, name="A", address="1 Equator Rd"),
        Point(lat=0.0, lng=0.001, name="B", address="2 Equator Rd"),
        Point(lat=50.0, lng=50.0, name="C", address="3 Far Away Ln"),
    ]


@pytest.fixture
def line_points() -> List[Point]:
    """X, Y, Z on the equator, 16 miles apart, so only neighbours are within 20 miles."""
    step = degrees_for_miles(16)
    return [
        Point(lat=0.0, lng=0.0, name="X"),
        Point(lat=0.0, lng=step, name="Y"),
        Point(lat=0.0, lng=2 * step, name="Z"),
    ]


@pytest.fixture
def wisconsin_points() -> List[Point]:
    """Client locations across Wisconsin, in export order."""
    return [
        Point(43.0747, -89.3841, "Ada Lindqvist", "12 Lake St, Madison, WI"),
        Point(43.0972, -89.5043, "Ben Okafor", "401 Main St, Middleton, WI"),
        Point(43.1836, -89.2137, "Cora Mendez", "88 Oak Ave, Sun Prairie, WI"),
        Point(43.0389, -87.9065, "Dev Raman", "7 River Rd, Milwaukee, WI"),
        Point(43.0495, -88.0076, "Eli Novak", "230 Pine St, Wauwatosa, WI"),
        Point(44.5133, -88.0133, "Fay Burke", "5 Elm Ct, Green Bay, WI"),
        Point(44.4489, -88.0604, "Gus Halvorsen", "19 Bay Dr, De Pere, WI"),
        Point(44.9591, -89.6301, "Hana Sato", "300 Birch Ln, Wausau, WI"),
        Point(44.8113, -91.4985, "Ivan Petrov", "44 Hill St, Eau Claire, WI"),
        Point(46.7208, -92.1041, "Kai Andersen", "61 Shore Dr, Superior, WI"),
    ]


# ==============================================================================
# Client Export Records
# ==============================================================================

@pytest.fixture
def client_rows() -> List[Dict[str, Any]]:
    """Raw export rows, one of them without a geolocation."""
    return [
        {
            "EMPI": 1,
            "FirstName": "Ada",
            "LastName": "Lindqvist",
            "Address": "12 Lake St",
            "City": "Madison",
            "County": "Dane",
            "State": "WI",
            "Zip": 53703,
            "geolocation": {"lat": 43.0747, "lng": -89.3841},
        },
        {
            "EMPI": 2,
            "FirstName": "Jo",
            "LastName": "Whitfield",
            "Address": "2 Mill Rd",
            "City": "La Crosse",
            "County": "La Crosse",
            "State": "WI",
            "Zip": 54601,
        },
        {
            "EMPI": 3,
            "FirstName": "Ben",
            "LastName": "Okafor",
            "Address": "401 Main St",
            "City": "Middleton",
            "County": "Dane",
            "State": "WI",
            "Zip": 53562,
            "geolocation": {"lat": 43.0972, "lng": -89.5043},
        },
    ]


@pytest.fixture
def client_export_file(tmp_path, client_rows) -> Path:
    path = tmp_path / "export.json"
    path.write_text(json.dumps(client_rows), encoding="utf-8")
    return path


# ==============================================================================
# Environment Setup
# ==============================================================================

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep profile and export overrides from leaking into tests."""
    monkeypatch.delenv("MAP_PROFILE", raising=False)
    monkeypatch.delenv("CLIENT_EXPORT_PATH", raising=False)
    yield


# ==============================================================================
# Utilities
# ==============================================================================

def member_names(clusters) -> List[List[str]]:
    """Member names per cluster, preserving order."""
    return [[p.name for p in c.members] for c in clusters]


def assert_approx_equal(a: float, b: float, tolerance: float = 0.01):
    """Assert two floats are approximately equal."""
    assert abs(a - b) < tolerance, f"{a} != {b} (tolerance={tolerance})"
