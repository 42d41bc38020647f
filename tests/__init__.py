"""Test package for client-cluster-map.

This package contains:
- Unit tests (test_distance.py, test_spatial.py, test_selection.py,
  test_client_feed.py, test_config_loader.py, test_markers.py)
- HTTP tests for the map server (test_actions.py)
- Integration tests (test_integration.py)
- Test configuration (conftest.py)
"""
