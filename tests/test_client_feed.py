"""Tests for the client export feed (clustermap/tools/client_feed.py)."""

import json
import logging
import math

import pytest
from pydantic import ValidationError

from clustermap.spatial import Point
from clustermap.tools import (
    ClientRecord,
    load_client_export,
    points_from_records,
    record_to_point,
)


class TestRecordToPoint:
    """Test conversion of a single export record."""

    def test_name_and_address_formatting(self, client_rows):
        record = ClientRecord.model_validate(client_rows[0])

        assert record_to_point(record) == Point(
            lat=43.0747,
            lng=-89.3841,
            name="Ada Lindqvist",
            address="12 Lake St, Madison, WI",
        )

    def test_missing_geolocation(self, client_rows):
        record = ClientRecord.model_validate(client_rows[1])
        assert record_to_point(record) is None

    def test_partial_geolocation(self):
        record = ClientRecord.model_validate({"FirstName": "No", "LastName": "Lng", "geolocation": {"lat": 44.0}})
        assert record_to_point(record) is None

    def test_non_finite_geolocation(self):
        record = ClientRecord(first_name="Bad", last_name="Fix", geolocation={"lat": math.nan, "lng": -89.0})
        assert record_to_point(record) is None

    def test_populate_by_field_name(self):
        record = ClientRecord(first_name="Ada", last_name="L", address="1 A St", city="Madison", state="WI")
        assert record.display_name == "Ada L"
        assert record.display_address == "1 A St, Madison, WI"

    def test_null_name_and_address_parts(self):
        record = ClientRecord.model_validate(
            {
                "FirstName": "Ada",
                "LastName": None,
                "Address": None,
                "City": "Madison",
                "State": "WI",
                "geolocation": {"lat": 43.0747, "lng": -89.3841},
            }
        )

        assert record_to_point(record) == Point(43.0747, -89.3841, "Ada", "Madison, WI")


class TestPointsFromRecords:
    """Test the input feed over many rows."""

    def test_skips_ungeolocated_and_keeps_order(self, client_rows):
        points = points_from_records(client_rows)
        assert [p.name for p in points] == ["Ada Lindqvist", "Ben Okafor"]

    def test_logs_skipped_records(self, client_rows, caplog):
        with caplog.at_level(logging.WARNING, logger="clustermap.tools.client_feed"):
            points_from_records(client_rows)

        assert "Skipped 1 client records without a usable geolocation" in caplog.text

    def test_accepts_models(self, client_rows):
        records = [ClientRecord.model_validate(r) for r in client_rows]
        assert len(points_from_records(records)) == 2

    def test_null_last_name_keeps_the_row(self, client_rows):
        client_rows[0]["LastName"] = None
        points = points_from_records(client_rows)

        assert [p.name for p in points] == ["Ada", "Ben Okafor"]

    def test_empty(self):
        assert points_from_records([]) == []

    def test_invalid_row_raises(self):
        with pytest.raises(ValidationError):
            points_from_records([{"FirstName": "X", "geolocation": {"lat": "north", "lng": 1.0}}])


class TestLoadClientExport:
    """Test reading export files."""

    def test_load_file(self, client_export_file):
        points = load_client_export(client_export_file)
        assert [p.name for p in points] == ["Ada Lindqvist", "Ben Okafor"]

    def test_load_bundled_sample(self, sample_export_path, wisconsin_points):
        points = load_client_export(sample_export_path)
        assert points == wisconsin_points

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_client_export(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_client_export(path)
