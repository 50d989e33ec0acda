"""Test the location point column type."""
from shapely.geometry import Point
from sqlalchemy.dialects import postgresql, sqlite

from models.types import PointType, point_to_coordinates


def test_empty_stored_value_reads_as_missing():
    assert PointType().process_result_value("", sqlite.dialect()) is None
    assert point_to_coordinates(None) == {"longitude": 0.0, "latitude": 0.0}


def test_wkt_text_round_trip_on_sqlite():
    column_type = PointType()
    stored = column_type.process_bind_param(Point(-122.4, 37.7), sqlite.dialect())
    assert stored == "POINT (-122.4 37.7)"
    point = column_type.process_result_value(stored, sqlite.dialect())
    assert (point.x, point.y) == (-122.4, 37.7)


def test_hex_ewkb_from_postgis():
    hex_wkb = Point(-73.9857, 40.7484).wkb_hex
    point = PointType().process_result_value(hex_wkb, postgresql.dialect())
    assert (point.x, point.y) == (-73.9857, 40.7484)


def test_bind_accepts_coordinate_pairs_with_srid_on_postgres():
    stored = PointType().process_bind_param((1.5, 2.5), postgresql.dialect())
    assert stored == "SRID=4326;POINT (1.5 2.5)"
