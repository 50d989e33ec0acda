# models/types.py
"""
Spatial column type for location coordinates.

On PostgreSQL the column is a PostGIS geometry(POINT, 4326) managed by
geoalchemy2. Other dialects (SQLite in the test suite) keep the point as
WKT text. Either way the Python value is a shapely Point whose x is the
longitude and y the latitude.
"""
from geoalchemy2 import Geometry
from geoalchemy2.elements import WKBElement, WKTElement
from geoalchemy2.shape import to_shape
from shapely import wkt
from shapely.geometry import Point
from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator

SRID = 4326


class PointType(TypeDecorator):
     impl = Text
     cache_ok = True

     def load_dialect_impl(self, dialect):
          if dialect.name == "postgresql":
               return dialect.type_descriptor(Geometry(geometry_type="POINT", srid=SRID))
          return dialect.type_descriptor(Text())

     def process_bind_param(self, value, dialect):
          if value is None:
               return None
          if not isinstance(value, Point):
               longitude, latitude = value
               value = Point(float(longitude), float(latitude))
          if dialect.name == "postgresql":
               return f"SRID={SRID};{value.wkt}"
          return value.wkt

     def process_result_value(self, value, dialect):
          if value is None:
               return None
          if isinstance(value, (WKBElement, WKTElement)):
               return to_shape(value)
          if len(value) == 0:
               return None
          # Raw hex EWKB straight from PostGIS
          if isinstance(value, (bytes, memoryview)) or value[0] in "0123456789abcdefABCDEF":
               return to_shape(WKBElement(value))
          return wkt.loads(value)


def point_to_coordinates(point) -> dict:
     """{longitude, latitude} for a stored point; (0, 0) when missing."""
     if point is None:
          return {"longitude": 0.0, "latitude": 0.0}
     return {"longitude": point.x, "latitude": point.y}
