# services/property_filters.py
"""
Property search filters.

Query-string filters are parsed into a list of typed predicates; each
predicate renders itself as a SQLAlchemy clause, so values always travel
as bound parameters.

Supported query parameters:
- favoriteIds: comma-separated property ids
- priceMin / priceMax: monthly price range
- beds / baths: minimum counts ("any" = no filter)
- propertyType: exact type ("any" = no filter)
- squareFeetMin / squareFeetMax: size range
- amenities: comma-separated, property must offer all of them
- availableFrom: ISO date; property has a lease started on or before it
- latitude + longitude: properties within SEARCH_RADIUS_KM of the point
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Sequence

from dateutil import parser as date_parser
from sqlalchemy import String, and_, cast, exists, func, select, type_coerce
from sqlalchemy.dialects.postgresql import JSONB

from models import Lease, Location, Property, PropertyType
from models.types import SRID

logger = logging.getLogger(__name__)

SEARCH_RADIUS_KM = 1000
KM_PER_DEGREE = 111


@dataclass(frozen=True)
class IdIn:
     ids: Sequence[int]

     def clause(self, dialect: str):
          return Property.id.in_(list(self.ids))


@dataclass(frozen=True)
class Range:
     column: Any
     minimum: Optional[float] = None
     maximum: Optional[float] = None

     def clause(self, dialect: str):
          bounds = []
          if self.minimum is not None:
               bounds.append(self.column >= self.minimum)
          if self.maximum is not None:
               bounds.append(self.column <= self.maximum)
          return and_(*bounds)


@dataclass(frozen=True)
class Equals:
     column: Any
     value: Any

     def clause(self, dialect: str):
          return self.column == self.value


@dataclass(frozen=True)
class ContainsAll:
     """List column holds every one of `values`."""
     column: Any
     values: Sequence[str]

     def clause(self, dialect: str):
          if dialect == "postgresql":
               return type_coerce(self.column, JSONB).contains(list(self.values))
          # Portable fallback: match the JSON-encoded string elements
          text = cast(self.column, String)
          return and_(*(text.like(f'%"{value}"%') for value in self.values))


@dataclass(frozen=True)
class LeaseStartedBy:
     """Property has at least one lease starting on or before `date`."""
     date: datetime

     def clause(self, dialect: str):
          return exists(
               select(Lease.id).where(Lease.property_id == Property.id, Lease.start_date <= self.date)
          )


@dataclass(frozen=True)
class WithinRadius:
     """Location lies within `radius_km` of the point (PostGIS only)."""
     longitude: float
     latitude: float
     radius_km: float = SEARCH_RADIUS_KM

     @property
     def degrees(self) -> float:
          return self.radius_km / KM_PER_DEGREE

     def clause(self, dialect: str):
          return func.ST_DWithin(
               Location.coordinates,
               func.ST_SetSRID(func.ST_MakePoint(self.longitude, self.latitude), SRID),
               self.degrees,
          )


def _is_set(value: Optional[str]) -> bool:
     return value is not None and value != "" and value != "any"


def _number(value: Optional[str]) -> Optional[float]:
     if not _is_set(value):
          return None
     try:
          return float(value)
     except ValueError:
          logger.debug("Ignoring non-numeric filter value %r", value)
          return None


def _csv(value: Optional[str]) -> List[str]:
     if not _is_set(value):
          return []
     return [item.strip() for item in value.split(",") if item.strip()]


def build_predicates(params: dict) -> list:
     """
     Turn raw query parameters into predicates. Unknown, empty, "any" and
     unparsable values are ignored.
     """
     predicates = []

     favorite_ids = []
     for item in _csv(params.get("favoriteIds")):
          try:
               favorite_ids.append(int(item))
          except ValueError:
               logger.debug("Ignoring non-numeric favorite id %r", item)
     if favorite_ids:
          predicates.append(IdIn(tuple(favorite_ids)))

     price_min, price_max = _number(params.get("priceMin")), _number(params.get("priceMax"))
     if price_min is not None or price_max is not None:
          predicates.append(Range(Property.price_per_month, price_min, price_max))

     beds = _number(params.get("beds"))
     if beds is not None:
          predicates.append(Range(Property.beds, minimum=beds))

     baths = _number(params.get("baths"))
     if baths is not None:
          predicates.append(Range(Property.baths, minimum=baths))

     sqft_min, sqft_max = _number(params.get("squareFeetMin")), _number(params.get("squareFeetMax"))
     if sqft_min is not None or sqft_max is not None:
          predicates.append(Range(Property.square_feet, sqft_min, sqft_max))

     property_type = params.get("propertyType")
     if _is_set(property_type):
          try:
               predicates.append(Equals(Property.property_type, PropertyType(property_type)))
          except ValueError:
               logger.debug("Ignoring unknown property type %r", property_type)

     amenities = _csv(params.get("amenities"))
     if amenities:
          predicates.append(ContainsAll(Property.amenities, tuple(amenities)))

     available_from = params.get("availableFrom")
     if _is_set(available_from):
          try:
               predicates.append(LeaseStartedBy(date_parser.isoparse(available_from).replace(tzinfo=None)))
          except ValueError:
               logger.debug("Ignoring unparsable availableFrom %r", available_from)

     latitude, longitude = _number(params.get("latitude")), _number(params.get("longitude"))
     if latitude is not None and longitude is not None:
          predicates.append(WithinRadius(longitude=longitude, latitude=latitude))

     return predicates
