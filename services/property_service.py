# services/property_service.py
"""
Property Service - listing search, detail lookup, and listing creation.
"""
import logging
from typing import List, Optional

from shapely.geometry import Point
from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

import azure_blob
from database import unit_of_work
from errors import NotFoundError
from models import Lease, Location, Manager, Property
from schemas.property import PropertyCreate
from services import geocoding
from services.property_filters import build_predicates

logger = logging.getLogger(__name__)


def search_properties(db: Session, params: Optional[dict] = None) -> List[Property]:
     """
     Return properties (with locations) matching every filter in `params`.

     See services.property_filters for the accepted parameters.
     """
     dialect = db.get_bind().dialect.name
     predicates = build_predicates(params or {})

     query = (
          select(Property)
          .join(Property.location)
          .options(joinedload(Property.location))
          .order_by(Property.id)
     )
     for predicate in predicates:
          query = query.where(predicate.clause(dialect))

     return list(db.execute(query).unique().scalars().all())


def get_property(db: Session, property_id: int) -> Property:
     """
     Fetch one property with its location and manager.

     Raises:
          NotFoundError: If no property has this id
     """
     property_ = db.execute(
          select(Property)
          .options(joinedload(Property.location), joinedload(Property.manager))
          .where(Property.id == property_id)
     ).unique().scalar_one_or_none()
     if property_ is None:
          raise NotFoundError("Property not found")
     return property_


def list_property_leases(db: Session, property_id: int) -> List[Lease]:
     """Leases signed on one property, newest first."""
     get_property(db, property_id)
     return list(db.execute(
          select(Lease)
          .options(joinedload(Lease.tenant))
          .where(Lease.property_id == property_id)
          .order_by(Lease.start_date.desc())
     ).scalars().all())


def list_manager_properties(db: Session, manager_cognito_id: str) -> List[Property]:
     return list(db.execute(
          select(Property)
          .options(joinedload(Property.location))
          .where(Property.manager_cognito_id == manager_cognito_id)
          .order_by(Property.id)
     ).unique().scalars().all())


def create_property(db: Session, data: PropertyCreate, photos: list, manager_cognito_id: str) -> Property:
     """
     Create a listing: upload photos, geocode the address, store location and property.

     Args:
          db: SQLAlchemy database session
          data: Parsed listing form
          photos: Uploaded photo files (may be empty)
          manager_cognito_id: Owner of the new listing

     Returns:
          The created Property with location and manager loaded

     Raises:
          NotFoundError: If the manager profile does not exist
     """
     manager = db.execute(
          select(Manager).where(Manager.cognito_id == manager_cognito_id)
     ).scalar_one_or_none()
     if manager is None:
          raise NotFoundError("Manager not found")

     photo_urls = []
     try:
          for photo in photos:
               photo_urls.append(azure_blob.upload_to_blob(photo))
          longitude, latitude = geocoding.geocode_address(
               data.address, data.city, data.country, data.postal_code
          )

          with unit_of_work(db):
               location = Location(
                    address=data.address,
                    city=data.city,
                    state=data.state,
                    country=data.country,
                    postal_code=data.postal_code,
                    coordinates=Point(longitude, latitude),
               )
               db.add(location)
               db.flush()

               property_ = Property(
                    **data.model_dump(exclude={"address", "city", "state", "country", "postal_code"}),
                    photo_urls=photo_urls,
                    location_id=location.id,
                    manager_cognito_id=manager.cognito_id,
               )
               db.add(property_)
               db.flush()
               property_id = property_.id
     except Exception:
          for url in photo_urls:
               azure_blob.delete_from_blob(url)
          raise

     logger.info("Property %s created by manager %s", property_id, manager.cognito_id)
     return get_property(db, property_id)
