# services/tenant_service.py
"""
Tenant Service - tenant profiles, favorites, and current residences.
"""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from database import unit_of_work
from errors import ConflictError, NotFoundError
from models import Property, Tenant
from schemas.profile import ProfileCreate, ProfileUpdate

logger = logging.getLogger(__name__)


def get_tenant(db: Session, cognito_id: str) -> Tenant:
     """
     Fetch a tenant with their favorite properties.

     Raises:
          NotFoundError: If no tenant has this identity
     """
     tenant = db.execute(
          select(Tenant)
          .options(selectinload(Tenant.favorites))
          .where(Tenant.cognito_id == cognito_id)
          .execution_options(populate_existing=True)
     ).scalar_one_or_none()
     if tenant is None:
          raise NotFoundError("Tenant not found")
     return tenant


def create_tenant(db: Session, data: ProfileCreate) -> Tenant:
     """
     Register a tenant profile for a newly signed-up identity.

     Raises:
          ConflictError: If a tenant with this cognito_id already exists
     """
     tenant = Tenant(**data.model_dump())
     try:
          with unit_of_work(db):
               db.add(tenant)
               db.flush()
     except IntegrityError:
          raise ConflictError("Tenant already exists")
     logger.info("Tenant %s created", tenant.cognito_id)
     return get_tenant(db, tenant.cognito_id)


def update_tenant(db: Session, cognito_id: str, data: ProfileUpdate) -> Tenant:
     tenant = get_tenant(db, cognito_id)
     with unit_of_work(db):
          for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
               setattr(tenant, field, value)
     return get_tenant(db, cognito_id)


def list_current_residences(db: Session, cognito_id: str) -> List[Property]:
     """Properties the tenant currently lives in, with locations."""
     get_tenant(db, cognito_id)
     return list(db.execute(
          select(Property)
          .options(joinedload(Property.location))
          .where(Property.tenants.any(Tenant.cognito_id == cognito_id))
          .order_by(Property.id)
     ).unique().scalars().all())


def add_favorite_property(db: Session, cognito_id: str, property_id: int) -> Tenant:
     """
     Bookmark a property for a tenant.

     Raises:
          NotFoundError: If the tenant or property does not exist
          ConflictError: If the property is already a favorite
     """
     tenant = get_tenant(db, cognito_id)
     if any(favorite.id == property_id for favorite in tenant.favorites):
          raise ConflictError("Property already added as favorite")

     property_ = db.get(Property, property_id)
     if property_ is None:
          raise NotFoundError("Property not found")

     try:
          with unit_of_work(db):
               tenant.favorites.append(property_)
               db.flush()
     except IntegrityError:
          # A concurrent request inserted the same link first
          raise ConflictError("Property already added as favorite")
     return get_tenant(db, cognito_id)


def remove_favorite_property(db: Session, cognito_id: str, property_id: int) -> Tenant:
     """Drop a property from a tenant's favorites; absent favorites are ignored."""
     tenant = get_tenant(db, cognito_id)
     with unit_of_work(db):
          tenant.favorites = [favorite for favorite in tenant.favorites if favorite.id != property_id]
     return get_tenant(db, cognito_id)
