# models/property.py
import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Float, ForeignKey, Integer, JSON, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from .associations import tenant_favorites, tenant_residences
from .base import Base

# JSONB on PostgreSQL so list columns support containment (@>) queries
ListColumn = JSON().with_variant(JSONB(), "postgresql")


class PropertyType(str, enum.Enum):
     """Kinds of rentable property."""
     ROOMS = "Rooms"
     TINYHOUSE = "Tinyhouse"
     APARTMENT = "Apartment"
     VILLA = "Villa"
     TOWNHOUSE = "Townhouse"
     COTTAGE = "Cottage"


class Property(Base):
     """
     Property model - a rentable listing owned by a manager.

     The `tenants` relation holds the tenants currently residing in the
     property; it grows when an application is approved.
     """
     __tablename__ = "properties"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(255), nullable=False)
     description = Column(Text, nullable=False, default="")

     # Pricing
     price_per_month = Column(Float, nullable=False)
     security_deposit = Column(Float, nullable=False)
     application_fee = Column(Float, nullable=False, default=0)

     # Listing details
     photo_urls = Column(ListColumn, nullable=False, default=list)
     amenities = Column(ListColumn, nullable=False, default=list)
     highlights = Column(ListColumn, nullable=False, default=list)
     is_pets_allowed = Column(Boolean, nullable=False, default=False)
     is_parking_included = Column(Boolean, nullable=False, default=False)
     beds = Column(Integer, nullable=False)
     baths = Column(Float, nullable=False)
     square_feet = Column(Integer, nullable=False)
     property_type = Column(
          Enum(PropertyType, name="property_type", values_callable=lambda e: [m.value for m in e]),
          nullable=False,
     )
     posted_date = Column(DateTime, server_default=func.now(), nullable=False)
     average_rating = Column(Float, nullable=True, default=0)
     number_of_reviews = Column(Integer, nullable=True, default=0)

     # Foreign keys
     location_id = Column(Integer, ForeignKey("locations.id"), nullable=False)
     manager_cognito_id = Column(String(128), ForeignKey("managers.cognito_id"), nullable=False, index=True)

     # Relationships
     location = relationship("Location", back_populates="properties")
     manager = relationship("Manager", back_populates="managed_properties")
     leases = relationship("Lease", back_populates="property")
     applications = relationship("Application", back_populates="property")
     tenants = relationship(
          "Tenant",
          secondary=tenant_residences,
          back_populates="properties",
     )
     favorited_by = relationship(
          "Tenant",
          secondary=tenant_favorites,
          back_populates="favorites",
     )

     def __repr__(self):
          return f"<Property(id={self.id}, name='{self.name}')>"
