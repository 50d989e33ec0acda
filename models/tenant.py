# models/tenant.py
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship

from .associations import tenant_favorites, tenant_residences
from .base import Base


class Tenant(Base):
     """
     Tenant model - renter profile keyed by the identity provider's subject id.
     """
     __tablename__ = "tenants"

     id = Column(Integer, primary_key=True, autoincrement=True)
     cognito_id = Column(String(128), unique=True, nullable=False, index=True)

     # Contact info
     name = Column(String(200), nullable=False)
     email = Column(String(255), nullable=False)
     phone_number = Column(String(50), nullable=False)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     favorites = relationship(
          "Property",
          secondary=tenant_favorites,
          back_populates="favorited_by",
          order_by="Property.id",
     )
     properties = relationship(
          "Property",
          secondary=tenant_residences,
          back_populates="tenants",
          order_by="Property.id",
     )
     applications = relationship("Application", back_populates="tenant")
     leases = relationship("Lease", back_populates="tenant")

     def __repr__(self):
          return f"<Tenant(id={self.id}, cognito_id='{self.cognito_id}')>"
