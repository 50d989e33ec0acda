# models/lease.py
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base


class Lease(Base):
     """
     Lease model - fixed one-year rental agreement between a tenant and a property.

     Rent and deposit are copied from the property when the lease is created,
     so later price changes do not alter existing leases.
     """
     __tablename__ = "leases"

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Lease period
     start_date = Column(DateTime, nullable=False)
     end_date = Column(DateTime, nullable=False)

     # Pricing
     rent = Column(Float, nullable=False)
     deposit = Column(Float, nullable=False)

     # Foreign keys
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
     tenant_cognito_id = Column(String(128), ForeignKey("tenants.cognito_id"), nullable=False, index=True)

     # Relationships
     property = relationship("Property", back_populates="leases")
     tenant = relationship("Tenant", back_populates="leases")
     application = relationship("Application", back_populates="lease", uselist=False)
     payments = relationship("Payment", back_populates="lease", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Lease(id={self.id}, tenant_cognito_id={self.tenant_cognito_id}, property_id={self.property_id})>"
