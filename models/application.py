# models/application.py
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base


class ApplicationStatus(str, enum.Enum):
     """Well-known application states. Pending moves to Approved or Denied."""
     PENDING = "Pending"
     APPROVED = "Approved"
     DENIED = "Denied"


TERMINAL_STATUSES = frozenset({ApplicationStatus.APPROVED.value, ApplicationStatus.DENIED.value})


class Application(Base):
     """
     Application model - a tenant's request to rent a property.

     `status` is stored as free text: only "Approved" carries side effects,
     any other value is recorded as given.
     """
     __tablename__ = "applications"

     id = Column(Integer, primary_key=True, autoincrement=True)
     application_date = Column(DateTime, nullable=False)
     status = Column(String(50), nullable=False, index=True)

     # Applicant contact details
     name = Column(String(200), nullable=False)
     email = Column(String(255), nullable=False)
     phone_number = Column(String(50), nullable=False)
     message = Column(Text, nullable=True)

     # Foreign keys
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
     tenant_cognito_id = Column(String(128), ForeignKey("tenants.cognito_id"), nullable=False, index=True)
     lease_id = Column(Integer, ForeignKey("leases.id", ondelete="SET NULL"), nullable=True, unique=True)

     # Relationships
     property = relationship("Property", back_populates="applications")
     tenant = relationship("Tenant", back_populates="applications")
     lease = relationship("Lease", back_populates="application")

     def is_terminal(self) -> bool:
          """Approved and Denied applications accept no further transitions."""
          return self.status in TERMINAL_STATUSES

     def __repr__(self):
          return f"<Application(id={self.id}, status='{self.status}', property_id={self.property_id})>"
