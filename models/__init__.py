# models/__init__.py
from .base import Base
from .associations import tenant_favorites, tenant_residences
from .tenant import Tenant
from .manager import Manager
from .location import Location
from .property import Property, PropertyType
from .lease import Lease
from .application import Application, ApplicationStatus
from .payment import Payment, PaymentStatus

__all__ = [
     "Base",
     "tenant_favorites",
     "tenant_residences",
     "Tenant",
     "Manager",
     "Location",
     "Property",
     "PropertyType",
     "Lease",
     "Application",
     "ApplicationStatus",
     "Payment",
     "PaymentStatus",
]
