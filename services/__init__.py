# services/__init__.py
from . import (
     application_service,
     geocoding,
     lease_service,
     manager_service,
     payment_schedule,
     property_filters,
     property_service,
     tenant_service,
)

__all__ = [
     "application_service",
     "geocoding",
     "lease_service",
     "manager_service",
     "payment_schedule",
     "property_filters",
     "property_service",
     "tenant_service",
]
