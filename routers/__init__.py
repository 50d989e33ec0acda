# routers/__init__.py
from .applications import router as applications_router
from .leases import router as leases_router
from .managers import router as managers_router
from .properties import router as properties_router
from .tenants import router as tenants_router

__all__ = [
     "applications_router",
     "leases_router",
     "managers_router",
     "properties_router",
     "tenants_router",
]
