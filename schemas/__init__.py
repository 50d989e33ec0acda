# schemas/__init__.py
from .application import (
     ApplicationCreate,
     ApplicationStatusUpdate,
     ApplicationResponse,
     ApplicationListItem,
)
from .lease import LeaseResponse, LeaseDetail, LeaseWithNextPayment, PaymentResponse
from .profile import ProfileCreate, ProfileUpdate, TenantResponse, ManagerResponse
from .property import (
     LocationResponse,
     PropertyCreate,
     PropertyDetail,
     PropertyResponse,
     PropertyWithAddress,
     PropertyWithLocation,
)
from .tenant import TenantWithFavorites

__all__ = [
     "ApplicationCreate",
     "ApplicationStatusUpdate",
     "ApplicationResponse",
     "ApplicationListItem",
     "LeaseResponse",
     "LeaseDetail",
     "LeaseWithNextPayment",
     "PaymentResponse",
     "ProfileCreate",
     "ProfileUpdate",
     "TenantResponse",
     "ManagerResponse",
     "LocationResponse",
     "PropertyCreate",
     "PropertyDetail",
     "PropertyResponse",
     "PropertyWithAddress",
     "PropertyWithLocation",
     "TenantWithFavorites",
]
