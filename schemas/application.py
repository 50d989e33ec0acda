# schemas/application.py
"""
Pydantic schemas for rental applications.
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .common import CamelModel
from .lease import LeaseResponse, LeaseWithNextPayment
from .profile import ManagerResponse, TenantResponse
from .property import PropertyResponse, PropertyWithAddress


class ApplicationCreate(CamelModel):
     """Schema for submitting a new application."""
     application_date: datetime
     status: str = Field(..., min_length=1, max_length=50)
     property_id: int = Field(..., gt=0)
     tenant_cognito_id: str = Field(..., min_length=1, max_length=128)
     name: str = Field(..., min_length=1, max_length=200)
     email: str = Field(..., min_length=3, max_length=255)
     phone_number: str = Field(..., max_length=50)
     message: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "applicationDate": "2025-03-01T10:00:00Z",
                    "status": "Pending",
                    "propertyId": 10,
                    "tenantCognitoId": "a1b2c3d4-5678-90ab-cdef-1234567890ab",
                    "name": "Jane Doe",
                    "email": "jane@example.com",
                    "phoneNumber": "+1 555 0100",
                    "message": "I'd love to move in next month.",
               }
          }
     )


class ApplicationStatusUpdate(CamelModel):
     """Schema for a manager's decision. Only "Approved" provisions a lease."""
     status: str = Field(..., min_length=1, max_length=50)


class ApplicationBase(CamelModel):
     id: int
     application_date: datetime
     status: str
     name: str
     email: str
     phone_number: str
     message: Optional[str] = None
     property_id: int
     tenant_cognito_id: str
     lease_id: Optional[int] = None


class ApplicationResponse(ApplicationBase):
     """Application with property, tenant and lease expanded."""
     property: PropertyResponse
     tenant: TenantResponse
     lease: Optional[LeaseResponse] = None


class ApplicationListItem(ApplicationBase):
     """Application as listed on the tenant and manager dashboards."""
     property: PropertyWithAddress
     tenant: TenantResponse
     manager: Optional[ManagerResponse] = None
     lease: Optional[LeaseWithNextPayment] = None
