# schemas/profile.py
"""
Pydantic schemas for tenant and manager profiles.
"""
from typing import Optional

from pydantic import ConfigDict, Field

from .common import CamelModel


class ProfileCreate(CamelModel):
     """Body for creating a tenant or manager profile after sign-up."""
     cognito_id: str = Field(..., min_length=1, max_length=128)
     name: str = Field(..., min_length=1, max_length=200)
     email: str = Field(..., min_length=3, max_length=255)
     phone_number: str = Field("", max_length=50)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "cognitoId": "a1b2c3d4-5678-90ab-cdef-1234567890ab",
                    "name": "Jane Doe",
                    "email": "jane@example.com",
                    "phoneNumber": "+1 555 0100",
               }
          }
     )


class ProfileUpdate(CamelModel):
     """Body for editing a profile; omitted fields are left unchanged."""
     name: Optional[str] = Field(None, min_length=1, max_length=200)
     email: Optional[str] = Field(None, min_length=3, max_length=255)
     phone_number: Optional[str] = Field(None, max_length=50)


class TenantResponse(CamelModel):
     id: int
     cognito_id: str
     name: str
     email: str
     phone_number: str


class ManagerResponse(CamelModel):
     id: int
     cognito_id: str
     name: str
     email: str
     phone_number: str
