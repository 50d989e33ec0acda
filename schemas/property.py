# schemas/property.py
"""
Pydantic schemas for property listings and their locations.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from models.property import PropertyType
from models.types import point_to_coordinates
from .common import CamelModel, Coordinates
from .profile import ManagerResponse


class LocationResponse(CamelModel):
     id: int
     address: str
     city: str
     state: str
     country: str
     postal_code: str
     coordinates: Coordinates

     @field_validator("coordinates", mode="before")
     @classmethod
     def _point_to_coordinates(cls, value):
          if value is None or hasattr(value, "x"):
               return point_to_coordinates(value)
          if isinstance(value, (tuple, list)):
               return {"longitude": value[0], "latitude": value[1]}
          return value


class PropertyResponse(CamelModel):
     id: int
     name: str
     description: str
     price_per_month: float
     security_deposit: float
     application_fee: float
     photo_urls: List[str] = []
     amenities: List[str] = []
     highlights: List[str] = []
     is_pets_allowed: bool
     is_parking_included: bool
     beds: int
     baths: float
     square_feet: int
     property_type: PropertyType
     posted_date: Optional[datetime] = None
     average_rating: Optional[float] = None
     number_of_reviews: Optional[int] = None
     location_id: int
     manager_cognito_id: str


class PropertyWithLocation(PropertyResponse):
     location: LocationResponse


class PropertyDetail(PropertyWithLocation):
     manager: Optional[ManagerResponse] = None


class PropertyWithAddress(PropertyResponse):
     """Property flattened with its street address, as shown on application cards."""
     address: str


def _split_csv(value):
     if value is None:
          return []
     if isinstance(value, str):
          return [item.strip() for item in value.split(",") if item.strip()]
     return list(value)


class PropertyCreate(CamelModel):
     """
     Listing fields as submitted by the manager's multipart form.

     Multipart forms carry every value as text: list fields arrive
     comma-separated and booleans as "true"/"false".
     """
     name: str = Field(..., min_length=1, max_length=255)
     description: str = ""
     price_per_month: float = Field(..., ge=0)
     security_deposit: float = Field(..., ge=0)
     application_fee: float = Field(0, ge=0)
     amenities: List[str] = []
     highlights: List[str] = []
     is_pets_allowed: bool = False
     is_parking_included: bool = False
     beds: int = Field(..., ge=0)
     baths: float = Field(..., ge=0)
     square_feet: int = Field(..., ge=0)
     property_type: PropertyType

     # Address, geocoded into the property's location
     address: str = Field(..., min_length=1)
     city: str
     state: str
     country: str
     postal_code: str

     @field_validator("amenities", "highlights", mode="before")
     @classmethod
     def _csv_list(cls, value):
          return _split_csv(value)

     @field_validator("is_pets_allowed", "is_parking_included", mode="before")
     @classmethod
     def _form_bool(cls, value):
          if isinstance(value, str):
               return value.strip().lower() == "true"
          return bool(value)
