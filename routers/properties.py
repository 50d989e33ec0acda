# routers/properties.py
"""
Property listing API routes.

Search and detail lookups are public; creating a listing requires the
manager role and accepts a multipart form with any number of photos.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from auth import AuthenticatedUser, require_roles
from database import get_session
from models.property import PropertyType
from schemas.lease import LeaseDetail
from schemas.property import PropertyCreate, PropertyDetail, PropertyWithLocation
from services import property_service

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get(
     "",
     response_model=List[PropertyWithLocation],
     summary="Search properties"
)
def search_properties(
     favorite_ids: Optional[str] = Query(None, alias="favoriteIds", description="Comma-separated property ids"),
     price_min: Optional[str] = Query(None, alias="priceMin"),
     price_max: Optional[str] = Query(None, alias="priceMax"),
     beds: Optional[str] = Query(None, description="Minimum bedrooms or 'any'"),
     baths: Optional[str] = Query(None, description="Minimum bathrooms or 'any'"),
     property_type: Optional[str] = Query(None, alias="propertyType"),
     square_feet_min: Optional[str] = Query(None, alias="squareFeetMin"),
     square_feet_max: Optional[str] = Query(None, alias="squareFeetMax"),
     amenities: Optional[str] = Query(None, description="Comma-separated, all required"),
     available_from: Optional[str] = Query(None, alias="availableFrom"),
     latitude: Optional[str] = Query(None),
     longitude: Optional[str] = Query(None),
     db: Session = Depends(get_session),
):
     """
     Filter listings by price, size, rooms, type, amenities, availability,
     favorites, and distance from a point. Empty or "any" values are ignored.
     """
     params = {
          "favoriteIds": favorite_ids,
          "priceMin": price_min,
          "priceMax": price_max,
          "beds": beds,
          "baths": baths,
          "propertyType": property_type,
          "squareFeetMin": square_feet_min,
          "squareFeetMax": square_feet_max,
          "amenities": amenities,
          "availableFrom": available_from,
          "latitude": latitude,
          "longitude": longitude,
     }
     return property_service.search_properties(db, params)


@router.get(
     "/{property_id}",
     response_model=PropertyDetail,
     summary="Get a property"
)
def get_property(property_id: int, db: Session = Depends(get_session)):
     return property_service.get_property(db, property_id)


@router.get(
     "/{property_id}/leases",
     response_model=List[LeaseDetail],
     summary="List leases of a property",
     dependencies=[Depends(require_roles("manager", "tenant"))],
)
def get_property_leases(property_id: int, db: Session = Depends(get_session)):
     return property_service.list_property_leases(db, property_id)


@router.post(
     "",
     response_model=PropertyDetail,
     status_code=status.HTTP_201_CREATED,
     summary="Create a property listing"
)
def create_property(
     name: str = Form(...),
     description: str = Form(""),
     pricePerMonth: float = Form(...),
     securityDeposit: float = Form(...),
     applicationFee: float = Form(0),
     amenities: str = Form(""),
     highlights: str = Form(""),
     isPetsAllowed: str = Form("false"),
     isParkingIncluded: str = Form("false"),
     beds: int = Form(...),
     baths: float = Form(...),
     squareFeet: int = Form(...),
     propertyType: PropertyType = Form(...),
     address: str = Form(...),
     city: str = Form(...),
     state: str = Form(...),
     country: str = Form(...),
     postalCode: str = Form(...),
     photos: List[UploadFile] = File([]),
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(require_roles("manager")),
):
     """
     Upload photos, geocode the address, and store the listing for the
     calling manager.
     """
     data = PropertyCreate(
          name=name,
          description=description,
          price_per_month=pricePerMonth,
          security_deposit=securityDeposit,
          application_fee=applicationFee,
          amenities=amenities,
          highlights=highlights,
          is_pets_allowed=isPetsAllowed,
          is_parking_included=isParkingIncluded,
          beds=beds,
          baths=baths,
          square_feet=squareFeet,
          property_type=propertyType,
          address=address,
          city=city,
          state=state,
          country=country,
          postal_code=postalCode,
     )
     return property_service.create_property(db, data, photos, manager_cognito_id=user.id)
