# routers/tenants.py
"""
Tenant profile API routes. Every route requires the tenant role, and
routes under /tenants/{cognitoId} only serve the caller's own profile.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth import AuthenticatedUser, require_roles, require_self
from database import get_session
from schemas.profile import ProfileCreate, ProfileUpdate
from schemas.property import PropertyWithLocation
from schemas.tenant import TenantWithFavorites
from services import tenant_service

router = APIRouter(prefix="/tenants", tags=["tenants"])

tenant_only = require_roles("tenant")


@router.post("", response_model=TenantWithFavorites, status_code=status.HTTP_201_CREATED)
def create_tenant(
     body: ProfileCreate,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(tenant_only),
):
     require_self(user, body.cognito_id)
     return tenant_service.create_tenant(db, body)


@router.get("/{cognito_id}", response_model=TenantWithFavorites)
def get_tenant(
     cognito_id: str,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(tenant_only),
):
     require_self(user, cognito_id)
     return tenant_service.get_tenant(db, cognito_id)


@router.put("/{cognito_id}", response_model=TenantWithFavorites)
def update_tenant(
     cognito_id: str,
     body: ProfileUpdate,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(tenant_only),
):
     require_self(user, cognito_id)
     return tenant_service.update_tenant(db, cognito_id, body)


@router.get("/{cognito_id}/current-residences", response_model=List[PropertyWithLocation])
def get_current_residences(
     cognito_id: str,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(tenant_only),
):
     require_self(user, cognito_id)
     return tenant_service.list_current_residences(db, cognito_id)


@router.post("/{cognito_id}/favorites/{property_id}", response_model=TenantWithFavorites)
def add_favorite_property(
     cognito_id: str,
     property_id: int,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(tenant_only),
):
     """409 when the property is already a favorite."""
     require_self(user, cognito_id)
     return tenant_service.add_favorite_property(db, cognito_id, property_id)


@router.delete("/{cognito_id}/favorites/{property_id}", response_model=TenantWithFavorites)
def remove_favorite_property(
     cognito_id: str,
     property_id: int,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(tenant_only),
):
     require_self(user, cognito_id)
     return tenant_service.remove_favorite_property(db, cognito_id, property_id)
