# routers/managers.py
"""
Manager profile API routes. Every route requires the manager role, and
routes under /managers/{cognitoId} only serve the caller's own profile.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth import AuthenticatedUser, require_roles, require_self
from database import get_session
from schemas.profile import ManagerResponse, ProfileCreate, ProfileUpdate
from schemas.property import PropertyWithLocation
from services import manager_service, property_service

router = APIRouter(prefix="/managers", tags=["managers"])

manager_only = require_roles("manager")


@router.post("", response_model=ManagerResponse, status_code=status.HTTP_201_CREATED)
def create_manager(
     body: ProfileCreate,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(manager_only),
):
     require_self(user, body.cognito_id)
     return manager_service.create_manager(db, body)


@router.get("/{cognito_id}", response_model=ManagerResponse)
def get_manager(
     cognito_id: str,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(manager_only),
):
     require_self(user, cognito_id)
     return manager_service.get_manager(db, cognito_id)


@router.put("/{cognito_id}", response_model=ManagerResponse)
def update_manager(
     cognito_id: str,
     body: ProfileUpdate,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(manager_only),
):
     require_self(user, cognito_id)
     return manager_service.update_manager(db, cognito_id, body)


@router.get("/{cognito_id}/properties", response_model=List[PropertyWithLocation])
def get_manager_properties(
     cognito_id: str,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(manager_only),
):
     require_self(user, cognito_id)
     manager_service.get_manager(db, cognito_id)
     return property_service.list_manager_properties(db, cognito_id)
