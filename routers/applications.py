# routers/applications.py
"""
Rental application API routes.

Role-based access:
- Tenant: submit applications, list own applications
- Manager: approve / deny applications, list applications for managed properties
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from auth import AuthenticatedUser, require_roles
from database import get_session
from errors import ForbiddenError
from schemas.application import (
     ApplicationCreate,
     ApplicationListItem,
     ApplicationResponse,
     ApplicationStatusUpdate,
)
from services import application_service

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get(
     "",
     response_model=List[ApplicationListItem],
     summary="List applications for the caller"
)
def list_applications(
     user_id: Optional[str] = Query(None, alias="userId", description="Tenant or manager identity"),
     user_type: Optional[str] = Query(None, alias="userType", description="'tenant' or 'manager'"),
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(require_roles("manager", "tenant")),
):
     """
     Tenants see the applications they submitted; managers see applications
     for the properties they manage.

     **userId** / **userType** default to the caller and, when given, must
     name the caller.
     """
     if (user_id and user_id != user.id) or (user_type and user_type.lower() != user.role):
          raise ForbiddenError("Forbidden: cannot list another user's applications")
     return application_service.list_applications(db, user_id=user.id, user_type=user.role)


@router.post(
     "",
     response_model=ApplicationResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Submit a rental application"
)
def create_application(
     body: ApplicationCreate,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(require_roles("tenant")),
):
     """
     Create an application and its provisional lease in one transaction.

     Returns 404 when the property does not exist; nothing is written.
     """
     if body.tenant_cognito_id != user.id:
          raise ForbiddenError("Forbidden: cannot apply on behalf of another tenant")
     return application_service.create_application(db, body)


@router.put(
     "/{application_id}/status",
     response_model=ApplicationResponse,
     summary="Approve or deny an application"
)
def update_application_status(
     application_id: int,
     body: ApplicationStatusUpdate,
     db: Session = Depends(get_session),
     user: AuthenticatedUser = Depends(require_roles("manager")),
):
     """
     **Approved** creates a one-year lease at the property's current price
     and adds the tenant to the property's residents; any other status is
     recorded without side effects. Approved and Denied are final (409).
     """
     application = application_service.get_application(db, application_id)
     if application.property.manager_cognito_id != user.id:
          raise ForbiddenError("Forbidden: property is managed by someone else")
     return application_service.update_application_status(db, application_id, body.status)
