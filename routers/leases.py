# routers/leases.py
"""
Lease and rent payment API routes (read-only).
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from auth import require_roles
from database import get_session
from schemas.lease import LeaseDetail, PaymentResponse
from services import lease_service

router = APIRouter(
     prefix="/leases",
     tags=["leases"],
     dependencies=[Depends(require_roles("manager", "tenant"))],
)


@router.get("", response_model=List[LeaseDetail], summary="List leases")
def get_leases(db: Session = Depends(get_session)):
     return lease_service.list_leases(db)


@router.get("/{lease_id}/payments", response_model=List[PaymentResponse], summary="List payments of a lease")
def get_lease_payments(lease_id: int, db: Session = Depends(get_session)):
     return lease_service.list_lease_payments(db, lease_id)
