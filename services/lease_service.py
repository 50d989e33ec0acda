# services/lease_service.py
"""
Lease Service - read-only reporting of leases and their rent payments.
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from models import Lease, Payment


def list_leases(db: Session) -> List[Lease]:
     """All leases with tenant and property loaded."""
     return list(db.execute(
          select(Lease)
          .options(joinedload(Lease.tenant), joinedload(Lease.property))
          .order_by(Lease.id)
     ).scalars().all())


def list_lease_payments(db: Session, lease_id: int) -> List[Payment]:
     """Payments recorded against one lease, by due date. Unknown leases yield an empty list."""
     return list(db.execute(
          select(Payment)
          .where(Payment.lease_id == lease_id)
          .order_by(Payment.due_date)
     ).scalars().all())
