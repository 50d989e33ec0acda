# schemas/lease.py
"""
Pydantic schemas for leases and rent payments.
"""
from datetime import datetime
from typing import Optional

from models.payment import PaymentStatus
from .common import CamelModel
from .profile import TenantResponse
from .property import PropertyResponse


class LeaseResponse(CamelModel):
     id: int
     start_date: datetime
     end_date: datetime
     rent: float
     deposit: float
     property_id: int
     tenant_cognito_id: str


class LeaseWithNextPayment(LeaseResponse):
     next_payment_date: datetime


class LeaseDetail(LeaseResponse):
     tenant: Optional[TenantResponse] = None
     property: Optional[PropertyResponse] = None


class PaymentResponse(CamelModel):
     id: int
     amount_due: float
     amount_paid: float
     due_date: datetime
     payment_date: Optional[datetime] = None
     payment_status: PaymentStatus
     lease_id: int
