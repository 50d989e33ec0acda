# models/payment.py
import enum

from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship

from .base import Base


class PaymentStatus(str, enum.Enum):
     """Enumeration for rent payment status."""
     PENDING = "Pending"
     PAID = "Paid"
     PARTIALLY_PAID = "PartiallyPaid"
     OVERDUE = "Overdue"


class Payment(Base):
     """
     Payment model - one monthly rent installment of a lease.
     Read-only from the API's point of view.
     """
     __tablename__ = "payments"

     id = Column(Integer, primary_key=True, autoincrement=True)
     amount_due = Column(Float, nullable=False)
     amount_paid = Column(Float, nullable=False, default=0)
     due_date = Column(DateTime, nullable=False, index=True)
     payment_date = Column(DateTime, nullable=True)
     payment_status = Column(
          Enum(PaymentStatus, name="payment_status", values_callable=lambda e: [m.value for m in e]),
          default=PaymentStatus.PENDING,
          nullable=False,
     )
     lease_id = Column(Integer, ForeignKey("leases.id", ondelete="CASCADE"), nullable=False, index=True)

     lease = relationship("Lease", back_populates="payments")

     def __repr__(self):
          return f"<Payment(id={self.id}, lease_id={self.lease_id}, status='{self.payment_status.value}')>"
