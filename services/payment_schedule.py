# services/payment_schedule.py
"""
Rent schedule arithmetic.

Leases run for a fixed calendar year and rent falls due on the same day
of every month as the lease start. Months are counted from the start
date each time, so a lease starting on the 31st is due on the last day
of shorter months and back on the 31st afterwards.
"""
from datetime import datetime, timezone
from typing import Optional

from dateutil.relativedelta import relativedelta

LEASE_TERM = relativedelta(years=1)


def utcnow() -> datetime:
     """Current UTC time as a naive datetime, matching the stored columns."""
     return datetime.now(timezone.utc).replace(tzinfo=None)


def lease_end_date(start_date: datetime) -> datetime:
     """End of a lease starting on start_date (29 Feb rolls to 28 Feb)."""
     return start_date + LEASE_TERM


def next_payment_date(start_date: datetime, now: Optional[datetime] = None) -> datetime:
     """
     First monthly due date strictly after `now`.

     Args:
          start_date: Lease start date; the first candidate due date
          now: Reference time (default: current UTC time)

     Returns:
          start_date + n months for the smallest n >= 0 that lands after now
     """
     if now is None:
          now = utcnow()
     months = 0
     candidate = start_date
     while candidate <= now:
          months += 1
          candidate = start_date + relativedelta(months=months)
     return candidate
