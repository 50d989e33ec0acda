# services/application_service.py
"""
Application Service - rental applications and the approval workflow.

An application moves from Pending to Approved or Denied; both outcomes
are final. Approving provisions a one-year lease at the property's
current price and records the tenant as a resident, all in a single
transaction.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session, joinedload

from database import unit_of_work
from errors import ConflictError, NotFoundError
from models import Application, Lease, Payment, Property, Tenant
from models.application import ApplicationStatus
from schemas.application import ApplicationCreate, ApplicationListItem
from services.payment_schedule import lease_end_date, next_payment_date, utcnow

logger = logging.getLogger(__name__)


def _naive_utc(value: datetime) -> datetime:
     if value.tzinfo is None:
          return value
     return value.astimezone(timezone.utc).replace(tzinfo=None)


def _new_lease(property_: Property, tenant_cognito_id: str, now: datetime) -> Lease:
     """Lease starting now, priced from the property as it is today."""
     return Lease(
          start_date=now,
          end_date=lease_end_date(now),
          rent=property_.price_per_month,
          deposit=property_.security_deposit,
          property_id=property_.id,
          tenant_cognito_id=tenant_cognito_id,
     )


def get_application(db: Session, application_id: int) -> Application:
     """Fetch one application with property, tenant and lease loaded."""
     application = db.execute(
          select(Application)
          .options(
               joinedload(Application.property),
               joinedload(Application.tenant),
               joinedload(Application.lease),
          )
          .where(Application.id == application_id)
          .execution_options(populate_existing=True)
     ).unique().scalar_one_or_none()
     if application is None:
          raise NotFoundError("Application not found.")
     return application


def list_applications(
     db: Session,
     user_id: Optional[str] = None,
     user_type: Optional[str] = None,
     now: Optional[datetime] = None,
) -> List[ApplicationListItem]:
     """
     List applications, optionally scoped to one tenant or one manager.

     - user_type "tenant": applications submitted by user_id
     - user_type "manager": applications for properties user_id manages
     - neither given: every application

     Each item carries the property's street address, its manager, and the
     tenant's most recent lease on that property with its next due date.
     """
     query = select(Application).options(
          joinedload(Application.property).joinedload(Property.location),
          joinedload(Application.property).joinedload(Property.manager),
          joinedload(Application.tenant),
     )
     if user_id and user_type:
          if user_type == "tenant":
               query = query.where(Application.tenant_cognito_id == str(user_id))
          elif user_type == "manager":
               query = query.join(Application.property).where(Property.manager_cognito_id == str(user_id))

     applications = db.execute(query.order_by(Application.id)).unique().scalars().all()
     now = now or utcnow()
     return [_build_list_item(db, application, now) for application in applications]


def _latest_lease(db: Session, tenant_cognito_id: str, property_id: int) -> Optional[Lease]:
     return db.execute(
          select(Lease)
          .where(Lease.tenant_cognito_id == tenant_cognito_id, Lease.property_id == property_id)
          .order_by(Lease.start_date.desc(), Lease.id.desc())
          .limit(1)
     ).scalar_one_or_none()


def _build_list_item(db: Session, application: Application, now: datetime) -> ApplicationListItem:
     property_ = application.property
     lease = _latest_lease(db, application.tenant_cognito_id, application.property_id)

     property_data = {
          column.key: getattr(property_, column.key) for column in Property.__table__.columns
     }
     property_data["address"] = property_.location.address if property_.location else ""

     lease_data = None
     if lease is not None:
          lease_data = {
               column.key: getattr(lease, column.key) for column in Lease.__table__.columns
          }
          lease_data["next_payment_date"] = next_payment_date(lease.start_date, now)

     return ApplicationListItem.model_validate({
          **{column.key: getattr(application, column.key) for column in Application.__table__.columns},
          "property": property_data,
          "tenant": application.tenant,
          "manager": property_.manager,
          "lease": lease_data,
     })


def create_application(db: Session, data: ApplicationCreate, now: Optional[datetime] = None) -> Application:
     """
     Submit an application together with its provisional lease.

     The lease (start now, one-year term, rent and deposit copied from the
     property) and the application are written in one transaction.

     Raises:
          NotFoundError: If the property or the tenant does not exist
     """
     property_ = db.get(Property, data.property_id)
     if property_ is None:
          raise NotFoundError("Property not found")

     tenant = db.execute(
          select(Tenant).where(Tenant.cognito_id == data.tenant_cognito_id)
     ).scalar_one_or_none()
     if tenant is None:
          raise NotFoundError("Tenant not found")

     now = now or utcnow()
     with unit_of_work(db):
          lease = _new_lease(property_, tenant.cognito_id, now)
          db.add(lease)
          db.flush()

          application = Application(
               application_date=_naive_utc(data.application_date),
               status=data.status,
               name=data.name,
               email=data.email,
               phone_number=data.phone_number,
               message=data.message,
               property_id=property_.id,
               tenant_cognito_id=tenant.cognito_id,
               lease_id=lease.id,
          )
          db.add(application)
          db.flush()
          application_id = application.id

     logger.info(
          "Application %s submitted by %s for property %s (lease %s)",
          application_id, tenant.cognito_id, property_.id, lease.id,
     )
     return get_application(db, application_id)


def _compare_and_set_status(db: Session, application: Application, status: str) -> None:
     """
     Move the application to `status` only if nobody changed it meanwhile.

     Raises:
          ConflictError: If another request already moved the application
     """
     result = db.execute(
          update(Application)
          .where(Application.id == application.id, Application.status == application.status)
          .values(status=status)
          .execution_options(synchronize_session=False)
     )
     if result.rowcount != 1:
          raise ConflictError(f"Application {application.id} was updated concurrently")


def update_application_status(
     db: Session,
     application_id: int,
     status: str,
     now: Optional[datetime] = None,
) -> Application:
     """
     Apply a manager's decision to an application.

     "Approved" creates a new lease from the property's current price,
     adds the tenant to the property's residents, and links the lease to
     the application; the provisional lease created at submission is
     removed unless payments already reference it. Any other status is
     stored as-is with no side effects. Either way the steps commit or
     roll back together.

     Raises:
          NotFoundError: If the application does not exist
          ConflictError: If the application is already Approved or Denied,
               or was changed by a concurrent request
     """
     application = get_application(db, application_id)
     if application.is_terminal():
          raise ConflictError(f"Application is already {application.status}")

     if status != ApplicationStatus.APPROVED.value:
          with unit_of_work(db):
               _compare_and_set_status(db, application, status)
          logger.info("Application %s set to %s", application_id, status)
          return get_application(db, application_id)

     now = now or utcnow()
     property_ = application.property
     provisional_lease_id = application.lease_id
     with unit_of_work(db):
          _compare_and_set_status(db, application, status)

          lease = _new_lease(property_, application.tenant_cognito_id, now)
          db.add(lease)
          db.flush()

          if application.tenant not in property_.tenants:
               property_.tenants.append(application.tenant)

          application.lease = lease
          if provisional_lease_id is not None:
               _discard_provisional_lease(db, provisional_lease_id)
          db.flush()
          lease_id = lease.id

     logger.info(
          "Application %s approved: lease %s for %s at property %s",
          application_id, lease_id, application.tenant_cognito_id, property_.id,
     )
     return get_application(db, application_id)


def _discard_provisional_lease(db: Session, lease_id: int) -> None:
     """Delete a superseded submission-time lease unless payments were recorded on it."""
     has_payments = db.execute(
          select(Payment.id).where(Payment.lease_id == lease_id).limit(1)
     ).first()
     if has_payments:
          logger.warning("Keeping superseded lease %s: payments reference it", lease_id)
          return
     lease = db.get(Lease, lease_id)
     if lease is not None:
          db.delete(lease)
