# services/manager_service.py
"""
Manager Service - manager profiles.
"""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import unit_of_work
from errors import ConflictError, NotFoundError
from models import Manager
from schemas.profile import ProfileCreate, ProfileUpdate

logger = logging.getLogger(__name__)


def get_manager(db: Session, cognito_id: str) -> Manager:
     manager = db.execute(
          select(Manager).where(Manager.cognito_id == cognito_id)
     ).scalar_one_or_none()
     if manager is None:
          raise NotFoundError("Manager not found")
     return manager


def create_manager(db: Session, data: ProfileCreate) -> Manager:
     manager = Manager(**data.model_dump())
     try:
          with unit_of_work(db):
               db.add(manager)
               db.flush()
     except IntegrityError:
          raise ConflictError("Manager already exists")
     logger.info("Manager %s created", manager.cognito_id)
     return manager


def update_manager(db: Session, cognito_id: str, data: ProfileUpdate) -> Manager:
     manager = get_manager(db, cognito_id)
     with unit_of_work(db):
          for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
               setattr(manager, field, value)
     return manager
