# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration for PostgreSQL/PostGIS
- Session factory for dependency injection
- A unit-of-work helper for multi-statement transactional writes

Usage:
     from database import get_session

     # In FastAPI routes:
     @router.get("/leases")
     def get_leases(db: Session = Depends(get_session)):
          return lease_service.list_leases(db)
"""
import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

import config

logger = logging.getLogger(__name__)


def build_engine(url: str = config.DATABASE_URL, echo: bool = config.SQL_ECHO) -> Engine:
     """
     Create an engine for the given URL.

     Pool sizing only applies to server databases; SQLite (used by the
     test suite) keeps SQLAlchemy's defaults.
     """
     options = {"echo": echo}
     if not url.startswith("sqlite"):
          options.update(
               pool_size=5,
               max_overflow=10,
               pool_timeout=30,
               pool_recycle=1800,  # Recycle connections after 30 minutes
               pool_pre_ping=True,
          )
     else:
          options["connect_args"] = {"check_same_thread": False}
     return create_engine(url, **options)


engine = build_engine()

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     Services commit their own units of work; anything left pending when
     the request finishes is committed, and any exception rolls back.

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def unit_of_work(db: Session) -> Generator[Session, None, None]:
     """
     Run a group of writes as one transaction on an existing session.

     Everything flushed inside the block is committed together when the
     block exits normally and rolled back together if it raises.

     Usage:
          with unit_of_work(db):
               db.add(lease)
               db.flush()
               application.lease_id = lease.id
     """
     try:
          yield db
          db.commit()
     except Exception:
          db.rollback()
          raise


def init_db(bind: Engine = engine) -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     if bind.dialect.name == "postgresql":
          with bind.begin() as conn:
               conn.execute(text("CREATE EXTENSION IF NOT EXISTS postgis"))
     Base.metadata.create_all(bind=bind)


def check_connection() -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with engine.connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except Exception:
          logger.exception("Database connection failed")
          return False
