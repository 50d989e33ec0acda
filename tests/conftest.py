"""
Test fixtures for the Rentwise backend.

Every test gets its own temporary SQLite database with the full schema,
and the app's session dependency is pointed at it so tests never touch
a real database. Tokens are minted with a shared HS256 test secret.
"""
import os
from datetime import datetime

# Configure before the app modules read the environment
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["JWT_ALGORITHM"] = "HS256"
os.environ.pop("COGNITO_USER_POOL_ID", None)

import pytest
from httpx import AsyncClient, ASGITransport
from jose import jwt
from shapely.geometry import Point
from sqlalchemy.orm import sessionmaker

from database import build_engine, get_session, init_db
from main import app
from models import Location, Manager, Property, PropertyType, Tenant


# ── Seed data ──────────────────────────────────────────────────────────

MANAGER_ID = "manager-sub-1"
OTHER_MANAGER_ID = "manager-sub-2"
TENANT_ID = "tenant-sub-1"
OTHER_TENANT_ID = "tenant-sub-2"


def make_token(sub: str, role: str, secret: str = "test-secret") -> str:
    return jwt.encode({"sub": sub, "custom:role": role}, secret, algorithm="HS256")


def auth_header(sub: str, role: str) -> dict:
    return {"Authorization": f"Bearer {make_token(sub, role)}"}


def add_property(db, manager_cognito_id=MANAGER_ID, **overrides) -> Property:
    """Insert a property with its location; keyword arguments override the defaults."""
    location = Location(
        address=overrides.pop("address", "1 Market St"),
        city="San Francisco",
        state="CA",
        country="United States",
        postal_code="94105",
        coordinates=overrides.pop("coordinates", Point(-122.3949, 37.7936)),
    )
    db.add(location)
    db.flush()

    values = dict(
        name="Bay View Apartment",
        description="Two bedrooms near the water",
        price_per_month=1200.0,
        security_deposit=500.0,
        application_fee=50.0,
        photo_urls=[],
        amenities=["WasherDryer", "Pool"],
        highlights=["GreatView"],
        is_pets_allowed=True,
        is_parking_included=False,
        beds=2,
        baths=1.0,
        square_feet=800,
        property_type=PropertyType.APARTMENT,
        posted_date=datetime(2025, 1, 1),
    )
    values.update(overrides)
    property_ = Property(location_id=location.id, manager_cognito_id=manager_cognito_id, **values)
    db.add(property_)
    db.commit()
    return property_


# ── Fixtures ───────────────────────────────────────────────────────────

@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'rentwise_test.db'}", echo=False)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    """Session for arranging data and inspecting results directly."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seed(db):
    """Two managers, two tenants and one property managed by MANAGER_ID."""
    db.add_all([
        Manager(cognito_id=MANAGER_ID, name="Maya Manager", email="maya@example.com", phone_number="555-0101"),
        Manager(cognito_id=OTHER_MANAGER_ID, name="Omar Other", email="omar@example.com", phone_number="555-0102"),
        Tenant(cognito_id=TENANT_ID, name="Tara Tenant", email="tara@example.com", phone_number="555-0201"),
        Tenant(cognito_id=OTHER_TENANT_ID, name="Theo Tenant", email="theo@example.com", phone_number="555-0202"),
    ])
    db.commit()
    property_ = add_property(db)
    return {"property_id": property_.id}


@pytest.fixture
def client_app(session_factory):
    """The app with its session dependency bound to the test database."""

    def override_get_session():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_session] = override_get_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(client_app):
    """Async test client for the FastAPI app."""
    transport = ASGITransport(app=client_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def tenant_headers():
    return auth_header(TENANT_ID, "tenant")


@pytest.fixture
def manager_headers():
    return auth_header(MANAGER_ID, "manager")
