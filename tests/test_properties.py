"""Test property search, detail lookup and listing creation."""
from datetime import datetime

import pytest
import requests
from sqlalchemy.dialects import postgresql

import azure_blob
from models import Lease, Location, Property, PropertyType
from services import geocoding, property_service
from services.property_filters import (
    ContainsAll,
    IdIn,
    LeaseStartedBy,
    Range,
    WithinRadius,
    build_predicates,
)
from tests.conftest import MANAGER_ID, TENANT_ID, add_property, auth_header


@pytest.fixture
def listings(db, seed):
    """Three properties with distinct prices, sizes, types and amenities."""
    cheap = db.get(Property, seed["property_id"])
    villa = add_property(
        db,
        name="Hillside Villa",
        price_per_month=4200.0,
        beds=4,
        baths=3.0,
        square_feet=2600,
        property_type=PropertyType.VILLA,
        amenities=["Pool", "Gym", "AirConditioning"],
        address="77 Hill Rd",
    )
    cottage = add_property(
        db,
        name="Garden Cottage",
        price_per_month=1800.0,
        beds=1,
        baths=1.0,
        square_feet=600,
        property_type=PropertyType.COTTAGE,
        amenities=["Gym"],
        address="5 Garden Ln",
    )
    return {"cheap": cheap.id, "villa": villa.id, "cottage": cottage.id}


def names(resp):
    return [item["name"] for item in resp.json()]


# ── Filter parsing ─────────────────────────────────────────────────────

def test_build_predicates_ignores_any_and_blank_values():
    params = {"beds": "any", "baths": "", "propertyType": "any", "priceMin": "abc", "amenities": ""}
    assert build_predicates(params) == []


def test_build_predicates_parses_every_filter():
    predicates = build_predicates({
        "favoriteIds": "3,1,x",
        "priceMin": "1000",
        "priceMax": "2500",
        "beds": "2",
        "amenities": "Pool, Gym",
        "availableFrom": "2025-06-01",
        "latitude": "37.77",
        "longitude": "-122.41",
    })
    kinds = [type(predicate) for predicate in predicates]
    assert IdIn(ids=(3, 1)) in predicates
    assert Range(Property.price_per_month, 1000.0, 2500.0) in predicates
    assert ContainsAll(Property.amenities, ("Pool", "Gym")) in predicates
    assert LeaseStartedBy(datetime(2025, 6, 1)) in predicates
    assert WithinRadius(longitude=-122.41, latitude=37.77) in predicates
    assert kinds.count(Range) == 2


def test_radius_filter_uses_postgis_distance():
    predicate = WithinRadius(longitude=-122.41, latitude=37.77)
    assert predicate.degrees == pytest.approx(1000 / 111)
    sql = str(predicate.clause("postgresql").compile(dialect=postgresql.dialect()))
    assert "ST_DWithin" in sql
    assert "ST_MakePoint" in sql


def test_amenities_use_jsonb_containment_on_postgres():
    clause = ContainsAll(Property.amenities, ("Pool",)).clause("postgresql")
    assert "@>" in str(clause.compile(dialect=postgresql.dialect()))


# ── Search ─────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_search_without_filters_returns_all(client, listings):
    resp = await client.get("/properties")
    assert resp.status_code == 200
    assert names(resp) == ["Bay View Apartment", "Hillside Villa", "Garden Cottage"]
    first = resp.json()[0]
    assert first["location"]["coordinates"] == {"longitude": -122.3949, "latitude": 37.7936}
    assert first["pricePerMonth"] == 1200.0


@pytest.mark.asyncio
async def test_search_by_price_range(client, listings):
    resp = await client.get("/properties", params={"priceMin": "1500", "priceMax": "2000"})
    assert names(resp) == ["Garden Cottage"]


@pytest.mark.asyncio
async def test_search_by_rooms_and_size(client, listings):
    resp = await client.get("/properties", params={"beds": "2", "baths": "any", "squareFeetMax": "1000"})
    assert names(resp) == ["Bay View Apartment"]


@pytest.mark.asyncio
async def test_search_by_property_type(client, listings):
    resp = await client.get("/properties", params={"propertyType": "Villa"})
    assert names(resp) == ["Hillside Villa"]


@pytest.mark.asyncio
async def test_search_requires_every_amenity(client, listings):
    resp = await client.get("/properties", params={"amenities": "Pool,Gym"})
    assert names(resp) == ["Hillside Villa"]

    resp = await client.get("/properties", params={"amenities": "Gym"})
    assert names(resp) == ["Hillside Villa", "Garden Cottage"]


@pytest.mark.asyncio
async def test_search_by_favorite_ids(client, listings):
    ids = f"{listings['cottage']},{listings['cheap']}"
    resp = await client.get("/properties", params={"favoriteIds": ids})
    assert names(resp) == ["Bay View Apartment", "Garden Cottage"]


@pytest.mark.asyncio
async def test_search_by_available_from(client, db, listings):
    db.add(Lease(
        start_date=datetime(2025, 1, 1),
        end_date=datetime(2026, 1, 1),
        rent=4200.0,
        deposit=500.0,
        property_id=listings["villa"],
        tenant_cognito_id=TENANT_ID,
    ))
    db.commit()

    resp = await client.get("/properties", params={"availableFrom": "2025-02-01"})
    assert names(resp) == ["Hillside Villa"]

    resp = await client.get("/properties", params={"availableFrom": "2024-12-01"})
    assert names(resp) == []


# ── Detail ─────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_get_property_includes_manager(client, seed):
    resp = await client.get(f"/properties/{seed['property_id']}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["manager"]["cognitoId"] == MANAGER_ID
    assert data["location"]["city"] == "San Francisco"
    assert data["propertyType"] == "Apartment"


@pytest.mark.asyncio
async def test_get_unknown_property_is_404(client, seed):
    resp = await client.get("/properties/9999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "not_found", "message": "Property not found"}


@pytest.mark.asyncio
async def test_property_leases_require_auth(client, seed):
    resp = await client.get(f"/properties/{seed['property_id']}/leases")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_property_leases(client, db, seed, manager_headers):
    db.add(Lease(
        start_date=datetime(2025, 1, 1),
        end_date=datetime(2026, 1, 1),
        rent=1200.0,
        deposit=500.0,
        property_id=seed["property_id"],
        tenant_cognito_id=TENANT_ID,
    ))
    db.commit()

    resp = await client.get(f"/properties/{seed['property_id']}/leases", headers=manager_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 1
    assert data[0]["tenant"]["cognitoId"] == TENANT_ID


# ── Creation ───────────────────────────────────────────────────────────

@pytest.fixture
def fake_storage(monkeypatch):
    uploaded = []

    def fake_upload(file, *args, **kwargs):
        url = f"https://photos.example/{file.filename}"
        uploaded.append(url)
        return url

    monkeypatch.setattr(azure_blob, "upload_to_blob", fake_upload)
    monkeypatch.setattr(geocoding, "geocode_address", lambda *args: (-73.9857, 40.7484))
    return uploaded


LISTING_FORM = {
    "name": "Midtown Loft",
    "description": "Open plan loft",
    "pricePerMonth": "3100",
    "securityDeposit": "3100",
    "applicationFee": "75",
    "amenities": "Gym, Pool",
    "highlights": "HighSpeedInternetAccess",
    "isPetsAllowed": "true",
    "isParkingIncluded": "false",
    "beds": "1",
    "baths": "1",
    "squareFeet": "900",
    "propertyType": "Apartment",
    "address": "350 5th Ave",
    "city": "New York",
    "state": "NY",
    "country": "United States",
    "postalCode": "10118",
}


@pytest.mark.asyncio
async def test_create_property(client, seed, manager_headers, fake_storage, session_factory):
    resp = await client.post(
        "/properties",
        data=LISTING_FORM,
        files=[
            ("photos", ("front.jpg", b"jpeg-bytes", "image/jpeg")),
            ("photos", ("kitchen.jpg", b"jpeg-bytes", "image/jpeg")),
        ],
        headers=manager_headers,
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["managerCognitoId"] == MANAGER_ID
    assert data["amenities"] == ["Gym", "Pool"]
    assert data["isPetsAllowed"] is True
    assert data["isParkingIncluded"] is False
    assert data["photoUrls"] == fake_storage
    assert len(fake_storage) == 2
    assert data["location"]["coordinates"] == {"longitude": -73.9857, "latitude": 40.7484}

    with session_factory() as session:
        location = session.get(Location, data["locationId"])
        assert location.address == "350 5th Ave"
        assert (location.coordinates.x, location.coordinates.y) == (-73.9857, 40.7484)


@pytest.mark.asyncio
async def test_create_property_requires_manager(client, seed, fake_storage):
    resp = await client.post("/properties", data=LISTING_FORM, headers=auth_header(TENANT_ID, "tenant"))
    assert resp.status_code == 403
    assert fake_storage == []


@pytest.mark.asyncio
async def test_create_property_without_manager_profile(client, seed, fake_storage):
    resp = await client.post("/properties", data=LISTING_FORM, headers=auth_header("unregistered", "manager"))
    assert resp.status_code == 404


def test_create_property_cleans_up_photos_on_failure(db, seed, monkeypatch):
    deleted = []
    monkeypatch.setattr(azure_blob, "upload_to_blob", lambda file: "https://photos.example/a.jpg")
    monkeypatch.setattr(azure_blob, "delete_from_blob", deleted.append)
    monkeypatch.setattr(geocoding, "geocode_address", lambda *args: (1.0, 2.0))

    def broken_flush(*args, **kwargs):
        raise RuntimeError("database went away")

    monkeypatch.setattr(db, "flush", broken_flush)

    from schemas.property import PropertyCreate
    data = PropertyCreate.model_validate(LISTING_FORM)
    with pytest.raises(RuntimeError):
        property_service.create_property(db, data, [object()], manager_cognito_id=MANAGER_ID)
    assert deleted == ["https://photos.example/a.jpg"]


def test_create_property_cleans_up_photos_when_geocoding_fails(db, seed, monkeypatch):
    deleted = []
    uploads = iter(["https://photos.example/a.jpg", "https://photos.example/b.jpg"])
    monkeypatch.setattr(azure_blob, "upload_to_blob", lambda file: next(uploads))
    monkeypatch.setattr(azure_blob, "delete_from_blob", deleted.append)

    def unreachable_geocoder(*args):
        raise requests.ConnectionError("geocoder unreachable")

    monkeypatch.setattr(geocoding, "geocode_address", unreachable_geocoder)

    from schemas.property import PropertyCreate
    data = PropertyCreate.model_validate(LISTING_FORM)
    with pytest.raises(requests.ConnectionError):
        property_service.create_property(db, data, [object(), object()], manager_cognito_id=MANAGER_ID)
    assert deleted == ["https://photos.example/a.jpg", "https://photos.example/b.jpg"]
    assert db.query(Property).count() == 1


def test_create_property_cleans_up_earlier_photos_when_upload_fails(db, seed, monkeypatch):
    deleted = []
    uploaded = []

    def flaky_upload(file):
        if uploaded:
            raise RuntimeError("storage unavailable")
        uploaded.append("https://photos.example/first.jpg")
        return uploaded[0]

    monkeypatch.setattr(azure_blob, "upload_to_blob", flaky_upload)
    monkeypatch.setattr(azure_blob, "delete_from_blob", deleted.append)
    monkeypatch.setattr(geocoding, "geocode_address", lambda *args: (1.0, 2.0))

    from schemas.property import PropertyCreate
    data = PropertyCreate.model_validate(LISTING_FORM)
    with pytest.raises(RuntimeError):
        property_service.create_property(db, data, [object(), object()], manager_cognito_id=MANAGER_ID)
    assert deleted == ["https://photos.example/first.jpg"]
