"""Test tenant profiles, favorites and current residences."""
import pytest

from models import Property, Tenant
from tests.conftest import OTHER_TENANT_ID, TENANT_ID, add_property, auth_header


@pytest.mark.asyncio
async def test_create_tenant(client, seed):
    body = {"cognitoId": "new-tenant", "name": "Nia New", "email": "nia@example.com", "phoneNumber": "555-0300"}
    resp = await client.post("/tenants", json=body, headers=auth_header("new-tenant", "tenant"))
    assert resp.status_code == 201
    data = resp.json()
    assert data["cognitoId"] == "new-tenant"
    assert data["favorites"] == []


@pytest.mark.asyncio
async def test_create_duplicate_tenant_is_409(client, seed, tenant_headers):
    body = {"cognitoId": TENANT_ID, "name": "Tara Again", "email": "tara@example.com", "phoneNumber": ""}
    resp = await client.post("/tenants", json=body, headers=tenant_headers)
    assert resp.status_code == 409
    assert resp.json() == {"error": "conflict", "message": "Tenant already exists"}


@pytest.mark.asyncio
async def test_get_tenant(client, seed, tenant_headers):
    resp = await client.get(f"/tenants/{TENANT_ID}", headers=tenant_headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == "tara@example.com"


@pytest.mark.asyncio
async def test_get_other_tenant_is_403(client, seed, tenant_headers):
    resp = await client.get(f"/tenants/{OTHER_TENANT_ID}", headers=tenant_headers)
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_get_unregistered_tenant_is_404(client, seed):
    resp = await client.get("/tenants/ghost", headers=auth_header("ghost", "tenant"))
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_tenant_keeps_omitted_fields(client, seed, tenant_headers):
    resp = await client.put(f"/tenants/{TENANT_ID}", json={"phoneNumber": "555-9999"}, headers=tenant_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["phoneNumber"] == "555-9999"
    assert data["name"] == "Tara Tenant"


@pytest.mark.asyncio
async def test_add_favorite_twice_is_409(client, seed, tenant_headers):
    url = f"/tenants/{TENANT_ID}/favorites/{seed['property_id']}"
    first = await client.post(url, headers=tenant_headers)
    assert first.status_code == 200
    assert [favorite["id"] for favorite in first.json()["favorites"]] == [seed["property_id"]]

    second = await client.post(url, headers=tenant_headers)
    assert second.status_code == 409
    assert second.json()["message"] == "Property already added as favorite"

    resp = await client.get(f"/tenants/{TENANT_ID}", headers=tenant_headers)
    assert len(resp.json()["favorites"]) == 1


@pytest.mark.asyncio
async def test_add_unknown_favorite_is_404(client, seed, tenant_headers):
    resp = await client.post(f"/tenants/{TENANT_ID}/favorites/9999", headers=tenant_headers)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_remove_favorite(client, db, seed, tenant_headers):
    second = add_property(db, name="Second Place", address="2 Second St")
    for property_id in (seed["property_id"], second.id):
        await client.post(f"/tenants/{TENANT_ID}/favorites/{property_id}", headers=tenant_headers)

    resp = await client.delete(f"/tenants/{TENANT_ID}/favorites/{seed['property_id']}", headers=tenant_headers)
    assert resp.status_code == 200
    assert [favorite["id"] for favorite in resp.json()["favorites"]] == [second.id]


@pytest.mark.asyncio
async def test_remove_missing_favorite_is_noop(client, seed, tenant_headers):
    resp = await client.delete(f"/tenants/{TENANT_ID}/favorites/{seed['property_id']}", headers=tenant_headers)
    assert resp.status_code == 200
    assert resp.json()["favorites"] == []


@pytest.mark.asyncio
async def test_current_residences(client, db, seed, tenant_headers):
    add_property(db, name="Not Home", address="3 Elsewhere Ave")
    tenant = db.query(Tenant).filter_by(cognito_id=TENANT_ID).one()
    property_ = db.get(Property, seed["property_id"])
    property_.tenants.append(tenant)
    db.commit()

    resp = await client.get(f"/tenants/{TENANT_ID}/current-residences", headers=tenant_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert [item["id"] for item in data] == [seed["property_id"]]
    assert data[0]["location"]["address"] == "1 Market St"
