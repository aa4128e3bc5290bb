import pytest
from httpx import AsyncClient

from tests.utils.session_helpers import API


async def seed_lease(client, headers, lease_id):
    for name in ("Resident One", "Resident Two"):
        response = await client.post(
            f"{API}/occupants",
            json={"name": name, "email": "r@example.com", "property_id": 2, "lease_id": lease_id},
            headers=headers,
        )
        assert response.status_code == 201
    response = await client.post(
        f"{API}/maintenance-requests",
        json={
            "property_id": 2,
            "unit_number": "3",
            "description": "Broken window in the bedroom",
            "priority": "medium",
            "lease_id": lease_id,
        },
        headers=headers,
    )
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_manager_closes_out_lease(client: AsyncClient, manager_headers):
    await seed_lease(client, manager_headers, lease_id=31)
    await seed_lease(client, manager_headers, lease_id=32)

    response = await client.delete(f"{API}/leases/31", headers=manager_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "lease_id": 31, "removed": 3}
    response = await client.get(f"{API}/occupants", headers=manager_headers)
    assert {o["lease_id"] for o in response.json()["occupants"]} == {32}


@pytest.mark.asyncio
async def test_non_manager_is_forbidden(client: AsyncClient, renter_headers):
    await seed_lease(client, renter_headers, lease_id=31)

    response = await client.delete(f"{API}/leases/31", headers=renter_headers)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "AUTHZ_ERROR"
    response = await client.get(f"{API}/occupants?lease_id=31", headers=renter_headers)
    assert len(response.json()["occupants"]) == 2


@pytest.mark.asyncio
async def test_empty_lease_is_404(client: AsyncClient, manager_headers):
    response = await client.delete(f"{API}/leases/404", headers=manager_headers)

    assert response.status_code == 404
