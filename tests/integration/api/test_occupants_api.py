import pytest
from httpx import AsyncClient
from structlog.testing import capture_logs

from tests.utils.json_compare import exclude_keys
from tests.utils.session_helpers import API


@pytest.mark.asyncio
async def test_occupants_require_session(client: AsyncClient):
    response = await client.get(f"{API}/occupants")

    assert response.status_code == 401
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_create_then_list_round_trip(client: AsyncClient, renter_headers, test_data):
    with capture_logs() as logs:
        response = await client.post(
            f"{API}/occupants", json=test_data.get("new_occupant"), headers=renter_headers
        )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Occupant created successfully"
    occupant_id = body["occupant_id"]
    assert any(entry["event"] == "Audit: CREATE_OCCUPANT on occupants" for entry in logs)

    response = await client.get(f"{API}/occupants?property_id=2", headers=renter_headers)
    assert response.status_code == 200
    occupants = response.json()["occupants"]
    created = next(o for o in occupants if o["occupant_id"] == occupant_id)
    assert exclude_keys(created, {"occupant_id", "registrationDate", "created_at"}) == {
        "lease_id": 2,
        "property_id": 2,
        "unit_id": 3,
        "name": "Jane Roe",
        "email": "jane@example.com",
        "phone": "",
        "relationshipToLeaseholder": "Co-occupant",
        "status": "active",
    }


@pytest.mark.asyncio
async def test_create_keeps_camel_case_fields(client: AsyncClient, renter_headers, test_data):
    payload = test_data.get("full_occupant")

    response = await client.post(f"{API}/occupants", json=payload, headers=renter_headers)
    assert response.status_code == 201

    response = await client.get(f"{API}/occupants?lease_id=9", headers=renter_headers)
    (occupant,) = response.json()["occupants"]
    assert occupant["relationshipToLeaseholder"] == "Dependent"
    assert occupant["registrationDate"] == "2025-02-14"
    assert occupant["status"] == "inactive"


@pytest.mark.asyncio
async def test_invalid_email_is_rejected(client: AsyncClient, renter_headers):
    payload = {"name": "Jane Roe", "email": "not-an-email", "property_id": 2}

    response = await client.post(f"{API}/occupants", json=payload, headers=renter_headers)

    assert response.status_code == 400
    details = response.json()["error"]["details"]
    assert [issue["path"] for issue in details] == ["email"]
    assert "Invalid email format" in details[0]["message"]

    response = await client.get(f"{API}/occupants", headers=renter_headers)
    assert response.json()["occupants"] == []


@pytest.mark.asyncio
async def test_missing_required_fields_all_listed(client: AsyncClient, renter_headers):
    response = await client.post(f"{API}/occupants", json={}, headers=renter_headers)

    assert response.status_code == 400
    paths = sorted(issue["path"] for issue in response.json()["error"]["details"])
    assert paths == ["email", "name", "property_id"]


@pytest.mark.asyncio
async def test_filters_combine_newest_first(client: AsyncClient, renter_headers):
    for name, unit_id in [("First Person", 1), ("Second Person", 1), ("Other Unit", 2)]:
        response = await client.post(
            f"{API}/occupants",
            json={"name": name, "email": "p@example.com", "property_id": 4, "unit_id": unit_id},
            headers=renter_headers,
        )
        assert response.status_code == 201

    response = await client.get(
        f"{API}/occupants?property_id=4&unit_id=1", headers=renter_headers
    )
    names = [o["name"] for o in response.json()["occupants"]]
    assert names == ["Second Person", "First Person"]


@pytest.mark.asyncio
async def test_update_occupant(client: AsyncClient, renter_headers, test_data):
    created = await client.post(
        f"{API}/occupants", json=test_data.get("new_occupant"), headers=renter_headers
    )
    occupant_id = created.json()["occupant_id"]

    response = await client.put(
        f"{API}/occupants",
        json={"occupant_id": occupant_id, "phone": "416-555-3333", "status": "inactive"},
        headers=renter_headers,
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Occupant updated successfully"

    response = await client.get(f"{API}/occupants", headers=renter_headers)
    (occupant,) = response.json()["occupants"]
    assert occupant["phone"] == "416-555-3333"
    assert occupant["status"] == "inactive"
    assert occupant["name"] == "Jane Roe"


@pytest.mark.asyncio
async def test_update_requires_a_field(client: AsyncClient, renter_headers):
    response = await client.put(
        f"{API}/occupants", json={"occupant_id": 1}, headers=renter_headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "No fields to update"


@pytest.mark.asyncio
async def test_update_rejects_unknown_columns(client: AsyncClient, renter_headers):
    response = await client.put(
        f"{API}/occupants",
        json={"occupant_id": 1, "name": "Ok Name", "occupant_id; DROP": "x"},
        headers=renter_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_update_unknown_occupant_is_404(client: AsyncClient, renter_headers, test_data):
    await client.post(f"{API}/occupants", json=test_data.get("new_occupant"), headers=renter_headers)

    response = await client.put(
        f"{API}/occupants", json={"occupant_id": 9999, "name": "Nobody"}, headers=renter_headers
    )

    assert response.status_code == 404
    assert response.json()["error"] == {
        "code": "NOT_FOUND",
        "message": "Occupant with ID 9999 not found",
    }
    response = await client.get(f"{API}/occupants", headers=renter_headers)
    assert [o["name"] for o in response.json()["occupants"]] == ["Jane Roe"]


@pytest.mark.asyncio
async def test_delete_occupant(client: AsyncClient, renter_headers, test_data):
    created = await client.post(
        f"{API}/occupants", json=test_data.get("new_occupant"), headers=renter_headers
    )
    occupant_id = created.json()["occupant_id"]

    response = await client.delete(
        f"{API}/occupants?occupant_id={occupant_id}", headers=renter_headers
    )
    assert response.status_code == 200

    response = await client.delete(
        f"{API}/occupants?occupant_id={occupant_id}", headers=renter_headers
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_requires_occupant_id(client: AsyncClient, renter_headers):
    response = await client.delete(f"{API}/occupants", headers=renter_headers)

    assert response.status_code == 400
    assert response.json()["error"]["details"][0]["path"] == "occupant_id"


@pytest.mark.asyncio
async def test_batch_registration(client: AsyncClient, renter_headers):
    payload = {
        "lease_id": 12,
        "occupants": [
            {"name": "Parent One", "email": "one@example.com", "property_id": 3},
            {"name": "Child Two", "email": "two@example.com", "property_id": 3,
             "relationshipToLeaseholder": "Dependent"},
        ],
    }

    response = await client.post(f"{API}/occupants/batch", json=payload, headers=renter_headers)

    assert response.status_code == 201
    assert len(response.json()["occupant_ids"]) == 2
    response = await client.get(f"{API}/occupants?lease_id=12", headers=renter_headers)
    assert len(response.json()["occupants"]) == 2


@pytest.mark.asyncio
async def test_batch_registration_is_all_or_nothing(client: AsyncClient, renter_headers):
    payload = {
        "occupants": [
            {"name": "Valid Person", "email": "ok@example.com", "property_id": 3},
            {"name": "Broken Person", "email": "broken", "property_id": 3},
        ],
    }

    response = await client.post(f"{API}/occupants/batch", json=payload, headers=renter_headers)

    assert response.status_code == 400
    assert response.json()["error"]["details"][0]["path"] == "occupants.1.email"
    response = await client.get(f"{API}/occupants", headers=renter_headers)
    assert response.json()["occupants"] == []
