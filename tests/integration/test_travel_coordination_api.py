"""
Integration tests for the travel coordination API
"""
import pytest
from httpx import AsyncClient

GROUPS = "/travel-coordination/groups"


async def _create_group(client: AsyncClient, **overrides):
    payload = {
        "name": "Stage Crew",
        "group_type": "crew",
        "priority_level": 2,
        "arrival_date": "2026-07-10",
        "departure_date": "2026-07-14",
        "arrival_location": "LAX",
        "departure_location": "JFK",
        "event_id": "event-1",
    }
    payload.update(overrides)
    response = await client.post(GROUPS, json=payload)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.mark.asyncio
async def test_full_coordination_flow(async_client: AsyncClient):
    """Create a group, load members, add lodging and auto-coordinate"""
    group = await _create_group(async_client)
    assert group["status"] == "planning"
    assert group["coordination_status"] == "pending"

    response = await async_client.post(
        f"{GROUPS}/{group['id']}/members/bulk",
        json={
            "members": [{"name": "Ana Ruiz", "email": "ana@example.com"}],
            "raw_text": "Ben Cole, ben@example.com, 555-0101, Lighting\n\nChi Park, chi@example.com",
        },
    )
    assert response.status_code == 201
    assert [m["member_name"] for m in response.json()["data"]] == ["Ana Ruiz", "Ben Cole", "Chi Park"]

    response = await async_client.post(
        "/travel-coordination/lodging",
        json={
            "booking_number": "HTL-1",
            "event_id": "event-1",
            "check_in_date": "2026-07-10",
            "check_out_date": "2026-07-14",
            "rooms_booked": 2,
            "guests_per_room": 2,
            "primary_guest_name": "Ana Ruiz",
        },
    )
    assert response.status_code == 201
    assert response.json()["data"]["total_guests"] == 4

    response = await async_client.post(f"{GROUPS}/{group['id']}/auto-coordinate")
    assert response.status_code == 200
    result = response.json()["data"]
    assert result["coordination_status"] == "complete"
    assert result["errors"] == []
    assert len(result["booked_flight_ids"]) == 1
    assert len(result["booked_vehicle_ids"]) == 1

    response = await async_client.get(f"{GROUPS}/{group['id']}/summary")
    assert response.status_code == 200
    view = response.json()["data"]
    assert view["group"]["total_members"] == 3
    assert view["summary"] == {"flights_booked": 1, "transport_arranged": 1, "hotel_rooms_booked": 1}
    assert view["coordination_badge"]["tone"] == "emerald"

    response = await async_client.get("/travel-coordination/flights", params={"group_id": group["id"]})
    flights = response.json()["data"]
    assert [f["flight_number"] for f in flights] == ["GROUP-STAGE-CREW"]
    assert flights[0]["fare_type"] == "group"

    response = await async_client.get("/travel-coordination/analytics", params={"event_id": "event-1"})
    analytics = response.json()["data"]
    assert analytics["total_groups"] == 1
    assert analytics["total_travelers"] == 3
    assert analytics["fully_coordinated_groups"] == 1
    assert analytics["coordination_completion_rate"] == 100.0

    response = await async_client.get("/travel-coordination/utilization", params={"event_id": "event-1"})
    rows = response.json()["data"]
    assert rows[0]["flight_utilization_percentage"] == 100.0


@pytest.mark.asyncio
async def test_member_status_updates_group_counter(async_client: AsyncClient):
    group = await _create_group(async_client)
    response = await async_client.post(f"{GROUPS}/{group['id']}/members", json={"name": "Ana Ruiz"})
    member = response.json()["data"]

    response = await async_client.put(
        f"/travel-coordination/members/{member['id']}/status", json={"status": "confirmed"}
    )
    assert response.status_code == 200

    response = await async_client.get(f"{GROUPS}/{group['id']}")
    assert response.json()["data"]["confirmed_members"] == 1

    response = await async_client.get(f"{GROUPS}/{group['id']}/members", params={"status": "confirmed"})
    assert len(response.json()["data"]) == 1

    response = await async_client.delete(f"/travel-coordination/members/{member['id']}")
    assert response.status_code == 200
    response = await async_client.get(f"{GROUPS}/{group['id']}")
    assert response.json()["data"]["total_members"] == 0


@pytest.mark.asyncio
async def test_list_and_delete_groups(async_client: AsyncClient):
    first = await _create_group(async_client, name="Artists", priority_level=1)
    await _create_group(async_client, name="Vendors", priority_level=5, event_id=None, tour_id="tour-9")

    response = await async_client.get(GROUPS, params={"event_id": "event-1"})
    assert [g["name"] for g in response.json()["data"]] == ["Artists"]

    response = await async_client.delete(f"{GROUPS}/{first['id']}")
    assert response.status_code == 200

    response = await async_client.get(f"{GROUPS}/{first['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_progress_endpoint(async_client: AsyncClient):
    response = await async_client.post(
        "/travel-coordination/progress",
        json={"transportation": "booked", "accommodation": "pending", "equipment": ["truss"], "crew": 0},
    )

    assert response.status_code == 200
    assert response.json()["data"] == {"percent": 50, "completed": 2, "total": 4}


@pytest.mark.asyncio
async def test_error_envelopes(async_client: AsyncClient):
    """Each error class maps onto its status code and error body"""
    response = await async_client.get(f"{GROUPS}/does-not-exist")
    assert response.status_code == 404
    body = response.json()
    assert body["status"] == "error"
    assert body["error_code"] == "NOT_FOUND"
    assert body["request_id"]

    group = await _create_group(async_client)

    response = await async_client.put(f"{GROUPS}/{group['id']}", json={"status": "arrived"})
    assert response.status_code == 409
    assert response.json()["error_code"] == "INVALID_STATUS_TRANSITION"

    response = await async_client.put(f"{GROUPS}/{group['id']}", json={"name": "   "})
    assert response.status_code == 400
    assert response.json()["error_code"] == "VALIDATION_ERROR"

    response = await async_client.post(f"{GROUPS}/{group['id']}/auto-coordinate")
    assert response.status_code == 400

    response = await async_client.post(GROUPS, json={"name": "Too Important", "priority_level": 9})
    assert response.status_code == 422
    assert response.json()["details"]["validation_errors"]


@pytest.mark.asyncio
async def test_request_id_is_echoed(async_client: AsyncClient):
    response = await async_client.get(f"{GROUPS}/missing", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.json()["request_id"] == "req-123"
