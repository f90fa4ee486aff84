"""Passenger Endpoints — verifies GET /api/v1/passenger/{id}.

Invariants:
    - Live passenger → 200 {"passenger_dto": {...}}
    - Unknown or soft-deleted passenger → 404 PASSENGER_NOT_FOUND
    - Non-UUID id → 400 (transport validation)
"""

import uuid

import pytest

from app.models.passenger import PassengerReadModel

URL = "/api/v1/passenger"


@pytest.fixture
def make_passenger(test_db):
    async def _make(is_deleted=False):
        passenger = PassengerReadModel(
            passenger_id=uuid.uuid4(), name="Ada Lovelace",
            passport_number="P1234567", passenger_type="female", age=36,
            is_deleted=is_deleted,
        )
        test_db.add(passenger)
        await test_db.commit()
        return passenger
    return _make


async def test_get_passenger(client, auth_headers, make_passenger):
    passenger = await make_passenger()

    res = await client.get(f"{URL}/{passenger.passenger_id}", headers=auth_headers)

    assert res.status_code == 200
    assert res.json() == {
        "passenger_dto": {
            "id": str(passenger.passenger_id),
            "name": "Ada Lovelace",
            "passport_number": "P1234567",
            "passenger_type": "female",
            "age": 36,
        },
    }


async def test_unknown_passenger_is_404(client, auth_headers):
    res = await client.get(f"{URL}/{uuid.uuid4()}", headers=auth_headers)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "PASSENGER_NOT_FOUND"


async def test_soft_deleted_passenger_is_404(client, auth_headers, make_passenger):
    passenger = await make_passenger(is_deleted=True)
    res = await client.get(f"{URL}/{passenger.passenger_id}", headers=auth_headers)
    assert res.status_code == 404


async def test_non_uuid_id_is_400(client, auth_headers):
    res = await client.get(f"{URL}/not-a-uuid", headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "path.passenger_id"
