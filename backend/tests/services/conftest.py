"""Service test fixtures — seeded rows and a mediator bound to the test session.

Invariants:
    - Seed factories commit, so the mediator's session sees the rows
    - mediator uses the same session as the assertions (test_db)
"""

import uuid

import pytest

from app.models.airport import Airport
from app.models.passenger import PassengerReadModel
from app.services.mediator import Mediator


@pytest.fixture
def mediator(test_db):
    return Mediator(test_db, timeout_seconds=5)


@pytest.fixture
def make_airport(test_db):
    """Insert an airport directly, bypassing the pipeline."""
    async def _make(code="JFK", name="JFK Intl", address="NYC", is_deleted=False):
        airport = Airport.create(uuid.uuid4(), name, code, address)
        airport.is_deleted = is_deleted
        test_db.add(airport)
        await test_db.commit()
        return airport
    return _make


@pytest.fixture
def make_passenger(test_db):
    """Insert a passenger read-model row, as the passenger projection would."""
    async def _make(
        name="Ada Lovelace", passport_number="P1234567",
        passenger_type="female", age=36, is_deleted=False,
    ):
        passenger = PassengerReadModel(
            passenger_id=uuid.uuid4(), name=name,
            passport_number=passport_number, passenger_type=passenger_type,
            age=age, is_deleted=is_deleted,
        )
        test_db.add(passenger)
        await test_db.commit()
        return passenger
    return _make
