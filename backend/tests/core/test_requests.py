"""Requests — verifies immutability and identifier assignment of commands/queries."""

import dataclasses
from uuid import UUID, uuid4

import pytest

from app.core.domain_types import RequestKind
from app.core.requests import (
    CreateAirport, DeleteAirport, GetAirportById, GetPassengerById,
)


def test_create_airport_generates_id_once():
    command = CreateAirport(name="JFK Intl", address="NYC", code="JFK")
    assert isinstance(command.id, UUID)
    assert command.id == command.id


def test_each_create_airport_gets_a_distinct_id():
    a = CreateAirport(name="A", address="A", code="A")
    b = CreateAirport(name="A", address="A", code="A")
    assert a.id != b.id


def test_supplied_id_is_kept():
    supplied = uuid4()
    command = CreateAirport(name="A", address="A", code="A", id=supplied)
    assert command.id == supplied


def test_requests_are_immutable():
    command = CreateAirport(name="A", address="A", code="A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        command.code = "B"


def test_request_kinds():
    assert CreateAirport.kind is RequestKind.COMMAND
    assert DeleteAirport.kind is RequestKind.COMMAND
    assert GetAirportById.kind is RequestKind.QUERY
    assert GetPassengerById.kind is RequestKind.QUERY


def test_kind_is_not_a_dataclass_field():
    names = {f.name for f in dataclasses.fields(GetPassengerById)}
    assert names == {"id"}
