"""Request Validation — field rules checked before any store access.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Rules return a list of FieldViolation; an empty list means valid
    - validate_* functions collect every violation (no first-error-wins)

Design Decisions:
    - Plain composable predicates over declarative rule classes: each rule is a
      function call, each request validator is a concatenation of rules
"""

from typing import Any

from app.core.outcomes import FieldViolation
from app.core.requests import (
    CreateAirport, DeleteAirport, GetAirportById, GetPassengerById,
)


def require_not_empty(field: str, value: Any, message: str) -> list[FieldViolation]:
    """None, empty strings and whitespace-only strings are all empty."""
    if value is None:
        return [FieldViolation(field, message)]
    if isinstance(value, str) and not value.strip():
        return [FieldViolation(field, message)]
    return []


def require_not_null(field: str, value: Any, message: str) -> list[FieldViolation]:
    if value is None:
        return [FieldViolation(field, message)]
    return []


def validate_create_airport(command: CreateAirport) -> list[FieldViolation]:
    return (
        require_not_empty("code", command.code, "Code is required")
        + require_not_empty("name", command.name, "Name is required")
        + require_not_empty("address", command.address, "Address is required")
    )


def validate_delete_airport(command: DeleteAirport) -> list[FieldViolation]:
    return require_not_null("id", command.id, "Id is required!")


def validate_get_airport_by_id(query: GetAirportById) -> list[FieldViolation]:
    return require_not_null("id", query.id, "Id is required!")


def validate_get_passenger_by_id(query: GetPassengerById) -> list[FieldViolation]:
    return require_not_null("id", query.id, "Id is required!")
