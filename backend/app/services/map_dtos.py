"""DTO Mapping — explicit field-by-field conversion between transport, requests, and entities.

Invariants:
    - Every function is total for well-formed input and has no side effects
    - Mappers never receive None: absence is turned into a NotFound failure upstream
"""

from app.core.domain_types import PassengerType
from app.core.requests import CreateAirport
from app.models.airport import Airport
from app.models.passenger import PassengerReadModel
from app.schemas.airport import AirportDto, CreateAirportRequestDto
from app.schemas.passenger import PassengerDto


def create_airport_from_request(
    dto: CreateAirportRequestDto, issued_by: str | None = None,
) -> CreateAirport:
    """Request DTO -> command. A client-supplied id wins over a fresh one."""
    if dto.id is not None:
        return CreateAirport(
            name=dto.name, address=dto.address, code=dto.code, id=dto.id,
            issued_by=issued_by,
        )
    return CreateAirport(
        name=dto.name, address=dto.address, code=dto.code, issued_by=issued_by,
    )


def airport_to_dto(airport: Airport) -> AirportDto:
    return AirportDto(
        id=airport.id,
        name=airport.name,
        address=airport.address,
        code=airport.code,
    )


def passenger_to_dto(passenger: PassengerReadModel) -> PassengerDto:
    return PassengerDto(
        id=passenger.passenger_id,
        name=passenger.name,
        passport_number=passenger.passport_number,
        passenger_type=_passenger_type(passenger.passenger_type),
        age=passenger.age,
    )


def _passenger_type(raw: str | None) -> PassengerType:
    """Unrecognized stored values map to UNKNOWN so the mapper stays total."""
    try:
        return PassengerType((raw or "").lower())
    except ValueError:
        return PassengerType.UNKNOWN
