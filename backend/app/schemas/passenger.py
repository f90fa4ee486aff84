"""Passenger Schemas — response DTOs for the passenger query endpoint."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.core.domain_types import PassengerType


class PassengerDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    passport_number: str
    passenger_type: PassengerType
    age: int


class GetPassengerByIdResponseDto(BaseModel):
    passenger_dto: PassengerDto
