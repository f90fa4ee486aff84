"""Airport Schemas — request/response DTOs for the flight endpoints.

Invariants:
    - Request fields are optional at the transport level: emptiness is a
      pipeline validation failure (field-level 400), not a parse failure
    - Response DTOs expose only visible business fields (no audit, no is_deleted)
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CreateAirportRequestDto(BaseModel):
    """Create airport payload. id is optional: when sent, it becomes the airport id."""
    name: str | None = Field(None, max_length=200)
    address: str | None = Field(None, max_length=500)
    code: str | None = Field(None, max_length=20)
    id: UUID | None = None


class CreateAirportResponseDto(BaseModel):
    id: UUID


class AirportDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    address: str
    code: str


class GetAirportByIdResponseDto(BaseModel):
    airport_dto: AirportDto


class DeleteAirportResponseDto(BaseModel):
    id: UUID
