"""Passenger Routes — passenger-service query endpoints.

Invariants:
    - Every route requires an authenticated caller (require_caller)
    - Soft-deleted passengers are reported as 404, same as never-created ones
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_mediator, unwrap
from app.core.requests import GetPassengerById
from app.infrastructure.security import Caller, require_caller
from app.schemas.error import ErrorResponse
from app.schemas.passenger import GetPassengerByIdResponseDto
from app.services.mediator import Mediator

router = APIRouter(prefix="/passenger", tags=["passenger"])


@router.get(
    "/{passenger_id}", response_model=GetPassengerByIdResponseDto,
    name="GetPassengerById", summary="Get Passenger By Id",
    description="Get Passenger By Id",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
async def get_passenger_by_id(
    passenger_id: UUID,
    mediator: Mediator = Depends(get_mediator),
    caller: Caller = Depends(require_caller),
):
    result = unwrap(
        await mediator.send(GetPassengerById(passenger_id)), "GetPassengerById",
    )
    return GetPassengerByIdResponseDto(passenger_dto=result.passenger_dto)
