"""Airport Routes — flight-service endpoints for the airport aggregate.

Invariants:
    - Every route requires an authenticated caller (require_caller)
    - Routes build a request, send it through the mediator, unwrap the outcome;
      no business logic lives here
    - Path is relative: main.py mounts the router under settings.api_base_path
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_mediator, unwrap
from app.core.requests import DeleteAirport, GetAirportById
from app.infrastructure.security import Caller, require_caller
from app.schemas.airport import (
    CreateAirportRequestDto, CreateAirportResponseDto,
    DeleteAirportResponseDto, GetAirportByIdResponseDto,
)
from app.schemas.error import ErrorResponse
from app.services.map_dtos import create_airport_from_request
from app.services.mediator import Mediator

router = APIRouter(prefix="/flight/airport", tags=["flight"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
}


@router.post(
    "", response_model=CreateAirportResponseDto,
    name="CreateAirport", summary="Create Airport",
    description="Create Airport",
    responses={**_ERRORS, status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
async def create_airport(
    body: CreateAirportRequestDto,
    mediator: Mediator = Depends(get_mediator),
    caller: Caller = Depends(require_caller),
):
    command = create_airport_from_request(body, issued_by=caller.subject)
    result = unwrap(await mediator.send(command), "CreateAirport")
    return CreateAirportResponseDto(id=result.id)


@router.get(
    "/{airport_id}", response_model=GetAirportByIdResponseDto,
    name="GetAirportById", summary="Get Airport By Id",
    description="Get Airport By Id",
    responses={**_ERRORS, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_airport_by_id(
    airport_id: UUID,
    mediator: Mediator = Depends(get_mediator),
    caller: Caller = Depends(require_caller),
):
    result = unwrap(
        await mediator.send(GetAirportById(airport_id)), "GetAirportById",
    )
    return GetAirportByIdResponseDto(airport_dto=result.airport_dto)


@router.delete(
    "/{airport_id}", response_model=DeleteAirportResponseDto,
    name="DeleteAirport", summary="Delete Airport",
    description="Soft-delete an airport; its code becomes available again",
    responses={**_ERRORS, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def delete_airport(
    airport_id: UUID,
    mediator: Mediator = Depends(get_mediator),
    caller: Caller = Depends(require_caller),
):
    command = DeleteAirport(airport_id, issued_by=caller.subject)
    result = unwrap(await mediator.send(command), "DeleteAirport")
    return DeleteAirportResponseDto(id=result.id)
