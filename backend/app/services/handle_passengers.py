"""Passenger Handlers — get_passenger_by_id over the passenger read model.

Invariants:
    - Existence check and read are fused into one query filtered on
      passenger_id and is_deleted = false
    - Read-only: never stages a write
"""

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import PassengerNotFoundError
from app.core.outcomes import Outcome, PreconditionFailed, Success
from app.core.requests import GetPassengerById
from app.models.passenger import PassengerReadModel
from app.schemas.passenger import PassengerDto
from app.services.map_dtos import passenger_to_dto


@dataclass(frozen=True)
class GetPassengerByIdResult:
    passenger_dto: PassengerDto


class PassengerHandlers:
    """Query handlers for the passenger read model."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_passenger_by_id(self, query: GetPassengerById) -> Outcome:
        result = await self.db.execute(
            select(PassengerReadModel)
            .where(PassengerReadModel.passenger_id == query.id)
            .where(PassengerReadModel.is_deleted.is_(False))
        )
        passenger = result.scalar_one_or_none()
        if passenger is None:
            return PreconditionFailed(PassengerNotFoundError(str(query.id)))
        return Success(GetPassengerByIdResult(passenger_to_dto(passenger)))
