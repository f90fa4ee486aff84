"""Airport Handlers — create_airport, get_airport_by_id, delete_airport.

Invariants:
    - Each handler performs exactly one precondition read before any write
    - The precondition read excludes soft-deleted rows (is_deleted = false)
    - create_airport stages the insert (add + flush) but never commits:
      the mediator's transaction behaviour owns commit/rollback
    - A unique violation while staging is reported by constraint: live code ->
      AirportAlreadyExistError, primary key -> AirportIdConflictError; any other
      integrity error propagates
    - Handlers never commit or roll back; the mediator rolls back PreconditionFailed
    - Expected failures are returned as PreconditionFailed, never raised

Design Decisions:
    - The uniqueness read is a fast path; the partial unique index
      ux_airports_code_live is the authoritative guard against racing writers
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import (
    AirportAlreadyExistError, AirportIdConflictError, AirportNotFoundError,
)
from app.core.outcomes import Outcome, PreconditionFailed, Success
from app.core.requests import CreateAirport, DeleteAirport, GetAirportById
from app.models.airport import Airport
from app.schemas.airport import AirportDto
from app.services.map_dtos import airport_to_dto

logger = logging.getLogger(__name__)

# constraint names as reported by PostgreSQL, column lists as reported by SQLite
_CODE_CONSTRAINT_MARKERS = ("ux_airports_code_live", "airports.code")
_ID_CONSTRAINT_MARKERS = ("airports_pkey", "airports.id")


def _conflict_for(
    exc: IntegrityError, command: CreateAirport,
) -> AirportAlreadyExistError | AirportIdConflictError | None:
    """Name the unique constraint the store rejected; None if it is neither."""
    reason = str(exc.orig)
    if any(marker in reason for marker in _CODE_CONSTRAINT_MARKERS):
        return AirportAlreadyExistError(command.code)
    if any(marker in reason for marker in _ID_CONSTRAINT_MARKERS):
        return AirportIdConflictError(str(command.id))
    return None


@dataclass(frozen=True)
class CreateAirportResult:
    id: UUID


@dataclass(frozen=True)
class GetAirportByIdResult:
    airport_dto: AirportDto


@dataclass(frozen=True)
class DeleteAirportResult:
    id: UUID


class AirportHandlers:
    """Command and query handlers for the airport aggregate."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find_live(self, criterion) -> Airport | None:
        """Single store read; soft-deleted rows behave as absent."""
        result = await self.db.execute(
            select(Airport)
            .where(criterion)
            .where(Airport.is_deleted.is_(False))
        )
        return result.scalar_one_or_none()

    async def create_airport(self, command: CreateAirport) -> Outcome:
        """Reject a live duplicate code, otherwise stage the new airport."""
        if await self._find_live(Airport.code == command.code) is not None:
            return PreconditionFailed(AirportAlreadyExistError(command.code))

        airport = Airport.create(
            command.id, command.name, command.code, command.address,
            created_by=command.issued_by,
        )
        self.db.add(airport)
        try:
            await self.db.flush()
        except IntegrityError as e:
            conflict = _conflict_for(e, command)
            if conflict is None:
                raise
            logger.warning(
                f"Store rejected airport insert: {conflict.code}",
                extra={"resource_id": str(command.id), "error_code": conflict.code},
            )
            return PreconditionFailed(conflict)

        return Success(CreateAirportResult(airport.id))

    async def get_airport_by_id(self, query: GetAirportById) -> Outcome:
        airport = await self._find_live(Airport.id == query.id)
        if airport is None:
            return PreconditionFailed(AirportNotFoundError(str(query.id)))
        return Success(GetAirportByIdResult(airport_to_dto(airport)))

    async def delete_airport(self, command: DeleteAirport) -> Outcome:
        """Soft delete: the row stays, is_deleted flips, the code is released."""
        airport = await self._find_live(Airport.id == command.id)
        if airport is None:
            return PreconditionFailed(AirportNotFoundError(str(command.id)))
        airport.soft_delete(deleted_by=command.issued_by)
        await self.db.flush()
        return Success(DeleteAirportResult(airport.id))
