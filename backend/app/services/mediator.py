"""Mediator — explicit routing from request type to validator + handler.

Invariants:
    - Every request->handler mapping is visible in one dict, built at construction
    - Validation runs first; a request with violations never reaches the store
    - Commands commit only on Success and roll back otherwise; queries never commit
    - Each handler runs under the configured request timeout; cancellation is
      cooperative and lands at the next store await
    - Unknown request types raise UnknownRequestError (programming error, 500)

Design Decisions:
    - Behaviours (logging, validation, timeout, transaction) are plain steps in
      send() rather than a middleware chain: there are four and their order is fixed
    - One Mediator per request, bound to that request's AsyncSession
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import RequestKind
from app.core.errors import RequestTimeoutError, UnknownRequestError
from app.core.outcomes import FieldViolation, Outcome, Success, ValidationFailed
from app.core.requests import (
    CreateAirport, DeleteAirport, GetAirportById, GetPassengerById,
)
from app.core.validate_requests import (
    validate_create_airport, validate_delete_airport,
    validate_get_airport_by_id, validate_get_passenger_by_id,
)
from app.services.handle_airports import AirportHandlers
from app.services.handle_passengers import PassengerHandlers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandlerRoute:
    validate: Callable[[Any], list[FieldViolation]]
    handle: Callable[[Any], Awaitable[Outcome]]


class Mediator:
    """Routes request -> (validator, handler). Explicit registration, no auto-discovery."""

    def __init__(
        self, db: AsyncSession,
        timeout_seconds: float | None = None,
        slow_threshold_ms: int = 3000,
    ):
        self._db = db
        self._timeout_seconds = timeout_seconds
        self._slow_threshold_ms = slow_threshold_ms
        airports = AirportHandlers(db)
        passengers = PassengerHandlers(db)

        # adding a request type requires editing this dict
        self._routes: dict[type, HandlerRoute] = {
            # Flight
            CreateAirport: HandlerRoute(
                validate_create_airport, airports.create_airport,
            ),
            GetAirportById: HandlerRoute(
                validate_get_airport_by_id, airports.get_airport_by_id,
            ),
            DeleteAirport: HandlerRoute(
                validate_delete_airport, airports.delete_airport,
            ),

            # Passenger
            GetPassengerById: HandlerRoute(
                validate_get_passenger_by_id, passengers.get_passenger_by_id,
            ),
        }

    @property
    def registered_requests(self) -> frozenset[type]:
        return frozenset(self._routes)

    async def send(self, request: Any) -> Outcome:
        """Run the full pipeline for one request and return its outcome."""
        request_type = type(request).__name__
        route = self._routes.get(type(request))
        if route is None:
            raise UnknownRequestError(request_type)

        started = time.perf_counter()
        logger.debug(
            f"[START] {request_type}", extra={"request_type": request_type},
        )

        violations = route.validate(request)
        if violations:
            outcome = ValidationFailed(tuple(violations))
        else:
            outcome = await self._invoke(route, request, request_type)

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        self._log_outcome(request, outcome, duration_ms)
        return outcome

    async def _invoke(
        self, route: HandlerRoute, request: Any, request_type: str,
    ) -> Outcome:
        """Handler call under timeout, wrapped in the transaction behaviour for commands."""
        is_command = request.kind is RequestKind.COMMAND
        try:
            outcome = await asyncio.wait_for(
                route.handle(request), timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            await self._db.rollback()
            raise RequestTimeoutError(request_type, self._timeout_seconds)
        except Exception:
            if is_command:
                await self._db.rollback()
            raise

        if is_command:
            if isinstance(outcome, Success):
                await self._db.commit()
            else:
                await self._db.rollback()
        return outcome

    def _log_outcome(
        self, request: Any, outcome: Outcome, duration_ms: float,
    ) -> None:
        request_type = type(request).__name__
        extra = {
            "request_type": request_type,
            "outcome": type(outcome).__name__,
            "duration_ms": duration_ms,
            "caller": getattr(request, "issued_by", None),
        }
        if isinstance(outcome, ValidationFailed):
            fields = ", ".join(v.field for v in outcome.violations)
            logger.warning(
                f"{request_type} rejected: invalid fields [{fields}]",
                extra=extra,
            )
        elif isinstance(outcome, Success):
            logger.info(f"[END] {request_type}", extra=extra)
        else:
            extra["error_code"] = outcome.error.code
            extra["resource_id"] = outcome.error.context.resource_id
            logger.info(
                f"{request_type} precondition failed: {outcome.error.message}",
                extra=extra,
            )
        if duration_ms > self._slow_threshold_ms:
            logger.warning(
                f"[PERFORMANCE] {request_type} took {duration_ms}ms",
                extra=extra,
            )
