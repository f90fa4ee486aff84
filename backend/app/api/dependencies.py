"""API Dependencies — per-request mediator and outcome unwrapping.

Invariants:
    - One Mediator per request, bound to the request's own AsyncSession
    - unwrap() is the only place failure outcomes become exceptions; the
      registered exception handlers turn those into status codes
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.errors import ErrorContext, RequestValidationFailedError
from app.core.outcomes import Outcome, PreconditionFailed, Success, ValidationFailed
from app.infrastructure.database import get_db
from app.services.mediator import Mediator


async def get_mediator(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Mediator:
    return Mediator(
        db,
        timeout_seconds=settings.request_timeout_seconds,
        slow_threshold_ms=settings.slow_request_threshold_ms,
    )


def unwrap(outcome: Outcome, request_type: str):
    """Return the success payload or raise the typed failure."""
    if isinstance(outcome, Success):
        return outcome.result
    if isinstance(outcome, ValidationFailed):
        raise RequestValidationFailedError(
            outcome.violations, ErrorContext(request_type=request_type),
        )
    if isinstance(outcome, PreconditionFailed):
        outcome.error.context.request_type = request_type
        raise outcome.error
    raise TypeError(f"Unexpected outcome {type(outcome).__name__}")
