"""Pipeline Outcomes — the terminal states of one mediator invocation.

Invariants:
    - Success, ValidationFailed, PreconditionFailed are the only returned values
    - An unexpected fault is never a value: it propagates as an exception and
      surfaces as 500 through the catch-all handler
    - ValidationFailed always carries at least one violation
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.core.errors import BookingError

T = TypeVar("T")


@dataclass(frozen=True)
class FieldViolation:
    """One broken field rule."""
    field: str
    message: str
    kind: str = "required"


@dataclass(frozen=True)
class Success(Generic[T]):
    result: T


@dataclass(frozen=True)
class ValidationFailed:
    violations: tuple[FieldViolation, ...]

    def __post_init__(self):
        if not self.violations:
            raise ValueError("ValidationFailed requires at least one violation")


@dataclass(frozen=True)
class PreconditionFailed:
    """Store precondition not met; error is the typed, named failure."""
    error: BookingError


Outcome = Union[Success, ValidationFailed, PreconditionFailed]
