"""Requests — immutable commands and queries sent through the mediator.

Invariants:
    - Every request is a frozen dataclass; nothing downstream mutates it
    - CreateAirport.id is generated once, when the command is built, and is authoritative
    - Queries carry only their lookup key
"""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from app.core.domain_types import RequestKind


# ─── Commands ────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateAirport:
    name: str | None
    address: str | None
    code: str | None
    id: UUID = field(default_factory=uuid4)
    issued_by: str | None = field(default=None, kw_only=True)

    kind = RequestKind.COMMAND


@dataclass(frozen=True)
class DeleteAirport:
    """Soft delete: flips is_deleted, never removes the row."""
    id: UUID | None
    issued_by: str | None = field(default=None, kw_only=True)

    kind = RequestKind.COMMAND


# ─── Queries ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class GetAirportById:
    id: UUID | None

    kind = RequestKind.QUERY


@dataclass(frozen=True)
class GetPassengerById:
    id: UUID | None

    kind = RequestKind.QUERY
