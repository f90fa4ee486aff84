"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AirportId, PassengerId wrap UUIDs — never use bare UUID in domain logic
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

AirportId = NewType("AirportId", UUID)
PassengerId = NewType("PassengerId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class PassengerType(str, Enum):
    """Passenger classification carried on the passenger read model."""
    UNKNOWN = "unknown"
    MALE = "male"
    FEMALE = "female"
    BABY = "baby"


class RequestKind(str, Enum):
    """Commands change state and run inside the transaction behaviour; queries only read."""
    COMMAND = "command"
    QUERY = "query"
