"""Passenger Read Model — query-side projection of the passenger service.

Invariants:
    - passenger_id is the lookup key used by queries; id is the row key
    - reads always filter on is_deleted = false
    - rows are written by the passenger projection, never by this API

Design Decisions:
    - Stored as a plain table in the same database: the read side only needs
      point lookups by passenger_id, which a unique index serves
"""

import uuid

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import Uuid

from app.db.base import Base


class PassengerReadModel(Base):
    """Denormalized passenger document."""
    __tablename__ = "passenger_read_models"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    passenger_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), nullable=False, unique=True, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    passport_number: Mapped[str] = mapped_column(String(50), nullable=False)
    passenger_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="unknown",
    )
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
