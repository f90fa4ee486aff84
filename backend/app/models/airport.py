"""Airport ORM — write-side aggregate of the flight service.

Invariants:
    - id is assigned by the caller (the command's id), never by the database
    - code has at most one live owner: partial unique index over is_deleted = false
    - rows are never physically deleted; soft_delete() flips is_deleted
    - version increments on every mutation after creation
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import Uuid

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Airport(Base):
    """Airport aggregate root."""
    __tablename__ = "airports"
    __table_args__ = (
        Index(
            "ux_airports_code_live", "code", unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    code: Mapped[str] = mapped_column(String(20), nullable=False)
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    created_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_modified: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    last_modified_by: Mapped[str | None] = mapped_column(
        String(100), nullable=True,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    @classmethod
    def create(
        cls, id: uuid.UUID, name: str, code: str, address: str,
        created_by: str | None = None,
    ) -> "Airport":
        """Build a new live airport carrying the pre-generated id."""
        return cls(
            id=id, name=name, code=code, address=address,
            is_deleted=False, created_at=_utcnow(), created_by=created_by,
            version=1,
        )

    def soft_delete(self, deleted_by: str | None = None) -> None:
        self.is_deleted = True
        self.last_modified = _utcnow()
        self.last_modified_by = deleted_by
        self.version += 1
