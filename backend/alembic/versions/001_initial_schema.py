"""Initial schema — airports (write side), passenger_read_models (read side).

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "airports",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("is_deleted", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("created_by", sa.String(100), nullable=True),
        sa.Column("last_modified", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_modified_by", sa.String(100), nullable=True),
        sa.Column("version", sa.Integer, nullable=False, server_default="1"),
    )
    # one live owner per code; soft-deleted rows release it
    op.create_index(
        "ux_airports_code_live", "airports", ["code"], unique=True,
        postgresql_where=sa.text("is_deleted = false"),
    )

    op.create_table(
        "passenger_read_models",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("passenger_id", UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("passport_number", sa.String(50), nullable=False),
        sa.Column("passenger_type", sa.String(20), nullable=False, server_default="unknown"),
        sa.Column("age", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_deleted", sa.Boolean, nullable=False, server_default="false"),
    )
    op.create_index(
        "ix_passenger_read_models_passenger_id", "passenger_read_models",
        ["passenger_id"], unique=True,
    )


def downgrade() -> None:
    op.drop_index("ix_passenger_read_models_passenger_id", table_name="passenger_read_models")
    op.drop_table("passenger_read_models")
    op.drop_index("ux_airports_code_live", table_name="airports")
    op.drop_table("airports")
