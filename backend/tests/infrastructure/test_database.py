"""Database Session Manager — verifies rollback and error mapping."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from app.core.errors import DatabaseError
from app.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_health_check_passes(manager):
    assert await manager.health_check() is True


async def test_operational_error_becomes_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session():
            raise OperationalError("SELECT 1", {}, Exception("gone"))
    assert exc_info.value.http_status == 500
    assert exc_info.value.code == "INTERNAL_ERROR"
    assert exc_info.value.operation == "execute"
    assert exc_info.value.context.debug_info["operation"] == "execute"


async def test_sql_error_inside_session_becomes_database_error(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))


async def test_other_exceptions_pass_through(manager):
    with pytest.raises(KeyError):
        async with manager.session():
            raise KeyError("x")
