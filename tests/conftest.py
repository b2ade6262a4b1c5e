"""Shared fixtures for the user access service tests."""

from __future__ import annotations

from typing import AsyncIterator
from unittest.mock import AsyncMock, MagicMock

import pytest

from user_access_service.database import Database


@pytest.fixture
async def sqlite_database(tmp_path) -> AsyncIterator[Database]:
    """A :class:`Database` backed by a throwaway SQLite file with tables created."""
    database = Database(
        None,
        None,
        None,
        None,
        str(tmp_path / "users.db"),
        drivername="sqlite+aiosqlite",
    )
    await database.create_tables()
    yield database
    await database.dispose()


@pytest.fixture
def mock_database() -> MagicMock:
    database = MagicMock()
    database.get_user = AsyncMock(return_value=None)
    database.create_user = AsyncMock(return_value=1)
    return database
