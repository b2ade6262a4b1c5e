"""Relational persistence for registered users.

:class:`Database` owns one SQLAlchemy async engine, whose pool provides
connection reuse and reconnection, and issues exactly two parameterized
statements against the ``users`` table. Failures raised by the engine or
the driver are never caught here; they reach the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from user_access_service.config import DEFAULT_DB_DRIVER, Settings
from user_access_service.models import Base

logger = logging.getLogger(__name__)

UserRow = Dict[str, Any]

# Named binds stand for the positional statements
#   SELECT * FROM users WHERE username = ?
#   INSERT INTO users (username, password) VALUES (?, ?)
# and are rendered in the driver's paramstyle (%s for aiomysql, ? for SQLite).
SELECT_USER_BY_USERNAME = text("SELECT * FROM users WHERE username = :username")
INSERT_USER = text(
    "INSERT INTO users (username, password) VALUES (:username, :password)"
)


class UserDatabase(Protocol):
    """Capability used by the HTTP layer to look up and register users."""

    async def get_user(self, username: str) -> Optional[UserRow]: ...

    async def create_user(self, username: str, password: str) -> int: ...


class Database:
    """Persistence component bound to one pooled async engine.

    Parameters
    ----------
    host, port, user, password, database:
        Connection parameters, fixed for the lifetime of the instance.
    drivername:
        SQLAlchemy dialect and driver, ``mysql+aiomysql`` by default.
    engine_options:
        Extra keyword arguments forwarded to
        :func:`~sqlalchemy.ext.asyncio.create_async_engine` (pool size,
        ``echo`` and so on).
    """

    def __init__(
        self,
        host: Optional[str],
        port: Optional[int],
        user: Optional[str],
        password: Optional[str],
        database: str,
        *,
        drivername: str = DEFAULT_DB_DRIVER,
        **engine_options: Any,
    ) -> None:
        self.url = URL.create(
            drivername,
            username=user,
            password=password,
            host=host,
            port=port,
            database=database,
        )
        self.engine: AsyncEngine = create_async_engine(self.url, **engine_options)

    @classmethod
    def from_settings(cls, settings: Settings, **engine_options: Any) -> "Database":
        return cls(
            settings.db_host,
            settings.db_port,
            settings.db_user,
            settings.db_password,
            settings.db_name,
            drivername=settings.db_driver,
            **engine_options,
        )

    async def get_user(self, username: str) -> Optional[UserRow]:
        """Return the row registered under ``username``.

        ``None`` is returned when no row matches; an empty result is not an
        error.
        """
        async with self.engine.connect() as conn:
            result = await conn.execute(
                SELECT_USER_BY_USERNAME, {"username": username}
            )
            row = result.mappings().first()
        if row is None:
            logger.debug("No user registered as %s", username)
            return None
        return dict(row)

    async def create_user(self, username: str, password: str) -> int:
        """Insert a user and return the identifier generated by the store."""
        async with self.engine.begin() as conn:
            result = await conn.execute(
                INSERT_USER, {"username": username, "password": password}
            )
            user_id = result.lastrowid
        logger.info("Created user %s with id %s", username, user_id)
        return user_id

    async def create_tables(self) -> None:
        """Create the mapped tables if they do not exist yet.

        Intended for development and test databases; production schemas are
        managed outside of this service.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured for %s", self.url.render_as_string())

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database connection pool disposed.")
