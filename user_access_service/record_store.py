"""Record stores used by :class:`~user_access_service.user_service.UserService`.

A record store persists and retrieves :class:`UserProfile` values keyed by
a caller-supplied string identifier. ``SqlUserRecordStore`` keeps them in
the ``user_profiles`` table; ``SimulatedUserRecordStore`` fabricates them
in process for demos.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from user_access_service.models import UserProfileRecord
from user_access_service.schemas import UserProfile

logger = logging.getLogger(__name__)


class UserRecordStore(Protocol):
    """Capability that persists and retrieves user profiles."""

    async def get_user(self, user_id: str) -> Optional[UserProfile]: ...

    async def save_user(self, user: UserProfile) -> None: ...


class SqlUserRecordStore:
    """Profile store backed by the ``user_profiles`` table.

    ``save_user`` is an upsert by id: saving the same id twice leaves one
    row holding the most recent name.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._session_maker = async_sessionmaker(bind=engine, expire_on_commit=False)

    async def get_user(self, user_id: str) -> Optional[UserProfile]:
        async with self._session_maker() as session:
            record = await session.get(UserProfileRecord, user_id)
            if record is None:
                return None
            return UserProfile(id=record.id, name=record.name)

    async def save_user(self, user: UserProfile) -> None:
        async with self._session_maker() as session:
            try:
                await session.merge(UserProfileRecord(id=user.id, name=user.name))
                await session.commit()
            except Exception:
                await session.rollback()
                raise
        logger.info("Saved user profile %s", user.id)


class SimulatedUserRecordStore:
    """In-process store that invents a profile for every id and saves nothing."""

    async def get_user(self, user_id: str) -> Optional[UserProfile]:
        return UserProfile(id=user_id, name=f"User {user_id}")

    async def save_user(self, user: UserProfile) -> None:
        logger.info("Saving user %s to database", user.name)
