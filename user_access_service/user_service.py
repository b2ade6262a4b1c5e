"""Orchestration of user profiles.

``UserService`` combines a record store with the display-name formatting
rule. Both collaborators are passed to the constructor so that either can
be replaced, for instance by a test double, without touching the
orchestration itself.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from user_access_service.formatting import format_name
from user_access_service.record_store import UserRecordStore
from user_access_service.schemas import UserProfile

logger = logging.getLogger(__name__)

NameFormatter = Callable[[str], str]


class UserService:
    """Fetch-then-format and format-then-save operations on user profiles."""

    def __init__(
        self, store: UserRecordStore, formatter: NameFormatter = format_name
    ) -> None:
        self.store = store
        self.formatter = formatter

    async def get_formatted_user(self, user_id: str) -> Optional[UserProfile]:
        """Return the profile stored under ``user_id`` with a formatted name.

        ``None`` is returned when the store has no such profile. Failures of
        the store are propagated as raised.
        """
        user = await self.store.get_user(user_id)
        if user is None:
            logger.debug("User profile %s not found", user_id)
            return None
        return UserProfile(id=user.id, name=self.formatter(user.name))

    async def create_user(self, user_id: str, name: str) -> None:
        """Format ``name`` and save the profile under ``user_id``."""
        if not user_id or not name:
            raise ValueError("user_id and name are required")
        formatted_name = self.formatter(name)
        await self.store.save_user(UserProfile(id=user_id, name=formatted_name))
