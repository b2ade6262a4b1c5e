"""Command-line walkthrough of :class:`~user_access_service.user_service.UserService`.

Fetches and formats the profile ``"123"`` and then creates ``"456"``
named ``"John Doe"`` against the simulated record store.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from user_access_service.config import setup_logging
from user_access_service.record_store import SimulatedUserRecordStore
from user_access_service.schemas import UserProfile
from user_access_service.user_service import UserService

logger = logging.getLogger(__name__)


async def run_demo(service: UserService) -> Optional[UserProfile]:
    user = await service.get_formatted_user("123")
    logger.info("Fetched user: %s", user)
    await service.create_user("456", "John Doe")
    return user


def main() -> None:
    setup_logging()
    asyncio.run(run_demo(UserService(SimulatedUserRecordStore())))


if __name__ == "__main__":
    main()
