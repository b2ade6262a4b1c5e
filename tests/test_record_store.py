import logging

import pytest

from user_access_service.record_store import SimulatedUserRecordStore, SqlUserRecordStore
from user_access_service.schemas import UserProfile


@pytest.fixture
def store(sqlite_database):
    return SqlUserRecordStore(sqlite_database.engine)


async def test_saved_profile_is_returned(store):
    await store.save_user(UserProfile(id="456", name="JOHN DOE"))

    assert await store.get_user("456") == UserProfile(id="456", name="JOHN DOE")


async def test_missing_profile_is_not_found(store):
    assert await store.get_user("does-not-exist") is None


async def test_saving_same_id_twice_keeps_latest_name(store, sqlite_database):
    await store.save_user(UserProfile(id="456", name="JOHN DOE"))
    await store.save_user(UserProfile(id="456", name="JANE DOE"))

    assert await store.get_user("456") == UserProfile(id="456", name="JANE DOE")
    async with sqlite_database.engine.connect() as conn:
        count = await conn.exec_driver_sql("SELECT COUNT(*) FROM user_profiles")
        assert count.scalar_one() == 1


async def test_simulated_store_fabricates_profiles():
    store = SimulatedUserRecordStore()

    assert await store.get_user("123") == UserProfile(id="123", name="User 123")


async def test_simulated_store_logs_saves(caplog):
    caplog.set_level(logging.INFO)
    store = SimulatedUserRecordStore()

    await store.save_user(UserProfile(id="456", name="Test User"))

    assert "Saving user Test User to database" in caplog.messages
