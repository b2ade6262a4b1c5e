from unittest.mock import AsyncMock, MagicMock

import pytest

from user_access_service.formatting import format_name
from user_access_service.schemas import UserProfile
from user_access_service.user_service import UserService


@pytest.fixture
def store():
    store = MagicMock()
    store.get_user = AsyncMock()
    store.save_user = AsyncMock()
    return store


@pytest.fixture
def formatter():
    return MagicMock()


@pytest.fixture
def service(store, formatter):
    return UserService(store, formatter)


class TestGetFormattedUser:
    async def test_fetches_and_formats_user(self, service, store, formatter):
        store.get_user.return_value = UserProfile(id="123", name="Test User")
        formatter.return_value = "TEST USER"

        result = await service.get_formatted_user("123")

        store.get_user.assert_awaited_once_with("123")
        formatter.assert_called_once_with("Test User")
        assert result == UserProfile(id="123", name="TEST USER")

    async def test_propagates_store_errors(self, service, store, formatter):
        error = RuntimeError("Database error")
        store.get_user.side_effect = error

        with pytest.raises(RuntimeError, match="Database error") as exc_info:
            await service.get_formatted_user("123")
        assert exc_info.value is error
        formatter.assert_not_called()

    async def test_returns_none_when_user_is_not_found(self, service, store, formatter):
        store.get_user.return_value = None

        assert await service.get_formatted_user("missing") is None
        formatter.assert_not_called()

    async def test_default_formatter_uppercases(self, store):
        store.get_user.return_value = UserProfile(id="123", name="Test User")

        result = await UserService(store).get_formatted_user("123")

        assert result == UserProfile(id="123", name=format_name("Test User"))
        assert result.name == "TEST USER"


class TestCreateUser:
    async def test_formats_and_saves_user(self, service, store, formatter):
        formatter.return_value = "FORMATTED NAME"

        await service.create_user("456", "John Doe")

        formatter.assert_called_once_with("John Doe")
        store.save_user.assert_awaited_once_with(
            UserProfile(id="456", name="FORMATTED NAME")
        )

    async def test_propagates_save_errors(self, service, store, formatter):
        formatter.return_value = "FORMATTED NAME"
        store.save_user.side_effect = RuntimeError("Save error")

        with pytest.raises(RuntimeError, match="Save error"):
            await service.create_user("456", "John Doe")
        store.save_user.assert_awaited_once()

    @pytest.mark.parametrize("user_id, name", [("", "John Doe"), ("456", "")])
    async def test_rejects_missing_fields(self, service, store, user_id, name):
        with pytest.raises(ValueError):
            await service.create_user(user_id, name)
        store.save_user.assert_not_awaited()
