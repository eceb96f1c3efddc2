"""
Unit tests for the shared Motor client.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import ConnectionFailure

from mdb_collections.config import FacadeConfig
from mdb_collections.database import connection
from mdb_collections.exceptions import ConfigurationError


@pytest.fixture
def config() -> FacadeConfig:
    return FacadeConfig(
        mongo_uri="mongodb://localhost:27017",
        db_name="test_db",
        max_pool_size=10,
        min_pool_size=1,
    )


@pytest.mark.unit
class TestSharedClient:
    """Test the shared client singleton."""

    def test_creates_client_once(self, config):
        with patch("mdb_collections.database.connection.AsyncIOMotorClient") as client_cls:
            first = connection.get_shared_client(config)
            second = connection.get_shared_client(config)

        assert first is second
        client_cls.assert_called_once()
        args, kwargs = client_cls.call_args
        assert args == ("mongodb://localhost:27017",)
        assert kwargs["maxPoolSize"] == 10
        assert kwargs["minPoolSize"] == 1

    def test_invalid_config_is_rejected(self):
        with patch("mdb_collections.database.connection.AsyncIOMotorClient") as client_cls:
            with pytest.raises(ConfigurationError):
                connection.get_shared_client(FacadeConfig(mongo_uri="", db_name="x"))
        client_cls.assert_not_called()

    def test_get_database(self, config):
        client = MagicMock()
        db = MagicMock()
        client.__getitem__.return_value = db

        with patch(
            "mdb_collections.database.connection.AsyncIOMotorClient", return_value=client
        ):
            assert connection.get_database(config) is db

        client.__getitem__.assert_called_once_with("test_db")

    def test_close_resets_singleton(self, config):
        with patch("mdb_collections.database.connection.AsyncIOMotorClient") as client_cls:
            client = connection.get_shared_client(config)
            connection.close_shared_client()

        client.close.assert_called_once()
        assert connection._shared_client is None
        assert client_cls.call_count == 1

    def test_close_without_client_is_noop(self):
        connection.close_shared_client()
        assert connection._shared_client is None


@pytest.mark.unit
class TestVerifySharedClient:
    """Test ping-based verification."""

    @pytest.mark.asyncio
    async def test_no_client(self):
        assert await connection.verify_shared_client() is False

    @pytest.mark.asyncio
    async def test_ping_success(self, config):
        client = MagicMock()
        client.admin.command = AsyncMock(return_value={"ok": 1})
        with patch(
            "mdb_collections.database.connection.AsyncIOMotorClient", return_value=client
        ):
            connection.get_shared_client(config)

        assert await connection.verify_shared_client() is True
        client.admin.command.assert_awaited_once_with("ping")

    @pytest.mark.asyncio
    async def test_ping_failure(self, config):
        client = MagicMock()
        client.admin.command = AsyncMock(side_effect=ConnectionFailure("down"))
        with patch(
            "mdb_collections.database.connection.AsyncIOMotorClient", return_value=client
        ):
            connection.get_shared_client(config)

        assert await connection.verify_shared_client() is False
