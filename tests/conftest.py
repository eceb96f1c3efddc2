"""
Pytest configuration and shared fixtures for MDB_COLLECTIONS tests.

This module provides:
- Mock Motor collection and database fixtures
- Schema fixtures
- Metrics isolation
"""

from typing import Any, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from mdb_collections.database import connection
from mdb_collections.observability import get_metrics_collector
from mdb_collections.schema import JsonSchema


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no MongoDB server")


# ============================================================================
# ISOLATION FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def reset_metrics():
    """Start every test with an empty global metrics collector."""
    get_metrics_collector().reset()
    yield
    get_metrics_collector().reset()


@pytest.fixture(autouse=True)
def reset_shared_client():
    """Make sure no test leaks a shared client into the next one."""
    connection._shared_client = None
    yield
    connection._shared_client = None


# ============================================================================
# MOCK MONGODB FIXTURES
# ============================================================================


def _make_collection(name: str) -> MagicMock:
    collection = MagicMock(spec=AsyncIOMotorCollection)
    collection.name = name
    collection.find = MagicMock(return_value=MagicMock(to_list=AsyncMock(return_value=[])))
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id="test_id"))
    collection.insert_many = AsyncMock(return_value=MagicMock(inserted_ids=["id1", "id2"]))
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.update_one = AsyncMock(return_value=MagicMock(modified_count=1))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.count_documents = AsyncMock(return_value=0)
    collection.aggregate = MagicMock(return_value=MagicMock(to_list=AsyncMock(return_value=[])))
    return collection


@pytest.fixture
def mock_mongo_collection() -> MagicMock:
    """Create a mock Motor collection."""
    return _make_collection("test_collection")


@pytest.fixture
def mock_mongo_database() -> MagicMock:
    """Create a mock Motor database whose get_collection builds mock collections."""
    db = MagicMock(spec=AsyncIOMotorDatabase)
    db.name = "test_db"
    db.get_collection = MagicMock(side_effect=_make_collection)
    return db


# ============================================================================
# SCHEMA FIXTURES
# ============================================================================


@pytest.fixture
def user_json_schema() -> Dict[str, Any]:
    """Provide a JSON schema for user documents."""
    return {
        "type": "object",
        "properties": {
            "email": {"type": "string"},
            "name": {"type": "string"},
            "age": {"type": "integer", "minimum": 0},
        },
        "required": ["email", "name"],
    }


@pytest.fixture
def user_schema(user_json_schema: Dict[str, Any]) -> JsonSchema:
    """Provide a JsonSchema adapter for user documents."""
    return JsonSchema(user_json_schema)


@pytest.fixture
def valid_user() -> Dict[str, Any]:
    return {"email": "ada@example.com", "name": "Ada", "age": 36}
