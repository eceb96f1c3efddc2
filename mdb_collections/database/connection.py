"""
Shared MongoDB Connection

Provides a process-wide Motor client so every collection definition bound
at connection-ready time shares one connection pool.

Usage:
    from mdb_collections import collection
    from mdb_collections.database import get_database

    users = collection("users", users_schema)

    db = get_database()  # reads MONGO_URI / DB_NAME
    users_collection = users(db)
"""

import logging
import threading

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import (ConfigurationError as PyMongoConfigurationError,
                            ConnectionFailure, InvalidOperation,
                            OperationFailure, ServerSelectionTimeoutError)

from ..config import FacadeConfig

logger = logging.getLogger(__name__)

# Global singleton instance
_shared_client: AsyncIOMotorClient | None = None
# threading.Lock rather than asyncio.Lock: clients may be created outside a loop
_init_lock = threading.Lock()


def get_shared_client(config: FacadeConfig | None = None) -> AsyncIOMotorClient:
    """
    Gets or creates the shared Motor client.

    Args:
        config: Connection configuration (defaults to environment-based FacadeConfig)

    Returns:
        Shared AsyncIOMotorClient instance

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    global _shared_client

    if _shared_client is not None:
        return _shared_client

    config = config or FacadeConfig()
    config.validate()

    with _init_lock:
        # Another thread may have initialized while we waited
        if _shared_client is not None:
            return _shared_client

        logger.info(
            f"Creating shared MongoDB client with max_pool_size={config.max_pool_size}, "
            f"min_pool_size={config.min_pool_size}"
        )
        try:
            _shared_client = AsyncIOMotorClient(
                config.mongo_uri,
                serverSelectionTimeoutMS=config.server_selection_timeout_ms,
                appname="MDB_COLLECTIONS",
                maxPoolSize=config.max_pool_size,
                minPoolSize=config.min_pool_size,
                maxIdleTimeMS=config.max_idle_time_ms,
            )
        except (
            ConnectionFailure,
            ServerSelectionTimeoutError,
            PyMongoConfigurationError,
            ValueError,
            TypeError,
        ) as e:
            logger.error(f"Failed to create shared MongoDB client: {e}", exc_info=True)
            _shared_client = None
            raise

    return _shared_client


def get_database(config: FacadeConfig | None = None) -> AsyncIOMotorDatabase:
    """
    Returns the configured database from the shared client.

    The result is what collection definitions are called with.
    """
    config = config or FacadeConfig()
    client = get_shared_client(config)
    return client[config.db_name]


async def verify_shared_client() -> bool:
    """
    Pings the server through the shared client.

    Returns:
        True if client is connected and responsive, False otherwise
    """
    if _shared_client is None:
        logger.warning("Shared MongoDB client is None - cannot verify")
        return False

    try:
        await _shared_client.admin.command("ping")
        logger.debug("Shared MongoDB client verification successful")
        return True
    except (
        ConnectionFailure,
        ServerSelectionTimeoutError,
        OperationFailure,
        InvalidOperation,
    ):
        logger.exception("Shared MongoDB client verification failed")
        return False


def close_shared_client() -> None:
    """
    Closes the shared MongoDB client.
    Should be called during application shutdown.
    """
    global _shared_client

    if _shared_client is not None:
        try:
            _shared_client.close()
            logger.info("Shared MongoDB client closed")
        except (InvalidOperation, AttributeError, RuntimeError) as e:
            logger.warning(f"Error closing shared MongoDB client: {e}")
        finally:
            _shared_client = None
