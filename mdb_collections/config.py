"""
Configuration management for MDB_COLLECTIONS.

Collection definitions need no configuration; this module only covers the
connection that produces the database handle they are bound to.
"""

import os

from .constants import (DEFAULT_MAX_IDLE_TIME_MS, DEFAULT_MAX_POOL_SIZE,
                        DEFAULT_MIN_POOL_SIZE,
                        DEFAULT_SERVER_SELECTION_TIMEOUT_MS)
from .exceptions import ConfigurationError


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{key} must be an integer", config_key=key, config_value=raw
        ) from e


class FacadeConfig:
    """
    MongoDB connection configuration.

    Explicit arguments win over environment variables, which win over
    the defaults in ``constants``.

    Example:
        # Using environment variables
        config = FacadeConfig()
        config.validate()
        db = get_database(config)

        # Or using direct parameters
        config = FacadeConfig(
            mongo_uri="mongodb://localhost:27017",
            db_name="my_db"
        )
    """

    def __init__(
        self,
        mongo_uri: str | None = None,
        db_name: str | None = None,
        max_pool_size: int | None = None,
        min_pool_size: int | None = None,
        server_selection_timeout_ms: int | None = None,
        max_idle_time_ms: int | None = None,
    ):
        """
        Initialize configuration.

        Args:
            mongo_uri: MongoDB connection URI (defaults to MONGO_URI env var)
            db_name: Database name (defaults to DB_NAME env var)
            max_pool_size: Maximum connection pool size (MONGO_MAX_POOL_SIZE)
            min_pool_size: Minimum connection pool size (MONGO_MIN_POOL_SIZE)
            server_selection_timeout_ms: Server selection timeout in ms
                (MONGO_SERVER_SELECTION_TIMEOUT_MS)
            max_idle_time_ms: Idle time before pooled connections close
                (MONGO_MAX_IDLE_TIME_MS)
        """
        self.mongo_uri = mongo_uri or os.getenv("MONGO_URI", "")
        self.db_name = db_name or os.getenv("DB_NAME", "")
        self.max_pool_size = max_pool_size or _env_int(
            "MONGO_MAX_POOL_SIZE", DEFAULT_MAX_POOL_SIZE
        )
        self.min_pool_size = min_pool_size or _env_int(
            "MONGO_MIN_POOL_SIZE", DEFAULT_MIN_POOL_SIZE
        )
        self.server_selection_timeout_ms = server_selection_timeout_ms or _env_int(
            "MONGO_SERVER_SELECTION_TIMEOUT_MS", DEFAULT_SERVER_SELECTION_TIMEOUT_MS
        )
        self.max_idle_time_ms = max_idle_time_ms or _env_int(
            "MONGO_MAX_IDLE_TIME_MS", DEFAULT_MAX_IDLE_TIME_MS
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        if not self.mongo_uri:
            raise ConfigurationError(
                "mongo_uri is required (set MONGO_URI environment variable or pass directly)",
                config_key="mongo_uri",
            )

        if not self.mongo_uri.startswith(("mongodb://", "mongodb+srv://")):
            raise ConfigurationError(
                "mongo_uri must start with 'mongodb://' or 'mongodb+srv://'",
                config_key="mongo_uri",
            )

        if not self.db_name:
            raise ConfigurationError(
                "db_name is required (set DB_NAME environment variable or pass directly)",
                config_key="db_name",
            )

        if self.max_pool_size < 1:
            raise ConfigurationError(
                f"max_pool_size must be >= 1, got {self.max_pool_size}",
                config_key="max_pool_size",
                config_value=self.max_pool_size,
            )

        if self.min_pool_size < 1:
            raise ConfigurationError(
                f"min_pool_size must be >= 1, got {self.min_pool_size}",
                config_key="min_pool_size",
                config_value=self.min_pool_size,
            )

        if self.min_pool_size > self.max_pool_size:
            raise ConfigurationError(
                f"min_pool_size ({self.min_pool_size}) cannot be greater than "
                f"max_pool_size ({self.max_pool_size})",
                config_key="min_pool_size",
                config_value=self.min_pool_size,
            )

        if self.server_selection_timeout_ms < 1000:
            raise ConfigurationError(
                f"server_selection_timeout_ms must be >= 1000, got "
                f"{self.server_selection_timeout_ms}",
                config_key="server_selection_timeout_ms",
                config_value=self.server_selection_timeout_ms,
            )
