"""
Constants for MDB_COLLECTIONS.

This module contains all shared constants used across the codebase to avoid
magic numbers and improve maintainability.
"""

from typing import Final, Tuple

# ============================================================================
# HOOK CONSTANTS
# ============================================================================

INSERT_ONE: Final[str] = "insert_one"
FIND_ONE_AND_UPDATE: Final[str] = "find_one_and_update"

HOOKABLE_OPERATIONS: Final[Tuple[str, ...]] = (INSERT_ONE, FIND_ONE_AND_UPDATE)
"""Collection operations the facade intercepts. Everything else is forwarded."""

HOOK_PHASES: Final[Tuple[str, ...]] = ("pre", "post")
"""Phases a hook chain can be registered for."""

RESERVED_OPERATIONS: Final[Tuple[str, ...]] = ("paginate",)
"""Operations declared on the facade surface but not yet available."""

# ============================================================================
# DATABASE CONSTANTS
# ============================================================================

# Connection pool defaults
DEFAULT_MAX_POOL_SIZE: Final[int] = 50
"""Default maximum MongoDB connection pool size."""

DEFAULT_MIN_POOL_SIZE: Final[int] = 10
"""Default minimum MongoDB connection pool size."""

DEFAULT_SERVER_SELECTION_TIMEOUT_MS: Final[int] = 5000
"""Default server selection timeout in milliseconds."""

DEFAULT_MAX_IDLE_TIME_MS: Final[int] = 45000
"""Default maximum idle time before closing connections (milliseconds)."""

# ============================================================================
# VALIDATION CONSTANTS
# ============================================================================

MAX_COLLECTION_NAME_LENGTH: Final[int] = 255
"""Maximum length for MongoDB collection names."""

RESERVED_COLLECTION_PREFIX: Final[str] = "system."
"""Prefix MongoDB reserves for internal collections."""

# ============================================================================
# METRICS CONSTANTS
# ============================================================================

DEFAULT_MAX_METRICS: Final[int] = 10000
"""Maximum number of distinct metric keys kept before LRU eviction."""
