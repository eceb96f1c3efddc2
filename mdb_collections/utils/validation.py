"""
Input validation utilities for MDB_COLLECTIONS.
"""

import re

from ..constants import MAX_COLLECTION_NAME_LENGTH, RESERVED_COLLECTION_PREFIX

_COLLECTION_NAME_RE = re.compile(r"^[a-zA-Z0-9_.-]+$")


def validate_collection_name(name: str) -> str:
    """
    Validate a collection name.

    Args:
        name: Collection name to validate

    Returns:
        Validated collection name

    Raises:
        ValueError: If collection name is invalid
    """
    if not name or not isinstance(name, str):
        raise ValueError("Collection name must be a non-empty string")

    if not _COLLECTION_NAME_RE.match(name):
        raise ValueError(
            f"Invalid collection name: {name}. "
            f"Only letters, digits, underscores, hyphens and dots are allowed."
        )

    if name.startswith(RESERVED_COLLECTION_PREFIX):
        raise ValueError(
            f"Invalid collection name: {name}. "
            f"The '{RESERVED_COLLECTION_PREFIX}' prefix is reserved by MongoDB."
        )

    if name.startswith(".") or name.endswith("."):
        raise ValueError(f"Invalid collection name: {name}. Cannot start or end with '.'")

    if len(name) > MAX_COLLECTION_NAME_LENGTH:
        raise ValueError(
            f"Collection name too long: {name} (max {MAX_COLLECTION_NAME_LENGTH} characters)"
        )

    return name
