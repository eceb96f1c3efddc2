"""
Utility helpers for MDB_COLLECTIONS.
"""

from .validation import validate_collection_name

__all__ = ["validate_collection_name"]
