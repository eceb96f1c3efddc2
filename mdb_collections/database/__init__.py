"""
Database layer.

Provides validated, hook-wrapped collection facades over Motor and the
shared connection they are bound to.
"""

from .connection import (close_shared_client, get_database,
                         get_shared_client, verify_shared_client)
from .facade import ValidatedCollection
from .factory import CollectionDefinition, bind_collections, collection

__all__ = [
    # Facade
    "ValidatedCollection",
    "CollectionDefinition",
    "collection",
    "bind_collections",
    # Connection
    "get_shared_client",
    "get_database",
    "verify_shared_client",
    "close_shared_client",
]
