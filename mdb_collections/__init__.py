"""
MDB_COLLECTIONS - Validated MongoDB Collections

Schema-validated collection facades for Motor with ordered pre/post hook
chains around inserts and updates.
"""

# Configuration
from .config import FacadeConfig
# Database layer
from .database import (CollectionDefinition, ValidatedCollection,
                       bind_collections, collection, get_database)
# Errors
from .exceptions import (CollectionFacadeError, ConfigurationError,
                         DocumentValidationError, HookConfigurationError,
                         OperationNotAvailableError, SchemaDefinitionError)
# Hooks
from .hooks import (CollectionHooks, FindOneAndUpdateHooks, InsertOneHooks,
                    run_pipeline)
# Schemas
from .schema import JsonSchema, PydanticSchema, as_schema

__version__ = "0.1.0"

__all__ = [
    # Database
    "collection",
    "bind_collections",
    "CollectionDefinition",
    "ValidatedCollection",
    "get_database",
    "FacadeConfig",
    # Hooks
    "run_pipeline",
    "CollectionHooks",
    "InsertOneHooks",
    "FindOneAndUpdateHooks",
    # Schemas
    "JsonSchema",
    "PydanticSchema",
    "as_schema",
    # Errors
    "CollectionFacadeError",
    "DocumentValidationError",
    "SchemaDefinitionError",
    "HookConfigurationError",
    "OperationNotAvailableError",
    "ConfigurationError",
]
