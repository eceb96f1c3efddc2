"""
Curried collection definitions.

A definition binds a collection name, schema and hooks without needing a
connection, so it can live at module level. Calling it with a database
handle (once the connection is ready) produces the facade.

Usage:
    users = collection(
        "users",
        {"type": "object", "required": ["email"]},
        hooks={"insert_one": {"post": [strip_password]}},
    )

    async def startup():
        db = get_database()
        app.state.users = users(db)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from motor.motor_asyncio import AsyncIOMotorDatabase

from ..hooks import CollectionHooks
from ..schema import as_schema
from ..utils.validation import validate_collection_name
from .facade import ValidatedCollection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionDefinition:
    """A named schema and hook set, waiting for a database handle."""

    name: str
    schema: Any
    hooks: CollectionHooks = field(default_factory=CollectionHooks)

    def __call__(self, db: AsyncIOMotorDatabase) -> ValidatedCollection:
        """Resolve the native collection on `db` and wrap it."""
        real_collection = db.get_collection(self.name)
        logger.debug(f"Bound collection definition '{self.name}'")
        return ValidatedCollection(real_collection, self.schema, self.hooks)


def collection(
    name: str,
    schema: Any,
    hooks: Optional[Union[CollectionHooks, Mapping[str, Any]]] = None,
) -> CollectionDefinition:
    """
    Define a validated collection.

    Args:
        name: Collection name
        schema: JSON schema mapping, pydantic model class, or any object
            with a `validate` coroutine
        hooks: `CollectionHooks` or its mapping form

    Returns:
        A `CollectionDefinition`; call it with a database handle to get
        the `ValidatedCollection`

    Raises:
        ValueError: If the collection name is invalid
        SchemaDefinitionError: If the schema cannot be used
        HookConfigurationError: If hooks name an unknown operation or phase
    """
    name = validate_collection_name(name)
    return CollectionDefinition(
        name=name,
        schema=as_schema(schema, name=name),
        hooks=CollectionHooks.coerce(hooks),
    )


def bind_collections(
    db: AsyncIOMotorDatabase, *definitions: CollectionDefinition
) -> Dict[str, ValidatedCollection]:
    """
    Bind several definitions to the same database handle.

    Returns:
        Facades keyed by collection name

    Raises:
        ValueError: If two definitions share a name
    """
    bound: Dict[str, ValidatedCollection] = {}
    for definition in definitions:
        if definition.name in bound:
            raise ValueError(f"Collection '{definition.name}' is defined more than once")
        bound[definition.name] = definition(db)
    return bound
