"""
Validated Collection Facade

Provides an asynchronous proxy around Motor's `AsyncIOMotorCollection`
that validates inserted documents against a schema and runs ordered
pre/post hook chains around a fixed set of operations.

This module is part of MDB_COLLECTIONS.

Core Features:
- `insert_one`: pre hooks -> schema validation -> native insert -> post
  hooks. Returns the inserted document (with `_id`) or whatever the post
  hooks turned it into.
- `find_one_and_update`: pre hooks -> native call -> post hooks. A filter
  that matches nothing yields None, and post hooks still run with None.
- Everything else (`find`, `delete_one`, `aggregate`, ...) is the native
  collection's own attribute, forwarded untouched.

Write ordering: a post hook runs after the store has committed the write.
If it fails, the error reaches the caller but the write stays in place.
"""

import inspect
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection

from ..constants import FIND_ONE_AND_UPDATE, INSERT_ONE
from ..exceptions import DocumentValidationError, OperationNotAvailableError
from ..hooks import CollectionHooks, run_pipeline
from ..observability import (collection_context, get_logger, log_operation,
                             record_operation)
from ..schema import as_schema

logger = get_logger(__name__)

K = TypeVar("K")


class ValidatedCollection:
    """
    Wraps an `AsyncIOMotorCollection` with schema validation and hooks.

    The facade holds no per-call state, so one instance can serve any
    number of concurrent calls. Attributes it does not define are looked
    up on the wrapped collection, which keeps the native signatures,
    results, and failure modes for every operation that is not intercepted.

    Update documents passed to `find_one_and_update` are not validated:
    update operators describe partial changes and a whole-document schema
    does not apply to them.
    """

    __slots__ = ("_collection", "_schema", "_hooks")

    def __init__(
        self,
        real_collection: AsyncIOMotorCollection,
        schema: Any,
        hooks: Optional[CollectionHooks] = None,
    ):
        """
        Args:
            real_collection: The native collection to wrap
            schema: A JSON schema mapping, a pydantic model class, or an
                object with ``validate``
            hooks: A `CollectionHooks` or its mapping form

        Raises:
            SchemaDefinitionError: If ``schema`` is not usable
            HookConfigurationError: If ``hooks`` is malformed
        """
        self._collection = real_collection
        self._schema = as_schema(schema, name=real_collection.name)
        self._hooks = CollectionHooks.coerce(hooks)

    @property
    def collection(self) -> AsyncIOMotorCollection:
        """The wrapped native collection."""
        return self._collection

    @property
    def schema(self) -> Any:
        return self._schema

    @property
    def hooks(self) -> CollectionHooks:
        return self._hooks

    def __getattr__(self, name: str) -> Any:
        """
        Proxies attribute access to the underlying collection.
        """
        # Prevent proxying private/special attributes
        if name.startswith("_"):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'. "
                "Access to private attributes is blocked."
            )
        return getattr(self._collection, name)

    def __getitem__(self, name: str) -> Any:
        return self._collection[name]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._collection.name!r})"

    async def _validate(self, document: Mapping[str, Any]) -> None:
        try:
            outcome = self._schema.validate(document)
            if inspect.isawaitable(outcome):
                await outcome
        except DocumentValidationError as e:
            logger.info(
                f"Document rejected for '{self._collection.name}': "
                f"{len(e.errors)} schema violation(s)"
            )
            raise

    async def _run_with_hooks(
        self, operation: str, func: Callable[[], Awaitable[K]]
    ) -> K:
        """
        Runs `func` between the operation's pre and post hook chains.

        Pre hooks run with no input and their result is discarded. Post
        hooks are seeded with `func`'s result and their output is returned
        in its place.

        Hooks, validation and the store call all run inside
        `collection_context`, so their log records carry the collection
        name and operation.
        """
        collection_name = self._collection.name
        chain = self._hooks.chain_for(operation)
        start_time = time.time()
        committed = False

        with collection_context(collection_name, operation):
            try:
                if chain is not None and chain.pre:
                    await run_pipeline(chain.pre)

                value = await func()
                committed = True

                if chain is not None and chain.post:
                    value = await run_pipeline(chain.post, value)
            except Exception:
                duration_ms = (time.time() - start_time) * 1000
                record_operation(
                    f"collection.{operation}",
                    duration_ms,
                    success=False,
                    collection=collection_name,
                )
                log_operation(
                    logger,
                    f"collection.{operation}",
                    level=logging.WARNING,
                    success=False,
                    duration_ms=duration_ms,
                )
                if committed:
                    logger.warning(
                        f"Post hook failed after {operation} on '{collection_name}' "
                        f"was applied by the store; the write is not rolled back"
                    )
                raise

            duration_ms = (time.time() - start_time) * 1000
            record_operation(
                f"collection.{operation}",
                duration_ms,
                success=True,
                collection=collection_name,
            )
            log_operation(
                logger,
                f"collection.{operation}",
                level=logging.DEBUG,
                duration_ms=duration_ms,
            )
            return value

    async def insert_one(
        self, document: Mapping[str, Any], *args, **kwargs
    ) -> Any:
        """
        Validates and inserts a single document.

        Returns:
            The inserted document including its `_id`, as transformed by
            any post hooks

        Raises:
            DocumentValidationError: If the document fails the schema; the
                store is not called
        """

        async def _insert() -> Dict[str, Any]:
            await self._validate(document)
            result = await self._collection.insert_one(document, *args, **kwargs)
            return {**document, "_id": result.inserted_id}

        return await self._run_with_hooks(INSERT_ONE, _insert)

    async def find_one_and_update(
        self, filter: Mapping[str, Any], update: Any, *args, **kwargs
    ) -> Any:
        """
        Updates a single document and returns it.

        Returns:
            The document reported by the store (pre- or post-update per
            `return_document`), None when nothing matched, as transformed
            by any post hooks
        """

        async def _update() -> Optional[Dict[str, Any]]:
            return await self._collection.find_one_and_update(
                filter, update, *args, **kwargs
            )

        return await self._run_with_hooks(FIND_ONE_AND_UPDATE, _update)

    def paginate(self, *args, **kwargs) -> Any:
        """
        Reserved for automatic result pagination. Not available yet.

        Raises:
            OperationNotAvailableError: Always
        """
        raise OperationNotAvailableError(
            "paginate is not available yet",
            context={"collection": self._collection.name, "operation": "paginate"},
        )
