"""
Logging helpers for validated collections.

Every wrapped collection call runs inside `collection_context`, so any
record emitted through a `get_logger` logger while a hook, a validator or
the store call is running carries the collection name and the operation.

Usage:
    logger = get_logger(__name__)

    with collection_context("users", "insert_one"):
        logger.info("checking quota")   # record.collection_name == "users"
"""

import contextvars
import logging
import uuid
from contextlib import contextmanager
from typing import Any, Iterator

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "mdb_collections_correlation_id", default=None
)

# (collection_name, operation) of the wrapped call in progress
_call_context: contextvars.ContextVar[tuple[str, str] | None] = contextvars.ContextVar(
    "mdb_collections_call_context", default=None
)


def get_correlation_id() -> str | None:
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Tag subsequent records in this context with a correlation ID.

    A random one is generated when none is given. Returns the ID in use.
    """
    correlation_id = correlation_id or uuid.uuid4().hex
    _correlation_id.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    _correlation_id.set(None)


@contextmanager
def collection_context(collection_name: str, operation: str) -> Iterator[None]:
    """
    Mark the enclosed block as running `operation` on `collection_name`.

    Contexts nest; leaving the block restores whatever was active before,
    including on error.
    """
    token = _call_context.set((collection_name, operation))
    try:
        yield
    finally:
        _call_context.reset(token)


def current_log_fields() -> dict[str, Any]:
    """Fields every contextual record gets in the current context."""
    fields: dict[str, Any] = {}
    correlation_id = _correlation_id.get()
    if correlation_id:
        fields["correlation_id"] = correlation_id
    call = _call_context.get()
    if call is not None:
        fields["collection_name"], fields["operation"] = call
    return fields


class CollectionLoggerAdapter(logging.LoggerAdapter):
    """
    Adds the active correlation ID, collection name and operation to every
    record. Explicit ``extra`` values win over context values.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        fields = current_log_fields()
        fields.update(kwargs.get("extra") or {})
        kwargs["extra"] = fields
        return msg, kwargs


def get_logger(name: str) -> CollectionLoggerAdapter:
    return CollectionLoggerAdapter(logging.getLogger(name), {})


def log_operation(
    logger: logging.Logger | logging.LoggerAdapter,
    operation: str,
    level: int = logging.INFO,
    success: bool = True,
    duration_ms: float | None = None,
    **fields: Any,
) -> None:
    """
    Emit one summary record for a finished collection operation.

    The message reads ``Operation: <name>`` or ``Operation failed: <name>``
    followed by the duration when known. ``success``, ``duration_ms`` and
    any extra ``fields`` are attached to the record. ``operation`` is the
    metric-style name (``collection.insert_one``) and replaces the short
    operation name from `collection_context` on this record.

    Args:
        logger: A plain logger or one from `get_logger`
        operation: Operation name
        level: Log level
        success: Whether the operation succeeded
        duration_ms: Elapsed time in milliseconds
        **fields: Additional record attributes
    """
    extra: dict[str, Any] = {**current_log_fields(), **fields}
    extra["operation"] = operation
    extra["success"] = success

    message = f"Operation{'' if success else ' failed'}: {operation}"
    if duration_ms is not None:
        extra["duration_ms"] = round(duration_ms, 2)
        message += f" (duration: {duration_ms:.2f}ms)"

    logger.log(level, message, extra=extra)
