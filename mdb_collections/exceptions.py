"""
Custom exceptions for MDB_COLLECTIONS.

Store errors (pymongo) and errors raised by hooks are never wrapped by
this package; they reach the caller unchanged. The classes below cover
the failures this layer raises itself.
"""

from typing import Any, Dict, List, Optional


class CollectionFacadeError(RuntimeError):
    """
    Base exception for MDB_COLLECTIONS errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context (collection_name,
                 operation, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class DocumentValidationError(CollectionFacadeError):
    """
    Raised when a document does not conform to its collection schema.

    Attributes:
        message: Error message
        errors: Field-level details, one ``{"path": ..., "message": ...}``
                entry per violation
        collection_name: Collection the document was destined for (if known)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, str]]] = None,
        collection_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if collection_name:
            context["collection_name"] = collection_name
        if errors:
            context["error_paths"] = [e["path"] for e in errors]
        super().__init__(message, context=context)
        self.errors = errors or []
        self.collection_name = collection_name


class SchemaDefinitionError(CollectionFacadeError):
    """Raised when a schema object cannot be used for validation."""


class HookConfigurationError(CollectionFacadeError):
    """
    Raised when hooks are registered for an unknown operation or phase,
    or when a registered hook is not callable.

    Attributes:
        operation: Operation name the hooks were registered for (if available)
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if operation:
            context["operation"] = operation
        super().__init__(message, context=context)
        self.operation = operation


class OperationNotAvailableError(CollectionFacadeError, NotImplementedError):
    """Raised by reserved facade operations that have no implementation yet."""


class ConfigurationError(CollectionFacadeError):
    """
    Raised when configuration is invalid or missing.

    Attributes:
        message: Error message
        config_key: Configuration key that caused the error (if available)
        config_value: Configuration value that caused the error (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = config_value
        super().__init__(message, context=context)
        self.config_key = config_key
        self.config_value = config_value
