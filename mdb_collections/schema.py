"""
Schema adapters for validated collections.

A schema is any object with an ``async validate(document)`` method that
returns the document when it conforms and raises
``DocumentValidationError`` otherwise. Validation itself is delegated to
jsonschema or pydantic; these adapters only translate their errors into
field-level details.

Usage:
    users_schema = JsonSchema({
        "type": "object",
        "properties": {"email": {"type": "string"}},
        "required": ["email"],
    })

    class User(BaseModel):
        email: str

    users_schema = PydanticSchema(User)
"""

from typing import Any, Dict, List, Mapping, Optional, Type

from jsonschema import Draft7Validator, SchemaError
from jsonschema.validators import validator_for
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import DocumentValidationError, SchemaDefinitionError


def _format_path(parts) -> str:
    parts = [str(p) for p in parts]
    return ".".join(parts) if parts else "root"


class JsonSchema:
    """
    Validates documents against a JSON Schema using ``jsonschema``.

    The validator class is picked from the schema's ``$schema`` keyword,
    falling back to Draft 7.
    """

    __slots__ = ("_schema", "_validator")

    def __init__(self, schema: Mapping[str, Any]):
        if not isinstance(schema, Mapping):
            raise SchemaDefinitionError(
                f"JSON schema must be a mapping, got {type(schema).__name__}"
            )
        validator_cls = validator_for(schema, default=Draft7Validator)
        try:
            validator_cls.check_schema(schema)
        except SchemaError as e:
            raise SchemaDefinitionError(
                f"Invalid schema definition: {e.message}",
                context={"schema_path": _format_path(e.absolute_path)},
            ) from e
        self._schema = dict(schema)
        self._validator = validator_cls(self._schema)

    @property
    def schema(self) -> Dict[str, Any]:
        return self._schema

    def errors_for(self, document: Any) -> List[Dict[str, str]]:
        """Return every violation in ``document``, ordered by field path."""
        errors = sorted(
            self._validator.iter_errors(document),
            key=lambda e: [str(p) for p in e.absolute_path],
        )
        return [
            {"path": _format_path(e.absolute_path), "message": e.message}
            for e in errors
        ]

    async def validate(self, document: Any) -> Any:
        errors = self.errors_for(document)
        if errors:
            raise DocumentValidationError(
                "; ".join(f"{e['path']}: {e['message']}" for e in errors),
                errors=errors,
            )
        return document


class PydanticSchema:
    """Validates documents by parsing them with a pydantic model."""

    __slots__ = ("_model",)

    def __init__(self, model: Type[BaseModel]):
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise SchemaDefinitionError(
                f"PydanticSchema requires a BaseModel subclass, got {model!r}"
            )
        self._model = model

    @property
    def model(self) -> Type[BaseModel]:
        return self._model

    async def validate(self, document: Any) -> Any:
        try:
            self._model.model_validate(document)
        except PydanticValidationError as e:
            errors = [
                {"path": _format_path(err.get("loc", ())), "message": err.get("msg", "")}
                for err in e.errors()
            ]
            raise DocumentValidationError(
                f"Document does not match {self._model.__name__}: "
                + "; ".join(f"{err['path']}: {err['message']}" for err in errors),
                errors=errors,
            ) from e
        return document


def as_schema(schema: Any, name: Optional[str] = None) -> Any:
    """
    Coerce ``schema`` into an object with a ``validate`` coroutine.

    - mappings become ``JsonSchema``
    - pydantic model classes become ``PydanticSchema``
    - objects that already expose ``validate`` are returned as-is

    Raises:
        SchemaDefinitionError: If ``schema`` is none of the above
    """
    if isinstance(schema, (JsonSchema, PydanticSchema)):
        return schema
    if isinstance(schema, Mapping):
        return JsonSchema(schema)
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return PydanticSchema(schema)
    if callable(getattr(schema, "validate", None)):
        return schema

    context = {"collection_name": name} if name else None
    raise SchemaDefinitionError(
        f"Unsupported schema type {type(schema).__name__}; expected a JSON schema "
        f"mapping, a pydantic model, or an object with validate()",
        context=context,
    )
