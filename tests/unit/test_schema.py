"""
Unit tests for schema adapters.
"""

from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel

from mdb_collections.exceptions import (DocumentValidationError,
                                        SchemaDefinitionError)
from mdb_collections.schema import JsonSchema, PydanticSchema, as_schema


class User(BaseModel):
    email: str
    age: int = 0


@pytest.mark.unit
class TestJsonSchema:
    """Test the jsonschema-backed adapter."""

    @pytest.mark.asyncio
    async def test_valid_document_is_returned_unchanged(self, user_schema, valid_user):
        result = await user_schema.validate(valid_user)
        assert result is valid_user

    @pytest.mark.asyncio
    async def test_missing_required_field_is_reported_at_root(self, user_schema):
        with pytest.raises(DocumentValidationError) as exc_info:
            await user_schema.validate({"name": "Ada"})

        errors = exc_info.value.errors
        assert len(errors) == 1
        assert errors[0]["path"] == "root"
        assert "'email' is a required property" in errors[0]["message"]

    @pytest.mark.asyncio
    async def test_collects_every_field_error(self, user_schema):
        with pytest.raises(DocumentValidationError) as exc_info:
            await user_schema.validate({"email": 42, "name": "Ada", "age": -1})

        paths = [e["path"] for e in exc_info.value.errors]
        assert paths == ["age", "email"]
        assert exc_info.value.context["error_paths"] == ["age", "email"]

    @pytest.mark.asyncio
    async def test_nested_paths_are_dotted(self):
        schema = JsonSchema(
            {
                "type": "object",
                "properties": {
                    "address": {
                        "type": "object",
                        "properties": {"zip": {"type": "string"}},
                    }
                },
            }
        )
        with pytest.raises(DocumentValidationError) as exc_info:
            await schema.validate({"address": {"zip": 12345}})

        assert exc_info.value.errors[0]["path"] == "address.zip"

    def test_invalid_schema_definition(self):
        with pytest.raises(SchemaDefinitionError, match="Invalid schema definition"):
            JsonSchema({"type": "not-a-type"})

    def test_non_mapping_schema(self):
        with pytest.raises(SchemaDefinitionError):
            JsonSchema(["type", "object"])


@pytest.mark.unit
class TestPydanticSchema:
    """Test the pydantic-backed adapter."""

    @pytest.mark.asyncio
    async def test_valid_document_is_returned_unchanged(self):
        document = {"email": "ada@example.com", "age": 36}
        result = await PydanticSchema(User).validate(document)
        assert result is document

    @pytest.mark.asyncio
    async def test_invalid_document(self):
        with pytest.raises(DocumentValidationError) as exc_info:
            await PydanticSchema(User).validate({"age": "old"})

        paths = sorted(e["path"] for e in exc_info.value.errors)
        assert paths == ["age", "email"]
        assert "User" in exc_info.value.message

    def test_requires_model_class(self):
        with pytest.raises(SchemaDefinitionError):
            PydanticSchema(User(email="ada@example.com"))


@pytest.mark.unit
class TestAsSchema:
    """Test schema coercion."""

    def test_mapping_becomes_json_schema(self, user_json_schema):
        schema = as_schema(user_json_schema)
        assert isinstance(schema, JsonSchema)
        assert schema.schema == user_json_schema

    def test_model_becomes_pydantic_schema(self):
        schema = as_schema(User)
        assert isinstance(schema, PydanticSchema)
        assert schema.model is User

    def test_adapters_pass_through(self, user_schema):
        assert as_schema(user_schema) is user_schema

    def test_custom_validator_passes_through(self):
        custom = MagicMock()
        assert as_schema(custom) is custom

    def test_unsupported_schema(self):
        with pytest.raises(SchemaDefinitionError) as exc_info:
            as_schema(42, name="users")
        assert exc_info.value.context == {"collection_name": "users"}
