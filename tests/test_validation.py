"""Tests for schema validation."""

import json
from typing import Any

import pytest
from jsonschema import SchemaError

from tokenlist_validator.schemas import SchemaInfo, load_token_list_schema
from tokenlist_validator.validation import (
    SchemaViolation,
    TokenListValidator,
    ValidationOutcome,
    default_validator,
)

REQUIRED_TOP_LEVEL = ["name", "timestamp", "version", "tokens"]


@pytest.fixture(scope="module")
def validator() -> TokenListValidator:
    """Compile the bundled schema once for the module."""
    return TokenListValidator()


class TestBundledSchema:
    """Tests for the shipped schema artifact."""

    def test_schema_loads(self) -> None:
        """Test that the bundled schema is a draft-07 object schema."""
        schema = load_token_list_schema()
        assert schema["$schema"] == "http://json-schema.org/draft-07/schema#"
        assert schema["required"] == REQUIRED_TOP_LEVEL

    def test_schema_info(self, validator: TokenListValidator) -> None:
        """Test schema identity metadata."""
        assert validator.info == SchemaInfo(
            title="Uniswap Token List",
            schema_id="https://uniswap.org/tokenlist.schema.json",
            draft="http://json-schema.org/draft-07/schema#",
        )

    def test_default_validator_is_shared(self) -> None:
        """Test that the process-wide validator is compiled once."""
        assert default_validator() is default_validator()


class TestValidDocuments:
    """Tests for documents that conform to the schema."""

    def test_valid_list(
        self, validator: TokenListValidator, valid_token_list: dict[str, Any]
    ) -> None:
        """Test that a valid list yields success and no errors."""
        outcome = validator.validate(valid_token_list)
        assert outcome.valid
        assert outcome.errors == ()

    def test_valid_list_with_optional_fields(
        self, validator: TokenListValidator, valid_token_list: dict[str, Any]
    ) -> None:
        """Test optional list and token fields."""
        valid_token_list["keywords"] = ["defi", "stable coins"]
        valid_token_list["logoURI"] = "ipfs://QmXfzKRvjZz3u5JRgC4v5mGVbm9ahrUiB4DgzHBsnWbTMM"
        valid_token_list["tags"] = {
            "stablecoin": {"name": "Stablecoin", "description": "Pegged to a fiat currency"}
        }
        token = valid_token_list["tokens"][0]
        token["tags"] = ["stablecoin"]
        token["logoURI"] = "https://example.org/dai.png"
        token["extensions"] = {"bridgeInfo": {"10": {"tokenAddress": "0xDA10"}}}

        outcome = validator.validate(valid_token_list)
        assert outcome.valid, outcome.to_json()

    def test_validation_does_not_mutate(
        self, validator: TokenListValidator, valid_token_list: dict[str, Any]
    ) -> None:
        """Test that validation leaves the document untouched."""
        before = json.dumps(valid_token_list, sort_keys=True)
        validator.validate(valid_token_list)
        assert json.dumps(valid_token_list, sort_keys=True) == before


class TestInvalidDocuments:
    """Tests for documents that violate the schema."""

    @pytest.mark.parametrize("field", REQUIRED_TOP_LEVEL)
    def test_missing_required_field(
        self,
        validator: TokenListValidator,
        valid_token_list: dict[str, Any],
        field: str,
    ) -> None:
        """Test that a missing field yields a `required` violation naming it."""
        del valid_token_list[field]
        outcome = validator.validate(valid_token_list)

        assert not outcome.valid
        required = [e for e in outcome.errors if e.keyword == "required"]
        assert required
        assert any(field in e.message for e in required)
        assert required[0].params == {"missingProperty": field}
        assert required[0].instance_path == ""

    def test_empty_object_reports_each_missing_field(
        self, validator: TokenListValidator
    ) -> None:
        """Test one violation per missing top-level field, not one generic failure."""
        outcome = validator.validate({})
        assert not outcome.valid
        assert [e.keyword for e in outcome.errors] == ["required"] * 4
        assert [e.params["missingProperty"] for e in outcome.errors] == REQUIRED_TOP_LEVEL

    def test_collects_all_errors(
        self, validator: TokenListValidator, valid_token_list: dict[str, Any]
    ) -> None:
        """Test that every violation is collected, not just the first."""
        token = valid_token_list["tokens"][0]
        token["address"] = "not-an-address"
        token["decimals"] = 300
        valid_token_list["version"]["major"] = -1

        outcome = validator.validate(valid_token_list)
        paths = {(e.instance_path, e.keyword) for e in outcome.errors}
        assert ("/tokens/0/address", "pattern") in paths
        assert ("/tokens/0/decimals", "maximum") in paths
        assert ("/version/major", "minimum") in paths

    def test_violation_details(
        self, validator: TokenListValidator, valid_token_list: dict[str, Any]
    ) -> None:
        """Test paths and params of a single violation."""
        valid_token_list["tokens"][0]["decimals"] = 300
        outcome = validator.validate(valid_token_list)

        assert len(outcome.errors) == 1
        violation = outcome.errors[0]
        assert violation.instance_path == "/tokens/0/decimals"
        assert violation.schema_path == "#/properties/tokens/items/properties/decimals/maximum"
        assert violation.keyword == "maximum"
        assert violation.params == {"limit": 255}

    def test_additional_property(
        self, validator: TokenListValidator, valid_token_list: dict[str, Any]
    ) -> None:
        """Test that unknown top-level fields are reported by name."""
        valid_token_list["unexpected"] = True
        outcome = validator.validate(valid_token_list)

        assert [e.keyword for e in outcome.errors] == ["additionalProperties"]
        assert outcome.errors[0].params == {"additionalProperties": ["unexpected"]}

    def test_wrong_type(self, validator: TokenListValidator, valid_token_list: dict[str, Any]) -> None:
        """Test a type violation reports the expected type."""
        valid_token_list["tokens"] = "all of them"
        outcome = validator.validate(valid_token_list)

        type_errors = [e for e in outcome.errors if e.keyword == "type"]
        assert type_errors[0].instance_path == "/tokens"
        assert type_errors[0].params == {"type": "array"}

    def test_empty_token_array(
        self, validator: TokenListValidator, valid_token_list: dict[str, Any]
    ) -> None:
        """Test that a list needs at least one token."""
        valid_token_list["tokens"] = []
        outcome = validator.validate(valid_token_list)
        assert [e.keyword for e in outcome.errors] == ["minItems"]

    def test_format_is_checked(
        self, validator: TokenListValidator, valid_token_list: dict[str, Any]
    ) -> None:
        """Test that date-time formats are enforced."""
        valid_token_list["timestamp"] = "yesterday"
        outcome = validator.validate(valid_token_list)

        assert [e.keyword for e in outcome.errors] == ["format"]
        assert outcome.errors[0].params == {"format": "date-time"}

    def test_non_object_document(self, validator: TokenListValidator) -> None:
        """Test that a non-object document is rejected at the root."""
        outcome = validator.validate([1, 2, 3])
        assert not outcome.valid
        assert outcome.errors[0].keyword == "type"
        assert outcome.errors[0].instance_path == ""

    def test_pointer_escaping(self, validator: TokenListValidator) -> None:
        """Test that path components are escaped as JSON pointer tokens."""
        schema = {
            "$schema": "http://json-schema.org/draft-07/schema#",
            "type": "object",
            "properties": {"a/b": {"type": "integer"}},
        }
        outcome = TokenListValidator(schema).validate({"a/b": "x"})
        assert outcome.errors[0].instance_path == "/a~1b"


class TestValidationOutcome:
    """Tests for outcome serialization."""

    def test_to_json_serializes_every_error(
        self, validator: TokenListValidator
    ) -> None:
        """Test that the full violation sequence round-trips through JSON."""
        outcome = validator.validate({})
        serialized = json.loads(outcome.to_json())

        assert len(serialized) == len(outcome.errors)
        assert serialized[0] == {
            "instance_path": "",
            "schema_path": "#/required",
            "keyword": "required",
            "message": "'name' is a required property",
            "params": {"missingProperty": "name"},
        }

    def test_valid_outcome_serializes_empty(self) -> None:
        """Test serialization of a valid outcome."""
        assert ValidationOutcome(valid=True).to_json() == "[]"

    def test_violation_to_dict(self) -> None:
        """Test SchemaViolation serialization."""
        violation = SchemaViolation(
            instance_path="/name",
            schema_path="#/properties/name/maxLength",
            keyword="maxLength",
            message="too long",
            params={"limit": 30},
        )
        assert violation.to_dict()["params"] == {"limit": 30}


class TestCustomSchema:
    """Tests for validators built from other schemas."""

    def test_invalid_schema_rejected(self) -> None:
        """Test that a malformed schema fails at construction."""
        with pytest.raises(SchemaError):
            TokenListValidator({"type": "no-such-type"})

    def test_enum_params(self) -> None:
        """Test that enum violations list the allowed values."""
        schema = {"enum": ["a", "b"]}
        outcome = TokenListValidator(schema).validate("c")
        assert outcome.errors[0].params == {"allowedValues": ["a", "b"]}
