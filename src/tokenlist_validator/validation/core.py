"""
Core validation logic for token list documents.

Validates a parsed document against the token list JSON Schema and
collects every violation in schema traversal order.
"""

import functools
import json
import re
from dataclasses import dataclass, field
from typing import Any

from jsonschema import ValidationError as JsonSchemaError
from jsonschema.validators import validator_for

from tokenlist_validator.schemas import SchemaInfo, load_token_list_schema
from tokenlist_validator.utils.logging import get_logger

log = get_logger(__name__)

# Keywords whose schema value is a numeric bound
LIMIT_KEYWORDS = frozenset(
    {
        "minimum",
        "maximum",
        "exclusiveMinimum",
        "exclusiveMaximum",
        "multipleOf",
        "minLength",
        "maxLength",
        "minItems",
        "maxItems",
        "minProperties",
        "maxProperties",
    }
)

# Keywords whose schema value is reported under a named parameter
VALUE_PARAMS: dict[str, str] = {
    "enum": "allowedValues",
    "const": "allowedValue",
    "type": "type",
    "pattern": "pattern",
    "format": "format",
    "uniqueItems": "uniqueItems",
}


def _json_pointer(parts: Any, prefix: str = "") -> str:
    """Render path components as a JSON pointer (RFC 6901)."""
    tokens = [str(part).replace("~", "~0").replace("/", "~1") for part in parts]
    if not tokens:
        return prefix
    return prefix + "/" + "/".join(tokens)


def _missing_property(error: JsonSchemaError) -> str | None:
    """Name the property a `required` error is about."""
    instance = error.instance if isinstance(error.instance, dict) else {}
    missing = [name for name in error.validator_value if name not in instance]
    for name in missing:
        if error.message.startswith(repr(name)):
            return name
    return missing[0] if missing else None


def _additional_properties(error: JsonSchemaError) -> list[str]:
    """List the properties an `additionalProperties` error rejected."""
    if not isinstance(error.instance, dict):
        return []
    properties = error.schema.get("properties", {})
    patterns = error.schema.get("patternProperties", {})
    return [
        name
        for name in error.instance
        if name not in properties
        and not any(re.search(pattern, name) for pattern in patterns)
    ]


def _params(error: JsonSchemaError) -> dict[str, Any]:
    """Keyword-specific parameters for a violation."""
    keyword = error.validator
    if keyword == "required":
        return {"missingProperty": _missing_property(error)}
    if keyword == "additionalProperties":
        return {"additionalProperties": _additional_properties(error)}
    if keyword in LIMIT_KEYWORDS:
        return {"limit": error.validator_value}
    if keyword in VALUE_PARAMS:
        return {VALUE_PARAMS[keyword]: error.validator_value}
    return {}


@dataclass(frozen=True)
class SchemaViolation:
    """
    A single schema violation.

    Attributes:
        instance_path: JSON pointer to the offending value ("" for the root).
        schema_path: JSON pointer into the schema, rooted at "#".
        keyword: The violated schema keyword.
        message: Human-readable description.
        params: Keyword-specific parameters (e.g. missingProperty).
    """

    instance_path: str
    schema_path: str
    keyword: str
    message: str
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_error(cls, error: JsonSchemaError) -> "SchemaViolation":
        """Build a violation from a jsonschema error."""
        return cls(
            instance_path=_json_pointer(error.absolute_path),
            schema_path=_json_pointer(error.absolute_schema_path, prefix="#"),
            keyword=str(error.validator),
            message=error.message,
            params=_params(error),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and JSON output."""
        return {
            "instance_path": self.instance_path,
            "schema_path": self.schema_path,
            "keyword": self.keyword,
            "message": self.message,
            "params": self.params,
        }


@dataclass(frozen=True)
class ValidationOutcome:
    """Verdict for one document, with every violation when invalid."""

    valid: bool
    errors: tuple[SchemaViolation, ...] = ()

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the full violation sequence as JSON."""
        return json.dumps([error.to_dict() for error in self.errors], indent=indent, default=str)


class TokenListValidator:
    """
    Validates documents against a compiled JSON Schema.

    The schema is checked and compiled once; validate() performs no I/O.
    """

    def __init__(self, schema: dict[str, Any] | None = None) -> None:
        """
        Initialize the validator.

        Args:
            schema: Schema document. Defaults to the bundled token list schema.

        Raises:
            jsonschema.SchemaError: If the schema itself is invalid.
        """
        self.schema = schema if schema is not None else load_token_list_schema()
        validator_cls = validator_for(self.schema)
        validator_cls.check_schema(self.schema)
        self._validator = validator_cls(
            self.schema, format_checker=validator_cls.FORMAT_CHECKER
        )
        self.info = SchemaInfo.from_schema(self.schema)

    def validate(self, document: Any) -> ValidationOutcome:
        """
        Validate a document, collecting all violations.

        Args:
            document: Parsed JSON value.

        Returns:
            ValidationOutcome with valid=True and no errors, or valid=False
            and the ordered sequence of violations.
        """
        violations = tuple(
            SchemaViolation.from_error(error)
            for error in self._validator.iter_errors(document)
        )
        log.debug("Validated document", schema=self.info.title, errors=len(violations))
        return ValidationOutcome(valid=not violations, errors=violations)


@functools.cache
def default_validator() -> TokenListValidator:
    """Process-wide validator for the bundled schema, compiled on first use."""
    return TokenListValidator()
