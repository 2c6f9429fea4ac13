"""
Bundled token list JSON Schema.

The schema ships as package data and is treated as a read-only,
versioned artifact: it is loaded as-is and never modified.
"""

import json
from dataclasses import dataclass
from importlib import resources
from typing import Any

SCHEMA_RESOURCE = "tokenlist.schema.json"


@dataclass(frozen=True)
class SchemaInfo:
    """Identity of a schema document."""

    title: str
    schema_id: str
    draft: str

    @classmethod
    def from_schema(cls, schema: dict[str, Any]) -> "SchemaInfo":
        """Read the identifying keywords of a schema."""
        return cls(
            title=schema.get("title", ""),
            schema_id=schema.get("$id", ""),
            draft=schema.get("$schema", ""),
        )


def load_token_list_schema() -> dict[str, Any]:
    """
    Load the bundled token list schema.

    Returns:
        Parsed schema document.
    """
    text = resources.files(__name__).joinpath(SCHEMA_RESOURCE).read_text(encoding="utf-8")
    return json.loads(text)


__all__ = ["SCHEMA_RESOURCE", "SchemaInfo", "load_token_list_schema"]
