"""Token list validation module."""

from tokenlist_validator.validation.core import (
    SchemaViolation,
    TokenListValidator,
    ValidationOutcome,
    default_validator,
)
from tokenlist_validator.validation.reporter import Reporter

__all__ = [
    "Reporter",
    "SchemaViolation",
    "TokenListValidator",
    "ValidationOutcome",
    "default_validator",
]
