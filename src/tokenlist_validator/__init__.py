"""
Tokenlist Validator: schema-validated token list loader and reporter.

This package fetches or reads a token list, validates it against the
token list JSON Schema and reports the outcome through structured logs
and the process exit status.
"""

from importlib.metadata import version

from tokenlist_validator.pipeline import (
    load_document,
    validate_document,
    validate_source,
)

__version__ = version("tokenlist-validator")

__all__ = ["__version__", "load_document", "validate_document", "validate_source"]
