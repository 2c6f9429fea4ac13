"""
Document ingestion: source resolution and loading.

All raw document loading happens through this module so that transport,
filesystem and parse failures surface through one error taxonomy.
"""

from tokenlist_validator.ingestion.loader import DocumentLoader, parse_json
from tokenlist_validator.ingestion.sources import (
    LocalSource,
    RemoteSource,
    Source,
    resolve_source,
)

__all__ = [
    "DocumentLoader",
    "LocalSource",
    "RemoteSource",
    "Source",
    "parse_json",
    "resolve_source",
]
