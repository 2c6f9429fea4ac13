"""
Source resolution.

Classifies a source string as a remote locator or a local path. The
classification is purely syntactic: nothing is probed.
"""

from dataclasses import dataclass

REMOTE_PREFIXES = ("http://", "https://")


@dataclass(frozen=True)
class RemoteSource:
    """A document reachable over HTTP(S)."""

    url: str

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True)
class LocalSource:
    """A document on the local filesystem, relative to the base directory."""

    path: str

    def __str__(self) -> str:
        return self.path


Source = RemoteSource | LocalSource


def is_remote(source: str) -> bool:
    """Return True if the source names an HTTP(S) URL."""
    return source.startswith(REMOTE_PREFIXES)


def resolve_source(source: str) -> Source:
    """
    Classify a source string.

    Args:
        source: URL or filesystem path as given by the caller.

    Returns:
        RemoteSource for http:// and https:// prefixes, LocalSource otherwise.
    """
    if is_remote(source):
        return RemoteSource(url=source)
    return LocalSource(path=source)
