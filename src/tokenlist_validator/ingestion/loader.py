"""
Document loading from remote and local sources.

Materializes the whole document in memory and parses it as JSON. Low-level
transport, filesystem and decoding failures are wrapped in the loader
error taxonomy.
"""

import json
from pathlib import Path
from typing import Any

import httpx

from tokenlist_validator.config.settings import HttpConfig
from tokenlist_validator.errors import (
    FetchError,
    LoadTimeoutError,
    ParseError,
    ReadError,
)
from tokenlist_validator.ingestion.sources import LocalSource, RemoteSource, Source
from tokenlist_validator.utils.logging import get_logger

log = get_logger(__name__)


def parse_json(text: str | bytes, source: str) -> Any:
    """
    Parse a complete JSON document.

    Args:
        text: Raw document text or bytes.
        source: Source string, used for error context.

    Returns:
        Parsed JSON value.

    Raises:
        ParseError: If the text is not well-formed JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Failed to parse JSON from {source}: {e.msg} (line {e.lineno}, column {e.colno})"
        raise ParseError(msg, source=source, line=e.lineno, column=e.colno) from e
    except UnicodeDecodeError as e:
        msg = f"Failed to parse JSON from {source}: {e.reason}"
        raise ParseError(msg, source=source) from e
    except RecursionError as e:
        msg = f"Failed to parse JSON from {source}: document is nested too deeply"
        raise ParseError(msg, source=source) from e


class DocumentLoader:
    """
    Loads a Document from a resolved source.

    The HTTP client can be injected (e.g. one built on httpx.MockTransport);
    otherwise a short-lived client is created per fetch using the network
    policy from HttpConfig.
    """

    def __init__(
        self,
        base_dir: Path,
        http: HttpConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize document loader.

        Args:
            base_dir: Directory local paths are resolved against.
            http: Network policy (timeout, redirects).
            client: Optional HTTP client owned by the caller.
        """
        self.base_dir = base_dir
        self.http = http or HttpConfig()
        self.client = client

    def load(self, source: Source) -> Any:
        """
        Load and parse the document behind a source.

        Args:
            source: Resolved remote or local source.

        Returns:
            Parsed JSON document.

        Raises:
            FetchError: If a remote source cannot be fetched.
            LoadTimeoutError: If a remote request times out.
            ReadError: If a local file does not exist or is not readable.
            ParseError: If the content is not well-formed JSON.
        """
        if isinstance(source, RemoteSource):
            return self.fetch(source)
        if isinstance(source, LocalSource):
            return self.read(source)
        msg = f"Unsupported source type: {type(source).__name__}"
        raise TypeError(msg)

    def fetch(self, source: RemoteSource) -> Any:
        """Fetch a remote document with a single GET request."""
        url = source.url
        log.debug(
            "Fetching document",
            url=url,
            timeout=self.http.timeout,
            follow_redirects=self.http.follow_redirects,
        )

        try:
            if self.client is not None:
                response = self.client.get(
                    url,
                    timeout=self.http.timeout,
                    follow_redirects=self.http.follow_redirects,
                )
            else:
                with httpx.Client(
                    timeout=self.http.timeout,
                    follow_redirects=self.http.follow_redirects,
                    max_redirects=self.http.max_redirects,
                ) as client:
                    response = client.get(url)
        except httpx.TimeoutException as e:
            msg = f"Failed to fetch data from {url}. Timed out after {self.http.timeout}s"
            raise LoadTimeoutError(msg, url=url, timeout=self.http.timeout) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            msg = f"Failed to fetch data from {url}. Error: {e}"
            raise FetchError(msg, url=url) from e

        if not response.is_success:
            msg = f"Failed to fetch data from {url}. Status: {response.status_code}"
            raise FetchError(msg, url=url, status=response.status_code)

        log.debug(
            "Fetched document",
            url=url,
            status=response.status_code,
            bytes=len(response.content),
        )
        return parse_json(response.content, source=url)

    def read(self, source: LocalSource) -> Any:
        """Read a local document in full."""
        path = self.base_dir / source.path
        log.debug("Reading document", path=str(path))

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            msg = f"Failed to parse JSON from {source.path}: {e.reason}"
            raise ParseError(msg, source=source.path) from e
        except OSError as e:
            msg = f"Failed to read data from {source.path}. Error: {e.strerror or e}"
            raise ReadError(msg, path=str(path)) from e

        log.debug("Read document", path=str(path), chars=len(text))
        return parse_json(text, source=source.path)
