"""Pytest configuration and shared fixtures."""

import copy
import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest
import structlog
from structlog.testing import LogCapture

from tokenlist_validator.utils.logging import PACKAGE_LOGGER

VALID_TOKEN_LIST: dict[str, Any] = {
    "name": "Test List",
    "timestamp": "2024-05-01T12:00:00Z",
    "version": {"major": 1, "minor": 2, "patch": 3},
    "tokens": [
        {
            "chainId": 1,
            "address": "0x6B175474E89094C44Da98b954EedeAC495271d0F",
            "name": "Dai Stablecoin",
            "symbol": "DAI",
            "decimals": 18,
        }
    ],
}


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def package_fixtures_dir(project_root: Path) -> Path:
    """Return the sample token lists shipped with the package."""
    return project_root / "src" / "tokenlist_validator" / "fixtures"


@pytest.fixture
def valid_token_list() -> dict[str, Any]:
    """Create a token list that conforms to the schema."""
    return copy.deepcopy(VALID_TOKEN_LIST)


@pytest.fixture
def list_dir(tmp_path: Path, valid_token_list: dict[str, Any]) -> Path:
    """Create a directory with valid, invalid and malformed token lists."""
    (tmp_path / "valid.json").write_text(json.dumps(valid_token_list), encoding="utf-8")

    missing_name = {k: v for k, v in valid_token_list.items() if k != "name"}
    (tmp_path / "missing-name.json").write_text(json.dumps(missing_name), encoding="utf-8")

    truncated = json.dumps(valid_token_list)[:40]
    (tmp_path / "truncated.json").write_text(truncated, encoding="utf-8")

    return tmp_path


@pytest.fixture
def make_client() -> Iterator[Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]]:
    """Build HTTP clients backed by a mock transport."""
    clients: list[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Detach log handlers installed during a test."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()


@pytest.fixture
def log_capture() -> LogCapture:
    """Collect log records as dicts."""
    return LogCapture()


@pytest.fixture
def captured_logger(log_capture: LogCapture) -> Any:
    """A logger whose records end up in log_capture."""
    return structlog.wrap_logger(
        structlog.testing.CapturingLogger(),
        processors=[log_capture],
        wrapper_class=structlog.BoundLogger,
    )
