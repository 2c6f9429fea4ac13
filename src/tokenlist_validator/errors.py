"""
Error taxonomy for the validation pipeline.

Every failure is terminal for a run. Each error carries the exit code the
process ends with and a context dict that is attached to the error record.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tokenlist_validator.validation.core import SchemaViolation


class TokenListValidatorError(Exception):
    """Base exception for token list validation failures."""

    exit_code: int = 1

    def context(self) -> dict[str, Any]:
        """Structured details logged alongside the error message."""
        return {}


class UsageError(TokenListValidatorError):
    """Raised when the tool is invoked without a source."""


class LoaderError(TokenListValidatorError):
    """Base exception for failures while acquiring or parsing a document."""

    def __init__(self, message: str, source: str) -> None:
        super().__init__(message)
        self.source = source

    def context(self) -> dict[str, Any]:
        return {"source": self.source}


class FetchError(LoaderError):
    """Raised when a remote document cannot be fetched."""

    def __init__(self, message: str, url: str, status: int | None = None) -> None:
        super().__init__(message, source=url)
        self.url = url
        self.status = status

    def context(self) -> dict[str, Any]:
        return {"url": self.url, "status": self.status}


class LoadTimeoutError(FetchError):
    """Raised when a remote request exceeds the configured timeout."""

    def __init__(self, message: str, url: str, timeout: float) -> None:
        super().__init__(message, url=url)
        self.timeout = timeout

    def context(self) -> dict[str, Any]:
        return {**super().context(), "timeout": self.timeout}


class ReadError(LoaderError):
    """Raised when a local document does not exist or cannot be read."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message, source=path)
        self.path = path

    def context(self) -> dict[str, Any]:
        return {"path": self.path}


class ParseError(LoaderError):
    """Raised when a document is not well-formed JSON."""

    def __init__(
        self,
        message: str,
        source: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message, source=source)
        self.line = line
        self.column = column

    def context(self) -> dict[str, Any]:
        return {"source": self.source, "line": self.line, "column": self.column}


class SchemaValidationError(TokenListValidatorError):
    """Raised when a well-formed document violates the token list schema."""

    def __init__(self, violations: "tuple[SchemaViolation, ...]") -> None:
        super().__init__(f"Document violates the token list schema ({len(violations)} error(s))")
        self.violations = violations

    def context(self) -> dict[str, Any]:
        return {"errors": [violation.to_dict() for violation in self.violations]}
