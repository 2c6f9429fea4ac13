"""
Reporter for validation outcomes.

Emits structured log records for every outcome and, when a Rich console
is attached, a table of schema violations.
"""

from typing import Any

from rich.console import Console
from rich.table import Table

from tokenlist_validator.errors import SchemaValidationError, TokenListValidatorError
from tokenlist_validator.validation.core import SchemaViolation


class Reporter:
    """Turns pipeline outcomes into log records and exit codes."""

    def __init__(self, logger: Any, console: Console | None = None) -> None:
        """
        Initialize reporter.

        Args:
            logger: structlog logger receiving the records.
            console: Optional Rich Console for the violations table.
        """
        self.logger = logger
        self.console = console

    def report_started(self, source: str) -> None:
        """Record that validation of a source has started."""
        self.logger.info("Validating token list", source=source)

    def report_success(self, source: str) -> int:
        """
        Record a successful validation.

        Returns:
            Exit code for success.
        """
        self.logger.info("Token list is valid.", source=source)
        return 0

    def report_failure(
        self, error: TokenListValidatorError, source: str | None = None
    ) -> int:
        """
        Record a failure with its full context.

        Args:
            error: The error that ended the pipeline.
            source: Source being validated, if one was given.

        Returns:
            Exit code for the failure.
        """
        fields: dict[str, Any] = {"source": source, **error.context()}
        self.logger.error(
            "Validation failed",
            error_type=type(error).__name__,
            error=str(error),
            **fields,
        )

        if self.console is not None and isinstance(error, SchemaValidationError):
            self.print_violations(error.violations)

        return error.exit_code

    def print_violations(self, violations: tuple[SchemaViolation, ...]) -> None:
        """
        Print violations as a formatted table.

        Args:
            violations: Violations to display, in reported order.
        """
        if self.console is None:
            return

        table = Table(title="Schema Violations", show_header=True)
        table.add_column("Path", style="cyan", no_wrap=True)
        table.add_column("Keyword", style="blue")
        table.add_column("Message", style="red")

        for violation in violations:
            table.add_row(
                violation.instance_path or "/",
                violation.keyword,
                violation.message,
            )

        self.console.print(table)
        self.console.print(f"[bold red]{len(violations)} violation(s)[/bold red]")
