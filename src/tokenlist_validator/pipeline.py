"""
Validation pipeline.

Runs one source through Resolver -> Loader -> Validator -> Reporter.
Stages run strictly in order and the first failure ends the run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from tokenlist_validator.config.settings import ValidatorConfig
from tokenlist_validator.errors import (
    SchemaValidationError,
    TokenListValidatorError,
    UsageError,
)
from tokenlist_validator.ingestion.loader import DocumentLoader
from tokenlist_validator.ingestion.sources import resolve_source
from tokenlist_validator.utils.logging import get_logger
from tokenlist_validator.validation.core import (
    TokenListValidator,
    ValidationOutcome,
    default_validator,
)
from tokenlist_validator.validation.reporter import Reporter

log = get_logger(__name__)

USAGE = "Usage: tokenlist-validator validate <source>"


class PipelineState(Enum):
    """Stage of a single pipeline run."""

    IDLE = "idle"
    RESOLVING = "resolving"
    LOADING = "loading"
    VALIDATING = "validating"
    REPORTED_SUCCESS = "reported_success"
    REPORTED_FAILURE = "reported_failure"


@dataclass
class PipelineResult:
    """
    Result of one pipeline run.

    Attributes:
        source: Source string as given (None when missing).
        state: Terminal state reached.
        exit_code: Process exit status for this outcome.
        document: Parsed document, if loading succeeded.
        outcome: Validation outcome, if validation ran.
        error: The error that ended the run, if any.
    """

    source: str | None
    state: PipelineState
    exit_code: int
    document: Any = None
    outcome: ValidationOutcome | None = None
    error: TokenListValidatorError | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the run ended in the success state."""
        return self.state == PipelineState.REPORTED_SUCCESS


class ValidationPipeline:
    """
    Validates a single source end to end.

    Loader, validator and reporter are passed in so the pipeline can run
    against fake transports and capturing loggers.
    """

    def __init__(
        self,
        loader: DocumentLoader,
        validator: TokenListValidator,
        reporter: Reporter,
    ) -> None:
        self.loader = loader
        self.validator = validator
        self.reporter = reporter
        self.state = PipelineState.IDLE

    def _advance(self, state: PipelineState) -> None:
        log.debug("Pipeline state", state=state.value)
        self.state = state

    def run(self, source: str | None) -> PipelineResult:
        """
        Run the pipeline for one source.

        Args:
            source: URL or local path. Missing or empty fails before any I/O.

        Returns:
            PipelineResult in a terminal state.
        """
        self.state = PipelineState.IDLE

        if not source:
            self._advance(PipelineState.REPORTED_FAILURE)
            error = UsageError(USAGE)
            exit_code = self.reporter.report_failure(error)
            return PipelineResult(
                source=source, state=self.state, exit_code=exit_code, error=error
            )

        self.reporter.report_started(source)
        document: Any = None
        outcome: ValidationOutcome | None = None

        try:
            self._advance(PipelineState.RESOLVING)
            resolved = resolve_source(source)

            self._advance(PipelineState.LOADING)
            document = self.loader.load(resolved)

            self._advance(PipelineState.VALIDATING)
            outcome = self.validator.validate(document)
            if not outcome.valid:
                raise SchemaValidationError(outcome.errors)
        except TokenListValidatorError as e:
            self._advance(PipelineState.REPORTED_FAILURE)
            exit_code = self.reporter.report_failure(e, source=source)
            return PipelineResult(
                source=source,
                state=self.state,
                exit_code=exit_code,
                document=document,
                outcome=outcome,
                error=e,
            )

        self._advance(PipelineState.REPORTED_SUCCESS)
        exit_code = self.reporter.report_success(source)
        return PipelineResult(
            source=source,
            state=self.state,
            exit_code=exit_code,
            document=document,
            outcome=outcome,
        )


def build_pipeline(
    config: ValidatorConfig,
    reporter: Reporter,
    client: httpx.Client | None = None,
    validator: TokenListValidator | None = None,
) -> ValidationPipeline:
    """Wire a pipeline from configuration."""
    loader = DocumentLoader(config.base_dir, http=config.http, client=client)
    return ValidationPipeline(
        loader=loader,
        validator=validator or default_validator(),
        reporter=reporter,
    )


def load_document(
    source: str,
    config: ValidatorConfig | None = None,
    client: httpx.Client | None = None,
) -> Any:
    """
    Fetch or read a document and parse it.

    Args:
        source: URL or path relative to the configured base directory.
        config: Validator configuration. Defaults are used when omitted.
        client: Optional HTTP client for remote sources.

    Returns:
        Parsed JSON document.
    """
    config = config or ValidatorConfig()
    loader = DocumentLoader(config.base_dir, http=config.http, client=client)
    return loader.load(resolve_source(source))


def validate_document(document: Any) -> ValidationOutcome:
    """Validate a parsed document against the bundled token list schema."""
    return default_validator().validate(document)


def validate_source(
    source: str | None,
    config: ValidatorConfig | None = None,
    *,
    reporter: Reporter | None = None,
    client: httpx.Client | None = None,
) -> PipelineResult:
    """
    Run the full pipeline for one source.

    Args:
        source: URL or local path.
        config: Validator configuration. Defaults are used when omitted.
        reporter: Reporter to use. Defaults to one on the package logger.
        client: Optional HTTP client for remote sources.

    Returns:
        PipelineResult in a terminal state.
    """
    config = config or ValidatorConfig()
    reporter = reporter or Reporter(get_logger("tokenlist_validator.reporter"))
    return build_pipeline(config, reporter, client=client).run(source)
