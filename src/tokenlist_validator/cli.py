"""Command-line interface for the token list validator."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
import yaml
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from tokenlist_validator.config.settings import ValidatorConfig

app = typer.Typer(
    name="tokenlist-validator",
    help="Fetch or read a token list and validate it against the token list schema.",
    no_args_is_help=True,
)

console = Console()


def _apply_overrides(
    config: "ValidatorConfig",
    *,
    base_dir: Path | None,
    timeout: float | None,
    follow_redirects: bool,
    error_log: Path | None,
    log_level: str | None,
    json_logs: bool,
) -> "ValidatorConfig":
    """Overlay command-line options on a loaded configuration."""
    from tokenlist_validator.config.settings import (
        HttpConfig,
        LoggingConfig,
        ValidatorConfig,
    )

    http_fields = config.http.model_dump()
    if timeout is not None:
        http_fields["timeout"] = timeout
    if not follow_redirects:
        http_fields["follow_redirects"] = False

    logging_fields = config.logging.model_dump()
    if error_log is not None:
        logging_fields["error_log"] = error_log
    if log_level is not None:
        logging_fields["level"] = log_level
    if json_logs:
        logging_fields["json_console"] = True

    return ValidatorConfig(
        service=config.service,
        base_dir=base_dir if base_dir is not None else config.base_dir,
        http=HttpConfig(**http_fields),
        logging=LoggingConfig(**logging_fields),
    )


@app.command()
def validate(
    source: Annotated[
        str | None,
        typer.Argument(
            help="Token list URL (http/https) or path relative to the base directory.",
            show_default=False,
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    base_dir: Annotated[
        Path | None,
        typer.Option(
            "--base-dir",
            "-b",
            help="Directory local paths are resolved against. Default: package directory.",
            file_okay=False,
        ),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option(
            "--timeout",
            "-t",
            help="HTTP request timeout in seconds.",
        ),
    ] = None,
    follow_redirects: Annotated[
        bool,
        typer.Option(
            "--follow-redirects/--no-follow-redirects",
            help="Follow HTTP redirects.",
        ),
    ] = True,
    error_log: Annotated[
        Path | None,
        typer.Option(
            "--error-log",
            help="File receiving error records as JSON lines.",
            dir_okay=False,
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            "-l",
            help="Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = None,
    json_logs: Annotated[
        bool,
        typer.Option(
            "--json-logs",
            help="Render console logs as JSON.",
        ),
    ] = False,
) -> None:
    """Validate a token list from a URL or a local file."""
    from tokenlist_validator.config.loader import load_config
    from tokenlist_validator.pipeline import build_pipeline
    from tokenlist_validator.utils.logging import configure_logging, get_logger
    from tokenlist_validator.validation import Reporter

    try:
        validator_config = _apply_overrides(
            load_config(config),
            base_dir=base_dir,
            timeout=timeout,
            follow_redirects=follow_redirects,
            error_log=error_log,
            log_level=log_level,
            json_logs=json_logs,
        )
    except (ValueError, OSError, yaml.YAMLError) as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=validator_config.logging.level,
        error_log=validator_config.logging.error_log,
        service=validator_config.service,
        json_output=validator_config.logging.json_console,
    )

    reporter = Reporter(get_logger("tokenlist_validator.reporter"), console=console)
    result = build_pipeline(validator_config, reporter).run(source)

    # Exit with appropriate code
    if result.exit_code != 0:
        raise typer.Exit(code=result.exit_code)


@app.command()
def schema() -> None:
    """Show the bundled token list schema."""
    from tokenlist_validator.validation import default_validator

    info = default_validator().info

    table = Table(title="Token List Schema")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Title", info.title)
    table.add_row("$id", info.schema_id)
    table.add_row("Draft", info.draft)
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from tokenlist_validator import __version__

    console.print(f"tokenlist-validator version {__version__}")


if __name__ == "__main__":
    app()
