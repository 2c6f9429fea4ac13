"""
Typed configuration models using Pydantic.

All runtime policy (network timeout, redirects, log sinks, base directory)
is defined here with explicit defaults and validation.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

PACKAGE_DIR = Path(__file__).resolve().parent.parent

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class HttpConfig(BaseModel):
    """Network policy for remote sources."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")
    max_redirects: int = Field(
        default=20, ge=0, description="Maximum redirect hops when following"
    )


class LoggingConfig(BaseModel):
    """Log sink configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Console log level")
    error_log: Path = Field(
        default=Path("error.log"), description="File receiving error records"
    )
    json_console: bool = Field(
        default=False, description="Render console records as JSON"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"level must be one of {', '.join(LOG_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class ValidatorConfig(BaseModel):
    """Complete validator configuration.

    Local sources are resolved against base_dir, which defaults to the
    installed package directory (it ships the sample fixtures).
    """

    model_config = ConfigDict(frozen=True)

    service: str = Field(
        default="token-list-validator",
        min_length=1,
        description="Service identifier attached to durable log records",
    )
    base_dir: Path = Field(
        default=PACKAGE_DIR, description="Directory local sources are resolved against"
    )
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
