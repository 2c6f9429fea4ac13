"""
Configuration management with typed Pydantic models.

Provides explicit network and logging policy and environment-aware
configuration loading.
"""

from tokenlist_validator.config.loader import load_config
from tokenlist_validator.config.settings import (
    HttpConfig,
    LoggingConfig,
    ValidatorConfig,
)

__all__ = [
    "HttpConfig",
    "LoggingConfig",
    "ValidatorConfig",
    "load_config",
]
