"""
Configuration loading utilities.

Supports environment variable interpolation. Every key is optional;
an absent file section falls back to the model defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from tokenlist_validator.config.settings import (
    HttpConfig,
    LoggingConfig,
    ValidatorConfig,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(config_path: Path | None = None) -> ValidatorConfig:
    """
    Load validator configuration from a YAML file.

    A relative base_dir is resolved against the directory of the config
    file, so a config can sit next to the lists it points at.

    Args:
        config_path: Path to the configuration file. None returns defaults.

    Returns:
        Fully validated ValidatorConfig instance.
    """
    if config_path is None:
        return ValidatorConfig()

    data = load_yaml(config_path)
    fields: dict[str, Any] = {}

    if data.get("service"):
        fields["service"] = data["service"]

    if data.get("base_dir"):
        base_dir = Path(data["base_dir"])
        if not base_dir.is_absolute():
            base_dir = config_path.parent / base_dir
        fields["base_dir"] = base_dir

    fields["http"] = HttpConfig(**(data.get("http") or {}))

    logging_data = dict(data.get("logging") or {})
    if logging_data.get("error_log"):
        logging_data["error_log"] = Path(logging_data["error_log"])
    fields["logging"] = LoggingConfig(**logging_data)

    return ValidatorConfig(**fields)
