"""Allow running with ``python -m tokenlist_validator``."""

from tokenlist_validator.cli import app

app(prog_name="tokenlist-validator")
