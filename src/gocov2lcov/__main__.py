"""Allow ``python -m gocov2lcov``."""

from gocov2lcov.cli.main import cli

cli()
