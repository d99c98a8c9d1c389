"""Core module exports."""

from gocov2lcov.core.errors import (
    ConfigError,
    ErrorCode,
    Gocov2LcovError,
    PackageNotFoundError,
    ProfileReadError,
)
from gocov2lcov.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "Gocov2LcovError",
    "PackageNotFoundError",
    "ProfileReadError",
    # Logging
    "configure_logging",
    "get_logger",
]
