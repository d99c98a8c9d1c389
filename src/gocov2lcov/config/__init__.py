"""Config module exports."""

from gocov2lcov.config.loader import load_config
from gocov2lcov.config.models import (
    Gocov2LcovConfig,
    LoggingConfig,
    LogOutputConfig,
    ProfileConfig,
    ResolverConfig,
)

__all__ = [
    "load_config",
    "Gocov2LcovConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ProfileConfig",
    "ResolverConfig",
]
