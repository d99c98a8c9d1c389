"""gocov2lcov - convert Go coverage profiles to LCOV tracefiles."""

__version__ = "0.1.0"
