"""Logging for conversion runs.

Module loggers come from get_logger(__name__) and always go through stdlib
logging. Without configure_logging() that means stdlib defaults apply:
DEBUG and INFO events are dropped and nothing is ever printed to stdout,
so library callers can stream LCOV to stdout safely.

configure_logging() attaches the handlers described by a LoggingConfig. It
refuses a stdout output when stdout carries the report.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from gocov2lcov.core.errors import ConfigError

if TYPE_CHECKING:
    from gocov2lcov.config.models import LoggingConfig

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(  # type: ignore[no-any-return]
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    config: LoggingConfig,
    *,
    verbose: bool = False,
    stdout_reserved: bool = False,
) -> None:
    """Install handlers for every configured output.

    Args:
        config: Logging levels and outputs.
        verbose: Force DEBUG regardless of the configured level.
        stdout_reserved: stdout carries the LCOV report; a stdout output
            is rejected.

    Raises:
        ConfigError: If an output targets stdout while it is reserved.
    """
    if stdout_reserved and any(o.destination == "stdout" for o in config.outputs):
        raise ConfigError.invalid_value(
            "logging.outputs", "stdout", "stdout carries the LCOV report"
        )

    default_level = logging.DEBUG if verbose else _LEVEL_MAP[config.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        # Don't cache - allows reconfiguration between runs in one process
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(default_level)

    for output in config.outputs:
        if verbose:
            output_level = logging.DEBUG
        else:
            output_level = _LEVEL_MAP[output.level or config.level]
        is_console = output.destination in ("stderr", "stdout")

        renderer: structlog.types.Processor
        if output.format == "json":
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(
                colors=is_console and sys.stderr.isatty(),
                pad_event_to=0,
                pad_level=False,
            )

        handler = _create_handler(output.destination)
        handler.setLevel(output_level)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=renderer,
                foreign_pre_chain=shared_processors,
            )
        )
        root_logger.addHandler(handler)


def _create_handler(destination: str) -> logging.Handler:
    """Create handler for stderr, stdout, or file path."""
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")
