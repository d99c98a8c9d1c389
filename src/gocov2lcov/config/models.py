"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GOCOV2LCOV__SECTION__KEY)
3. Explicit YAML file (--config)
4. Global YAML (~/.config/gocov2lcov/config.yaml)
5. Built-in defaults (this file)

Examples:
    GOCOV2LCOV__LOGGING__LEVEL=DEBUG
    GOCOV2LCOV__RESOLVER__GO_BINARY=/usr/local/go/bin/go
    GOCOV2LCOV__PROFILE__MAX_LINE_BYTES=1048576
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_VCS_MARKERS = (".git", ".hg", ".bzr", ".svn")


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GOCOV2LCOV__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG reports every dropped profile line.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ResolverConfig(BaseModel):
    """Package resolution and repository root detection.

    Env vars:
        GOCOV2LCOV__RESOLVER__GO_BINARY: go executable used for package lookup
        GOCOV2LCOV__RESOLVER__WORKING_DIR: directory package lookups run from
        GOCOV2LCOV__RESOLVER__TIMEOUT_SEC: per-lookup timeout
    """

    go_binary: str = Field(
        default="go",
        description="go executable used for find-only package lookups.",
    )
    working_dir: str | None = Field(
        default=None,
        description="Directory package lookups run from. Default: current directory.",
    )
    timeout_sec: float = Field(
        default=60.0,
        description="Timeout for a single package lookup. A timed-out lookup "
        "counts as an unresolvable package.",
    )
    vcs_markers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_VCS_MARKERS),
        description="Directory names that mark a repository root.",
    )

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    @field_validator("vcs_markers")
    @classmethod
    def validate_markers(cls, v: list[str]) -> list[str]:
        for marker in v:
            if not marker or "/" in marker or "\\" in marker:
                raise ValueError(f"VCS marker must be a bare directory name: {marker!r}")
        return v


class ProfileConfig(BaseModel):
    """Coverage profile scanning.

    Env vars:
        GOCOV2LCOV__PROFILE__MAX_LINE_BYTES: longest accepted profile line
    """

    max_line_bytes: int = Field(
        default=64 * 1024,
        description="Lines longer than this abort the run.",
    )

    @field_validator("max_line_bytes")
    @classmethod
    def validate_max_line_bytes(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_line_bytes must be positive, got {v}")
        return v


class Gocov2LcovConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
