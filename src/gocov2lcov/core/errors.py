"""gocov2lcov error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Package resolution
- 4xxx: Profile input
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Package resolution (3xxx)
    PACKAGE_NOT_FOUND = 3001

    # Profile input (4xxx)
    PROFILE_READ_FAILED = 4001
    PROFILE_LINE_TOO_LONG = 4002


@dataclass(frozen=True, slots=True)
class Gocov2LcovError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'PACKAGE_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON log output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(Gocov2LcovError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class PackageNotFoundError(Gocov2LcovError):
    """A package-qualified file reference could not be mapped to a directory."""

    @classmethod
    def for_reference(cls, reference: str, reason: str) -> "PackageNotFoundError":
        return cls(
            code=ErrorCode.PACKAGE_NOT_FOUND,
            message=f"can't find {reference!r}: {reason}",
            details={"reference": reference, "reason": reason},
        )


class ProfileReadError(Gocov2LcovError):
    """Fatal failure while scanning the coverage profile."""

    @classmethod
    def read_failed(cls, reason: str) -> "ProfileReadError":
        return cls(
            code=ErrorCode.PROFILE_READ_FAILED,
            message=f"Failed to read coverage profile: {reason}",
            details={"reason": reason},
        )

    @classmethod
    def line_too_long(cls, line_number: int, limit: int) -> "ProfileReadError":
        return cls(
            code=ErrorCode.PROFILE_LINE_TOO_LONG,
            message=f"Line {line_number} exceeds {limit} bytes",
            details={"line": line_number, "limit": limit},
        )
