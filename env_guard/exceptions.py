"""
ABOUTME: Custom exception classes for environment validation
ABOUTME: Provides a single tagged error type for missing, placeholder, and forbidden config access
"""

from enum import Enum
from typing import Iterable, Optional


class ErrorKind(str, Enum):
    """Why a configuration lookup or validation failed."""

    MISSING = "missing"
    INVALID = "invalid"
    NO_DEFAULT = "no-default"
    FORBIDDEN_CONTEXT = "forbidden-context"


class ConfigError(Exception):
    """Configuration validation error."""

    name = "EnvironmentVariableError"

    def __init__(
        self,
        message: str = "",
        kind: ErrorKind = ErrorKind.MISSING,
        keys: Optional[Iterable[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.keys = tuple(keys or ())

    def to_dict(self) -> dict:
        """Structured view of the error, used for JSON output."""
        return {
            "error": self.name,
            "kind": self.kind.value,
            "keys": list(self.keys),
            "message": self.message,
        }
