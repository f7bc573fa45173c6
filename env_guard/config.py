"""
ABOUTME: Environment variable configuration utilities
ABOUTME: Provides type-safe single-key lookups against an injected or process-wide environment
"""

import os
from typing import Mapping, Optional

from .exceptions import ConfigError, ErrorKind


def resolve_environ(environ: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """Return the mapping to read from, falling back to the live process environment."""
    return os.environ if environ is None else environ


def get_env_var(
    key: str,
    default: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Get an environment variable, falling back to ``default`` when unset or empty.

    Raises:
        ConfigError: If the key is missing and no non-empty default was given.
    """
    value = resolve_environ(environ).get(key)
    if not value and not default:
        raise ConfigError(
            f"Environment variable {key} is not defined",
            kind=ErrorKind.NO_DEFAULT,
            keys=[key],
        )
    return value or default
