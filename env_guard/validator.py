"""
ABOUTME: Required and optional environment variable validation
ABOUTME: Detects missing keys and leftover placeholder values before the application starts
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Union

from .config import resolve_environ
from .exceptions import ConfigError, ErrorKind
from .runtime import RuntimeMode

DEFAULT_REQUIRED = (
    "NEXT_PUBLIC_SUPABASE_URL",
    "NEXT_PUBLIC_SUPABASE_ANON_KEY",
)

PLACEHOLDER_SENTINEL = "eyJ..."
PLACEHOLDER_MARKERS = ("your_", "[PROJECT_ID]")


class ValueStatus(str, Enum):
    VALID = "valid"
    MISSING = "missing"
    INVALID = "invalid"


@dataclass
class EnvVarConfig:
    """Keys to check in one validation call."""

    required: Sequence[str] = DEFAULT_REQUIRED
    optional: Sequence[str] = field(default_factory=tuple)

    @classmethod
    def coerce(cls, config: Union["EnvVarConfig", Mapping[str, Any], None]) -> "EnvVarConfig":
        """Build a config from ``None``, a plain dict, or an existing instance."""
        if isinstance(config, cls):
            return config
        config = config or {}
        required = config.get("required")
        return cls(
            required=DEFAULT_REQUIRED if required is None else tuple(required),
            optional=tuple(config.get("optional") or ()),
        )


def is_placeholder(value: str) -> bool:
    """Return True if the value still looks like an unedited template value."""
    if value == PLACEHOLDER_SENTINEL:
        return True
    return any(marker in value for marker in PLACEHOLDER_MARKERS)


def classify_value(value: Optional[str]) -> ValueStatus:
    if not value:
        return ValueStatus.MISSING
    if is_placeholder(value):
        return ValueStatus.INVALID
    return ValueStatus.VALID


def _bullets(keys: Sequence[str]) -> str:
    return "\n".join(f"  - {k}" for k in keys)


def check_env_variables(
    config: Union[EnvVarConfig, Mapping[str, Any], None] = None,
    environ: Optional[Mapping[str, str]] = None,
    mode: Optional[RuntimeMode] = None,
) -> bool:
    """
    Validate required environment variables and warn about unset optional ones.

    Missing keys are reported before placeholder keys; when any required key is
    missing, placeholder values in the same list are not reported.

    Parameters:
        config: Required/optional key lists. Defaults to the backend URL and anon key.
        environ: Mapping to read from. Defaults to ``os.environ``.
        mode: Run mode used to decide whether to warn. Defaults to the mode in ``environ``.

    Returns:
        bool: Always True; failures raise.

    Raises:
        ConfigError: With kind ``MISSING`` or ``INVALID``.
    """
    config = EnvVarConfig.coerce(config)
    environ = resolve_environ(environ)

    missing: List[str] = []
    invalid: List[str] = []
    for key in config.required:
        status = classify_value(environ.get(key))
        if status is ValueStatus.MISSING:
            missing.append(key)
        elif status is ValueStatus.INVALID:
            invalid.append(key)

    if missing:
        raise ConfigError(
            f"Missing required environment variables:\n{_bullets(missing)}\n\n"
            "Please check your .env.local file and ensure all required variables are set.",
            kind=ErrorKind.MISSING,
            keys=missing,
        )

    if invalid:
        raise ConfigError(
            "Invalid environment variables (still using placeholder values):\n"
            f"{_bullets(invalid)}\n\n"
            "Please update these variables with actual values in your .env.local file.",
            kind=ErrorKind.INVALID,
            keys=invalid,
        )

    missing_optional = [key for key in config.optional if not environ.get(key)]
    if missing_optional:
        if mode is None:
            mode = RuntimeMode.from_environ(environ)
        if mode.is_development:
            logging.warning(
                f"⚠️  Optional environment variables not set:\n{_bullets(missing_optional)}\n"
                "These features may not work without these variables."
            )

    return True
