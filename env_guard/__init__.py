"""
ABOUTME: Environment variable validation for web application configuration
ABOUTME: Provides required-key checks, placeholder detection, and typed config accessors
"""

__version__ = "0.1.0"

from .config import get_env_var
from .exceptions import ConfigError, ErrorKind
from .runtime import LiveRuntimeMode, RuntimeMode, env
from .settings import SiteConfig, SupabaseConfig, site_config, supabase_config
from .validator import (
    DEFAULT_REQUIRED,
    EnvVarConfig,
    ValueStatus,
    check_env_variables,
    classify_value,
    is_placeholder,
)

__all__ = [
    "check_env_variables",
    "classify_value",
    "is_placeholder",
    "get_env_var",
    "ConfigError",
    "ErrorKind",
    "EnvVarConfig",
    "ValueStatus",
    "DEFAULT_REQUIRED",
    "RuntimeMode",
    "LiveRuntimeMode",
    "SupabaseConfig",
    "SiteConfig",
    "env",
    "supabase_config",
    "site_config",
]
