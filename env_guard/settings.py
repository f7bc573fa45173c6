"""
ABOUTME: Typed accessors for backend service and site configuration
ABOUTME: Each accessor re-reads the environment on call and never caches values
"""

from typing import Mapping, Optional

from .config import get_env_var
from .exceptions import ConfigError, ErrorKind
from .runtime import RuntimeMode

SUPABASE_URL_KEY = "NEXT_PUBLIC_SUPABASE_URL"
SUPABASE_ANON_KEY = "NEXT_PUBLIC_SUPABASE_ANON_KEY"
SUPABASE_SERVICE_ROLE_KEY = "SUPABASE_SERVICE_ROLE_KEY"
SITE_URL_KEY = "NEXT_PUBLIC_SITE_URL"

PRODUCTION_SITE_URL = "https://your-domain.com"
DEVELOPMENT_SITE_URL = "http://localhost:3000"


class SupabaseConfig:
    """Backend service connection settings."""

    def __init__(
        self, environ: Optional[Mapping[str, str]] = None, client_side: bool = False
    ):
        """
        Parameters:
            environ: Mapping to read from. Defaults to ``os.environ`` at call time.
            client_side: True when running in code shipped to browsers.
        """
        self.environ = environ
        self.client_side = client_side

    def url(self) -> str:
        return get_env_var(SUPABASE_URL_KEY, environ=self.environ)

    def anon_key(self) -> str:
        return get_env_var(SUPABASE_ANON_KEY, environ=self.environ)

    def service_role_key(self) -> str:
        """Return the privileged key. Refused outright in a client-side context."""
        if self.client_side:
            raise ConfigError(
                "Service role key should never be accessed on the client side!",
                kind=ErrorKind.FORBIDDEN_CONTEXT,
                keys=[SUPABASE_SERVICE_ROLE_KEY],
            )
        return get_env_var(SUPABASE_SERVICE_ROLE_KEY, environ=self.environ)


class SiteConfig:
    """Public site settings."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        mode: Optional[RuntimeMode] = None,
    ):
        self.environ = environ
        self.mode = mode

    def url(self) -> str:
        mode = self.mode or RuntimeMode.from_environ(self.environ)
        default = PRODUCTION_SITE_URL if mode.is_production else DEVELOPMENT_SITE_URL
        return get_env_var(SITE_URL_KEY, default, environ=self.environ)


supabase_config = SupabaseConfig()
site_config = SiteConfig()
