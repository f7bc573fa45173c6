"""
ABOUTME: Run mode detection for the web application
ABOUTME: Classifies development, production, test, and preview contexts from environment flags
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from .config import resolve_environ

MODE_KEY = "NODE_ENV"
PREVIEW_KEY = "VERCEL_ENV"


@dataclass(frozen=True)
class RuntimeMode:
    """Snapshot of the run mode indicators."""

    node_env: Optional[str] = None
    vercel_env: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "RuntimeMode":
        environ = resolve_environ(environ)
        return cls(node_env=environ.get(MODE_KEY), vercel_env=environ.get(PREVIEW_KEY))

    @property
    def is_development(self) -> bool:
        return self.node_env == "development"

    @property
    def is_production(self) -> bool:
        return self.node_env == "production"

    @property
    def is_test(self) -> bool:
        return self.node_env == "test"

    @property
    def is_preview(self) -> bool:
        return self.vercel_env == "preview"

    def to_dict(self) -> dict:
        return {
            "isDevelopment": self.is_development,
            "isProduction": self.is_production,
            "isTest": self.is_test,
            "isPreview": self.is_preview,
        }


class LiveRuntimeMode:
    """Run mode flags re-read from the environment on every access."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    @property
    def current(self) -> RuntimeMode:
        return RuntimeMode.from_environ(self._environ)

    @property
    def is_development(self) -> bool:
        return self.current.is_development

    @property
    def is_production(self) -> bool:
        return self.current.is_production

    @property
    def is_test(self) -> bool:
        return self.current.is_test

    @property
    def is_preview(self) -> bool:
        return self.current.is_preview


env = LiveRuntimeMode()
