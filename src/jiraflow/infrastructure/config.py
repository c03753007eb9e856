"""
Cache location settings.

The cache directory is resolved once, here, and passed explicitly to the
cache constructor. JIRAFLOW_CACHE_DIR overrides the per-user default, mainly
so test runs can use an isolated directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import platformdirs

from jiraflow.infrastructure.persistence.filesystem import FilesystemPathCache

CACHE_DIR_ENV_VAR = "JIRAFLOW_CACHE_DIR"
APP_NAME = "jiraflow"


def default_cache_dir() -> Path:
    """Per-user configuration directory (e.g. ~/.config/jiraflow on Linux)."""
    return Path(platformdirs.user_config_dir(APP_NAME, appauthor=False))


@dataclass(frozen=True)
class CacheSettings:
    """Where the path cache lives and which project scope it covers."""

    cache_dir: Path
    scope_key: str | None = None

    @classmethod
    def from_env(
        cls,
        scope_key: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "CacheSettings":
        """
        Resolve settings from the environment.

        Args:
            scope_key: Project scope for the cache file
            environ: Environment mapping (defaults to os.environ)
        """
        env = os.environ if environ is None else environ
        override = env.get(CACHE_DIR_ENV_VAR)
        if override:
            return cls(Path(override).expanduser(), scope_key)
        return cls(default_cache_dir(), scope_key)

    def open_cache(self) -> FilesystemPathCache:
        """Open the filesystem cache these settings point at."""
        return FilesystemPathCache(self.cache_dir, self.scope_key)
