"""
Infrastructure layer for workflow path discovery.

Contains adapters for external concerns (persistence, trackers, prompts,
configuration).
"""

from jiraflow.infrastructure.config import CACHE_DIR_ENV_VAR, CacheSettings
from jiraflow.infrastructure.interactive import ConsoleConfirmation
from jiraflow.infrastructure.oracle import (
    InMemoryTransitionOracle,
    ScriptedTransitionOracle,
)
from jiraflow.infrastructure.persistence import (
    FilesystemPathCache,
    InMemoryPathCache,
)

__all__ = [
    # Persistence
    "InMemoryPathCache",
    "FilesystemPathCache",
    # Trackers
    "InMemoryTransitionOracle",
    "ScriptedTransitionOracle",
    # Interactive
    "ConsoleConfirmation",
    # Configuration
    "CACHE_DIR_ENV_VAR",
    "CacheSettings",
]
