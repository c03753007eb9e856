"""
Persistence adapters for the path cache.
"""

from jiraflow.infrastructure.persistence.filesystem import (
    DEFAULT_CACHE_FILENAME,
    FilesystemPathCache,
    cache_filename,
)
from jiraflow.infrastructure.persistence.memory import InMemoryPathCache

__all__ = [
    "DEFAULT_CACHE_FILENAME",
    "FilesystemPathCache",
    "InMemoryPathCache",
    "cache_filename",
]
