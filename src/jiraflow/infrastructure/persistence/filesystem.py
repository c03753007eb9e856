"""
Filesystem implementation of the path cache.

One JSON document per project scope, loaded fully at construction and
rewritten in full on every mutation. There is no locking: concurrent
processes sharing a file race and the last writer wins.
"""

import contextlib
import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import jsonschema

from jiraflow.domain.exceptions import CacheDocumentError
from jiraflow.domain.interfaces import PathCacheInterface
from jiraflow.domain.models import PathKey, PathSuggestion, WorkflowPath, WorkflowStep
from jiraflow.domain.ranking import DEFAULT_SUGGESTION_LIMIT, rank_suggestions
from jiraflow.schemas import validate_path_cache

logger = logging.getLogger(__name__)

DEFAULT_CACHE_FILENAME = "jira-workflows.json"


def cache_filename(scope_key: str | None = None) -> str:
    """File name for a scope: the generic name, or one per lower-cased scope."""
    if not scope_key:
        return DEFAULT_CACHE_FILENAME
    return f"jira-workflows-{scope_key.lower()}.json"


class FilesystemPathCache(PathCacheInterface):
    """
    Persistent path cache backed by a single JSON document.

    Document layout:
    {
        "workflows": {
            "<issueType>:<fromState>:<toState>": {
                "steps": [{"fromState", "toState", "transitionName", "transitionId"}],
                "discoveredDate": ..., "lastUsed": ..., "usageCount": ...
            }
        },
        "lastUpdated": ...
    }

    Read and write failures never reach the caller. A failed read starts an
    empty cache; a failed write leaves the in-memory cache authoritative for
    the rest of the process and the previous file intact.
    """

    def __init__(self, cache_dir: str | Path, scope_key: str | None = None):
        """
        Args:
            cache_dir: Directory holding cache documents
            scope_key: Project scope; each scope gets its own file
        """
        self._cache_dir = Path(cache_dir)
        self._cache_path = self._cache_dir / cache_filename(scope_key)
        self._last_updated: str | None = None
        self._workflows: dict[str, WorkflowPath] = self._load()

    @property
    def path(self) -> Path:
        return self._cache_path

    @property
    def last_updated(self) -> str | None:
        return self._last_updated

    def _load(self) -> dict[str, WorkflowPath]:
        """Load the document, or start empty if it is missing or unreadable."""
        try:
            with open(self._cache_path, encoding="utf-8") as f:
                data = json.load(f)
            self._validate(data)
        except FileNotFoundError:
            logger.info(
                "No workflow cache at %s; starting empty", self._cache_path
            )
            return {}
        except (OSError, ValueError, CacheDocumentError) as e:
            logger.warning(
                "Could not load workflow cache %s: %s", self._cache_path, e
            )
            return {}

        self._last_updated = data.get("lastUpdated")
        return {
            key: self._dict_to_path(entry)
            for key, entry in data["workflows"].items()
        }

    def _validate(self, data: Any) -> None:
        try:
            validate_path_cache(data)
        except jsonschema.ValidationError as e:
            raise CacheDocumentError(f"Invalid cache document: {e.message}") from e

    def _save(self) -> None:
        """Rewrite the whole document atomically (write temp + replace)."""
        self._last_updated = datetime.now(timezone.utc).isoformat()
        document = {
            "workflows": {
                key: self._path_to_dict(path) for key, path in self._workflows.items()
            },
            "lastUpdated": self._last_updated,
        }

        temp_name: str | None = None
        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                dir=self._cache_dir, prefix=f".{self._cache_path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
            os.replace(temp_name, self._cache_path)  # Atomic on POSIX and Windows
        except OSError as e:
            logger.warning(
                "Could not save workflow cache %s: %s", self._cache_path, e
            )
            if temp_name is not None:
                with contextlib.suppress(OSError):
                    os.remove(temp_name)

    def _path_to_dict(self, path: WorkflowPath) -> dict[str, Any]:
        """Serialize a path to its JSON-compatible form."""
        return {
            "steps": [
                {
                    "fromState": step.from_state,
                    "toState": step.to_state,
                    "transitionName": step.transition_name,
                    "transitionId": step.transition_id,
                }
                for step in path.steps
            ],
            "discoveredDate": path.discovered_at,
            "lastUsed": path.last_used_at,
            "usageCount": path.usage_count,
        }

    def _dict_to_path(self, data: dict[str, Any]) -> WorkflowPath:
        """Deserialize a path from its JSON form."""
        return WorkflowPath(
            steps=tuple(
                WorkflowStep(
                    from_state=step["fromState"],
                    to_state=step["toState"],
                    transition_name=step["transitionName"],
                    transition_id=step["transitionId"],
                )
                for step in data["steps"]
            ),
            discovered_at=data.get("discoveredDate") or "",
            last_used_at=data.get("lastUsed"),
            usage_count=data.get("usageCount", 0),
        )

    def get(
        self, issue_type: str, from_state: str, to_state: str
    ) -> WorkflowPath | None:
        return self._workflows.get(PathKey(issue_type, from_state, to_state).serialize())

    def put(
        self, issue_type: str, from_state: str, to_state: str, path: WorkflowPath
    ) -> None:
        key = PathKey(issue_type, from_state, to_state).serialize()
        self._workflows[key] = path
        self._save()

    def entries(self) -> list[tuple[str, WorkflowPath]]:
        return list(self._workflows.items())

    def top_suggestions(
        self,
        issue_type: str,
        from_state: str,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> list[PathSuggestion]:
        return rank_suggestions(self.entries(), issue_type, from_state, limit)
