"""
In-memory implementation of the path cache.

Useful for testing and single-process use where nothing should reach disk.
"""

from jiraflow.domain.interfaces import PathCacheInterface
from jiraflow.domain.models import PathKey, PathSuggestion, WorkflowPath
from jiraflow.domain.ranking import DEFAULT_SUGGESTION_LIMIT, rank_suggestions


class InMemoryPathCache(PathCacheInterface):
    """Simple in-memory path cache for testing."""

    def __init__(self) -> None:
        self._workflows: dict[str, WorkflowPath] = {}

    def get(
        self, issue_type: str, from_state: str, to_state: str
    ) -> WorkflowPath | None:
        return self._workflows.get(PathKey(issue_type, from_state, to_state).serialize())

    def put(
        self, issue_type: str, from_state: str, to_state: str, path: WorkflowPath
    ) -> None:
        self._workflows[PathKey(issue_type, from_state, to_state).serialize()] = path

    def entries(self) -> list[tuple[str, WorkflowPath]]:
        return list(self._workflows.items())

    def top_suggestions(
        self,
        issue_type: str,
        from_state: str,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> list[PathSuggestion]:
        return rank_suggestions(self.entries(), issue_type, from_state, limit)
