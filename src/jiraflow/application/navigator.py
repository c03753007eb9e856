"""
WorkflowNavigator: get-or-discover facade over cache, explorer and executor.

This is the surface command handlers call: discover a path, fetch one from
the cache (discovering on a miss), execute a path and record its usage, and
list ranked suggestions for an issue's current state.
"""

import logging

from jiraflow.application.executor import WorkflowExecutor
from jiraflow.application.explorer import PathExplorer
from jiraflow.domain.interfaces import (
    ConfirmationInterface,
    PathCacheInterface,
    TransitionOracleInterface,
)
from jiraflow.domain.models import (
    ExecutionResult,
    ExecutionStatus,
    IssueOverview,
    PathSuggestion,
    WorkflowPath,
)
from jiraflow.domain.ranking import DEFAULT_SUGGESTION_LIMIT

logger = logging.getLogger(__name__)

DEFAULT_TARGET_STATE = "Done"
FALLBACK_ISSUE_TYPE = "Task"


class WorkflowNavigator:
    """
    Ties the path cache, explorer and executor together.

    Only discovered paths are cached. A failed discovery is never cached and
    is retried from scratch on the next call.
    """

    def __init__(
        self,
        oracle: TransitionOracleInterface,
        cache: PathCacheInterface,
        explorer: PathExplorer | None = None,
        executor: WorkflowExecutor | None = None,
        confirmation: ConfirmationInterface | None = None,
    ):
        """
        Args:
            oracle: Tracker for the issues being navigated
            cache: Store of discovered paths
            explorer: Path search (defaults to PathExplorer over oracle)
            executor: Path execution (defaults to a WorkflowExecutor over
                      oracle using confirmation)
            confirmation: Human yes/no channel for the default executor;
                          without one only non-interactive execution works
        """
        self._oracle = oracle
        self._cache = cache
        self._explorer = explorer or PathExplorer(oracle)
        self._executor = executor or WorkflowExecutor(oracle, confirmation)

    def discover_path(
        self, issue_id: str, target_state: str = DEFAULT_TARGET_STATE
    ) -> WorkflowPath | None:
        """
        Search for a path from the issue's current state and cache it.

        Always searches, even when a cached path exists.

        Returns:
            The discovered path, or None if none was found or the issue's
            state could not be read
        """
        _require_issue_id(issue_id)

        located = self._locate(issue_id)
        if located is None:
            return None
        issue_type, current_state = located

        return self._discover(issue_id, issue_type, current_state, target_state)

    def get_path(
        self, issue_id: str, target_state: str = DEFAULT_TARGET_STATE
    ) -> WorkflowPath | None:
        """
        Return the cached path for the issue's current state, discovering
        it on a miss.
        """
        _require_issue_id(issue_id)

        located = self._locate(issue_id)
        if located is None:
            return None
        issue_type, current_state = located

        cached = self._cache.get(issue_type, current_state, target_state)
        if cached is not None:
            logger.info(
                "Using cached workflow path for %s from '%s' to '%s'",
                issue_type,
                current_state,
                target_state,
            )
            return cached

        return self._discover(issue_id, issue_type, current_state, target_state)

    def execute_path(
        self, issue_id: str, path: WorkflowPath, interactive: bool = True
    ) -> ExecutionResult:
        """
        Execute a path and persist its updated usage statistics.

        The updated path is stored under (issue type, path start, path
        target). Empty paths succeed without touching the tracker or cache.
        """
        _require_issue_id(issue_id)
        if path is None:
            raise TypeError("A workflow path is required")

        # The type does not change as the issue moves, so read it up front.
        issue_type = self._issue_type(issue_id) if not path.is_empty else ""

        result = self._executor.execute(issue_id, path, interactive=interactive)

        if result.succeeded and not path.is_empty:
            start, target = path.steps[0].from_state, path.steps[-1].to_state
            self._cache.put(issue_type, start, target, result.path)

        return result

    def complete(
        self,
        issue_id: str,
        target_state: str = DEFAULT_TARGET_STATE,
        interactive: bool = True,
    ) -> ExecutionResult:
        """
        Move an issue to target_state: get or discover a path, then run it.

        A missing path is reported as a FAILED result, not raised.

        Raises:
            ValueError: If interactive is requested without a confirmation
                        channel; checked before any discovery or caching
        """
        _require_issue_id(issue_id)
        self._executor.check_interactive(interactive)

        logger.info("Finding workflow path to '%s'...", target_state)
        path = self.get_path(issue_id, target_state)

        if path is None:
            logger.warning(
                "No workflow path found to '%s' for %s", target_state, issue_id
            )
            return ExecutionResult(
                status=ExecutionStatus.FAILED,
                path=WorkflowPath(steps=(), discovered_at=""),
                error=f"No workflow path found to '{target_state}'",
            )

        return self.execute_path(issue_id, path, interactive=interactive)

    def suggestions(
        self,
        issue_type: str,
        current_state: str,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> list[PathSuggestion]:
        """Most-used cached destinations from current_state."""
        return self._cache.top_suggestions(issue_type, current_state, limit)

    def describe_issue(self, issue_id: str) -> IssueOverview:
        """
        Collect an issue's type, state, next transitions and suggestions.

        Raises:
            Exception: Tracker failures reading state or transitions propagate
        """
        _require_issue_id(issue_id)

        current_state = self._oracle.current_state(issue_id)
        issue_type = self._oracle.issue_type(issue_id)
        transitions = self._oracle.available_transitions(issue_id)

        return IssueOverview(
            issue_id=issue_id,
            issue_type=issue_type,
            current_state=current_state,
            transitions=tuple(transitions),
            suggestions=tuple(self.suggestions(issue_type, current_state)),
        )

    def _discover(
        self, issue_id: str, issue_type: str, current_state: str, target_state: str
    ) -> WorkflowPath | None:
        logger.info(
            "Discovering workflow for %s issues from '%s' to '%s'...",
            issue_type,
            current_state,
            target_state,
        )
        path = self._explorer.explore(issue_id, current_state, target_state)
        if path is None:
            return None

        self._cache.put(issue_type, current_state, target_state, path)
        return path

    def _locate(self, issue_id: str) -> tuple[str, str] | None:
        """Read (issue type, current state); None if the state is unreadable."""
        try:
            current_state = self._oracle.current_state(issue_id)
        except Exception as e:
            logger.error("Error reading state of %s: %s", issue_id, e)
            return None
        return self._issue_type(issue_id), current_state

    def _issue_type(self, issue_id: str) -> str:
        try:
            return self._oracle.issue_type(issue_id)
        except Exception as e:
            logger.warning(
                "Could not read issue type of %s, assuming '%s': %s",
                issue_id,
                FALLBACK_ISSUE_TYPE,
                e,
            )
            return FALLBACK_ISSUE_TYPE


def _require_issue_id(issue_id: str) -> None:
    if not issue_id:
        raise ValueError("Issue id cannot be empty")
