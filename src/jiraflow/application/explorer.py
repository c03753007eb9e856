"""
PathExplorer: depth-first discovery of a transition path.

The tracker is the only source of graph edges. It reports transitions for the
issue's one real, current state, so every level of the search sees the same
observed edges combined with their inferred destinations; the search never
moves the real issue.
"""

import logging
from datetime import datetime, timezone

from jiraflow.domain.interfaces import (
    StateResolverInterface,
    TransitionOracleInterface,
)
from jiraflow.domain.models import TransitionOption, WorkflowPath, WorkflowStep
from jiraflow.domain.resolution import MetadataStateResolver

logger = logging.getLogger(__name__)


class PathExplorer:
    """
    Finds a sequence of transitions from a start state to a target state.

    Depth-first with an explicit visited set. A state is unmarked when every
    branch out of it fails, so it can still be reached through a different
    ancestor; within one branch no state repeats, which guarantees
    termination on cyclic workflows.
    """

    def __init__(
        self,
        oracle: TransitionOracleInterface,
        resolver: StateResolverInterface | None = None,
    ):
        """
        Args:
            oracle: Tracker used to list available transitions
            resolver: Works out each transition's destination
                      (defaults to MetadataStateResolver)
        """
        self._oracle = oracle
        self._resolver = resolver or MetadataStateResolver()

    def explore(
        self, issue_id: str, start_state: str, target_state: str
    ) -> WorkflowPath | None:
        """
        Search for a path from start_state to target_state.

        Args:
            issue_id: Issue whose available transitions drive the search
            start_state: State the search begins in
            target_state: State to reach

        Returns:
            A fresh WorkflowPath (usage_count 0), or None when the reachable
            space is exhausted without reaching the target
        """
        if not issue_id:
            raise ValueError("Issue id cannot be empty")
        if not target_state:
            raise ValueError("Target state cannot be empty")

        logger.info(
            "Exploring %s from '%s' to '%s'", issue_id, start_state, target_state
        )
        visited: set[str] = set()
        steps: list[WorkflowStep] = []

        if not self._search(issue_id, start_state, target_state, visited, steps):
            logger.info(
                "No path found from '%s' to '%s' for %s",
                start_state,
                target_state,
                issue_id,
            )
            return None

        logger.info("Discovered path with %d steps", len(steps))
        return WorkflowPath(
            steps=tuple(steps),
            discovered_at=datetime.now(timezone.utc).isoformat(),
            usage_count=0,
        )

    def _search(
        self,
        issue_id: str,
        current_state: str,
        target_state: str,
        visited: set[str],
        steps: list[WorkflowStep],
    ) -> bool:
        if current_state == target_state:
            return True

        if current_state in visited:
            return False

        visited.add(current_state)
        logger.info("Visiting '%s'", current_state)

        for transition in self._transitions_for(issue_id, current_state):
            destination = self._resolver.resolve(transition)
            if destination in visited:
                continue

            logger.info(
                "  Trying '%s' -> '%s'", transition.name, destination
            )
            steps.append(
                WorkflowStep(
                    from_state=current_state,
                    to_state=destination,
                    transition_name=transition.name,
                    transition_id=transition.id,
                )
            )

            if self._search(issue_id, destination, target_state, visited, steps):
                return True

            # Backtrack
            steps.pop()

        visited.discard(current_state)
        return False

    def _transitions_for(
        self, issue_id: str, current_state: str
    ) -> list[TransitionOption]:
        """
        One tracker query per visited state.

        Detailed metadata is preferred; if the tracker cannot provide it the
        plain listing is used and destinations are guessed by the resolver.
        Any failure makes this state a dead end rather than aborting the
        search.
        """
        try:
            return self._oracle.detailed_available_transitions(issue_id)
        except Exception as e:
            logger.debug(
                "Detailed transitions unavailable for %s: %s", issue_id, e
            )

        try:
            return self._oracle.available_transitions(issue_id)
        except Exception as e:
            logger.error(
                "Error exploring transitions from '%s': %s", current_state, e
            )
            return []
