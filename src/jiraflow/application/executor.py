"""
WorkflowExecutor: applies a workflow path to a real issue.

Steps run strictly in order. After each transition the issue's state is
re-read and compared with the step's expected state; a mismatch is recorded
as drift and execution carries on, since the tracker is the source of truth
and the path may have been discovered against stale metadata.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Callable

from jiraflow.domain.interfaces import (
    ConfirmationInterface,
    TransitionOracleInterface,
)
from jiraflow.domain.models import (
    ExecutionResult,
    ExecutionStatus,
    StateDrift,
    WorkflowPath,
)

logger = logging.getLogger(__name__)

DEFAULT_PAUSE_SECONDS = 1.0


class WorkflowExecutor:
    """
    Executes a WorkflowPath against the tracker.

    Does not persist anything: on success the returned result carries an
    updated copy of the path (usage count and last-used time) for the caller
    to store.
    """

    def __init__(
        self,
        oracle: TransitionOracleInterface,
        confirmation: ConfirmationInterface | None = None,
        pause_seconds: float = DEFAULT_PAUSE_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            oracle: Tracker that applies transitions and reports state
            confirmation: Human yes/no channel for interactive execution
            pause_seconds: Delay between applying a transition and re-reading
                           state, for trackers that are eventually consistent
            sleep: Blocking sleep function (injectable for tests)
        """
        self._oracle = oracle
        self._confirmation = confirmation
        self._pause_seconds = pause_seconds
        self._sleep = sleep

    def check_interactive(self, interactive: bool) -> None:
        """
        Reject interactive execution when nobody can be asked.

        Raises:
            ValueError: If interactive execution is requested without a
                        confirmation channel
        """
        if interactive and self._confirmation is None:
            raise ValueError("Interactive execution requires a confirmation channel")

    def execute(
        self, issue_id: str, path: WorkflowPath, interactive: bool = True
    ) -> ExecutionResult:
        """
        Execute every step of a path.

        Args:
            issue_id: Issue to transition
            path: Steps to apply, in order
            interactive: Ask for confirmation before applying anything

        Returns:
            ExecutionResult. Steps applied before a failure are not rolled
            back; steps_applied reports how far execution got.

        Raises:
            ValueError: If issue_id is empty, or interactive execution is
                        requested without a confirmation channel
            TypeError: If path is None
        """
        if not issue_id:
            raise ValueError("Issue id cannot be empty")
        if path is None:
            raise TypeError("A workflow path is required")

        if path.is_empty:
            logger.info("%s is already at the target state; nothing to do", issue_id)
            return ExecutionResult(status=ExecutionStatus.SUCCESS, path=path)

        self.check_interactive(interactive)

        logger.info("Executing workflow path with %d steps:", len(path.steps))
        for number, step in enumerate(path.steps, start=1):
            logger.info(
                "  %d. %s -> %s (via '%s')",
                number,
                step.from_state,
                step.to_state,
                step.transition_name,
            )

        if interactive and self._confirmation is not None:
            if not self._confirmation.confirm(issue_id, path):
                logger.info("Workflow execution cancelled.")
                return ExecutionResult(status=ExecutionStatus.CANCELLED, path=path)

        drift: list[StateDrift] = []
        applied = 0

        try:
            for number, step in enumerate(path.steps, start=1):
                logger.info(
                    "Executing: %s -> %s via '%s'",
                    step.from_state,
                    step.to_state,
                    step.transition_name,
                )
                self._oracle.apply_transition(issue_id, step.transition_id)
                applied += 1

                self._sleep(self._pause_seconds)

                actual_state = self._oracle.current_state(issue_id)
                if actual_state != step.to_state:
                    logger.warning(
                        "Expected state '%s' but found '%s'",
                        step.to_state,
                        actual_state,
                    )
                    drift.append(StateDrift(number, step.to_state, actual_state))

        except Exception as e:
            logger.exception("Error executing workflow on %s: %s", issue_id, e)
            return ExecutionResult(
                status=ExecutionStatus.FAILED,
                path=path,
                steps_applied=applied,
                drift=tuple(drift),
                error=str(e),
            )

        logger.info("Workflow execution completed successfully!")
        return ExecutionResult(
            status=ExecutionStatus.SUCCESS,
            path=path.record_usage(datetime.now(timezone.utc).isoformat()),
            steps_applied=applied,
            drift=tuple(drift),
        )
