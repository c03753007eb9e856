"""Shared pytest fixtures for jiraflow tests."""

import pytest

from jiraflow.application.executor import WorkflowExecutor
from jiraflow.domain.interfaces import ConfirmationInterface
from jiraflow.domain.models import TransitionOption, WorkflowPath, WorkflowStep
from jiraflow.infrastructure.oracle.memory import InMemoryTransitionOracle
from jiraflow.infrastructure.persistence.memory import InMemoryPathCache


class FixedConfirmation(ConfirmationInterface):
    """Confirmation channel with a canned answer that records each prompt."""

    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts: list[tuple[str, WorkflowPath]] = []

    def confirm(self, issue_id: str, path: WorkflowPath) -> bool:
        self.prompts.append((issue_id, path))
        return self.answer


def no_sleep(_seconds: float) -> None:
    """Sleep replacement so execution tests run instantly."""


@pytest.fixture
def simple_workflow() -> dict[str, list[TransitionOption]]:
    """To Do -> In Progress -> Done, with a way back from In Progress."""
    return {
        "To Do": [
            TransitionOption(id="11", name="Start Progress", to_state="In Progress"),
        ],
        "In Progress": [
            TransitionOption(id="21", name="Stop Progress", to_state="To Do"),
            TransitionOption(id="31", name="Done", to_state="Done"),
        ],
        "Done": [
            TransitionOption(id="41", name="Reopen", to_state="To Do"),
        ],
    }


@pytest.fixture
def tracker(simple_workflow) -> InMemoryTransitionOracle:
    """In-memory tracker holding TASK-1 in To Do and DONE-1 in Done."""
    oracle = InMemoryTransitionOracle(simple_workflow)
    oracle.add_issue("TASK-1", "To Do", issue_type="Task")
    oracle.add_issue("DONE-1", "Done", issue_type="Task")
    return oracle


@pytest.fixture
def memory_cache() -> InMemoryPathCache:
    """Create an in-memory path cache."""
    return InMemoryPathCache()


@pytest.fixture
def two_step_path() -> WorkflowPath:
    """To Do -> In Progress -> Done, used twice before."""
    return WorkflowPath(
        steps=(
            WorkflowStep("To Do", "In Progress", "Start Progress", "11"),
            WorkflowStep("In Progress", "Done", "Done", "31"),
        ),
        discovered_at="2025-01-01T00:00:00+00:00",
        last_used_at="2025-01-02T00:00:00+00:00",
        usage_count=2,
    )


@pytest.fixture
def empty_path() -> WorkflowPath:
    """Zero-step path: already at the target."""
    return WorkflowPath(steps=(), discovered_at="2025-01-01T00:00:00+00:00")


@pytest.fixture
def executor(tracker: InMemoryTransitionOracle) -> WorkflowExecutor:
    """Non-interactive executor without inter-step delay."""
    return WorkflowExecutor(tracker, pause_seconds=0, sleep=no_sleep)


@pytest.fixture
def approving() -> FixedConfirmation:
    """Confirmation channel that always says yes."""
    return FixedConfirmation(answer=True)


@pytest.fixture
def declining() -> FixedConfirmation:
    """Confirmation channel that always says no."""
    return FixedConfirmation(answer=False)


@pytest.fixture
def instant_sleep():
    """Sleep replacement passed to WorkflowExecutor."""
    return no_sleep
