"""
Domain models for workflow path discovery and execution.

Pure data structures describing steps, paths, cache keys and execution
outcomes. All models are immutable (frozen dataclasses); updates produce
copies via dataclasses.replace.
"""

from dataclasses import dataclass, replace
from enum import Enum

# =============================================================================
# WORKFLOW PATHS
# =============================================================================


@dataclass(frozen=True)
class WorkflowStep:
    """A single transition taken from one state to another."""

    from_state: str
    to_state: str
    transition_name: str
    transition_id: str


@dataclass(frozen=True)
class WorkflowPath:
    """
    Ordered walk from a start state to a target state.

    A path with no steps means the issue is already at the target and is a
    valid, immediately successful path.
    """

    steps: tuple[WorkflowStep, ...]
    discovered_at: str  # ISO timestamp
    last_used_at: str | None = None  # ISO timestamp, None until first execution
    usage_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.steps

    @property
    def start_state(self) -> str | None:
        return self.steps[0].from_state if self.steps else None

    @property
    def target_state(self) -> str | None:
        return self.steps[-1].to_state if self.steps else None

    def record_usage(self, used_at: str) -> "WorkflowPath":
        """Return a copy with one more successful execution recorded."""
        return replace(self, usage_count=self.usage_count + 1, last_used_at=used_at)


@dataclass(frozen=True)
class PathKey:
    """
    Cache key for a discovered path.

    Keys are exact and case-sensitive: "Done" and "done" are different
    states, mirroring the tracker's own casing.
    """

    issue_type: str
    from_state: str
    to_state: str

    def serialize(self) -> str:
        return f"{self.issue_type}:{self.from_state}:{self.to_state}"

    @staticmethod
    def prefix(issue_type: str, from_state: str) -> str:
        """Serialized prefix shared by every key leaving from_state."""
        return f"{issue_type}:{from_state}:"


# =============================================================================
# TRACKER VIEW
# =============================================================================


@dataclass(frozen=True)
class TransitionOption:
    """A transition currently offered by the tracker for an issue."""

    id: str
    name: str
    to_state: str | None = None  # Only known when the tracker reports it
    to_state_id: str | None = None


@dataclass(frozen=True)
class PathSuggestion:
    """A cached destination offered to a human, ranked by past usage."""

    to_state: str
    step_count: int
    usage_count: int

    def describe(self) -> str:
        return f"Complete to '{self.to_state}' ({self.step_count} steps)"


@dataclass(frozen=True)
class IssueOverview:
    """Snapshot of an issue's workflow position for the help view."""

    issue_id: str
    issue_type: str
    current_state: str
    transitions: tuple[TransitionOption, ...]
    suggestions: tuple[PathSuggestion, ...] = ()


# =============================================================================
# EXECUTION
# =============================================================================


class ExecutionStatus(Enum):
    """Outcome of executing a workflow path."""

    SUCCESS = "success"  # Every step applied
    FAILED = "failed"  # Tracker raised mid-execution; earlier steps stay applied
    CANCELLED = "cancelled"  # Human declined before any step was applied


@dataclass(frozen=True)
class StateDrift:
    """Post-transition state did not match the step's expected state."""

    step_number: int  # 1-based position in the path
    expected_state: str
    actual_state: str


@dataclass(frozen=True)
class ExecutionResult:
    """Result of executing a workflow path against an issue."""

    status: ExecutionStatus
    path: WorkflowPath  # Updated copy on success, the input path otherwise
    steps_applied: int = 0
    drift: tuple[StateDrift, ...] = ()
    error: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == ExecutionStatus.SUCCESS
