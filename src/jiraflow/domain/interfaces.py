"""
Domain interfaces (Ports) for workflow path discovery.

These abstract base classes define the contracts that adapters must satisfy.
They have no external dependencies and represent the core domain boundaries.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jiraflow.domain.models import (
        PathSuggestion,
        TransitionOption,
        WorkflowPath,
    )


class TransitionOracleInterface(ABC):
    """
    Port for the external issue tracker.

    The oracle only ever describes an issue's one real, current state. It
    cannot be asked about transitions out of hypothetical states.

    Implementations raise on tracker-side failure (typically OracleError);
    the core decides per call site whether that is fatal.
    """

    @abstractmethod
    def current_state(self, issue_id: str) -> str:
        """Name of the state the issue is in right now."""
        pass

    @abstractmethod
    def issue_type(self, issue_id: str) -> str:
        """Declared type of the issue (e.g. "Task", "Bug")."""
        pass

    @abstractmethod
    def available_transitions(self, issue_id: str) -> list["TransitionOption"]:
        """
        Transitions currently available on the issue, in tracker order.

        Only id and name are guaranteed; to_state is usually None.
        """
        pass

    @abstractmethod
    def detailed_available_transitions(
        self, issue_id: str
    ) -> list["TransitionOption"]:
        """
        Transitions currently available, with destination state when known.

        Preferred over available_transitions because it avoids guessing the
        destination from the transition name.
        """
        pass

    @abstractmethod
    def apply_transition(self, issue_id: str, transition_id: str) -> None:
        """
        Execute a transition on the issue.

        Raises:
            Exception: If the tracker rejects the transition
        """
        pass


class PathCacheInterface(ABC):
    """
    Port for discovered-path persistence.

    Keys are (issue_type, from_state, to_state) triples; see PathKey.
    """

    @abstractmethod
    def get(
        self, issue_type: str, from_state: str, to_state: str
    ) -> "WorkflowPath | None":
        """Exact-match lookup; None on a miss."""
        pass

    @abstractmethod
    def put(
        self, issue_type: str, from_state: str, to_state: str, path: "WorkflowPath"
    ) -> None:
        """Insert or replace a path. Persistence failures must not raise."""
        pass

    @abstractmethod
    def entries(self) -> list[tuple[str, "WorkflowPath"]]:
        """All (serialized key, path) pairs in insertion order."""
        pass

    @abstractmethod
    def top_suggestions(
        self, issue_type: str, from_state: str, limit: int = 3
    ) -> list["PathSuggestion"]:
        """Most-used cached destinations leaving from_state."""
        pass


class StateResolverInterface(ABC):
    """
    Port for working out where a transition leads.

    Lets a tracker with reliable destination metadata bypass name-based
    guessing entirely.
    """

    @abstractmethod
    def resolve(self, transition: "TransitionOption") -> str:
        """Return the state name the transition is expected to reach."""
        pass


class ConfirmationInterface(ABC):
    """Port for the human yes/no check before a path is executed."""

    @abstractmethod
    def confirm(self, issue_id: str, path: "WorkflowPath") -> bool:
        """
        Show the path and ask whether to proceed.

        Returns:
            True to execute, False to cancel
        """
        pass
