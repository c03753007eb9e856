"""
In-memory issue tracker.

Holds a workflow graph and a set of issues, each with a real current state.
Like a live tracker it only ever reports transitions out of an issue's real
state. Useful for testing and for rehearsing a path before running it
against a live tracker.
"""

from typing import Mapping, Sequence

from jiraflow.domain.exceptions import OracleError
from jiraflow.domain.interfaces import TransitionOracleInterface
from jiraflow.domain.models import TransitionOption


class InMemoryTransitionOracle(TransitionOracleInterface):
    """
    Tracker backed by a state -> transitions mapping.

    Every transition in the graph must carry its to_state. Whether that
    destination is exposed through detailed_available_transitions is
    controlled by report_destinations, so callers can exercise the
    name-based fallback.
    """

    def __init__(
        self,
        workflow: Mapping[str, Sequence[TransitionOption]],
        report_destinations: bool = True,
    ):
        """
        Args:
            workflow: Outgoing transitions for each state
            report_destinations: Include to_state in detailed listings
        """
        for state, transitions in workflow.items():
            for transition in transitions:
                if not transition.to_state:
                    raise ValueError(
                        f"Transition '{transition.name}' from '{state}' has no to_state"
                    )

        self._workflow = {state: tuple(ts) for state, ts in workflow.items()}
        self._report_destinations = report_destinations
        self._states: dict[str, str] = {}
        self._types: dict[str, str] = {}
        self._landing_overrides: dict[str, str] = {}
        self._failing: set[str] = set()
        self._applied: list[tuple[str, str]] = []

    def add_issue(self, issue_id: str, state: str, issue_type: str = "Task") -> None:
        """Register an issue in a given state."""
        self._states[issue_id] = state
        self._types[issue_id] = issue_type

    def land_in(self, transition_id: str, state: str) -> None:
        """Make a transition end in a different state than it declares."""
        self._landing_overrides[transition_id] = state

    def fail_transition(self, transition_id: str) -> None:
        """Make applying a transition raise OracleError."""
        self._failing.add(transition_id)

    @property
    def applied(self) -> list[tuple[str, str]]:
        """(issue_id, transition_id) pairs applied so far, in order."""
        return list(self._applied)

    def current_state(self, issue_id: str) -> str:
        if issue_id not in self._states:
            raise OracleError(f"Issue not found: {issue_id}", issue_id)
        return self._states[issue_id]

    def issue_type(self, issue_id: str) -> str:
        if issue_id not in self._types:
            raise OracleError(f"Issue not found: {issue_id}", issue_id)
        return self._types[issue_id]

    def available_transitions(self, issue_id: str) -> list[TransitionOption]:
        return [
            TransitionOption(id=t.id, name=t.name) for t in self._outgoing(issue_id)
        ]

    def detailed_available_transitions(
        self, issue_id: str
    ) -> list[TransitionOption]:
        if self._report_destinations:
            return list(self._outgoing(issue_id))
        return self.available_transitions(issue_id)

    def apply_transition(self, issue_id: str, transition_id: str) -> None:
        for transition in self._outgoing(issue_id):
            if transition.id != transition_id:
                continue
            if transition_id in self._failing:
                raise OracleError(
                    f"Transition '{transition.name}' rejected for {issue_id}",
                    issue_id,
                )
            self._states[issue_id] = self._landing_overrides.get(
                transition_id, transition.to_state or ""
            )
            self._applied.append((issue_id, transition_id))
            return

        raise OracleError(
            f"Transition {transition_id} is not available for {issue_id} "
            f"in state '{self._states[issue_id]}'",
            issue_id,
        )

    def _outgoing(self, issue_id: str) -> tuple[TransitionOption, ...]:
        return self._workflow.get(self.current_state(issue_id), ())
