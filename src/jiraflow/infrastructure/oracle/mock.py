"""
Scripted tracker for testing without a live issue tracker.

Returns predefined transition listings in sequence.
"""

from jiraflow.domain.exceptions import OracleError
from jiraflow.domain.interfaces import TransitionOracleInterface
from jiraflow.domain.models import TransitionOption


class ScriptedTransitionOracle(TransitionOracleInterface):
    """
    Replays one transition listing per query, in order.

    The issue type is fixed. The state only changes when a transition is
    applied and states still has entries; each apply moves to the next one.
    An exception instance in the listings is raised instead of returned.
    """

    def __init__(
        self,
        state: str,
        listings: list[list[TransitionOption] | Exception],
        issue_type: str = "Task",
        states: list[str] | None = None,
    ):
        """
        Args:
            state: State reported before any transition is applied
            listings: Transition listings returned by successive queries
            issue_type: Type reported for every issue
            states: States reported after each applied transition
        """
        self._state = state
        self._listings = listings
        self._issue_type = issue_type
        self._states = list(states or [])
        self._call_count = 0
        self._applied: list[tuple[str, str]] = []

    def current_state(self, issue_id: str) -> str:
        return self._state

    def issue_type(self, issue_id: str) -> str:
        return self._issue_type

    def available_transitions(self, issue_id: str) -> list[TransitionOption]:
        return [TransitionOption(id=t.id, name=t.name) for t in self._next_listing()]

    def detailed_available_transitions(
        self, issue_id: str
    ) -> list[TransitionOption]:
        return self._next_listing()

    def apply_transition(self, issue_id: str, transition_id: str) -> None:
        self._applied.append((issue_id, transition_id))
        if self._states:
            self._state = self._states.pop(0)

    @property
    def applied(self) -> list[tuple[str, str]]:
        """(issue_id, transition_id) pairs applied so far, in order."""
        return list(self._applied)

    @property
    def call_count(self) -> int:
        """Number of transition listings served."""
        return self._call_count

    def _next_listing(self) -> list[TransitionOption]:
        if self._call_count >= len(self._listings):
            raise OracleError("ScriptedTransitionOracle exhausted listings")

        listing = self._listings[self._call_count]
        self._call_count += 1
        if isinstance(listing, Exception):
            raise listing
        return list(listing)
