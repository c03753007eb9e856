"""
State resolvers: work out which state a transition leads to.

Trackers that report a transition's destination make this trivial. When they
do not, the destination is guessed from the transition's display name using a
table of common workflow verbs and, failing that, by stripping well-known
prefixes ("Move to Review" -> "Review"). The guess is workflow-specific and
can be wrong; a wrong guess shows up as drift at execution time.
"""

from types import MappingProxyType
from typing import Mapping, Sequence

from jiraflow.domain.interfaces import StateResolverInterface
from jiraflow.domain.models import TransitionOption

DEFAULT_STATE_MAPPINGS: Mapping[str, str] = MappingProxyType(
    {
        "Start doing": "Doing",
        "Start Progress": "In Progress",
        "Ready for verification": "Ready for Verification",
        "Start verification": "Verifying",
        "Ready for acceptance": "Ready for Acceptance",
        "Accept for Release": "Ready for Release",
        "Release to Closed": "Closed",
        "Done": "Done",
        "Close Issue": "Closed",
        "Resolve Issue": "Resolved",
    }
)

DEFAULT_STRIP_PREFIXES: tuple[str, ...] = ("Start ", "Mark as ", "Move to ", "Set to ")


class NameHeuristicStateResolver(StateResolverInterface):
    """
    Guesses the destination state from the transition name alone.

    Table lookup is case-insensitive. Prefix stripping is case-sensitive and
    removes every occurrence of each prefix, in order.
    """

    def __init__(
        self,
        mappings: Mapping[str, str] = DEFAULT_STATE_MAPPINGS,
        prefixes: Sequence[str] = DEFAULT_STRIP_PREFIXES,
    ):
        """
        Args:
            mappings: Transition name -> state name table
            prefixes: Prefixes removed when the table has no entry
        """
        self._mappings = {name.lower(): state for name, state in mappings.items()}
        self._prefixes = tuple(prefixes)

    def resolve(self, transition: TransitionOption) -> str:
        mapped = self._mappings.get(transition.name.lower())
        if mapped is not None:
            return mapped

        clean_name = transition.name
        for prefix in self._prefixes:
            clean_name = clean_name.replace(prefix, "")
        return clean_name


class MetadataStateResolver(StateResolverInterface):
    """
    Uses the tracker-reported destination, falling back to another resolver.

    This is the default: detailed transition metadata wins whenever the
    tracker supplied it.
    """

    def __init__(self, fallback: StateResolverInterface | None = None):
        """
        Args:
            fallback: Resolver used when to_state is missing
                      (defaults to NameHeuristicStateResolver)
        """
        self._fallback = fallback or NameHeuristicStateResolver()

    def resolve(self, transition: TransitionOption) -> str:
        if transition.to_state:
            return transition.to_state
        return self._fallback.resolve(transition)
