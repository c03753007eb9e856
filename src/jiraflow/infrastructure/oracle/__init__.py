"""
Issue tracker adapters.
"""

from jiraflow.infrastructure.oracle.memory import InMemoryTransitionOracle
from jiraflow.infrastructure.oracle.mock import ScriptedTransitionOracle

__all__ = [
    "InMemoryTransitionOracle",
    "ScriptedTransitionOracle",
]
