"""
Domain layer for workflow path discovery.

Contains core models, ports and pure logic with no external dependencies.
"""

from jiraflow.domain.exceptions import CacheDocumentError, OracleError
from jiraflow.domain.interfaces import (
    ConfirmationInterface,
    PathCacheInterface,
    StateResolverInterface,
    TransitionOracleInterface,
)
from jiraflow.domain.models import (
    ExecutionResult,
    ExecutionStatus,
    IssueOverview,
    PathKey,
    PathSuggestion,
    StateDrift,
    TransitionOption,
    WorkflowPath,
    WorkflowStep,
)
from jiraflow.domain.ranking import DEFAULT_SUGGESTION_LIMIT, rank_suggestions
from jiraflow.domain.resolution import (
    DEFAULT_STATE_MAPPINGS,
    DEFAULT_STRIP_PREFIXES,
    MetadataStateResolver,
    NameHeuristicStateResolver,
)

__all__ = [
    # Models
    "WorkflowStep",
    "WorkflowPath",
    "PathKey",
    "TransitionOption",
    "PathSuggestion",
    "IssueOverview",
    "ExecutionStatus",
    "StateDrift",
    "ExecutionResult",
    # Interfaces
    "TransitionOracleInterface",
    "PathCacheInterface",
    "StateResolverInterface",
    "ConfirmationInterface",
    # Exceptions
    "OracleError",
    "CacheDocumentError",
    # Resolution
    "DEFAULT_STATE_MAPPINGS",
    "DEFAULT_STRIP_PREFIXES",
    "MetadataStateResolver",
    "NameHeuristicStateResolver",
    # Ranking
    "DEFAULT_SUGGESTION_LIMIT",
    "rank_suggestions",
]
