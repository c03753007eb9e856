"""
jiraflow: discover, cache and execute multi-step issue workflow transitions.

Given an issue and a target state, jiraflow searches the tracker's available
transitions for a path, remembers it per (issue type, from state, to state),
and replays it step by step while checking each step landed where expected.

Example:
    from jiraflow import WorkflowNavigator, WorkflowExecutor
    from jiraflow.infrastructure import CacheSettings, ConsoleConfirmation

    cache = CacheSettings.from_env(scope_key="PROJ").open_cache()
    executor = WorkflowExecutor(tracker, confirmation=ConsoleConfirmation())
    navigator = WorkflowNavigator(tracker, cache, executor=executor)

    result = navigator.complete("PROJ-123", target_state="Done")
"""

# Application layer (orchestration)
from jiraflow.application.executor import WorkflowExecutor
from jiraflow.application.explorer import PathExplorer
from jiraflow.application.navigator import WorkflowNavigator

# Domain exceptions
from jiraflow.domain.exceptions import CacheDocumentError, OracleError

# Domain interfaces (for type hints and custom implementations)
from jiraflow.domain.interfaces import (
    ConfirmationInterface,
    PathCacheInterface,
    StateResolverInterface,
    TransitionOracleInterface,
)

# Domain models (most commonly used)
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
from jiraflow.domain.resolution import (
    MetadataStateResolver,
    NameHeuristicStateResolver,
)

# Infrastructure (explicit import encouraged for dependency injection)
from jiraflow.infrastructure.persistence import (
    FilesystemPathCache,
    InMemoryPathCache,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "WorkflowStep",
    "WorkflowPath",
    "PathKey",
    "TransitionOption",
    "PathSuggestion",
    "IssueOverview",
    "ExecutionStatus",
    "ExecutionResult",
    "StateDrift",
    # Domain interfaces
    "TransitionOracleInterface",
    "PathCacheInterface",
    "StateResolverInterface",
    "ConfirmationInterface",
    # Domain exceptions
    "OracleError",
    "CacheDocumentError",
    # State resolution
    "MetadataStateResolver",
    "NameHeuristicStateResolver",
    # Application layer
    "PathExplorer",
    "WorkflowExecutor",
    "WorkflowNavigator",
    # Infrastructure - Persistence
    "InMemoryPathCache",
    "FilesystemPathCache",
]
