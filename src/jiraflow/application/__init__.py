"""
Application layer for workflow path discovery.

Contains the search, execution and facade services that coordinate domain
objects through their ports.
"""

from jiraflow.application.executor import WorkflowExecutor
from jiraflow.application.explorer import PathExplorer
from jiraflow.application.navigator import WorkflowNavigator

__all__ = [
    "PathExplorer",
    "WorkflowExecutor",
    "WorkflowNavigator",
]
