"""
Human-in-the-loop adapters.
"""

from jiraflow.infrastructure.interactive.console import ConsoleConfirmation

__all__ = ["ConsoleConfirmation"]
