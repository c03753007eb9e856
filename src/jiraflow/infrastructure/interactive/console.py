"""
Console confirmation before executing a workflow path.

Blocks until a human approves or declines via CLI prompts.
"""

from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from jiraflow.domain.interfaces import ConfirmationInterface
from jiraflow.domain.models import WorkflowPath


class ConsoleConfirmation(ConfirmationInterface):
    """
    Shows the planned steps and asks whether to proceed.

    Declining is the default, so pressing Enter cancels.
    """

    def __init__(
        self,
        console: Console | None = None,
        prompt_title: str = "WORKFLOW EXECUTION",
    ):
        """
        Args:
            console: Console to render to (defaults to a new stdout console)
            prompt_title: Title displayed above the step table
        """
        self.console = console or Console()
        self.prompt_title = prompt_title

    def confirm(self, issue_id: str, path: WorkflowPath) -> bool:
        self.console.print(f"\n[bold yellow]═══ {self.prompt_title} ═══[/bold yellow]")
        self.console.print(f"[dim]Issue: {issue_id}[/dim]\n")

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("From")
        table.add_column("To")
        table.add_column("Transition")
        for number, step in enumerate(path.steps, start=1):
            table.add_row(
                str(number), step.from_state, step.to_state, step.transition_name
            )
        self.console.print(table)

        return Confirm.ask(
            "\n[bold]Proceed with execution?[/bold]",
            default=False,
            console=self.console,
        )
