"""Approval gate — asks the user before a command runs or a file is written.

The dispatcher only consults a gate when one is configured. A denial is
returned to the agent loop as text, optionally with the user's feedback.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from toolrelay.tools import ToolName
from toolrelay.tools.inputs import ExecuteCommandInput, ToolInput, WriteToFileInput

console = Console(stderr=True)

GATED_TOOLS: frozenset[ToolName] = frozenset({ToolName.EXECUTE_COMMAND, ToolName.WRITE_TO_FILE})


@dataclass(frozen=True)
class Approval:
    """Outcome of an approval request.

    Attributes:
        approved: True when the operation may proceed.
        feedback: Free text the user gave when denying.
    """

    approved: bool
    feedback: str | None = None


ApprovalHandler = Callable[[ToolName, ToolInput], Awaitable[Approval]]


def describe_action(tool: ToolName, record: ToolInput) -> str:
    """One-line summary of what a gated tool is about to do."""
    if isinstance(record, ExecuteCommandInput):
        return f"Run command: {record.command}"
    if isinstance(record, WriteToFileInput):
        return f"Write {len(record.content)} chars to {record.path}"
    return str(tool)


class ConsoleApproval:
    """Interactive approval through a rich prompt on the terminal."""

    async def __call__(self, tool: ToolName, record: ToolInput) -> Approval:
        console.print(
            Panel(
                Text.assemble(
                    ("Tool: ", "bold white"),
                    (str(tool), "white"),
                    ("\nAction: ", "bold yellow"),
                    (describe_action(tool, record), "yellow"),
                ),
                title="[bold red]Approval Required[/bold red]",
                border_style="red",
            )
        )

        answer = Prompt.ask("[bold]Allow?[/bold]", choices=["y", "n"], default="n")
        if answer.lower() == "y":
            return Approval(approved=True)

        feedback = Prompt.ask("[dim]Feedback for the agent (optional)[/dim]", default="")
        return Approval(approved=False, feedback=feedback.strip() or None)
