"""Typer CLI entry point for toolrelay.

Bridges the synchronous Typer world to the async dispatcher via asyncio.run().
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from toolrelay import __version__
from toolrelay.approval import ConsoleApproval
from toolrelay.config import load_config
from toolrelay.dispatcher import Dispatcher
from toolrelay.exceptions import ToolRelayError
from toolrelay.tools.registry import ToolRegistry

app = typer.Typer(
    name="toolrelay",
    help="toolrelay — local tools for an LLM agent loop.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


def _error_exit(message: str, hint: str | None = None) -> None:
    """Print a styled error and exit."""
    console.print(f"[bold red]Error:[/bold red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
    raise typer.Exit(code=1)


def _parse_arguments(pairs: list[str]) -> dict[str, str]:
    """Turn ``key=value`` pairs into a tool argument mapping."""
    arguments: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            _error_exit(f"Malformed argument '{pair}'.", hint="Use key=value, e.g. path=src")
        arguments[key] = value
    return arguments


@app.command()
def tools() -> None:
    """Show the tool catalogue."""
    table = Table(
        title=f"toolrelay v{__version__}", border_style="cyan", header_style="bold cyan"
    )
    table.add_column("Tool", style="bold")
    table.add_column("Required")
    table.add_column("Optional", style="dim")

    for spec in ToolRegistry.default():
        table.add_row(
            str(spec.name),
            ", ".join(spec.required),
            ", ".join(spec.optional) or "—",
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def schema() -> None:
    """Print the tool definitions as JSON for the agent loop."""
    import json

    console.print_json(json.dumps(ToolRegistry.default().definitions()))


@app.command()
def run(
    tool: Annotated[str, typer.Argument(help="Name of the tool to run")],
    arguments: Annotated[
        list[str] | None, typer.Argument(help="Tool arguments as key=value pairs")
    ] = None,
    cwd: Annotated[
        Path | None, typer.Option("--cwd", help="Working directory for the tool")
    ] = None,
    confirm: Annotated[
        bool, typer.Option("--confirm", help="Ask before running commands or writing files")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output")] = False,
) -> None:
    """Run a single tool and print its result."""
    parsed = _parse_arguments(arguments or [])

    try:
        config = load_config(cwd or Path.cwd())
        if verbose:
            config.log_level = "DEBUG"

        approval = ConsoleApproval() if confirm or config.require_approval else None
        dispatcher = Dispatcher(ToolRegistry.default(), config, approval=approval)
        result = asyncio.run(dispatcher.execute(tool, parsed))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(code=130)
    except ToolRelayError as exc:
        _error_exit(str(exc), hint="Run 'toolrelay tools' to see the catalogue.")
        return

    console.print(
        result if isinstance(result, str) else str(result),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
