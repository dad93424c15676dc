"""Tool dispatcher — validates a tool call and routes it to its operation.

1. Look the tool up in the registry (unknown names raise)
2. Check required parameters in declaration order (missing ones raise)
3. Build the tool's typed input record
4. Ask the approval gate, for commands and writes, when one is configured
5. Run the operation; its failures come back as formatted text
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from typing import Any

from rich.console import Console

from toolrelay.approval import GATED_TOOLS, ApprovalHandler
from toolrelay.config import RelayConfig
from toolrelay.exceptions import (
    DispatchError,
    MissingParameterError,
    UnimplementedToolError,
    UnknownToolError,
)
from toolrelay.tools import ToolInvocation, ToolName, ToolResponse, ToolSpec
from toolrelay.tools.conversation import ask_followup_question, attempt_completion
from toolrelay.tools.file_ops import read_file, write_to_file
from toolrelay.tools.formatting import format_tool_denied, format_tool_denied_feedback
from toolrelay.tools.inputs import (
    AskFollowupInput,
    AttemptCompletionInput,
    ExecuteCommandInput,
    ListCodeDefinitionsInput,
    ListFilesInput,
    ReadFileInput,
    SearchFilesInput,
    ToolInput,
    WriteToFileInput,
)
from toolrelay.tools.listing import list_code_definition_names, list_files
from toolrelay.tools.registry import ToolRegistry
from toolrelay.tools.search import search_files
from toolrelay.tools.shell import execute_command

console = Console(stderr=True)

Handler = Callable[["Dispatcher", Any], Awaitable[ToolResponse]]

_TOOL_NAMES: frozenset[str] = frozenset(tool.value for tool in ToolName)


async def _execute_command(d: Dispatcher, record: ExecuteCommandInput) -> ToolResponse:
    return await execute_command(record.command, d.working_dir)


async def _list_files(d: Dispatcher, record: ListFilesInput) -> ToolResponse:
    return await list_files(
        record.path, record.recursive, d.working_dir, limit=d.config.list_files_limit
    )


async def _list_code_definition_names(
    d: Dispatcher, record: ListCodeDefinitionsInput
) -> ToolResponse:
    return await list_code_definition_names(record.path, d.working_dir)


async def _search_files(d: Dispatcher, record: SearchFilesInput) -> ToolResponse:
    return await search_files(record.path, record.regex, d.working_dir, record.file_pattern)


async def _read_file(d: Dispatcher, record: ReadFileInput) -> ToolResponse:
    return await read_file(record.path, d.working_dir)


async def _write_to_file(d: Dispatcher, record: WriteToFileInput) -> ToolResponse:
    return await write_to_file(record.path, record.content, d.working_dir)


async def _ask_followup_question(d: Dispatcher, record: AskFollowupInput) -> ToolResponse:
    return await ask_followup_question(record.question)


async def _attempt_completion(d: Dispatcher, record: AttemptCompletionInput) -> ToolResponse:
    return await attempt_completion(record.result, record.command)


# ToolName -> (input record type, handler). Every ToolName must appear here.
HANDLERS: dict[ToolName, tuple[type[ToolInput], Handler]] = {
    ToolName.EXECUTE_COMMAND: (ExecuteCommandInput, _execute_command),
    ToolName.LIST_FILES: (ListFilesInput, _list_files),
    ToolName.LIST_CODE_DEFINITION_NAMES: (ListCodeDefinitionsInput, _list_code_definition_names),
    ToolName.SEARCH_FILES: (SearchFilesInput, _search_files),
    ToolName.READ_FILE: (ReadFileInput, _read_file),
    ToolName.WRITE_TO_FILE: (WriteToFileInput, _write_to_file),
    ToolName.ASK_FOLLOWUP_QUESTION: (AskFollowupInput, _ask_followup_question),
    ToolName.ATTEMPT_COMPLETION: (AttemptCompletionInput, _attempt_completion),
}


class Dispatcher:
    """Routes tool calls from the agent loop to local operations.

    The dispatcher holds no per-call state; the working directory and the
    registry are fixed at construction.

    Usage::

        dispatcher = Dispatcher(ToolRegistry.default(), RelayConfig(working_dir=root))
        text = await dispatcher.execute("read_file", {"path": "README.md"})
    """

    def __init__(
        self,
        registry: ToolRegistry | None = None,
        config: RelayConfig | None = None,
        approval: ApprovalHandler | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            registry: Declared tool schemas (defaults to the full catalogue).
            config: Settings, including the working directory.
            approval: Gate consulted before commands and file writes.
        """
        self.registry = registry if registry is not None else ToolRegistry.default()
        self.config = config if config is not None else RelayConfig()
        self.working_dir: Path = self.config.working_dir.resolve()
        self._approval = approval

    async def execute(self, name: str, arguments: Mapping[str, Any]) -> ToolResponse:
        """Validate and run a single tool call.

        Args:
            name: Tool name as sent by the agent loop.
            arguments: Tool input parameters.

        Returns:
            The operation's text result (errors inside the operation are
            returned as the formatted error envelope).

        Raises:
            UnknownToolError: If no registered tool has this name.
            MissingParameterError: If a required parameter is absent.
            UnimplementedToolError: If the tool has no handler.
        """
        try:
            spec = self._lookup(name)
            self._validate(spec, arguments)
            record_type, handler = self._route(spec.name)
        except DispatchError as exc:
            console.print(f"[red]Dispatch error:[/red] {exc}")
            raise

        record = record_type.from_arguments(arguments)
        if self.config.log_level == "DEBUG":
            console.print(f"[dim]→ {spec.name}({_summarize_input(arguments)})[/dim]")

        if self._approval is not None and spec.name in GATED_TOOLS:
            approval = await self._approval(spec.name, record)
            if not approval.approved:
                if approval.feedback:
                    return format_tool_denied_feedback(approval.feedback)
                return format_tool_denied()

        return await handler(self, record)

    async def run(self, invocation: ToolInvocation) -> ToolResponse:
        return await self.execute(invocation.name, invocation.arguments)

    def _lookup(self, name: str) -> ToolSpec:
        spec = self.registry.get(name)
        if spec is None or name not in _TOOL_NAMES:
            raise UnknownToolError(name)
        return spec

    @staticmethod
    def _validate(spec: ToolSpec, arguments: Mapping[str, Any]) -> None:
        for parameter in spec.required:
            if parameter not in arguments:
                raise MissingParameterError(parameter, spec.name)

    @staticmethod
    def _route(name: ToolName) -> tuple[type[ToolInput], Handler]:
        try:
            return HANDLERS[ToolName(name)]
        except KeyError:
            raise UnimplementedToolError(name) from None


def _summarize_input(tool_input: Mapping[str, Any]) -> str:
    """Create a short summary of tool input for display."""
    parts: list[str] = []
    for key, value in tool_input.items():
        if isinstance(value, str) and len(value) > 50:
            parts.append(f'{key}="{value[:47]}..."')
        elif isinstance(value, str):
            parts.append(f'{key}="{value}"')
        else:
            parts.append(f"{key}={value}")
    return ", ".join(parts)
