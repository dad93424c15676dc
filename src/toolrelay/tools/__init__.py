"""toolrelay tool system — the 8 tools available to the agent."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

__all__ = [
    "TOOL_DEFINITIONS",
    "ParameterSpec",
    "ToolInvocation",
    "ToolName",
    "ToolResponse",
    "ToolSpec",
]

# Plain text, or text/image content blocks passed straight through to the agent loop.
ToolResponse = str | list[dict[str, Any]]


class ToolName(StrEnum):
    """The closed set of tools the dispatcher knows how to run."""

    EXECUTE_COMMAND = "execute_command"
    LIST_FILES = "list_files"
    LIST_CODE_DEFINITION_NAMES = "list_code_definition_names"
    SEARCH_FILES = "search_files"
    READ_FILE = "read_file"
    WRITE_TO_FILE = "write_to_file"
    ASK_FOLLOWUP_QUESTION = "ask_followup_question"
    ATTEMPT_COMPLETION = "attempt_completion"


@dataclass(frozen=True)
class ParameterSpec:
    """A single declared tool parameter.

    Attributes:
        type: JSON schema type name.
        description: Text shown to the model.
    """

    type: str
    description: str


@dataclass(frozen=True)
class ToolSpec:
    """Declared schema of a tool.

    Attributes:
        name: Tool identifier.
        description: What the tool does, shown to the model.
        parameters: Ordered mapping of parameter name to its spec.
        required: Names of required parameters, in declaration order.
    """

    name: ToolName
    description: str
    parameters: dict[str, ParameterSpec] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    @property
    def optional(self) -> tuple[str, ...]:
        return tuple(p for p in self.parameters if p not in self.required)

    def to_schema(self) -> dict[str, Any]:
        """Render the Anthropic tool-definition dict for this spec."""
        return {
            "name": str(self.name),
            "description": self.description,
            "input_schema": {
                "type": "object",
                "properties": {
                    name: {"type": param.type, "description": param.description}
                    for name, param in self.parameters.items()
                },
                "required": list(self.required),
            },
        }


@dataclass(frozen=True)
class ToolInvocation:
    """A single tool call as received from the agent loop."""

    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


TOOL_DEFINITIONS: list[ToolSpec] = [
    ToolSpec(
        name=ToolName.EXECUTE_COMMAND,
        description=(
            "Execute a CLI command on the system. Use this to perform system operations "
            "or run commands needed to accomplish the task."
        ),
        parameters={
            "command": ParameterSpec("string", "The CLI command to execute."),
        },
        required=("command",),
    ),
    ToolSpec(
        name=ToolName.LIST_FILES,
        description=(
            "List files and directories within the specified directory. "
            "Directories are shown with a trailing slash."
        ),
        parameters={
            "path": ParameterSpec(
                "string", "Directory path relative to the current working directory."
            ),
            "recursive": ParameterSpec(
                "string", "Set to 'true' to list files recursively."
            ),
        },
        required=("path",),
    ),
    ToolSpec(
        name=ToolName.LIST_CODE_DEFINITION_NAMES,
        description=(
            "List top-level definition names (classes, functions, interfaces, ...) "
            "found in source files under the specified directory."
        ),
        parameters={
            "path": ParameterSpec(
                "string", "Directory path relative to the current working directory."
            ),
        },
        required=("path",),
    ),
    ToolSpec(
        name=ToolName.SEARCH_FILES,
        description=(
            "Perform a regex search across files in a directory. "
            "Returns each match with surrounding context lines."
        ),
        parameters={
            "path": ParameterSpec(
                "string", "Directory path relative to the current working directory."
            ),
            "regex": ParameterSpec("string", "Regular expression pattern to search for."),
            "filePattern": ParameterSpec(
                "string", "Glob pattern to filter file names (e.g. '*.py')."
            ),
        },
        required=("path", "regex"),
    ),
    ToolSpec(
        name=ToolName.READ_FILE,
        description="Read the contents of a file at the specified path.",
        parameters={
            "path": ParameterSpec(
                "string", "File path relative to the current working directory."
            ),
        },
        required=("path",),
    ),
    ToolSpec(
        name=ToolName.WRITE_TO_FILE,
        description=(
            "Write content to a file. Overwrites the file if it exists, "
            "creating parent directories as needed."
        ),
        parameters={
            "path": ParameterSpec(
                "string", "File path relative to the current working directory."
            ),
            "content": ParameterSpec("string", "The full content to write to the file."),
        },
        required=("path", "content"),
    ),
    ToolSpec(
        name=ToolName.ASK_FOLLOWUP_QUESTION,
        description="Ask the user a question to gather additional information.",
        parameters={
            "question": ParameterSpec("string", "The question to ask the user."),
        },
        required=("question",),
    ),
    ToolSpec(
        name=ToolName.ATTEMPT_COMPLETION,
        description="Present the result of the task to the user once it is complete.",
        parameters={
            "result": ParameterSpec("string", "The final result of the task."),
            "command": ParameterSpec(
                "string", "Optional CLI command that demonstrates the result."
            ),
        },
        required=("result",),
    ),
]
