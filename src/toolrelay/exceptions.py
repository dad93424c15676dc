"""toolrelay exception hierarchy.

All exceptions inherit from ToolRelayError so callers can catch the base
class when they want to handle any toolrelay-specific failure uniformly.

Dispatch errors are raised to the caller. Failures inside an operation
never escape: they are rendered into the tool error envelope instead.
"""

from __future__ import annotations


class ToolRelayError(Exception):
    """Base exception for all toolrelay errors."""


class ConfigError(ToolRelayError):
    """Configuration-related errors (invalid values in TOML or env vars)."""


class DispatchError(ToolRelayError):
    """A tool call the dispatcher refused to route."""

    def __init__(self, message: str, tool_name: str) -> None:
        super().__init__(message)
        self.tool_name = tool_name


class UnknownToolError(DispatchError):
    """No registered tool matches the requested name."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}", tool_name)


class MissingParameterError(DispatchError):
    """A required parameter was absent from the call arguments."""

    def __init__(self, parameter: str, tool_name: str) -> None:
        super().__init__(
            f"Missing required parameter: {parameter} for tool: {tool_name}", tool_name
        )
        self.parameter = parameter


class UnimplementedToolError(DispatchError):
    """A registered tool has no handler."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unimplemented tool: {tool_name}", tool_name)
