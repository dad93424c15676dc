"""Shell command execution tool."""

from __future__ import annotations

import asyncio
from pathlib import Path

from toolrelay.tools.formatting import format_tool_error


async def execute_command(command: str, cwd: Path) -> str:
    """Run a command through the default shell and wait for it to exit.

    There is no timeout: a command that never exits blocks the call.

    Args:
        command: The shell command to execute.
        cwd: Working directory for the command.

    Returns:
        stdout (or stderr when stdout is empty) on success, otherwise the
        tool error envelope.
    """
    try:
        process = await asyncio.create_subprocess_shell(
            command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd),
        )
        stdout, stderr = await process.communicate()
    except (OSError, ValueError) as exc:
        return format_tool_error(f"Error executing command: {exc}")

    stdout_str = stdout.decode("utf-8", errors="replace")
    stderr_str = stderr.decode("utf-8", errors="replace")

    if process.returncode != 0:
        return format_tool_error(
            f"Error executing command: Command failed: {command}\n{stderr_str}"
        )
    return stdout_str or stderr_str
