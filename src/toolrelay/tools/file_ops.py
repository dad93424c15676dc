"""File operations tools — read_file and write_to_file."""

from __future__ import annotations

from pathlib import Path

from toolrelay.tools.formatting import format_tool_error, pretty_patch, readable_path


async def read_file(path: str, cwd: Path) -> str:
    """Read a file and return its full text.

    Args:
        path: File path relative to the working directory.
        cwd: Working directory.

    Returns:
        The file content or the tool error envelope.
    """
    try:
        resolved = (cwd / path).resolve()
        return resolved.read_text(encoding="utf-8", errors="replace")
    except (OSError, ValueError) as exc:
        return format_tool_error(f"Error reading file: {exc}")


async def write_to_file(path: str, content: str, cwd: Path) -> str:
    """Write content to a file, reporting a diff when it already existed.

    Args:
        path: File path relative to the working directory.
        content: The full new content.
        cwd: Working directory.

    Returns:
        An update message carrying the diff body, a creation message
        naming the readable path, or the tool error envelope.
    """
    try:
        resolved = (cwd / path).resolve()

        if resolved.exists():
            original = resolved.read_text(encoding="utf-8", errors="replace")
            changes = pretty_patch(path, original, content)
            resolved.write_text(content, encoding="utf-8")
            return f"File updated successfully. Changes:\n\n{changes}"

        resolved.parent.mkdir(parents=True, exist_ok=True)
        resolved.write_text(content, encoding="utf-8")
        return f"New file created successfully at {readable_path(cwd, path)}"
    except (OSError, ValueError) as exc:
        return format_tool_error(f"Error writing to file: {exc}")
