"""Directory listing tools — list_files and list_code_definition_names."""

from __future__ import annotations

import asyncio
import os
import re
from pathlib import Path

from toolrelay.tools.formatting import (
    LIST_FILES_LIMIT,
    format_files_list,
    format_tool_error,
    relative_entry,
    sort_paths,
)

NO_DEFINITIONS_FOUND = "No code definitions found."

DEFINITION_PATTERNS: dict[str, re.Pattern[str]] = {
    ".js": re.compile(r"(?:class|function)\s+(\w+)"),
    ".ts": re.compile(r"(?:class|function|interface)\s+(\w+)"),
    ".py": re.compile(r"(?:class|def)\s+(\w+)"),
    ".java": re.compile(r"(?:class|interface|enum)\s+(\w+)"),
    ".cpp": re.compile(r"(?:class|struct|enum)\s+(\w+)"),
    ".c": re.compile(r"(?:struct|enum)\s+(\w+)"),
    ".cs": re.compile(r"(?:class|interface|struct|enum)\s+(\w+)"),
}


def _read_entries(directory: str) -> list[tuple[str, bool]]:
    with os.scandir(directory) as it:
        return [(entry.path, entry.is_dir(follow_symlinks=False)) for entry in it]


async def scan_directory(directory: str, recursive: bool) -> list[str]:
    """Collect absolute entry paths under directory.

    In recursive mode only files are collected, one worker thread per child
    directory; otherwise immediate subdirectories are emitted with a
    trailing separator.

    Raises:
        OSError: If directory cannot be read.
    """
    entries = await asyncio.to_thread(_read_entries, directory)

    results: list[str] = []
    subdirs: list[str] = []
    for path, is_dir in entries:
        if is_dir:
            subdirs.append(path)
            if not recursive:
                results.append(path + os.sep)
        else:
            results.append(path)

    if recursive and subdirs:
        nested = await asyncio.gather(*(scan_directory(d, recursive) for d in subdirs))
        for children in nested:
            results.extend(children)
    return results


async def list_all_files(directory: Path) -> list[str]:
    """Every file under directory, in listing order."""
    files = await scan_directory(str(directory), recursive=True)
    ordered = sort_paths([relative_entry(directory, f) for f in files])
    return [str(directory / rel) for rel in ordered]


def extract_definitions(content: str, extension: str) -> str:
    """Newline-joined declaration matches (e.g. ``class Foo``) for one file."""
    pattern = DEFINITION_PATTERNS.get(extension)
    if pattern is None:
        return ""
    return "\n".join(match.group(0) for match in pattern.finditer(content))


async def list_files(
    path: str,
    recursive: bool,
    cwd: Path,
    limit: int = LIST_FILES_LIMIT,
) -> str:
    """List a directory, optionally recursively.

    Args:
        path: Directory path relative to the working directory.
        recursive: Descend into subdirectories.
        cwd: Working directory.
        limit: Maximum number of entries in the output.

    Returns:
        The sorted listing, or the tool error envelope.
    """
    try:
        absolute = (cwd / path).resolve()
        entries = await scan_directory(str(absolute), recursive)
        return format_files_list(absolute, entries, limit)
    except (OSError, ValueError) as exc:
        return format_tool_error(f"Error listing files: {exc}")


async def list_code_definition_names(path: str, cwd: Path) -> str:
    """Scan source files under path for top-level declaration keywords.

    This is a syntactic heuristic: keywords inside comments or strings
    match too.

    Args:
        path: Directory path relative to the working directory.
        cwd: Working directory.

    Returns:
        ``File: <rel>`` blocks of matches, the "no definitions" message,
        or the tool error envelope.
    """
    try:
        absolute = (cwd / path).resolve()
        files = await list_all_files(absolute)

        sections: list[str] = []
        for file in files:
            extension = os.path.splitext(file)[1]
            if extension not in DEFINITION_PATTERNS:
                continue
            content = await asyncio.to_thread(
                Path(file).read_text, encoding="utf-8", errors="replace"
            )
            definitions = extract_definitions(content, extension)
            if definitions:
                sections.append(f"File: {os.path.relpath(file, absolute)}\n{definitions}\n\n")

        return "".join(sections) or NO_DEFINITIONS_FOUND
    except (OSError, ValueError) as exc:
        return format_tool_error(f"Error listing code definitions: {exc}")
