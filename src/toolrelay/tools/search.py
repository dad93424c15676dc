"""File search tool — regex across a directory tree with context lines."""

from __future__ import annotations

import asyncio
import os
import re
from pathlib import Path

from toolrelay.tools.formatting import format_tool_error
from toolrelay.tools.listing import list_all_files

NO_MATCHES_FOUND = "No matches found."


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a filename glob where ``*`` is any run and ``?`` is any one character."""
    escaped = re.escape(pattern).replace(r"\*", ".*").replace(r"\?", ".")
    return re.compile(f"^{escaped}$", re.DOTALL)


def match_glob_pattern(file_path: str, pattern: str) -> bool:
    return glob_to_regex(pattern).match(os.path.basename(file_path)) is not None


def _search_content(content: str, compiled: re.Pattern[str]) -> list[str]:
    """Render a ``- Match at line N`` block for every match in content."""
    blocks: list[str] = []
    lines = content.split("\n")
    for match in compiled.finditer(content):
        line_number = content.count("\n", 0, match.start()) + 1
        start = max(0, line_number - 3)
        end = min(len(lines), line_number + 2)
        context = "\n".join(lines[start:end])
        blocks.append(f"- Match at line {line_number}:\n{context}\n\n")
    return blocks


async def search_files(
    path: str,
    regex: str,
    cwd: Path,
    file_pattern: str | None = None,
) -> str:
    """Search every file under path for regex.

    An invalid pattern or an unreadable file aborts the whole search.

    Args:
        path: Directory to search, relative to the working directory.
        regex: Regular expression, applied in multiline mode to whole files.
        cwd: Working directory.
        file_pattern: Optional glob matched against base filenames.

    Returns:
        ``File:`` sections with match context, the "no matches" message,
        or the tool error envelope.
    """
    try:
        absolute = (cwd / path).resolve()
        files = await list_all_files(absolute)
        if file_pattern:
            files = [f for f in files if match_glob_pattern(f, file_pattern)]

        compiled = re.compile(regex, re.MULTILINE)

        results: list[str] = []
        for file in files:
            content = await asyncio.to_thread(
                Path(file).read_text, encoding="utf-8", errors="replace"
            )
            blocks = _search_content(content, compiled)
            if blocks:
                results.append(f"File: {os.path.relpath(file, absolute)}\n")
                results.extend(blocks)
                results.append("\n")

        return "".join(results) or NO_MATCHES_FOUND
    except (OSError, ValueError, re.error) as exc:
        return format_tool_error(f"Error searching files: {exc}")
