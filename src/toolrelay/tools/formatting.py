"""Shared formatting — response envelopes, file lists, patches, readable paths."""

from __future__ import annotations

import difflib
import functools
import os
import re
import unicodedata
from collections.abc import Sequence
from pathlib import Path

LIST_FILES_LIMIT = 1000

NO_FILES_FOUND = "No files found or you do not have permission to view this directory."

_DIGITS = re.compile(r"(\d+)")


def format_tool_error(error: str) -> str:
    return f"The tool execution failed with the following error:\n<e>\n{error}\n</e>"


def format_tool_denied() -> str:
    return "The user denied this operation."


def format_tool_denied_feedback(feedback: str) -> str:
    return (
        "The user denied this operation and provided the following feedback:\n"
        f"<feedback>\n{feedback}\n</feedback>"
    )


def natural_key(text: str) -> list[str | int]:
    """Sort key comparing digit runs by value, ignoring case and accents.

    re.split with a capturing group alternates text and digits, so the
    key always holds a str at even positions and an int at odd ones.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    parts = _DIGITS.split(folded)
    return [int(part) if i % 2 else part for i, part in enumerate(parts)]


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def compare_paths(a: str, b: str) -> int:
    """Order two relative paths component by component.

    A path that ends at the first differing component sorts before one
    that continues deeper; otherwise components compare naturally. When
    one path is a prefix of the other, the shorter sorts first. A trailing
    directory marker is ignored for ordering.
    """
    a_parts = a.rstrip(os.sep).split(os.sep)
    b_parts = b.rstrip(os.sep).split(os.sep)
    for i, (a_part, b_part) in enumerate(zip(a_parts, b_parts)):
        if a_part == b_part:
            continue
        if i + 1 == len(a_parts) and i + 1 < len(b_parts):
            return -1
        if i + 1 == len(b_parts) and i + 1 < len(a_parts):
            return 1
        return _cmp(natural_key(a_part), natural_key(b_part)) or _cmp(a_part, b_part)
    return _cmp(len(a_parts), len(b_parts)) or _cmp(a, b)


def sort_paths(paths: Sequence[str]) -> list[str]:
    return sorted(paths, key=functools.cmp_to_key(compare_paths))


def relative_entry(root: Path, entry: str) -> str:
    """Render an absolute listing entry relative to root, keeping a directory marker."""
    rel = os.path.relpath(entry, root)
    if entry.endswith(os.sep):
        return rel + os.sep
    return rel


def format_files_list(root: Path, entries: Sequence[str], limit: int = LIST_FILES_LIMIT) -> str:
    """Sort, cap and join a directory listing.

    Args:
        root: The directory that was listed.
        entries: Absolute paths; directories carry a trailing separator.
        limit: Maximum number of entries shown.

    Returns:
        Newline-joined relative paths, a truncation notice when capped,
        or the fixed "no files" message.
    """
    sorted_entries = sort_paths([relative_entry(root, entry) for entry in entries])

    if not sorted_entries or (len(sorted_entries) == 1 and sorted_entries[0] == ""):
        return NO_FILES_FOUND
    if len(sorted_entries) > limit:
        truncated = "\n".join(sorted_entries[:limit])
        return (
            f"{truncated}\n\n(Truncated at {limit} results. "
            "Try listing files in subdirectories if you need to explore further.)"
        )
    return "\n".join(sorted_entries)


def create_patch(filename: str, old: str, new: str, context: int = 4) -> str:
    """Build a unified diff with an Index/=== header above the ---/+++ lines."""
    lines = [
        f"Index: {filename}",
        "=" * 67,
        f"--- {filename}",
        f"+++ {filename}",
    ]
    hunks = difflib.unified_diff(
        old.splitlines(keepends=True),
        new.splitlines(keepends=True),
        n=context,
    )
    for line in list(hunks)[2:]:
        if line.endswith("\n"):
            lines.append(line[:-1])
        else:
            lines.append(line)
            lines.append("\\ No newline at end of file")
    return "\n".join(lines) + "\n"


def pretty_patch(filename: str, old: str, new: str) -> str:
    """Unified diff body with the four header lines removed."""
    return "\n".join(create_patch(filename, old, new).split("\n")[4:])


def readable_path(cwd: Path, rel_path: str) -> str:
    """Display-friendly rendering of rel_path with respect to cwd.

    Args:
        cwd: Working directory.
        rel_path: Path as supplied by the caller.

    Returns:
        The absolute path when cwd is the Desktop folder or the target lies
        outside cwd, the bare name when the target is cwd itself, and the
        path relative to cwd otherwise.
    """
    cwd = cwd.resolve()
    absolute = (cwd / rel_path).resolve()
    if cwd == (Path.home() / "Desktop").resolve():
        return str(absolute)
    if absolute == cwd:
        return absolute.name
    if absolute.is_relative_to(cwd):
        return str(absolute.relative_to(cwd))
    return str(absolute)
