"""Typed input records — one per tool, built once at the dispatch boundary."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _text(arguments: Mapping[str, Any], key: str) -> str:
    value = arguments[key]
    return value if isinstance(value, str) else str(value)


def _optional_text(arguments: Mapping[str, Any], key: str) -> str | None:
    value = arguments.get(key)
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class ExecuteCommandInput:
    command: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> ExecuteCommandInput:
        return cls(command=_text(arguments, "command"))


@dataclass(frozen=True)
class ListFilesInput:
    """Input for list_files.

    Attributes:
        path: Directory to list, relative to the working directory.
        recursive: Descend into subdirectories. Only the string ``"true"``
            (or a literal ``True``) enables it.
    """

    path: str
    recursive: bool = False

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> ListFilesInput:
        flag = arguments.get("recursive")
        return cls(path=_text(arguments, "path"), recursive=flag is True or flag == "true")


@dataclass(frozen=True)
class ListCodeDefinitionsInput:
    path: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> ListCodeDefinitionsInput:
        return cls(path=_text(arguments, "path"))


@dataclass(frozen=True)
class SearchFilesInput:
    path: str
    regex: str
    file_pattern: str | None = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> SearchFilesInput:
        return cls(
            path=_text(arguments, "path"),
            regex=_text(arguments, "regex"),
            file_pattern=_optional_text(arguments, "filePattern"),
        )


@dataclass(frozen=True)
class ReadFileInput:
    path: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> ReadFileInput:
        return cls(path=_text(arguments, "path"))


@dataclass(frozen=True)
class WriteToFileInput:
    path: str
    content: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> WriteToFileInput:
        return cls(path=_text(arguments, "path"), content=_text(arguments, "content"))


@dataclass(frozen=True)
class AskFollowupInput:
    question: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> AskFollowupInput:
        return cls(question=_text(arguments, "question"))


@dataclass(frozen=True)
class AttemptCompletionInput:
    result: str
    command: str | None = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> AttemptCompletionInput:
        return cls(result=_text(arguments, "result"), command=_optional_text(arguments, "command"))


ToolInput = (
    ExecuteCommandInput
    | ListFilesInput
    | ListCodeDefinitionsInput
    | SearchFilesInput
    | ReadFileInput
    | WriteToFileInput
    | AskFollowupInput
    | AttemptCompletionInput
)
