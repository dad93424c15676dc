"""Tests for tool execution."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolrelay.tools.conversation import ask_followup_question, attempt_completion
from toolrelay.tools.file_ops import read_file, write_to_file
from toolrelay.tools.shell import execute_command


class TestReadFile:
    @pytest.mark.asyncio
    async def test_read_existing_file(self, tmp_path: Path) -> None:
        test_file = tmp_path / "hello.txt"
        test_file.write_text("line1\nline2\nline3", encoding="utf-8")

        result = await read_file("hello.txt", tmp_path)
        assert result == "line1\nline2\nline3"

    @pytest.mark.asyncio
    async def test_read_nonexistent(self, tmp_path: Path) -> None:
        result = await read_file("nope.txt", tmp_path)
        assert result.startswith("The tool execution failed with the following error:")
        assert "Error reading file:" in result
        assert "No such file" in result

    @pytest.mark.asyncio
    async def test_read_directory(self, tmp_path: Path) -> None:
        result = await read_file(".", tmp_path)
        assert "Error reading file:" in result

    @pytest.mark.asyncio
    async def test_read_invalid_path(self, tmp_path: Path) -> None:
        result = await read_file("a\x00b", tmp_path)
        assert result.startswith("The tool execution failed with the following error:")
        assert "Error reading file:" in result


class TestWriteToFile:
    @pytest.mark.asyncio
    async def test_write_new_file(self, tmp_path: Path) -> None:
        result = await write_to_file("output.txt", "hello world", tmp_path)
        assert result == "New file created successfully at output.txt"
        assert (tmp_path / "output.txt").read_text() == "hello world"

    @pytest.mark.asyncio
    async def test_write_creates_dirs(self, tmp_path: Path) -> None:
        result = await write_to_file("sub/dir/file.txt", "content", tmp_path)
        assert result == "New file created successfully at sub/dir/file.txt"
        assert (tmp_path / "sub" / "dir" / "file.txt").read_text() == "content"

    @pytest.mark.asyncio
    async def test_write_outside_cwd_reports_absolute_path(self, tmp_path: Path) -> None:
        work = tmp_path / "work"
        work.mkdir()
        result = await write_to_file("../elsewhere/out.txt", "x", work)
        expected = tmp_path.resolve() / "elsewhere" / "out.txt"
        assert result == f"New file created successfully at {expected}"
        assert expected.read_text() == "x"

    @pytest.mark.asyncio
    async def test_update_reports_diff_without_header(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("one\ntwo\nthree\n", encoding="utf-8")

        result = await write_to_file("a.txt", "one\n2\nthree\n", tmp_path)
        assert result == (
            "File updated successfully. Changes:\n\n"
            "@@ -1,3 +1,3 @@\n one\n-two\n+2\n three\n"
        )
        assert "Index:" not in result
        assert "+++" not in result
        assert (tmp_path / "a.txt").read_text() == "one\n2\nthree\n"

    @pytest.mark.asyncio
    async def test_write_over_directory_is_tool_error(self, tmp_path: Path) -> None:
        (tmp_path / "folder").mkdir()
        result = await write_to_file("folder", "x", tmp_path)
        assert "Error writing to file:" in result

    @pytest.mark.asyncio
    async def test_unencodable_content_is_tool_error(self, tmp_path: Path) -> None:
        result = await write_to_file("x.txt", "bad \ud800", tmp_path)
        assert result.startswith("The tool execution failed with the following error:")
        assert "Error writing to file:" in result


class TestExecuteCommand:
    @pytest.mark.asyncio
    async def test_echo(self, tmp_path: Path) -> None:
        result = await execute_command('echo "Hello, World!"', tmp_path)
        assert "Hello, World!" in result

    @pytest.mark.asyncio
    async def test_runs_in_working_dir(self, tmp_path: Path) -> None:
        result = await execute_command("pwd", tmp_path)
        assert Path(result.strip()).resolve() == tmp_path.resolve()

    @pytest.mark.asyncio
    async def test_stderr_when_stdout_empty(self, tmp_path: Path) -> None:
        result = await execute_command("echo warning 1>&2", tmp_path)
        assert result == "warning\n"

    @pytest.mark.asyncio
    async def test_stdout_preferred(self, tmp_path: Path) -> None:
        result = await execute_command("echo out; echo err 1>&2", tmp_path)
        assert result == "out\n"

    @pytest.mark.asyncio
    async def test_failing_command(self, tmp_path: Path) -> None:
        result = await execute_command("echo broken 1>&2; exit 3", tmp_path)
        assert result.startswith("The tool execution failed with the following error:\n<e>\n")
        assert "Error executing command: Command failed: echo broken 1>&2; exit 3" in result
        assert "broken" in result

    @pytest.mark.asyncio
    async def test_missing_working_dir(self, tmp_path: Path) -> None:
        result = await execute_command("echo hi", tmp_path / "gone")
        assert "Error executing command:" in result

    @pytest.mark.asyncio
    async def test_null_byte_in_command(self, tmp_path: Path) -> None:
        result = await execute_command("echo a\x00b", tmp_path)
        assert result.startswith("The tool execution failed with the following error:")
        assert "Error executing command:" in result


class TestConversation:
    @pytest.mark.asyncio
    async def test_followup(self) -> None:
        assert await ask_followup_question("Which file?") == "Follow-up question asked: Which file?"

    @pytest.mark.asyncio
    async def test_completion(self) -> None:
        assert await attempt_completion("Done") == "Completion attempted with result: Done"

    @pytest.mark.asyncio
    async def test_completion_with_command(self) -> None:
        result = await attempt_completion("Done", "open index.html")
        assert result == (
            "Completion attempted with result: Done\nCommand to be executed: open index.html"
        )
