"""Unit tests for utility functions (create_express_app.utils).

Tests cover:
- run_command (success, failure, cwd, env vars, capture=False, timeout)
- write_file / write_file_async
- Rich output helpers
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from create_express_app.utils import (
    print_banner,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
    write_file,
    write_file_async,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command([sys.executable, "-c", "print('hello')"])
        assert returncode == 0
        assert stdout == "hello"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failed_command(self):
        returncode, _, _ = await run_command([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert returncode == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_with_cwd(self, tmp_path: Path):
        _, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_with_env(self):
        _, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.environ['CEA_TEST_VALUE'])"],
            env={"CEA_TEST_VALUE": "42"},
        )
        assert stdout == "42"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_no_capture(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "print('visible')"], capture=False
        )
        assert returncode == 0
        assert stdout == ""
        assert stderr == ""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_timeout(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import time; time.sleep(10)"], timeout=0.5
        )
        assert returncode == -1
        assert "timed out" in stderr

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_program(self):
        with pytest.raises(FileNotFoundError):
            await run_command(["definitely-not-a-real-program-xyz"])


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------


class TestWriteFile:
    @pytest.mark.unit
    def test_creates_parents(self, tmp_path: Path):
        path = write_file(tmp_path / "a" / "b" / "c.txt", "héllo\n")
        assert path.read_text(encoding="utf-8") == "héllo\n"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_async(self, tmp_path: Path):
        path = await write_file_async(tmp_path / "x.js", "export {};\n")
        assert path.read_text(encoding="utf-8") == "export {};\n"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_helpers(self):
        with patch("create_express_app.utils.console") as mock_console:
            print_success("ok")
            print_error("bad")
            print_warning("careful")
            print_info("plain")
        printed = [call.args[0] for call in mock_console.print.call_args_list]
        assert printed == [
            "[bold green]ok[/bold green]",
            "[bold red]bad[/bold red]",
            "[bold yellow]careful[/bold yellow]",
            "plain",
        ]

    @pytest.mark.unit
    def test_print_banner(self):
        with patch("create_express_app.utils.console") as mock_console:
            print_banner("Welcome")
        mock_console.print.assert_called_once()

    @pytest.mark.unit
    def test_print_summary_table(self):
        with patch("create_express_app.utils.console") as mock_console:
            print_summary_table({"Project": "demo"}, title="Done")
        table = mock_console.print.call_args_list[0].args[0]
        assert table.title == "Done"
        assert table.row_count == 1
