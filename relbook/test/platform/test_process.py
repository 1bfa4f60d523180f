"""Tests for relbook.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from relbook.core.result import Err, Ok
from relbook.platform.process import ProcessError, run


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(
            command=("git", "describe"),
            returncode=128,
            stdout="",
            stderr="fatal: No names found",
        )
        assert str(error) == "git describe failed (exit 128)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("git", "-C", "/repo", "log", "--no-merges"),
            returncode=1,
            stdout="",
            stderr="",
        )
        assert str(error) == "git -C /repo ... failed (exit 1)"

    def test_frozen(self) -> None:
        error = ProcessError(("git",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "print('hello')"], cwd=tmp_path)
        assert isinstance(result, Ok)
        assert result.value.strip() == "hello"

    def test_non_zero_exit_returns_error(self, tmp_path: Path) -> None:
        script = "import sys; sys.stderr.write('bad'); sys.exit(3)"
        result = run([sys.executable, "-c", script], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == 3
        assert result.error.stderr == "bad"

    def test_missing_executable(self, tmp_path: Path) -> None:
        result = run(["relbook-definitely-not-a-command"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == -1

    def test_timeout(self, tmp_path: Path) -> None:
        result = run(
            [sys.executable, "-c", "import time; time.sleep(5)"],
            cwd=tmp_path,
            timeout=0.2,
        )
        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert "timed out" in result.error.stderr
