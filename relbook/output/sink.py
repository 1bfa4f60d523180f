"""Delivery of computed outputs.

Two kinds of output leave a command:

- named values (``old-version``, ``changelog``, ...) through an ``OutputSink``
- a rendered report through a ``ReportSink``

The file-backed sinks follow the workflow-runner file formats (the files
named by ``GITHUB_OUTPUT`` and ``GITHUB_STEP_SUMMARY``); the console sinks
are the fallback when no file is configured. Where a sink writes is decided
by whoever constructs it.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from relbook.core.result import Err, Ok, Result
from relbook.output.console import ConsoleProtocol
from relbook.release.errors import ReleaseError

__all__ = [
    "ConsoleOutputSink",
    "ConsoleReportSink",
    "FileReportSink",
    "GithubOutputSink",
    "OutputSink",
    "ReportSink",
    "format_output",
]


class OutputSink(Protocol):
    def write(self, outputs: Mapping[str, str]) -> Result[None, ReleaseError]:
        """Deliver every key/value pair in one go."""
        ...


class ReportSink(Protocol):
    def publish(self, report: str) -> Result[None, ReleaseError]: ...


def _delimiter_for(key: str, value: str) -> str:
    base = key.upper().replace("-", "_") + "_EOF"
    delimiter = base
    n = 1
    while delimiter in value:
        n += 1
        delimiter = f"{base}_{n}"
    return delimiter


def format_output(key: str, value: str) -> str:
    """Format one output in the ``key=value`` / heredoc file syntax."""
    if "\n" not in value:
        return f"{key}={value}\n"
    delimiter = _delimiter_for(key, value)
    return f"{key}<<{delimiter}\n{value}\n{delimiter}\n"


def _append(path: Path, content: str) -> Result[None, ReleaseError]:
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        return Err(
            ReleaseError(
                kind="output_failed",
                message=f"failed to write {path}: {e}",
                hint=str(path),
            )
        )
    return Ok(None)


class GithubOutputSink:
    """Appends outputs to a step-output file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def write(self, outputs: Mapping[str, str]) -> Result[None, ReleaseError]:
        content = "".join(format_output(k, v) for k, v in outputs.items())
        return _append(self.path, content)


class ConsoleOutputSink:
    """Prints ``key=value``; multi-line values are printed as-is."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def write(self, outputs: Mapping[str, str]) -> Result[None, ReleaseError]:
        for key, value in outputs.items():
            if "\n" in value:
                self._console.print(value)
            else:
                self._console.print(f"{key}={value}")
        return Ok(None)


class FileReportSink:
    """Appends the report to a step-summary file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def publish(self, report: str) -> Result[None, ReleaseError]:
        return _append(self.path, report)


class ConsoleReportSink:
    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def publish(self, report: str) -> Result[None, ReleaseError]:
        self._console.print(report)
        return Ok(None)
