"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from relbook.core.errors import ErrorCode
from relbook.core.result import Err, Ok, Result
from relbook.output.console import ConsoleProtocol
from relbook.output.sink import (
    ConsoleOutputSink,
    ConsoleReportSink,
    FileReportSink,
    GithubOutputSink,
    OutputSink,
    ReportSink,
)
from relbook.release.errors import ReleaseError


def exit_code_for(error: ReleaseError) -> ErrorCode:
    match error.kind:
        case "gateway_unavailable":
            return ErrorCode.ENV_ERROR
        case "output_failed":
            return ErrorCode.IO_ERROR
        case _:
            return ErrorCode.USER_ERROR


def fail(error: ReleaseError, console: ConsoleProtocol) -> NoReturn:
    console.error(error.message, error.hint)
    raise typer.Exit(code=int(exit_code_for(error)))


def unwrap_or_exit[T](result: Result[T, ReleaseError], console: ConsoleProtocol) -> T:
    """Return the value of ``result`` or report its error and exit.

    This replaces the per-command boilerplate:
        match result:
            case Err(e):
                console.error(e.message)
                raise typer.Exit(code=...)
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        fail(result.error, console)
    return result.value


def require(value: str | None, name: str) -> Result[str, ReleaseError]:
    """A required positional input must be present and non-blank."""
    if value is None or not value.strip():
        return Err(
            ReleaseError(
                kind="missing_argument",
                message=f"missing required argument: {name}",
            )
        )
    return Ok(value.strip())


def optional(value: str | None) -> str | None:
    """Blank optional inputs (e.g. an empty workflow expression) count as absent."""
    if value is None or not value.strip():
        return None
    return value.strip()


def output_sink(console: ConsoleProtocol, output_file: Path | None) -> OutputSink:
    if output_file is None:
        return ConsoleOutputSink(console)
    return GithubOutputSink(output_file)


def report_sink(console: ConsoleProtocol, summary_file: Path | None) -> ReportSink:
    if summary_file is None:
        return ConsoleReportSink(console)
    return FileReportSink(summary_file)
