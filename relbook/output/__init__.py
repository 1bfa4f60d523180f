"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .sink import (
    ConsoleOutputSink,
    ConsoleReportSink,
    FileReportSink,
    GithubOutputSink,
    OutputSink,
    ReportSink,
)

__all__ = [
    "ConsoleOutputSink",
    "ConsoleProtocol",
    "ConsoleReportSink",
    "FileReportSink",
    "GithubOutputSink",
    "MockConsole",
    "OutputSink",
    "ReportSink",
    "RichConsole",
    "Style",
]
