"""Console output abstraction.

Commands write human-facing text through ``ConsoleProtocol`` so the Rich
dependency stays in one place and tests can capture output with
``MockConsole``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    DIM = auto()
    BOLD = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print (printed literally, never as markup)
            style: The style to apply
        """
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str, hint: str | None = None) -> None:
        """Report a failure, with an optional ``hint:`` line after it."""
        ...

    def newline(self) -> None: ...


class RichConsole:
    """Console implementation using Rich library.

    Regular output goes to stdout; errors and their hints go to stderr so
    they never mix with ``key=value`` outputs printed as a fallback.
    """

    def __init__(self) -> None:
        from rich.console import Console

        # Rendered documents must come out line for line: no hard wrapping.
        self._console = Console(highlight=False, emoji=False, soft_wrap=True)
        self._err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.DIM: "dim",
            Style.BOLD: "bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        # Changelogs and reports contain [brackets]; never interpret them as markup.
        rich_style = self._style_map.get(style, "")
        self._console.print(message, style=rich_style or None, markup=False)

    def success(self, message: str) -> None:
        from rich.text import Text

        text = Text("✅", style="green")
        text.append(f" {message}")
        self._console.print(text)

    def error(self, message: str, hint: str | None = None) -> None:
        from rich.text import Text

        text = Text("error:", style="red bold")
        text.append(f" {message}")
        self._err_console.print(text)
        if hint:
            self._err_console.print(f"hint: {hint}", style="dim", markup=False)

    def newline(self) -> None:
        self._console.print()


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str, hint: str | None = None) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))
        if hint:
            self.outputs.append(OutputRecord(f"hint: {hint}", Style.DIM))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]
