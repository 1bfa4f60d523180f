"""Error type for release computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "invalid_format",
    "unknown_bump_kind",
    "missing_argument",
    "gateway_unavailable",
    "output_failed",
    "invalid_config",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Canonical release error payload.

    Every failure a release command can hit is described by one of these;
    the CLI maps ``kind`` to an exit code and prints ``message``/``hint``.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
