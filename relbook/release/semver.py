from __future__ import annotations

import re
from dataclasses import dataclass

from relbook.core.result import Err, Ok, Result
from relbook.release.errors import ReleaseError
from relbook.release.model import BUMP_KINDS, BumpKind


_SEGMENT_RE = re.compile(r"[0-9]+")

_FORMAT_HINT = "expected MAJOR.MINOR.PATCH with an optional leading 'v', e.g. v1.2.3"


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def to_tag(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return self.to_tag()

    def bump(self, kind: str) -> Result[SemVer, ReleaseError]:
        """Return the next version for ``kind``; lower fields reset to zero."""
        match kind:
            case "major":
                return Ok(SemVer(self.major + 1, 0, 0))
            case "minor":
                return Ok(SemVer(self.major, self.minor + 1, 0))
            case "patch":
                return Ok(SemVer(self.major, self.minor, self.patch + 1))
            case _:
                return Err(_unknown_bump(kind))


# Starting point when the repository has no tag at all.
ZERO = SemVer(0, 0, 0)


def parse_version(text: str) -> Result[SemVer, ReleaseError]:
    """Parse ``v1.2.3`` or ``1.2.3``.

    Pre-release and build-metadata suffixes are rejected: ``v1.2.3-rc.1`` is a
    malformed version here, not a version with extra data.
    """
    clean = text[1:] if text.startswith("v") else text
    parts = clean.split(".")
    if len(parts) != 3 or not all(_SEGMENT_RE.fullmatch(p) for p in parts):
        return Err(
            ReleaseError(
                kind="invalid_format",
                message=f"invalid version: {text!r}",
                hint=_FORMAT_HINT,
            )
        )
    return Ok(SemVer(int(parts[0]), int(parts[1]), int(parts[2])))


def parse_bump_kind(token: str) -> Result[BumpKind, ReleaseError]:
    match token:
        case "major" | "minor" | "patch":
            return Ok(token)
        case _:
            return Err(_unknown_bump(token))


def _unknown_bump(kind: str) -> ReleaseError:
    return ReleaseError(
        kind="unknown_bump_kind",
        message=f"unknown bump kind: {kind!r}",
        hint=f"use one of: {', '.join(BUMP_KINDS)}",
    )
