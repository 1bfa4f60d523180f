from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from relbook.core.result import Err, Ok, Result
from relbook.release.errors import ReleaseError
from relbook.release.model import BumpKind
from relbook.release.semver import ZERO, SemVer, parse_bump_kind, parse_version

if TYPE_CHECKING:
    from relbook.git.gateway import SourceControlGateway


@dataclass(frozen=True, slots=True)
class VersionBump:
    previous: SemVer
    next: SemVer
    kind: BumpKind


def current_version(gateway: SourceControlGateway) -> Result[SemVer, ReleaseError]:
    """Version of the latest tag, or v0.0.0 when the repository has none.

    A tag that exists but does not parse is an error, never treated as "no tag".
    """
    tag_result = gateway.latest_tag()
    if isinstance(tag_result, Err):
        return tag_result

    tag = tag_result.value
    if tag is None:
        return Ok(ZERO)

    parsed = parse_version(tag)
    if isinstance(parsed, Err):
        return Err(
            ReleaseError(
                kind="invalid_format",
                message=f"latest tag {tag!r} is not a semantic version",
                hint=parsed.error.hint,
            )
        )
    return parsed


def next_version(gateway: SourceControlGateway, bump: str) -> Result[VersionBump, ReleaseError]:
    """Compute the version after ``bump`` without creating any tag."""
    kind_result = parse_bump_kind(bump)
    if isinstance(kind_result, Err):
        return kind_result
    kind = kind_result.value

    previous_result = current_version(gateway)
    if isinstance(previous_result, Err):
        return previous_result
    previous = previous_result.value

    return previous.bump(kind).map(lambda nxt: VersionBump(previous=previous, next=nxt, kind=kind))
