"""Source-control gateway: the only read path from the release core to history.

The core asks two questions, "what is the latest tag?" and "which commits lie
in this range?". ``GitRepository`` answers them from a real checkout;
``InMemoryGateway`` answers them from fixed data.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from relbook.core.result import Err, Ok, Result
from relbook.release.errors import ReleaseError
from relbook.release.model import Commit

__all__ = ["InMemoryGateway", "SourceControlGateway"]


class SourceControlGateway(Protocol):
    """Read-only view of a repository's tags and commits."""

    def latest_tag(self) -> Result[str | None, ReleaseError]:
        """Return the most recent tag reachable from HEAD, or None if there is none."""
        ...

    def commits_in_range(
        self, from_ref: str | None, to_ref: str
    ) -> Result[tuple[Commit, ...], ReleaseError]:
        """Return non-merge commits in ``from_ref..to_ref``, newest first.

        With ``from_ref`` None, every commit reachable from ``to_ref``.
        """
        ...


def _empty_tags() -> dict[str, str]:
    return {}


@dataclass
class InMemoryGateway:
    """Gateway over a fixed linear history.

    Attributes:
        history: Commits newest first; ``HEAD`` is ``history[0]``
        tags: Tag name -> commit hash
        error: When set, every read fails with this error
    """

    history: Sequence[Commit] = ()
    tags: Mapping[str, str] = field(default_factory=_empty_tags)
    error: ReleaseError | None = None

    def latest_tag(self) -> Result[str | None, ReleaseError]:
        if self.error is not None:
            return Err(self.error)
        for commit in self.history:
            for name, target in self.tags.items():
                if target == commit.hash:
                    return Ok(name)
        return Ok(None)

    def commits_in_range(
        self, from_ref: str | None, to_ref: str
    ) -> Result[tuple[Commit, ...], ReleaseError]:
        if self.error is not None:
            return Err(self.error)

        start = self._index_of(to_ref)
        if start is None:
            return Err(_unknown_revision(to_ref))

        stop = len(self.history)
        if from_ref is not None:
            found = self._index_of(from_ref)
            if found is None:
                return Err(_unknown_revision(from_ref))
            stop = found

        return Ok(tuple(self.history[start:stop]))

    def _index_of(self, ref: str) -> int | None:
        if ref == "HEAD":
            return 0 if self.history else None
        target = self.tags.get(ref, ref)
        for i, commit in enumerate(self.history):
            if commit.hash == target:
                return i
        return None


def _unknown_revision(ref: str) -> ReleaseError:
    return ReleaseError(
        kind="gateway_unavailable",
        message=f"unknown revision: {ref}",
    )
