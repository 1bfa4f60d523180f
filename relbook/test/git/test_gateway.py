"""Tests for relbook.git.gateway (in-memory gateway)."""

from __future__ import annotations

from relbook.core.result import Err, Ok
from relbook.git.gateway import InMemoryGateway
from relbook.release.errors import ReleaseError
from relbook.release.model import Commit

C4 = Commit(hash="4" * 40, subject="feat: four")
C3 = Commit(hash="3" * 40, subject="fix: three")
C2 = Commit(hash="2" * 40, subject="docs: two")
C1 = Commit(hash="1" * 40, subject="chore: one")

HISTORY = (C4, C3, C2, C1)


class TestLatestTag:
    def test_none_without_tags(self) -> None:
        assert InMemoryGateway(history=HISTORY).latest_tag() == Ok(None)

    def test_nearest_tag_wins(self) -> None:
        gateway = InMemoryGateway(history=HISTORY, tags={"v0.1.0": C1.hash, "v0.2.0": C3.hash})
        assert gateway.latest_tag() == Ok("v0.2.0")

    def test_error(self) -> None:
        error = ReleaseError(kind="gateway_unavailable", message="down")
        assert InMemoryGateway(error=error).latest_tag() == Err(error)


class TestCommitsInRange:
    def test_all_history_when_from_is_absent(self) -> None:
        gateway = InMemoryGateway(history=HISTORY)
        assert gateway.commits_in_range(None, "HEAD") == Ok(HISTORY)

    def test_range_excludes_from_tag(self) -> None:
        gateway = InMemoryGateway(history=HISTORY, tags={"v0.1.0": C2.hash})
        assert gateway.commits_in_range("v0.1.0", "HEAD") == Ok((C4, C3))

    def test_range_ending_at_hash(self) -> None:
        gateway = InMemoryGateway(history=HISTORY)
        assert gateway.commits_in_range(C1.hash, C3.hash) == Ok((C3, C2))

    def test_unknown_ref(self) -> None:
        result = InMemoryGateway(history=HISTORY).commits_in_range("v9.9.9", "HEAD")
        assert isinstance(result, Err)
        assert result.error.kind == "gateway_unavailable"
        assert "v9.9.9" in result.error.message

    def test_empty_history_has_no_head(self) -> None:
        result = InMemoryGateway().commits_in_range(None, "HEAD")
        assert isinstance(result, Err)
