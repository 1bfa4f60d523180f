"""Git-backed source-control gateway.

Usage:
    repo = GitRepository(Path("."))

    match repo.latest_tag():
        case Ok(None):
            print("no tags yet")
        case Ok(tag):
            print(f"latest: {tag}")
        case Err(e):
            print(f"git failed: {e.message}")
"""

from __future__ import annotations

from pathlib import Path

from relbook.core.result import Err, Ok, Result
from relbook.platform.process import ProcessError
from relbook.platform.process import run as run_process
from relbook.release.errors import ReleaseError
from relbook.release.model import Commit

__all__ = ["GitRepository"]

_GIT_TIMEOUT_SECONDS = 30.0

# Field separator for `git log --pretty`; never appears in a hash or a subject line.
_FIELD_SEP = "\x1f"

# `git describe` reports "no tag" through stderr, not a dedicated exit code.
_NO_TAG_MARKERS = ("no names found", "no tags can describe")


class GitRepository:
    """Source-control gateway backed by the ``git`` command line.

    Attributes:
        path: Path to the repository (any directory inside a work tree)
    """

    def __init__(
        self,
        path: Path,
        *,
        executable: str = "git",
        timeout: float = _GIT_TIMEOUT_SECONDS,
    ) -> None:
        self.path = path
        self._executable = executable
        self._timeout = timeout

    def latest_tag(self) -> Result[str | None, ReleaseError]:
        """Most recent tag reachable from HEAD.

        Returns:
            Ok(tag) when a tag exists
            Ok(None) when git reports the repository has no tags
            Err(ReleaseError) for any other failure
        """
        result = self._run(["describe", "--tags", "--abbrev=0"])
        match result:
            case Ok(stdout):
                return Ok(stdout.strip() or None)
            case Err(e):
                if _is_no_tag_error(e):
                    return Ok(None)
                return Err(self._unavailable("describe --tags", e))

    def commits_in_range(
        self, from_ref: str | None, to_ref: str
    ) -> Result[tuple[Commit, ...], ReleaseError]:
        """Non-merge commits in ``from_ref..to_ref``, newest first."""
        rev = f"{from_ref}..{to_ref}" if from_ref else to_ref
        result = self._run(
            ["log", rev, f"--pretty=format:%H{_FIELD_SEP}%s", "--no-merges", "--"]
        )
        match result:
            case Err(e):
                return Err(self._unavailable(f"log {rev}", e))
            case Ok(stdout):
                return Ok(parse_log(stdout))

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        return run_process(
            [self._executable, "-C", str(self.path), *args],
            cwd=self.path,
            timeout=self._timeout,
        )

    def _unavailable(self, command: str, error: ProcessError) -> ReleaseError:
        detail = error.stderr.strip() or str(error)
        return ReleaseError(
            kind="gateway_unavailable",
            message=f"git {command} failed: {detail}",
            hint=str(self.path),
        )


def parse_log(output: str) -> tuple[Commit, ...]:
    """Parse ``%H<sep>%s`` lines; malformed lines are skipped."""
    commits: list[Commit] = []
    for line in output.splitlines():
        if _FIELD_SEP not in line:
            continue
        sha, subject = line.split(_FIELD_SEP, 1)
        sha = sha.strip()
        if not sha:
            continue
        commits.append(Commit(hash=sha, subject=subject))
    return tuple(commits)


def _is_no_tag_error(error: ProcessError) -> bool:
    if error.returncode <= 0:
        return False
    stderr = error.stderr.lower()
    return any(marker in stderr for marker in _NO_TAG_MARKERS)
