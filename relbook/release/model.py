from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal


BumpKind = Literal["major", "minor", "patch"]
BUMP_KINDS: tuple[BumpKind, ...] = ("major", "minor", "patch")


@dataclass(frozen=True, slots=True)
class Commit:
    """A non-merge commit as reported by the source-control gateway."""

    hash: str
    subject: str

    @property
    def short_hash(self) -> str:
        return self.hash[:7]


class CommitCategory(Enum):
    """Changelog section a commit belongs to."""

    BREAKING = "breaking"
    FEATURES = "features"
    BUG_FIXES = "bugFixes"
    PERFORMANCE = "performance"
    REFACTORING = "refactoring"
    DOCUMENTATION = "documentation"
    TESTS = "tests"
    CHORES = "chores"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


# Changelog section order, independent of commit order.
CATEGORY_ORDER: tuple[CommitCategory, ...] = (
    CommitCategory.BREAKING,
    CommitCategory.FEATURES,
    CommitCategory.BUG_FIXES,
    CommitCategory.PERFORMANCE,
    CommitCategory.REFACTORING,
    CommitCategory.DOCUMENTATION,
    CommitCategory.TESTS,
    CommitCategory.CHORES,
    CommitCategory.OTHER,
)


class DeploymentOutcome(Enum):
    """Closed classification of a deployment status token."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILURE = "failure"

    @classmethod
    def from_status(cls, status: str) -> DeploymentOutcome:
        """Only the literal tokens ``success`` and ``skipped`` are not failures."""
        if status == "success":
            return cls.SUCCESS
        if status == "skipped":
            return cls.SKIPPED
        return cls.FAILURE

    @property
    def indicator(self) -> str:
        match self:
            case DeploymentOutcome.SUCCESS:
                return "✅"
            case DeploymentOutcome.SKIPPED:
                return "⏭️"
            case DeploymentOutcome.FAILURE:
                return "❌"
