"""Commit subject classification.

Rules are evaluated top to bottom against the lower-cased subject and the
first match wins. A subject such as ``"breaking: drop v1 api; feat: add v2"``
is therefore breaking, not a feature.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from relbook.release.model import CommitCategory

type Predicate = Callable[[str], bool]


def _prefix(*prefixes: str) -> Predicate:
    return lambda subject: subject.startswith(prefixes)


def _is_breaking(subject: str) -> bool:
    return "breaking" in subject or subject.startswith("!:")


CLASSIFICATION_RULES: tuple[tuple[Predicate, CommitCategory], ...] = (
    (_is_breaking, CommitCategory.BREAKING),
    (_prefix("feat:", "feature:"), CommitCategory.FEATURES),
    (_prefix("fix:"), CommitCategory.BUG_FIXES),
    (_prefix("docs:"), CommitCategory.DOCUMENTATION),
    (_prefix("perf:"), CommitCategory.PERFORMANCE),
    (_prefix("refactor:"), CommitCategory.REFACTORING),
    (_prefix("test:"), CommitCategory.TESTS),
    (_prefix("chore:", "build:", "ci:"), CommitCategory.CHORES),
)

_CLEAN_PREFIX_RE = re.compile(
    r"^(feat|fix|docs|perf|refactor|test|chore|build|ci):\s*",
    re.IGNORECASE,
)


def classify(subject: str) -> CommitCategory:
    lowered = subject.lower()
    for matches, category in CLASSIFICATION_RULES:
        if matches(lowered):
            return category
    return CommitCategory.OTHER


def clean_subject(subject: str) -> str:
    """Drop a recognized ``<type>:`` prefix for display."""
    return _CLEAN_PREFIX_RE.sub("", subject, count=1).strip()
