from __future__ import annotations

import pytest

from relbook.release.classify import CLASSIFICATION_RULES, classify, clean_subject
from relbook.release.model import CommitCategory


@pytest.mark.parametrize(
    ("subject", "expected"),
    [
        ("feat: add export", CommitCategory.FEATURES),
        ("feature: add export", CommitCategory.FEATURES),
        ("FEAT: shouting", CommitCategory.FEATURES),
        ("fix: off by one", CommitCategory.BUG_FIXES),
        ("docs: readme", CommitCategory.DOCUMENTATION),
        ("perf: cache lookups", CommitCategory.PERFORMANCE),
        ("refactor: split module", CommitCategory.REFACTORING),
        ("test: cover parser", CommitCategory.TESTS),
        ("chore: bump deps", CommitCategory.CHORES),
        ("build: new base image", CommitCategory.CHORES),
        ("ci: cache pip", CommitCategory.CHORES),
        ("!: drop python 3.11", CommitCategory.BREAKING),
        ("Update something", CommitCategory.OTHER),
        ("feat(api): scoped", CommitCategory.OTHER),
        ("", CommitCategory.OTHER),
    ],
)
def test_classify(subject: str, expected: CommitCategory) -> None:
    assert classify(subject) == expected


class TestPrecedence:
    def test_breaking_substring_beats_feat_prefix(self) -> None:
        assert classify("breaking: remove field; feat: add x") == CommitCategory.BREAKING

    def test_breaking_anywhere_case_insensitive(self) -> None:
        assert classify("fix: BREAKING change to config format") == CommitCategory.BREAKING
        assert classify("chore: non-breaking cleanup") == CommitCategory.BREAKING

    def test_docs_checked_before_perf(self) -> None:
        rules = [category for _, category in CLASSIFICATION_RULES]
        assert rules.index(CommitCategory.DOCUMENTATION) < rules.index(
            CommitCategory.PERFORMANCE
        )

    def test_prefix_must_be_at_start(self) -> None:
        assert classify("revert fix: thing") == CommitCategory.OTHER


class TestCleanSubject:
    def test_strips_known_prefix_and_whitespace(self) -> None:
        assert clean_subject("feat: add export") == "add export"
        assert clean_subject("fix:   spaces  ") == "spaces"
        assert clean_subject("CI: cache") == "cache"

    def test_leaves_unknown_prefix(self) -> None:
        assert clean_subject("feature: add export") == "feature: add export"
        assert clean_subject("style: tabs") == "style: tabs"
        assert clean_subject("  plain subject ") == "plain subject"

    def test_only_first_prefix_removed(self) -> None:
        assert clean_subject("fix: feat: nested") == "feat: nested"

    def test_independent_of_classification(self) -> None:
        subject = "fix: breaking timeout"
        assert classify(subject) == CommitCategory.BREAKING
        assert clean_subject(subject) == "breaking timeout"
