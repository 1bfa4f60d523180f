"""Changelog rendering.

Commits are bucketed by category. Sections follow ``CATEGORY_ORDER`` and
entries keep the order the gateway returned them in (newest first), so the
same commit list always renders to the same bytes. Empty sections are left
out; with no commits at all the document is just its header.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from relbook.release.classify import classify, clean_subject
from relbook.release.model import CATEGORY_ORDER, Commit, CommitCategory

SECTION_TITLES: dict[CommitCategory, str] = {
    CommitCategory.BREAKING: "### ⚠️ Breaking Changes",
    CommitCategory.FEATURES: "### ✨ Features",
    CommitCategory.BUG_FIXES: "### 🐛 Bug Fixes",
    CommitCategory.PERFORMANCE: "### ⚡ Performance",
    CommitCategory.REFACTORING: "### ♻️ Refactoring",
    CommitCategory.DOCUMENTATION: "### 📚 Documentation",
    CommitCategory.TESTS: "### ✅ Tests",
    CommitCategory.CHORES: "### 🔧 Chores",
    CommitCategory.OTHER: "### 📝 Other Changes",
}


@dataclass(frozen=True, slots=True)
class ChangelogSection:
    category: CommitCategory
    entries: tuple[str, ...]

    @property
    def title(self) -> str:
        return SECTION_TITLES[self.category]


@dataclass(frozen=True, slots=True)
class ChangelogDocument:
    """A changelog for a single version label.

    Attributes:
        label: Version label used for the ``## <label>`` header
        sections: Non-empty sections in display order
    """

    label: str
    sections: tuple[ChangelogSection, ...]

    @property
    def entry_count(self) -> int:
        return sum(len(s.entries) for s in self.sections)

    def render(self) -> str:
        lines: list[str] = [f"## {self.label}", ""]
        for section in self.sections:
            lines.append(section.title)
            lines.append("")
            lines.extend(section.entries)
            lines.append("")
        return "\n".join(lines)


def format_entry(commit: Commit) -> str:
    return f"- {clean_subject(commit.subject)} ({commit.short_hash})"


def build_changelog(commits: Iterable[Commit], label: str) -> ChangelogDocument:
    buckets: dict[CommitCategory, list[str]] = {category: [] for category in CATEGORY_ORDER}
    for commit in commits:
        buckets[classify(commit.subject)].append(format_entry(commit))

    sections = tuple(
        ChangelogSection(category=category, entries=tuple(buckets[category]))
        for category in CATEGORY_ORDER
        if buckets[category]
    )
    return ChangelogDocument(label=label, sections=sections)


def render_changelog(commits: Iterable[Commit], label: str) -> str:
    """Render ``commits`` as a Markdown changelog headed ``## <label>``."""
    return build_changelog(commits, label).render()
