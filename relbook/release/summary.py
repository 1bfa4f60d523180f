"""Release summary rendering.

The report always contains the version table and the follow-up checklist.
The image section appears only when tags were given, the deployment section
only when a status was given.
"""

from __future__ import annotations

from dataclasses import dataclass

from relbook.release.model import BumpKind, DeploymentOutcome
from relbook.release.semver import SemVer

NEXT_STEPS: tuple[str, ...] = (
    "Verify deployment health",
    "Monitor application logs",
    "Check error rates and metrics",
    "Update documentation if needed",
)

RECAP_RULE = "━" * 40


@dataclass(frozen=True, slots=True)
class ReleaseSummary:
    new_version: SemVer
    previous_version: SemVer
    bump: BumpKind
    image_tags: tuple[str, ...] = ()
    deployment_status: str | None = None

    @property
    def deployment_outcome(self) -> DeploymentOutcome | None:
        if self.deployment_status is None:
            return None
        return DeploymentOutcome.from_status(self.deployment_status)


def split_image_tags(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated tag list, dropping blanks."""
    if raw is None:
        return ()
    return tuple(t.strip() for t in raw.split(",") if t.strip())


def render_summary(
    summary: ReleaseSummary,
    *,
    repository: str,
    registry: str,
) -> str:
    lines: list[str] = [
        "# 🚀 Release Summary",
        "",
        "## Version Information",
        "",
        "| Item | Value |",
        "|------|-------|",
        f"| **New Version** | `{summary.new_version}` |",
        f"| **Previous Version** | `{summary.previous_version}` |",
        f"| **Release Type** | `{summary.bump}` |",
        "",
    ]

    if summary.image_tags:
        lines.extend(["## 🐳 Container Images", "", "```"])
        lines.extend(summary.image_tags)
        lines.extend(["```", ""])
        lines.extend(
            [
                "Pull the image:",
                "```bash",
                f"docker pull {registry}/{repository}:{summary.new_version}",
                "```",
                "",
            ]
        )

    outcome = summary.deployment_outcome
    if outcome is not None:
        lines.extend(
            [
                "## 📦 Deployment",
                "",
                f"{outcome.indicator} Status: **{summary.deployment_status}**",
                "",
            ]
        )

    lines.extend(["## 📋 Next Steps", ""])
    lines.extend(f"- [ ] {step}" for step in NEXT_STEPS)
    lines.append("")

    return "\n".join(lines)


def render_recap(summary: ReleaseSummary) -> list[str]:
    """Condensed console lines shown after the report is published."""
    lines = [
        RECAP_RULE,
        "🚀 Release Complete!",
        RECAP_RULE,
        "",
        f"Version:      {summary.previous_version} → {summary.new_version}",
        f"Release Type: {summary.bump}",
    ]
    if summary.deployment_status is not None:
        lines.append(f"Deployment:   {summary.deployment_status}")
    lines.extend(["", RECAP_RULE])
    return lines
