from __future__ import annotations

from pathlib import Path

import typer

from relbook.cli.commands._helpers import optional, report_sink, require, unwrap_or_exit
from relbook.cli.context import build_context
from relbook.core.result import Result
from relbook.output.console import Style
from relbook.release.errors import ReleaseError
from relbook.release.semver import SemVer, parse_bump_kind, parse_version
from relbook.release.summary import ReleaseSummary, render_recap, render_summary, split_image_tags


def _version_arg(value: str | None, name: str) -> Result[SemVer, ReleaseError]:
    return require(value, name).flat_map(parse_version)


def summary(
    new_version: str = typer.Argument(..., help="Version being released."),
    previous_version: str = typer.Argument(..., help="Version released before it."),
    bump: str = typer.Argument(..., help="Bump kind used: patch, minor or major."),
    image_tags: str | None = typer.Argument(None, help="Comma-separated image tags."),
    deployment_status: str | None = typer.Argument(
        None, help="Deployment result: success, skipped, or anything else for failure."
    ),
    repository: str | None = typer.Option(
        None,
        "--repository",
        envvar="GITHUB_REPOSITORY",
        help="owner/name used in the image pull hint (default: [release].repository).",
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to relbook.toml."),
    summary_file: Path | None = typer.Option(
        None,
        "--summary-file",
        envvar="GITHUB_STEP_SUMMARY",
        help="Append the report here instead of printing it.",
    ),
) -> None:
    """Write a release report and print a short recap."""
    ctx = build_context(repo=Path("."), config_path=config)
    console = ctx.console

    new = unwrap_or_exit(_version_arg(new_version, "NEW_VERSION"), console)
    previous = unwrap_or_exit(_version_arg(previous_version, "PREVIOUS_VERSION"), console)
    kind = unwrap_or_exit(require(bump, "BUMP").flat_map(parse_bump_kind), console)

    release = ReleaseSummary(
        new_version=new,
        previous_version=previous,
        bump=kind,
        image_tags=split_image_tags(image_tags),
        deployment_status=optional(deployment_status),
    )
    report = render_summary(
        release,
        repository=optional(repository) or ctx.config.release.repository,
        registry=ctx.config.release.registry,
    )

    unwrap_or_exit(report_sink(console, summary_file).publish(report), console)

    console.success("Release summary generated")
    console.newline()
    for line in render_recap(release):
        console.print(line, Style.BOLD if line.startswith("🚀") else Style.DEFAULT)
