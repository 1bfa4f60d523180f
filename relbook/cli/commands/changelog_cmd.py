from __future__ import annotations

from pathlib import Path

import typer

from relbook.cli.commands._helpers import optional, output_sink, require, unwrap_or_exit
from relbook.cli.context import build_context
from relbook.release.changelog import build_changelog


def changelog(
    to_version: str = typer.Argument(..., help="Version label for the changelog header."),
    from_version: str | None = typer.Argument(
        None, help="Tag the range starts after. Omit to include all history."
    ),
    to_ref: str | None = typer.Option(
        None, "--to-ref", help="Revision the range ends at (default: [git].ref)."
    ),
    repo: Path = typer.Option(Path("."), "--repo", help="Repository to read commits from."),
    config: Path | None = typer.Option(None, "--config", help="Path to relbook.toml."),
    output_file: Path | None = typer.Option(
        None,
        "--output-file",
        envvar="GITHUB_OUTPUT",
        help="Append the changelog output here instead of printing it.",
    ),
) -> None:
    """Render a categorized changelog for a commit range."""
    ctx = build_context(repo=repo, config_path=config)

    label = unwrap_or_exit(require(to_version, "TO_VERSION"), ctx.console)
    end = optional(to_ref) or ctx.config.git.ref
    commits = unwrap_or_exit(
        ctx.gateway.commits_in_range(optional(from_version), end),
        ctx.console,
    )

    document = build_changelog(commits, label)
    text = document.render()

    unwrap_or_exit(output_sink(ctx.console, output_file).write({"changelog": text}), ctx.console)
    ctx.console.success(f"Changelog generated ({document.entry_count} commits)")
    if output_file is not None:
        ctx.console.newline()
        ctx.console.print(text)
