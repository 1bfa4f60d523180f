from __future__ import annotations

from pathlib import Path

import typer

from relbook.cli.commands._helpers import output_sink, require, unwrap_or_exit
from relbook.cli.context import build_context
from relbook.release.version import next_version


def version(
    bump: str = typer.Argument(..., help="Bump kind: patch, minor or major."),
    repo: Path = typer.Option(Path("."), "--repo", help="Repository to read tags from."),
    config: Path | None = typer.Option(None, "--config", help="Path to relbook.toml."),
    output_file: Path | None = typer.Option(
        None,
        "--output-file",
        envvar="GITHUB_OUTPUT",
        help="Append old-version/new-version here instead of printing them.",
    ),
) -> None:
    """Compute the next version from the latest tag."""
    ctx = build_context(repo=repo, config_path=config)

    bump_token = unwrap_or_exit(require(bump, "BUMP"), ctx.console)
    bumped = unwrap_or_exit(next_version(ctx.gateway, bump_token), ctx.console)

    sink = output_sink(ctx.console, output_file)
    unwrap_or_exit(
        sink.write(
            {
                "old-version": bumped.previous.to_tag(),
                "new-version": bumped.next.to_tag(),
            }
        ),
        ctx.console,
    )
    ctx.console.success(f"Version bump: {bumped.previous} → {bumped.next}")
