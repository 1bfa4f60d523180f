from __future__ import annotations

import typer

from relbook import __version__
from relbook.cli.commands.changelog_cmd import changelog
from relbook.cli.commands.summary_cmd import summary
from relbook.cli.commands.version_cmd import version


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Release bookkeeping: next version, changelog and release summary.",
)


app.command()(version)
app.command()(changelog)
app.command()(summary)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    pass


def main() -> None:
    app()
