from __future__ import annotations

from pathlib import Path

import pytest
import typer

from relbook.cli.context import CLIContext
from relbook.core.config import Config
from relbook.core.errors import ErrorCode
from relbook.git.gateway import InMemoryGateway
from relbook.output.console import MockConsole
from relbook.release.errors import ReleaseError
from relbook.release.model import Commit

HEAD = Commit(hash="f" * 40, subject="feat: latest")


def _ctx(tmp_path: Path, gateway: InMemoryGateway) -> CLIContext:
    return CLIContext(repo_root=tmp_path, config=Config(), console=MockConsole(), gateway=gateway)


def _patch(monkeypatch: pytest.MonkeyPatch, ctx: CLIContext) -> None:
    import relbook.cli.commands.version_cmd as version_cmd

    monkeypatch.setattr(version_cmd, "build_context", lambda **_: ctx)


def test_writes_outputs_to_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import relbook.cli.commands.version_cmd as version_cmd

    ctx = _ctx(tmp_path, InMemoryGateway(history=(HEAD,), tags={"v1.2.3": HEAD.hash}))
    _patch(monkeypatch, ctx)
    output = tmp_path / "github_output"

    version_cmd.version(bump="minor", repo=tmp_path, config=None, output_file=output)

    assert output.read_text(encoding="utf-8") == "old-version=v1.2.3\nnew-version=v1.3.0\n"
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.find("Version bump: v1.2.3 → v1.3.0")


def test_console_fallback_without_tags(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import relbook.cli.commands.version_cmd as version_cmd

    ctx = _ctx(tmp_path, InMemoryGateway(history=(HEAD,)))
    _patch(monkeypatch, ctx)

    version_cmd.version(bump="patch", repo=tmp_path, config=None, output_file=None)

    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.messages == [
        "old-version=v0.0.0",
        "new-version=v0.0.1",
        "OK Version bump: v0.0.0 → v0.0.1",
    ]


def test_unknown_bump_exits_without_output(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import relbook.cli.commands.version_cmd as version_cmd

    ctx = _ctx(tmp_path, InMemoryGateway(history=(HEAD,)))
    _patch(monkeypatch, ctx)
    output = tmp_path / "github_output"

    with pytest.raises(typer.Exit) as exc:
        version_cmd.version(bump="giant", repo=tmp_path, config=None, output_file=output)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert not output.exists()
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.find("unknown bump kind: 'giant'")


def test_blank_bump_is_missing_argument(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import relbook.cli.commands.version_cmd as version_cmd

    ctx = _ctx(tmp_path, InMemoryGateway(history=(HEAD,)))
    _patch(monkeypatch, ctx)

    with pytest.raises(typer.Exit) as exc:
        version_cmd.version(bump="  ", repo=tmp_path, config=None, output_file=None)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.find("missing required argument: BUMP")


def test_malformed_tag_is_fatal(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import relbook.cli.commands.version_cmd as version_cmd

    ctx = _ctx(tmp_path, InMemoryGateway(history=(HEAD,), tags={"release-7": HEAD.hash}))
    _patch(monkeypatch, ctx)
    output = tmp_path / "github_output"

    with pytest.raises(typer.Exit) as exc:
        version_cmd.version(bump="patch", repo=tmp_path, config=None, output_file=output)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert not output.exists()


def test_gateway_failure_is_env_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import relbook.cli.commands.version_cmd as version_cmd

    error = ReleaseError(kind="gateway_unavailable", message="git describe failed: boom")
    ctx = _ctx(tmp_path, InMemoryGateway(error=error))
    _patch(monkeypatch, ctx)

    with pytest.raises(typer.Exit) as exc:
        version_cmd.version(bump="patch", repo=tmp_path, config=None, output_file=None)

    assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)


def test_unwritable_output_is_io_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import relbook.cli.commands.version_cmd as version_cmd

    ctx = _ctx(tmp_path, InMemoryGateway(history=(HEAD,)))
    _patch(monkeypatch, ctx)

    with pytest.raises(typer.Exit) as exc:
        version_cmd.version(
            bump="patch", repo=tmp_path, config=None, output_file=tmp_path / "no" / "such"
        )

    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
    assert isinstance(ctx.console, MockConsole)
    assert not ctx.console.find("Version bump")
    assert ctx.console.find(f"hint: {tmp_path / 'no' / 'such'}")
