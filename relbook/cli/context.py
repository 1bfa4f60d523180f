from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relbook.cli.commands._helpers import fail
from relbook.core.config import CONFIG_FILENAME, Config, load_config, load_config_or_default
from relbook.core.result import Err
from relbook.git.gateway import SourceControlGateway
from relbook.git.repository import GitRepository
from relbook.output.console import ConsoleProtocol, RichConsole
from relbook.release.errors import ReleaseError


@dataclass(frozen=True, slots=True)
class CLIContext:
    repo_root: Path
    config: Config
    console: ConsoleProtocol
    gateway: SourceControlGateway


def build_context(*, repo: Path, config_path: Path | None) -> CLIContext:
    """Resolve config and wire the git gateway for one command invocation.

    An explicit ``--config`` must exist; the default ``relbook.toml`` in the
    repository root is optional.
    """
    console = RichConsole()
    repo_root = repo.expanduser().resolve()

    if config_path is not None:
        config_result = load_config(config_path)
    else:
        config_result = load_config_or_default(repo_root / CONFIG_FILENAME)

    if isinstance(config_result, Err):
        error = config_result.error
        fail(
            ReleaseError(
                kind="invalid_config",
                message=error.message,
                hint=str(error.path) if error.path is not None else None,
            ),
            console,
        )

    config = config_result.value
    gateway = GitRepository(
        repo_root,
        executable=config.git.executable,
        timeout=config.git.timeout,
    )
    return CLIContext(repo_root=repo_root, config=config, console=console, gateway=gateway)
