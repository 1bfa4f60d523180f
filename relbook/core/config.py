"""Typed configuration loading.

``relbook.toml`` is optional; every field has a default. Example:

    [git]
    executable = "git"
    ref = "HEAD"
    timeout = 30

    [release]
    repository = "acme/widgets"
    registry = "ghcr.io"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_number, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "GitConfig",
    "ReleaseConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "relbook.toml"

DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_GIT_REF = "HEAD"
DEFAULT_GIT_TIMEOUT_SECONDS = 30.0
DEFAULT_REPOSITORY = "unknown/repo"
DEFAULT_REGISTRY = "ghcr.io"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitConfig:
    """How the git gateway is invoked."""

    executable: str = DEFAULT_GIT_EXECUTABLE
    ref: str = DEFAULT_GIT_REF
    timeout: float = DEFAULT_GIT_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Where released images live, used by the summary pull hint."""

    repository: str = DEFAULT_REPOSITORY
    registry: str = DEFAULT_REGISTRY


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    git: GitConfig = field(default_factory=GitConfig)
    release: ReleaseConfig = field(default_factory=ReleaseConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        git: StrDict = get_table(data, "git") or {}
        release: StrDict = get_table(data, "release") or {}

        return cls(
            git=GitConfig(
                executable=get_str(git, "executable") or DEFAULT_GIT_EXECUTABLE,
                ref=get_str(git, "ref") or DEFAULT_GIT_REF,
                timeout=get_number(git, "timeout") or DEFAULT_GIT_TIMEOUT_SECONDS,
            ),
            release=ReleaseConfig(
                repository=get_str(release, "repository") or DEFAULT_REPOSITORY,
                registry=get_str(release, "registry") or DEFAULT_REGISTRY,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relbook.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the default Config.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
