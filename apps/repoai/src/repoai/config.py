from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from repo_tasks import path_exists

CONFIG_FILENAME = ".repoai.yaml"
_CONFIG_VERSION = 1
_ALLOWED_KEYS: frozenset[str] = frozenset(
    {"version", "tasks_dir", "sample_task", "update_agents", "meta"}
)


@dataclass(frozen=True)
class RepoAIConfig:
    tasks_dir: Path = Path("tasks")
    sample_task: bool = True
    update_agents: bool = False


class ConfigError(ValueError):
    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML in {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(raw).__name__}.")
    return raw


def _parse_bool(value: Any, *, default: bool, path: Path, field: str) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"Expected true/false for {field} in {path}.")
    return value


def _parse_tasks_dir(value: Any, *, path: Path) -> Path:
    if value is None:
        return RepoAIConfig.tasks_dir
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"Expected non-empty string for tasks_dir in {path}.")
    tasks_dir = Path(value.strip())
    if tasks_dir.is_absolute() or ".." in tasks_dir.parts:
        raise ConfigError(
            f"tasks_dir must be a path inside the repository in {path}: {value!r}",
            code="tasks_dir_outside_root",
            details={"tasks_dir": value},
        )
    return tasks_dir


def load_repoai_config(root: Path) -> RepoAIConfig:
    """Load ``.repoai.yaml`` from ``root``; a missing file yields the defaults."""
    path = root / CONFIG_FILENAME
    if not path_exists(path):
        return RepoAIConfig()

    data = _load_yaml_mapping(path)
    unknown = set(data) - _ALLOWED_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown keys in {path}: {', '.join(sorted(unknown))}. "
            f"Allowed: {', '.join(sorted(_ALLOWED_KEYS))}.",
            code="unknown_keys",
            details={"keys": sorted(unknown)},
        )

    version = data.get("version")
    if version is not None and version != _CONFIG_VERSION:
        raise ConfigError(f"Unsupported config version {version!r} in {path}.")

    return RepoAIConfig(
        tasks_dir=_parse_tasks_dir(data.get("tasks_dir"), path=path),
        sample_task=_parse_bool(
            data.get("sample_task"), default=True, path=path, field="sample_task"
        ),
        update_agents=_parse_bool(
            data.get("update_agents"), default=False, path=path, field="update_agents"
        ),
    )
