from __future__ import annotations

from pathlib import Path

import pytest

from repoai.config import CONFIG_FILENAME, ConfigError, RepoAIConfig, load_repoai_config


def _write_config(root: Path, text: str) -> None:
    (root / CONFIG_FILENAME).write_text(text, encoding="utf-8")


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    assert load_repoai_config(tmp_path) == RepoAIConfig()


def test_config_overrides(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "version: 1\ntasks_dir: docs/tasks\nsample_task: false\nupdate_agents: true\n",
    )

    config = load_repoai_config(tmp_path)

    assert config == RepoAIConfig(
        tasks_dir=Path("docs/tasks"), sample_task=False, update_agents=True
    )


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    assert load_repoai_config(tmp_path) == RepoAIConfig()


def test_unknown_keys_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "tasks_dir: tasks\ncolour: blue\n")

    with pytest.raises(ConfigError) as exc:
        load_repoai_config(tmp_path)

    assert exc.value.code == "unknown_keys"
    assert exc.value.details == {"keys": ["colour"]}


@pytest.mark.parametrize(
    "text",
    [
        "- not\n- a mapping\n",
        "version: 2\n",
        "sample_task: maybe\n",
        "tasks_dir: ''\n",
        "tasks_dir: ../outside\n",
        "tasks_dir: [unclosed\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str) -> None:
    _write_config(tmp_path, text)

    with pytest.raises(ConfigError):
        load_repoai_config(tmp_path)


def test_non_utf8_config_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_bytes(b"tasks_dir: \xff\xfe\n")

    with pytest.raises(ConfigError, match="Failed to read"):
        load_repoai_config(tmp_path)


def test_unprobeable_config_reads_as_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _denied(self: Path) -> bool:
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "exists", _denied)

    assert load_repoai_config(tmp_path) == RepoAIConfig()
