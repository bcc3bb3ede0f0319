from __future__ import annotations

from pathlib import Path

from repo_tasks import TASKS_INDEX_HEADER, read_frontmatter_file

from repoai.config import RepoAIConfig
from repoai.scaffold import SAMPLE_DISABLED_LABEL, build_manifest, run_init


def _rel(targets: tuple[str, ...], root: Path) -> set[str]:
    return {Path(t).relative_to(root).as_posix() for t in targets if Path(t).is_absolute()}


def test_build_manifest_marks_only_agent_files_overwritable() -> None:
    manifest = build_manifest()

    agent_paths = {e.rel_path.as_posix() for e in manifest if e.agent_file}
    assert agent_paths == {
        ".aicontext/agents/01-intake-planner.md",
        ".aicontext/agents/02-context-researcher.md",
        ".aicontext/agents/03-criteria-scope.md",
        ".aicontext/agents/04-implementation.md",
        ".aicontext/agents/05-docs-cleanup.md",
        ".aicontext/agents/06-review-sync.md",
    }
    all_paths = {e.rel_path.as_posix() for e in manifest}
    assert ".aicontext/AI_README.md" in all_paths
    assert ".github/workflows/repoai-auto-sync.yml" in all_paths


def test_run_init_fresh_repo_creates_everything(tmp_path: Path) -> None:
    summary = run_init(tmp_path)

    created = _rel(summary.created, tmp_path)
    assert ".aicontext/TASK_TEMPLATE.md" in created
    assert ".aicontext/agents/06-review-sync.md" in created
    assert ".github/workflows/repoai-auto-sync.yml" in created
    assert "tasks/TASKS_INDEX.md" in created
    assert "tasks/T-0001-sample-task.md" in created
    assert summary.skipped == ()
    assert summary.updated == ()

    index_text = (tmp_path / "tasks" / "TASKS_INDEX.md").read_text(encoding="utf-8")
    assert index_text == TASKS_INDEX_HEADER
    sample = read_frontmatter_file(tmp_path / "tasks" / "T-0001-sample-task.md")
    assert sample.frontmatter["id"] == "T-0001"
    assert sample.frontmatter["status"] == "planning"


def test_run_init_twice_skips_everything(tmp_path: Path) -> None:
    first = run_init(tmp_path)
    readme = tmp_path / ".aicontext" / "AI_README.md"
    readme.write_text("customized\n", encoding="utf-8")

    second = run_init(tmp_path)

    assert second.created == ()
    assert second.updated == ()
    sample_path = str(tmp_path / "tasks" / "T-0001-sample-task.md")
    assert set(second.skipped) == set(first.created) - {sample_path}
    assert readme.read_text(encoding="utf-8") == "customized\n"


def test_run_init_keeps_populated_index(tmp_path: Path) -> None:
    index_path = tmp_path / "tasks" / "TASKS_INDEX.md"
    index_path.parent.mkdir(parents=True)
    row = "| T-0009 | kept |  |  |  |  |  |\n"
    index_path.write_text(TASKS_INDEX_HEADER + row, encoding="utf-8")

    run_init(tmp_path)

    assert "| T-0009 | kept |" in index_path.read_text(encoding="utf-8")


def test_run_init_update_agents_overwrites_only_agent_files(tmp_path: Path) -> None:
    run_init(tmp_path)
    agent = tmp_path / ".aicontext" / "agents" / "04-implementation.md"
    agent.write_text("old agent\n", encoding="utf-8")

    summary = run_init(tmp_path, update_agents=True)

    assert len(summary.updated) == 6
    assert all("/agents/" in Path(t).as_posix() for t in summary.updated)
    assert summary.created == ()
    assert agent.read_text(encoding="utf-8").startswith("# Agent: Implementation")


def test_run_init_no_sample_records_label(tmp_path: Path) -> None:
    summary = run_init(tmp_path, sample=False)

    assert SAMPLE_DISABLED_LABEL in summary.skipped
    assert not (tmp_path / "tasks" / "T-0001-sample-task.md").exists()


def test_run_init_skips_sample_when_tasks_exist(tmp_path: Path) -> None:
    tasks_dir = tmp_path / "tasks"
    tasks_dir.mkdir()
    (tasks_dir / "T-0042-existing.md").write_text("---\nid: T-0042\n---\n", encoding="utf-8")

    summary = run_init(tmp_path)

    assert not (tasks_dir / "T-0001-sample-task.md").exists()
    assert "tasks/T-0001-sample-task.md" not in _rel(summary.created, tmp_path)
    assert SAMPLE_DISABLED_LABEL not in summary.skipped


def test_run_init_uses_configured_tasks_dir(tmp_path: Path) -> None:
    config = RepoAIConfig(tasks_dir=Path("work") / "tasks", sample_task=False)

    summary = run_init(tmp_path, config=config)

    assert (tmp_path / "work" / "tasks" / "TASKS_INDEX.md").exists()
    assert SAMPLE_DISABLED_LABEL in summary.skipped


def test_run_init_sample_flag_overrides_config(tmp_path: Path) -> None:
    config = RepoAIConfig(sample_task=False)

    run_init(tmp_path, sample=True, config=config)

    assert (tmp_path / "tasks" / "T-0001-sample-task.md").exists()
