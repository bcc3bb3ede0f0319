from __future__ import annotations

from pathlib import Path

from repo_tasks.scan import has_task_files, is_task_filename, list_task_files


def test_is_task_filename_matches_convention() -> None:
    assert is_task_filename("T-0001-sample-task.md")
    assert is_task_filename("t-42.MD")
    assert not is_task_filename("T-.md")
    assert not is_task_filename("TASKS_INDEX.md")
    assert not is_task_filename("notes.md")
    assert not is_task_filename("T-0001.txt")


def test_list_task_files_creates_missing_dir(tmp_path: Path) -> None:
    tasks_dir = tmp_path / "tasks"

    assert list_task_files(tasks_dir) == []
    assert tasks_dir.is_dir()


def test_list_task_files_filters_by_name_and_skips_directories(tmp_path: Path) -> None:
    tasks_dir = tmp_path / "tasks"
    tasks_dir.mkdir()
    for name in ["T-0002-b.md", "T-0001-a.md", "TASKS_INDEX.md", "README.md"]:
        (tasks_dir / name).write_text("", encoding="utf-8")
    (tasks_dir / "T-0003-dir.md").mkdir()

    found = [p.name for p in list_task_files(tasks_dir)]

    assert found == ["T-0001-a.md", "T-0002-b.md"]


def test_has_task_files(tmp_path: Path) -> None:
    tasks_dir = tmp_path / "tasks"
    assert has_task_files(tasks_dir) is False

    (tasks_dir / "TASKS_INDEX.md").write_text("", encoding="utf-8")
    assert has_task_files(tasks_dir) is False

    (tasks_dir / "T-0001-x.md").write_text("", encoding="utf-8")
    assert has_task_files(tasks_dir) is True
