from __future__ import annotations

import re
from pathlib import Path

from repo_tasks.materialize import ensure_dir

TASK_FILENAME_RE = re.compile(r"^T-[^/\\]+\.md$", re.IGNORECASE)


def is_task_filename(name: str) -> bool:
    return TASK_FILENAME_RE.match(name) is not None


def list_task_files(tasks_dir: Path) -> list[Path]:
    """List task markdown files (``T-*.md``) directly under ``tasks_dir``.

    The directory is created when missing, so a fresh checkout scans as empty.
    """

    ensure_dir(tasks_dir)
    return [
        entry
        for entry in sorted(tasks_dir.iterdir(), key=lambda p: p.name)
        if is_task_filename(entry.name) and entry.is_file()
    ]


def has_task_files(tasks_dir: Path) -> bool:
    return bool(list_task_files(tasks_dir))
