from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from repo_tasks.frontmatter import FrontmatterError, read_frontmatter_file
from repo_tasks.materialize import write_text_file
from repo_tasks.scan import list_task_files

TASKS_INDEX_FILENAME = "TASKS_INDEX.md"
TASKS_INDEX_HEADER = (
    "# Tasks Index\n"
    "\n"
    "| ID | Title | Status | Priority | Owner | Tags | Updated |\n"
    "|----|-------|--------|----------|-------|------|---------|\n"
)


class TaskIndexError(ValueError):
    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


@dataclass(frozen=True)
class TaskRecord:
    id: str = ""
    title: str = ""
    status: str = ""
    priority: str = ""
    owner: str = ""
    tags: str = ""
    updated: str = ""

    def as_row(self) -> str:
        cells = (
            self.id,
            self.title,
            self.status,
            self.priority,
            self.owner,
            self.tags,
            self.updated,
        )
        return "| " + " | ".join(cells) + " |"


@dataclass(frozen=True)
class TasksIndex:
    content: str
    task_count: int


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_tags(value: Any) -> str:
    """Render a ``tags`` frontmatter value as a table cell.

    A list of tags is comma-joined, a single string is used as-is, and any other
    shape (missing, mapping, number) renders empty.
    """

    if isinstance(value, (list, tuple)):
        return ", ".join(_format_cell(tag) for tag in value)
    if isinstance(value, str):
        return value
    return ""


def task_record_from_frontmatter(frontmatter: dict[str, Any]) -> TaskRecord:
    updated = frontmatter.get("updated_at")
    if updated is None:
        updated = frontmatter.get("updated")
    return TaskRecord(
        id=_format_cell(frontmatter.get("id")),
        title=_format_cell(frontmatter.get("title")),
        status=_format_cell(frontmatter.get("status")),
        priority=_format_cell(frontmatter.get("priority")),
        owner=_format_cell(frontmatter.get("owner")),
        tags=format_tags(frontmatter.get("tags")),
        updated=_format_cell(updated),
    )


def render_tasks_index(records: Iterable[TaskRecord]) -> str:
    # sorted() is stable: equal ids keep scan order.
    rows = [record.as_row() + "\n" for record in sorted(records, key=lambda r: r.id)]
    return TASKS_INDEX_HEADER + "".join(rows)


def _display_path(path: Path, root: Path) -> str:
    try:
        return os.path.relpath(path, root)
    except ValueError:
        return str(path)


def load_task_records(tasks_dir: Path, *, root: Path | None = None) -> list[TaskRecord]:
    """Parse every task file under ``tasks_dir`` into a record, in scan order.

    Parameters
    ----------
    tasks_dir:
        Directory holding ``T-*.md`` task files.
    root:
        Base used to shorten paths in error messages. Defaults to the parent of
        ``tasks_dir``.

    Returns
    -------
    list[TaskRecord]
        One record per task file.

    Raises
    ------
    TaskIndexError
        Raised on the first task file that cannot be read or parsed.
    """

    base = root if root is not None else tasks_dir.parent
    records: list[TaskRecord] = []
    for task_path in list_task_files(tasks_dir):
        try:
            doc = read_frontmatter_file(task_path)
        except (FrontmatterError, OSError, UnicodeDecodeError) as e:
            raise TaskIndexError(
                f"Failed to parse {_display_path(task_path, base)}: {e}", path=task_path
            ) from e
        records.append(task_record_from_frontmatter(doc.frontmatter))
    return records


def synthesize_tasks_index(tasks_dir: Path, *, root: Path | None = None) -> TasksIndex:
    records = load_task_records(tasks_dir, root=root)
    return TasksIndex(content=render_tasks_index(records), task_count=len(records))


def sync_tasks_index(tasks_dir: Path, *, root: Path | None = None) -> TasksIndex:
    """Regenerate ``TASKS_INDEX.md`` inside ``tasks_dir`` from task frontmatter.

    The index is only written once every task file parsed successfully.
    """

    index = synthesize_tasks_index(tasks_dir, root=root)
    write_text_file(tasks_dir / TASKS_INDEX_FILENAME, index.content)
    return index
