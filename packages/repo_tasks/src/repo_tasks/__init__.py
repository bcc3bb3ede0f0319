from repo_tasks.frontmatter import (
    FrontmatterDocument,
    FrontmatterError,
    parse_frontmatter,
    read_frontmatter_file,
    serialize_frontmatter,
    write_frontmatter_file,
)
from repo_tasks.index import (
    TASKS_INDEX_FILENAME,
    TASKS_INDEX_HEADER,
    TaskIndexError,
    TaskRecord,
    TasksIndex,
    format_tags,
    load_task_records,
    render_tasks_index,
    sync_tasks_index,
    synthesize_tasks_index,
    task_record_from_frontmatter,
)
from repo_tasks.materialize import (
    MaterializeOutcome,
    RunSummary,
    create_if_missing,
    ensure_dir,
    path_exists,
    skipped_outcome,
    write_text_file,
)
from repo_tasks.scan import TASK_FILENAME_RE, has_task_files, is_task_filename, list_task_files

__all__ = [
    "TASKS_INDEX_FILENAME",
    "TASKS_INDEX_HEADER",
    "TASK_FILENAME_RE",
    "FrontmatterDocument",
    "FrontmatterError",
    "MaterializeOutcome",
    "RunSummary",
    "TaskIndexError",
    "TaskRecord",
    "TasksIndex",
    "create_if_missing",
    "ensure_dir",
    "format_tags",
    "has_task_files",
    "is_task_filename",
    "list_task_files",
    "load_task_records",
    "parse_frontmatter",
    "path_exists",
    "read_frontmatter_file",
    "render_tasks_index",
    "serialize_frontmatter",
    "skipped_outcome",
    "sync_tasks_index",
    "synthesize_tasks_index",
    "task_record_from_frontmatter",
    "write_frontmatter_file",
    "write_text_file",
]
