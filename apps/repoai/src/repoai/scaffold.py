from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from repo_tasks import (
    TASKS_INDEX_FILENAME,
    TASKS_INDEX_HEADER,
    MaterializeOutcome,
    RunSummary,
    create_if_missing,
    ensure_dir,
    has_task_files,
    skipped_outcome,
)

from repoai.config import RepoAIConfig, load_repoai_config
from repoai.templates import (
    AGENT_DOCS,
    CONTEXT_DOCS,
    SAMPLE_TASK_FILENAME,
    WORKFLOW_FILENAME,
    WORKFLOW_YML,
    build_sample_task,
)

CONTEXT_DIR = Path(".aicontext")
AGENTS_DIR = CONTEXT_DIR / "agents"
WORKFLOWS_DIR = Path(".github") / "workflows"
SAMPLE_DISABLED_LABEL = "Sample task (--no-sample)"


@dataclass(frozen=True)
class ManifestEntry:
    rel_path: Path
    payload: str
    agent_file: bool = False


def required_dirs(config: RepoAIConfig) -> tuple[Path, ...]:
    return (CONTEXT_DIR, AGENTS_DIR, config.tasks_dir, WORKFLOWS_DIR)


def build_manifest() -> tuple[ManifestEntry, ...]:
    entries = [
        ManifestEntry(CONTEXT_DIR / name, payload) for name, payload in CONTEXT_DOCS.items()
    ]
    entries.extend(
        ManifestEntry(AGENTS_DIR / name, payload, agent_file=True)
        for name, payload in AGENT_DOCS.items()
    )
    entries.append(ManifestEntry(WORKFLOWS_DIR / WORKFLOW_FILENAME, WORKFLOW_YML))
    return tuple(entries)


def run_init(
    root: Path,
    *,
    sample: bool | None = None,
    update_agents: bool | None = None,
    config: RepoAIConfig | None = None,
) -> RunSummary:
    """Materialize the scaffold under ``root`` and report what happened per file.

    Parameters
    ----------
    root:
        Repository root to scaffold into.
    sample:
        Create ``T-0001-sample-task.md`` when the tasks dir holds no task file.
        ``None`` defers to ``config.sample_task``.
    update_agents:
        Overwrite existing agent instruction files with the bundled templates.
        ``None`` defers to ``config.update_agents``.
    config:
        Pre-loaded configuration; read from ``root`` when omitted.

    Returns
    -------
    RunSummary
        Created, skipped, and updated targets in materialization order.
    """

    cfg = config if config is not None else load_repoai_config(root)
    sample_enabled = cfg.sample_task if sample is None else sample
    overwrite_agents = cfg.update_agents if update_agents is None else update_agents
    tasks_dir = root / cfg.tasks_dir

    for rel in required_dirs(cfg):
        ensure_dir(root / rel)

    outcomes: list[MaterializeOutcome] = [
        create_if_missing(
            root / entry.rel_path,
            entry.payload,
            overwrite=entry.agent_file and overwrite_agents,
        )
        for entry in build_manifest()
    ]

    # Existing indexes are left for `sync` to regenerate.
    outcomes.append(create_if_missing(tasks_dir / TASKS_INDEX_FILENAME, TASKS_INDEX_HEADER))

    if not sample_enabled:
        outcomes.append(skipped_outcome(SAMPLE_DISABLED_LABEL))
    elif not has_task_files(tasks_dir):
        outcomes.append(create_if_missing(tasks_dir / SAMPLE_TASK_FILENAME, build_sample_task()))

    return RunSummary.from_outcomes(outcomes)
