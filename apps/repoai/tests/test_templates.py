from __future__ import annotations

import datetime as _dt

import yaml
from repo_tasks import parse_frontmatter, task_record_from_frontmatter

from repoai.templates import AGENT_DOCS, CONTEXT_DOCS, WORKFLOW_YML, build_sample_task


def test_sample_task_frontmatter_indexes_cleanly() -> None:
    text = build_sample_task(_dt.date(2026, 1, 2))

    doc = parse_frontmatter(text)
    record = task_record_from_frontmatter(doc.frontmatter)

    assert record.id == "T-0001"
    assert record.title == "Sample task: customize or delete"
    assert record.status == "planning"
    assert record.priority == "medium"
    assert record.updated == "2026-01-02"
    assert record.tags == ""
    assert doc.body.startswith("\n## 0. User story / problem")
    assert "- 2026-01-02 – sample-agent: created sample task" in doc.body


def test_task_template_has_parseable_placeholder_frontmatter() -> None:
    doc = parse_frontmatter(CONTEXT_DOCS["TASK_TEMPLATE.md"])

    assert doc.frontmatter["id"] == "T-XXXX"
    assert doc.frontmatter["tags"] == []


def test_workflow_is_valid_yaml_running_init_and_sync() -> None:
    workflow = yaml.safe_load(WORKFLOW_YML)

    runs = [step.get("run") for step in workflow["jobs"]["sync"]["steps"]]
    assert "repoai init --no-sample" in runs
    assert "repoai sync" in runs


def test_agent_docs_are_headed_markdown() -> None:
    assert len(AGENT_DOCS) == 6
    for name, payload in AGENT_DOCS.items():
        assert name.endswith(".md")
        assert payload.startswith("# Agent: ")
