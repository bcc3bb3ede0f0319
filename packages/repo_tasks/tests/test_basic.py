from repo_tasks import TASKS_INDEX_HEADER, parse_frontmatter, render_tasks_index


def test_index_header_is_two_table_rows() -> None:
    lines = TASKS_INDEX_HEADER.splitlines()
    assert lines[0] == "# Tasks Index"
    assert lines[2].startswith("| ID | Title |")
    assert lines[3].startswith("|----|")
    assert render_tasks_index([]) == TASKS_INDEX_HEADER


def test_parse_frontmatter_is_exported() -> None:
    assert parse_frontmatter("plain").body == "plain"
