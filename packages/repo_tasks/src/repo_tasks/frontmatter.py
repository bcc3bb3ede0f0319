from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from repo_tasks.materialize import write_text_file

FRONTMATTER_DELIMITER = "---"

_YAML_BOOL_TAG = "tag:yaml.org,2002:bool"
_YAML_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _FrontmatterLoader(yaml.SafeLoader):
    """Safe loader restricted to YAML 1.2 core scalars.

    Timestamps stay strings and only true/false spellings resolve to booleans, so
    values such as ``2024-01-01T10:00:00Z`` or ``no`` survive exactly as written.
    """


_FrontmatterLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in (_YAML_BOOL_TAG, _YAML_TIMESTAMP_TAG)
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_FrontmatterLoader.add_implicit_resolver(
    _YAML_BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class FrontmatterError(ValueError):
    pass


@dataclass(frozen=True)
class FrontmatterDocument:
    frontmatter: dict[str, Any] = field(default_factory=dict)
    body: str = ""


def parse_frontmatter(text: str) -> FrontmatterDocument:
    """Split markdown text into its YAML header and body.

    Parameters
    ----------
    text:
        Raw markdown content.

    Returns
    -------
    FrontmatterDocument
        Parsed header mapping and the body text after the closing marker. When the
        text does not open with ``---`` or the header is never closed, the whole
        text is returned as body with an empty mapping. A header that is valid YAML
        but not a mapping yields an empty mapping.

    Raises
    ------
    FrontmatterError
        Raised when the header region is not valid YAML.
    """

    lines = text.split("\n")
    if lines[0].strip() != FRONTMATTER_DELIMITER:
        return FrontmatterDocument(frontmatter={}, body=text)

    try:
        end_idx = lines.index(FRONTMATTER_DELIMITER, 1)
    except ValueError:
        # TODO: decide whether an opened-but-unterminated header should raise instead.
        return FrontmatterDocument(frontmatter={}, body=text)

    fm_text = "\n".join(lines[1:end_idx])
    try:
        fm_raw = yaml.load(fm_text, Loader=_FrontmatterLoader)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML frontmatter: {e}") from e

    if not isinstance(fm_raw, dict):
        # Scalars, lists and empty headers carry no fields.
        fm_raw = {}

    return FrontmatterDocument(frontmatter=fm_raw, body="\n".join(lines[end_idx + 1 :]))


def serialize_frontmatter(frontmatter: dict[str, Any], body: str) -> str:
    fm_text = yaml.safe_dump(frontmatter, sort_keys=False, allow_unicode=True).rstrip()
    return f"{FRONTMATTER_DELIMITER}\n{fm_text}\n{FRONTMATTER_DELIMITER}\n{body}"


def read_frontmatter_file(path: Path) -> FrontmatterDocument:
    return parse_frontmatter(path.read_text(encoding="utf-8"))


def write_frontmatter_file(path: Path, frontmatter: dict[str, Any], body: str) -> None:
    write_text_file(path, serialize_frontmatter(frontmatter, body))
