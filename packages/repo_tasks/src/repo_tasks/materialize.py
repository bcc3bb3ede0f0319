from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

MaterializeAction = Literal["created", "skipped", "updated"]


@dataclass(frozen=True)
class MaterializeOutcome:
    action: MaterializeAction
    target: str


@dataclass(frozen=True)
class RunSummary:
    created: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()
    updated: tuple[str, ...] = ()

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[MaterializeOutcome]) -> RunSummary:
        """Fold materialization outcomes into per-action target lists, keeping order."""
        buckets: dict[MaterializeAction, list[str]] = {
            "created": [],
            "skipped": [],
            "updated": [],
        }
        for outcome in outcomes:
            buckets[outcome.action].append(outcome.target)
        return cls(
            created=tuple(buckets["created"]),
            skipped=tuple(buckets["skipped"]),
            updated=tuple(buckets["updated"]),
        )

    @property
    def is_noop(self) -> bool:
        return not self.created and not self.updated


def skipped_outcome(label: str) -> MaterializeOutcome:
    return MaterializeOutcome(action="skipped", target=label)


def path_exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def write_text_file(path: Path, content: str) -> None:
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8", newline="\n")


def _with_trailing_newline(content: str) -> str:
    return content if content.endswith("\n") else f"{content}\n"


def create_if_missing(path: Path, content: str, *, overwrite: bool = False) -> MaterializeOutcome:
    """Write ``content`` to ``path`` unless it already exists.

    Parameters
    ----------
    path:
        Target file.
    content:
        Text payload; a trailing newline is added when missing.
    overwrite:
        Replace an existing file instead of skipping it.

    Returns
    -------
    MaterializeOutcome
        ``skipped`` when the file exists and ``overwrite`` is false, ``updated`` when
        an existing file was replaced, otherwise ``created``.
    """

    exists = path_exists(path)
    if exists and not overwrite:
        return MaterializeOutcome(action="skipped", target=str(path))

    write_text_file(path, _with_trailing_newline(content))
    if exists:
        return MaterializeOutcome(action="updated", target=str(path))
    return MaterializeOutcome(action="created", target=str(path))
