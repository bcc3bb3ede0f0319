from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from repo_tasks import FrontmatterError, RunSummary, TaskIndexError, sync_tasks_index

from repoai import __version__
from repoai.config import ConfigError, load_repoai_config
from repoai.scaffold import run_init

_NEXT_STEPS = (
    "Next steps: customize `.aicontext/CODESTYLE.md`, adjust agent files for your repo, "
    "and start creating tasks in `tasks/`."
)


def _eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def _display_target(target: str, root: Path) -> str:
    if not os.path.isabs(target):
        return target
    try:
        return os.path.relpath(target, root)
    except ValueError:
        return target


def _print_summary(summary: RunSummary, *, root: Path) -> None:
    sections = (
        ("Created:", summary.created),
        ("Skipped (already existed or not requested):", summary.skipped),
        ("Updated:", summary.updated),
    )
    for title, targets in sections:
        if not targets:
            continue
        print(title)
        for target in targets:
            print(f"  - {_display_target(target, root)}")


def cmd_init(args: argparse.Namespace) -> int:
    root = Path(args.root).resolve()
    summary = run_init(
        root,
        sample=False if args.no_sample else None,
        update_agents=True if args.update_agents else None,
    )
    print("repoai init finished.")
    _print_summary(summary, root=root)
    print(_NEXT_STEPS)
    return 0


def cmd_sync(args: argparse.Namespace) -> int:
    root = Path(args.root).resolve()
    config = load_repoai_config(root)
    index = sync_tasks_index(root / config.tasks_dir, root=root)
    print(f"Indexed {index.task_count} task(s).")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repoai",
        description="AI task workflow scaffold and sync CLI.",
    )
    parser.add_argument("--version", action="store_true", help="Print package version and exit.")
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("version", help="Print package version.")

    p_init = sub.add_parser(
        "init", help="Bootstrap the AI task workflow scaffold in the repository (idempotent)."
    )
    p_init.add_argument("--root", default=".", help="Repository root (default: current directory).")
    p_init.add_argument(
        "--no-sample",
        action="store_true",
        help="Skip creating a sample task.",
    )
    p_init.add_argument(
        "--update-agents",
        action="store_true",
        help="Overwrite agent instruction files with the latest templates.",
    )
    p_init.set_defaults(func=cmd_init)

    p_sync = sub.add_parser("sync", help="Regenerate tasks/TASKS_INDEX.md from task frontmatter.")
    p_sync.add_argument("--root", default=".", help="Repository root (default: current directory).")
    p_sync.set_defaults(func=cmd_sync)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.version or args.cmd == "version":
        print(__version__)
        return 0

    if args.cmd is None:
        parser.print_help()
        return 0

    try:
        return int(args.func(args))
    except (ConfigError, FrontmatterError, TaskIndexError, OSError) as exc:
        _eprint(f"Error during {args.cmd}: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
