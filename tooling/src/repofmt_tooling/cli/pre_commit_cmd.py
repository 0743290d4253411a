"""CLI for pre-commit: repofmt pre-commit workspace-fmt."""

from __future__ import annotations

import sys
from pathlib import Path

from repofmt_tooling.cli.parse_common import parse_flags, path_resolver
from repofmt_tooling.fmt import fmt_argv, load_fmt_config
from repofmt_tooling.pre_commit import run_workspace_fmt


def run_pre_commit_argv(argv: list[str] | None = None) -> None:
    """Dispatch repofmt pre-commit <subcommand> [options]."""
    if argv is None:
        argv = sys.argv[2:]
    if not argv:
        print(
            "Usage: repofmt pre-commit <subcommand> [options]",
            file=sys.stderr,
        )
        print(
            "Subcommands: workspace-fmt",
            file=sys.stderr,
        )
        print(
            "Options: --project-root PATH, --workspace-dir DIR (default: .), --config PATH",
            file=sys.stderr,
        )
        sys.exit(1)

    sub = argv[0].lower()
    parsed, _ = parse_flags(
        argv[1:],
        ("project_root", "--project-root", Path.cwd, path_resolver),
        ("workspace_dir", "--workspace-dir", lambda: ".", None),
        ("config", "--config", None, path_resolver),
    )

    if sub == "workspace-fmt":
        cmd = None
        if parsed["config"] is not None:
            try:
                cmd = fmt_argv(load_fmt_config(parsed["config"]))
            except ValueError as e:
                print(f"❌ {e}", file=sys.stderr)
                sys.exit(1)
        code = run_workspace_fmt(
            project_root=parsed["project_root"],
            workspace_dir=parsed["workspace_dir"],
            fmt_argv=cmd,
        )
        sys.exit(code)

    print(f"Error: Unknown pre-commit subcommand: {sub}", file=sys.stderr)
    sys.exit(1)
