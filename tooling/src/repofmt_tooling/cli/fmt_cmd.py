"""CLI for fmt: repofmt fmt [--check] [--config PATH] [--project-root PATH]."""

from __future__ import annotations

import sys
from pathlib import Path

from repofmt_tooling.cli.parse_common import parse_flags, path_resolver
from repofmt_tooling.fmt import fmt_argv, format_root, load_fmt_config, resolve_fmt_layout


def _print_usage() -> None:
    print("Usage: repofmt fmt [--check] [--config PATH] [--project-root PATH]", file=sys.stderr)
    print("  --check         - Pass the layout's check_args (cargo fmt --check)", file=sys.stderr)
    print("  --config        - YAML fmt layout (fmt_command, check_args, status_message)", file=sys.stderr)
    print("  --project-root  - Directory to format (default: cwd)", file=sys.stderr)


def run_fmt_argv(argv: list[str] | None = None) -> None:
    """Parse argv and run the formatter from the project root; exits with its code."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'repofmt fmt'
    parsed, rest = parse_flags(
        argv,
        ("project_root", "--project-root", Path.cwd, path_resolver),
        ("config", "--config", None, path_resolver),
        switches=("--check",),
    )
    if rest:
        print(f"Error: Unexpected arguments: {' '.join(rest)}", file=sys.stderr)
        _print_usage()
        sys.exit(1)

    try:
        raw = load_fmt_config(parsed["config"]) if parsed["config"] is not None else None
        layout = resolve_fmt_layout(raw)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    code = format_root(
        parsed["project_root"],
        fmt_argv(layout, check=parsed["check"]),
        status_message=layout["status_message"],
    )
    sys.exit(code)
