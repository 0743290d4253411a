"""Main CLI entry point for repofmt tooling."""

import logging
import sys

from repofmt_tooling.cli import fmt_cmd, pre_commit_cmd


def _print_usage() -> None:
    print("Usage: repofmt [-v|--verbose] <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print("  fmt [--check]              - Run the formatter from the project root", file=sys.stderr)
    print(
        "  pre-commit workspace-fmt   - Format a workspace dir changed vs HEAD; fail if fmt rewrote files",
        file=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]
    # Global switches come before the command; later ones belong to the subcommand.
    verbose = False
    while argv and argv[0] in ("-v", "--verbose"):
        verbose = True
        argv = argv[1:]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not argv:
        _print_usage()
        sys.exit(1)

    command = argv[0]
    if command == "fmt":
        fmt_cmd.run_fmt_argv(argv[1:])
    elif command == "pre-commit":
        pre_commit_cmd.run_pre_commit_argv(argv[1:])
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        _print_usage()
        sys.exit(1)


if __name__ == "__main__":
    main()
