"""Run the project formatter from the repository root.

The root is found from the running script's own location (default: the parent
of the script's directory), never from the caller's cwd, so the formatter sees
the same tree wherever it is invoked from. The process cwd is changed to the
root before the formatter starts; if that fails the formatter is not run.

Exit codes: the formatter's own code is returned verbatim. Failures that
happen before or instead of a formatter run use the EXIT_* constants below.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from repofmt_tooling.fmt.config import DEFAULT_FMT_LAYOUT

log = logging.getLogger(__name__)

EXIT_ROOT_UNAVAILABLE = 66
EXIT_FMT_NOT_EXECUTABLE = 126
EXIT_FMT_NOT_FOUND = 127

STATUS_MESSAGE: str = DEFAULT_FMT_LAYOUT["status_message"]


class PathResolutionError(RuntimeError):
    """Script location or repository root cannot be resolved or entered."""


def _run(cmd: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
    # Output is not captured; the formatter talks to the terminal directly.
    return subprocess.run(list(cmd), check=False)


def _exit_status(returncode: int) -> int:
    """Map a subprocess returncode to a process exit status (signal N -> 128 + N)."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def resolve_repo_root(script_path: Path, root_levels: int = 1) -> Path:
    """Absolute repository root for script_path: root_levels parents above its directory.

    Symlinks (to the script or its directories) are resolved first. Levels past
    the filesystem root resolve to the filesystem root.
    """
    try:
        script = Path(script_path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        msg = f"Cannot resolve script location {script_path}: {e}"
        raise PathResolutionError(msg) from e
    if root_levels < 1:
        msg = f"root_levels must be at least 1, got {root_levels}"
        raise PathResolutionError(msg)
    parents = script.parents
    # Walking above the filesystem root stays there, as `cd /..` does.
    root = parents[min(root_levels, len(parents) - 1)]
    log.debug("Resolved repository root %s from %s", root, script)
    return root


def enter_repo_root(root: Path) -> None:
    """chdir into root. Raises PathResolutionError if missing, not a directory, or not accessible."""
    try:
        os.chdir(root)
    except OSError as e:
        msg = f"Cannot enter repository root {root}: {e.strerror or e}"
        raise PathResolutionError(msg) from e
    log.debug("Working directory is now %s", root)


def _fmt_command(fmt_argv: Sequence[str] | None) -> list[str]:
    """Formatter argv; None means the default. Raises ValueError on an empty command."""
    if fmt_argv is None:
        return list(DEFAULT_FMT_LAYOUT["fmt_command"])
    argv = list(fmt_argv)
    if not argv:
        msg = "fmt_argv must not be empty"
        raise ValueError(msg)
    return argv


def run_fmt(fmt_argv: Sequence[str] | None = None) -> int:
    """Run the formatter in the current directory and return its exit status.

    A missing binary returns EXIT_FMT_NOT_FOUND. One that exists but cannot be
    started (no exec bit, bad executable format) returns EXIT_FMT_NOT_EXECUTABLE,
    so neither is mistaken for a formatting failure.
    """
    argv = _fmt_command(fmt_argv)
    log.debug("Running %s", argv)
    try:
        r = _run(argv)
    except FileNotFoundError:
        print(f"❌ Formatter not found: {argv[0]}", file=sys.stderr)
        return EXIT_FMT_NOT_FOUND
    except PermissionError:
        print(f"❌ Formatter not executable: {argv[0]}", file=sys.stderr)
        return EXIT_FMT_NOT_EXECUTABLE
    except OSError as e:
        print(f"❌ Formatter could not start: {argv[0]}: {e.strerror or e}", file=sys.stderr)
        return EXIT_FMT_NOT_EXECUTABLE
    code = _exit_status(r.returncode)
    if code != 0:
        log.debug("Formatter exited with %d", code)
    return code


def format_root(
    root: Path,
    fmt_argv: Sequence[str] | None = None,
    *,
    status_message: str = STATUS_MESSAGE,
) -> int:
    """Enter root, print the status line, run the formatter. Returns the exit status.

    Raises ValueError for an empty fmt_argv, before the cwd changes.
    """
    argv = _fmt_command(fmt_argv)
    try:
        enter_repo_root(root)
    except PathResolutionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ROOT_UNAVAILABLE
    # Flush so the status line precedes anything the formatter writes.
    print(status_message, flush=True)
    return run_fmt(argv)


def invoke(
    script_path: Path,
    fmt_argv: Sequence[str] | None = None,
    *,
    root_levels: int = 1,
    status_message: str = STATUS_MESSAGE,
) -> int:
    """Format the repository that contains script_path. Returns the exit status for sys.exit."""
    argv = _fmt_command(fmt_argv)
    try:
        root = resolve_repo_root(script_path, root_levels)
    except PathResolutionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ROOT_UNAVAILABLE
    return format_root(root, argv, status_message=status_message)
