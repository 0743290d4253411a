"""Pre-commit fmt: format a workspace directory only when it changed vs HEAD.

Exits 1 when the formatter fails or rewrites tracked files, so the hook stops
the commit and the user can add the formatted files and recommit.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from repofmt_tooling.fmt.config import DEFAULT_FMT_LAYOUT

log = logging.getLogger(__name__)


def _run(
    cmd: Sequence[str],
    cwd: Path | None = None,
) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        cmd,
        cwd=cwd,
        capture_output=True,
        text=True,
    )


def _dir_spec(d: str) -> str:
    d = d.strip("/")
    return f"{d}/" if d and d != "." else "."


def run_workspace_fmt(
    project_root: Path,
    workspace_dir: str = ".",
    fmt_argv: Sequence[str] | None = None,
    extra_check_dirs: Sequence[str] | None = None,
) -> int:
    """If workspace_dir has changed vs HEAD, run fmt; if fmt changes files, return 1.

    Default fmt runs in project_root/workspace_dir; an explicit fmt_argv runs in
    project_root. Returns 0 when nothing changed or fmt left the tree as is.
    """
    workspace_spec = _dir_spec(workspace_dir)
    r = _run(
        ["git", "diff", "--name-only", "HEAD", "--", workspace_spec],
        cwd=project_root,
    )
    if r.returncode != 0:
        log.warning("git diff failed in %s: %s", project_root, (r.stderr or "").strip())
        print("git diff failed; skipping workspace fmt", file=sys.stderr)
        return 0
    if not r.stdout.strip():
        log.debug("No changes under %s; fmt skipped", workspace_spec)
        return 0

    if fmt_argv is None:
        cmd = list(DEFAULT_FMT_LAYOUT["fmt_command"])
        cwd = project_root / workspace_dir
    else:
        cmd = list(fmt_argv)
        cwd = project_root
    try:
        r = _run(cmd, cwd=cwd)
    except OSError as e:
        print(f"❌ fmt could not start ({cmd[0]}): {e}", file=sys.stderr)
        return 1
    if r.returncode != 0:
        err = r.stderr or ""
        print(f"fmt failed: {err}", file=sys.stderr)
        return 1

    check_dirs = [_dir_spec(d) for d in extra_check_dirs] if extra_check_dirs else [workspace_spec]
    for d in check_dirs:
        r = _run(["git", "diff", "--exit-code", "--", d], cwd=project_root)
        if r.returncode != 0:
            dirs_str = " ".join(check_dirs)
            print(
                f"fmt changed {d}. Please run: git add {dirs_str} && git commit",
                file=sys.stderr,
            )
            return 1
    return 0
