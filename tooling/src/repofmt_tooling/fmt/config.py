"""Fmt layout configuration (formatter command, root depth, status line)."""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any

import yaml

# Rust default; override for other formatters (e.g. ["ruff", "format"]).
DEFAULT_FMT_LAYOUT: dict[str, Any] = {
    "fmt_command": ["cargo", "fmt"],
    "check_args": ["--check"],
    "root_levels": 1,
    "status_message": "Run fmt to format code",
}


def _as_argv(key: str, value: Any) -> list[str]:
    if isinstance(value, str):
        return shlex.split(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    msg = f"{key} must be a string or a list of strings, got {value!r}"
    raise ValueError(msg)


def resolve_fmt_layout(layout: dict[str, Any] | None) -> dict[str, Any]:
    """Return layout dict with defaults filled. Unknown keys are ignored; raises ValueError on bad values."""
    out = {k: (list(v) if isinstance(v, list) else v) for k, v in DEFAULT_FMT_LAYOUT.items()}
    if layout is None:
        return out
    out.update({k: v for k, v in layout.items() if k in out})

    out["fmt_command"] = _as_argv("fmt_command", out["fmt_command"])
    if not out["fmt_command"]:
        msg = "fmt_command must not be empty"
        raise ValueError(msg)
    out["check_args"] = _as_argv("check_args", out["check_args"])

    levels = out["root_levels"]
    if isinstance(levels, bool) or not isinstance(levels, int) or levels < 1:
        msg = f"root_levels must be a positive integer, got {levels!r}"
        raise ValueError(msg)
    out["status_message"] = str(out["status_message"])
    return out


def load_fmt_config(path: Path) -> dict[str, Any]:
    """Load a fmt layout mapping from YAML. Empty file gives {}; raises ValueError if unreadable or not a mapping."""
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        msg = f"Could not load fmt config {path}: {e}"
        raise ValueError(msg) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"fmt config {path} must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def fmt_argv(layout: dict[str, Any] | None = None, check: bool = False) -> list[str]:
    """Formatter argv from layout; check appends check_args (e.g. cargo fmt --check)."""
    cfg = resolve_fmt_layout(layout)
    argv = list(cfg["fmt_command"])
    if check:
        argv.extend(cfg["check_args"])
    return argv
