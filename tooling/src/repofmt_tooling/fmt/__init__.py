"""Formatter invocation from the repository root (cargo fmt by default)."""

from .config import (
    DEFAULT_FMT_LAYOUT,
    fmt_argv,
    load_fmt_config,
    resolve_fmt_layout,
)
from .invoker import (
    EXIT_FMT_NOT_EXECUTABLE,
    EXIT_FMT_NOT_FOUND,
    EXIT_ROOT_UNAVAILABLE,
    PathResolutionError,
    enter_repo_root,
    format_root,
    invoke,
    resolve_repo_root,
    run_fmt,
)

__all__ = [
    "DEFAULT_FMT_LAYOUT",
    "EXIT_FMT_NOT_EXECUTABLE",
    "EXIT_FMT_NOT_FOUND",
    "EXIT_ROOT_UNAVAILABLE",
    "PathResolutionError",
    "enter_repo_root",
    "fmt_argv",
    "format_root",
    "invoke",
    "load_fmt_config",
    "resolve_fmt_layout",
    "resolve_repo_root",
    "run_fmt",
]
