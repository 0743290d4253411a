"""Shared CLI argument parsing for repofmt subcommands (--project-root, --config, --check)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

# (key, flag, default, converter); default may be a zero-arg callable, converter None keeps str.
FlagSpec = tuple[str, str, Any, Callable[[str], Any] | None]


def parse_flags(
    argv: list[str],
    *specs: FlagSpec,
    switches: tuple[str, ...] = (),
) -> tuple[dict[str, Any], list[str]]:
    """Parse value flags and boolean switches from argv, left to right.

    Value flags accept "--flag value" and "--flag=value"; the word after a value
    flag is always its value, even if it looks like a switch. A switch sets
    result[key] to True, where key is the switch without leading dashes and
    with "-" replaced by "_" (e.g. "--check" -> "check").
    Returns (dict of key -> value, remaining argv in order).
    """
    result: dict[str, Any] = {}
    for key, _flag, default, _converter in specs:
        result[key] = default() if callable(default) else default
    by_flag = {flag: (key, converter) for key, flag, _, converter in specs}
    switch_keys = {s: s.lstrip("-").replace("-", "_") for s in switches}
    for key in switch_keys.values():
        result[key] = False

    rest: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        flag, eq, inline = arg.partition("=")
        if eq and flag in by_flag:
            key, converter = by_flag[flag]
            result[key] = converter(inline) if converter else inline
            i += 1
        elif arg in by_flag and i + 1 < len(argv):
            key, converter = by_flag[arg]
            result[key] = converter(argv[i + 1]) if converter else argv[i + 1]
            i += 2
        elif arg in switch_keys:
            result[switch_keys[arg]] = True
            i += 1
        else:
            rest.append(arg)
            i += 1
    return result, rest


def path_resolver(s: str) -> Path:
    """Absolute, symlink-resolved Path for a --project-root or --config value."""
    return Path(s).expanduser().resolve()
