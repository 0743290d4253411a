"""Pytest fixtures for repofmt tooling tests."""

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Appends its cwd to the log file, prints a marker, exits with the given code.
STUB_FORMATTER = """\
import os
import sys

log_path, code = sys.argv[1], int(sys.argv[2])
with open(log_path, "a") as f:
    f.write(os.getcwd() + "\\n")
print("stub formatter ran", flush=True)
sys.exit(code)
"""


@pytest.fixture(autouse=True)
def _restore_cwd() -> Iterator[None]:
    """The invoker chdirs into the repository root; put the test process back afterwards."""
    cwd = os.getcwd()
    yield
    os.chdir(cwd)


@pytest.fixture
def repo_layout(tmp_path: Path) -> tuple[Path, Path]:
    """Repository with a scripts/fmt.py entry script. Returns (root, script)."""
    root = tmp_path / "repo"
    scripts = root / "scripts"
    scripts.mkdir(parents=True)
    script = scripts / "fmt.py"
    script.write_text("# entry script\n")
    return root, script


@pytest.fixture
def stub_formatter(tmp_path: Path) -> Callable[[int], tuple[list[str], Path]]:
    """Factory: stub_formatter(code) -> (argv, calls_log). One log line (cwd) per run."""
    stub = tmp_path / "stub_fmt.py"
    stub.write_text(STUB_FORMATTER)
    calls_log = tmp_path / "stub_calls.log"

    def make(code: int = 0) -> tuple[list[str], Path]:
        return [sys.executable, str(stub), str(calls_log), str(code)], calls_log

    return make


def read_calls(calls_log: Path) -> list[str]:
    """Working directories recorded by the stub formatter, one per run."""
    if not calls_log.exists():
        return []
    return calls_log.read_text().splitlines()
