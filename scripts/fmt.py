#!/usr/bin/env python3
"""Format the whole repository with cargo fmt.

The repository root is the parent of this script's directory, so the result is
the same wherever the script is run from. Takes no arguments.

Needs the repofmt-tooling package installed (`pip install -e .` from the
repository root).

Usage:
    scripts/fmt.py
"""

import sys
from pathlib import Path

from repofmt_tooling.fmt import invoke

if __name__ == "__main__":
    sys.exit(invoke(Path(__file__)))
