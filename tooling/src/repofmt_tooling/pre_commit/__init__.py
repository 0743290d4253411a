"""Pre-commit helpers: run the formatter when a workspace dir has changed."""

from repofmt_tooling.pre_commit.workspace_fmt import run_workspace_fmt

__all__ = ["run_workspace_fmt"]
