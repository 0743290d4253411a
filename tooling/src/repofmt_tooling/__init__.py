"""Repository formatting tooling: run cargo fmt (or a configured formatter) from the repo root."""
