"""Helpers for resolving catalog file locations."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_PATH_ENV = "SHIPYARD_DEFINITIONS_PATH"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing JSON catalog files.

    An explicit ``base_path`` wins, then the ``SHIPYARD_DEFINITIONS_PATH``
    environment variable, then ``data/definitions`` under the repo root.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_PATH_ENV)
    if override:
        return Path(override)
    return get_repo_root() / "data" / "definitions"
