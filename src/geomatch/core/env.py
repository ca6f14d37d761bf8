"""
Environment helpers.

- `load_dotenv_if_present()`: load a `.env` file once (never overrides existing env vars)
- `resolve_project_path()`: resolve relative config paths (e.g., an external `regions.yaml`)
  against `GEOMATCH_PROJECT_ROOT`, or the working directory when unset
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None)."""
    explicit = os.getenv("GEOMATCH_ENV_FILE")
    env_path = Path(explicit).expanduser() if explicit else None
    if env_path is None:
        found = find_dotenv(usecwd=True)
        env_path = Path(found) if found else None

    if env_path is None or not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against the project root."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    root = os.getenv("GEOMATCH_PROJECT_ROOT")
    base = Path(root).expanduser() if root else Path.cwd()
    return (base / p).resolve()
