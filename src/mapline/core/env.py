"""
Environment helpers.

- `load_dotenv_if_present()`: load `MAPLINE_ENV_FILE` or a `.env` in the working directory
  (never overrides env vars already set in the process)
- `resolve_project_path()`: resolve a relative `MAPLINE_CONFIG_PATH` next to that `.env`
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


def _env_path() -> Path:
    explicit = os.getenv("MAPLINE_ENV_FILE")
    if explicit:
        return Path(explicit).expanduser().resolve()
    return Path.cwd().resolve() / ".env"


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load the env file once if it exists; returns the loaded path (or None)."""
    env_path = _env_path()
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against the directory holding the env file."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (_env_path().parent / p).resolve()
