"""Environment helpers for the ringside settings modules.

A `.env` file at the repository root is loaded once on import; real
environment variables always win over it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv


BASE_DIR: Final[Path] = Path(__file__).resolve().parents[2]

_env_file = BASE_DIR / ".env"
if _env_file.exists():
    load_dotenv(_env_file, override=False)


def env(name: str, default: str | None = None, *, required: bool = False) -> str:
    """Return an env var value.

    Raises:
        RuntimeError: When `required=True` and the variable is missing/empty.

    """
    value = os.getenv(name, default)
    if required and value in {None, ""}:
        raise RuntimeError(f"Environment variable '{name}' is required")
    return "" if value is None else value


def env_bool(name: str, default: bool = False) -> bool:
    """Return a bool env var.

    Truthy values: `1,true,yes,on` (case-insensitive).
    """
    return os.getenv(name, str(default)).lower() in {"1", "true", "yes", "on"}


def env_int(name: str, default: int) -> int:
    """Return an int env var, falling back to `default`."""
    raw = os.getenv(name)
    return int(raw) if raw else default
