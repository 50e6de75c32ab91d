from __future__ import annotations

from pathlib import Path


def is_valid_directory(path: str | Path) -> bool:
    if isinstance(path, str) and not path.strip():
        return False
    try:
        candidate = Path(path).expanduser()
        return candidate.exists() and candidate.is_dir()
    except (OSError, RuntimeError, ValueError):
        return False
