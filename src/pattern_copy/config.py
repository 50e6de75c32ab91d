from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, cast

import yaml
from pydantic import BaseModel, BeforeValidator, ValidationError


def _ensure_list(v: str | list[str] | None) -> list[str]:
    if v is None:
        return []
    return [v] if isinstance(v, str) else v


StrList = Annotated[list[str], BeforeValidator(_ensure_list)]


class ConfigFile(BaseModel):
    source: str = "~"
    destination: str = "~"
    patterns: StrList = []


@dataclass(frozen=True)
class CopyRequest:
    """Snapshot of one copy invocation -- no I/O performed."""

    source: str
    destination: str
    patterns: tuple[str, ...] = ()

    @staticmethod
    def create(
        source: str | Path, destination: str | Path, patterns: Iterable[str] = ()
    ) -> "CopyRequest":
        return CopyRequest(
            source=str(source),
            destination=str(destination),
            patterns=tuple(patterns),
        )


def _resolve_dir(value: str, config_dir: Path) -> str:
    """Resolve a directory entry relative to the job file.

    Blank values and unknown ~user prefixes are kept so validation can
    reject them.
    """
    if not value.strip():
        return value
    try:
        candidate = Path(value).expanduser()
    except RuntimeError:
        return value
    if candidate.is_absolute():
        return str(candidate)
    return str((config_dir / candidate).resolve())


def load_config(path: Path) -> CopyRequest | None:
    try:
        text = path.read_text()
    except FileNotFoundError:
        print(f"Config file not found: {path}")
        return None
    except OSError as exc:
        print(f"Failed to read config: {exc}")
        return None

    try:
        data = cast(object, yaml.safe_load(text))
        config = ConfigFile.model_validate(data or {})
    except (yaml.YAMLError, ValidationError) as exc:
        print(f"Failed to read config: {exc}")
        return None

    config_dir = path.parent.resolve()
    return CopyRequest.create(
        _resolve_dir(config.source, config_dir),
        _resolve_dir(config.destination, config_dir),
        config.patterns,
    )
