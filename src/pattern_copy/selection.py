from __future__ import annotations

import os
import re
import stat
from collections.abc import Iterable
from pathlib import Path

from .common import log_line


class CopyError(RuntimeError):
    pass


class SelectionError(CopyError):
    pass


class InvalidDirectoryError(CopyError):
    def __init__(self, role: str, path: str | Path) -> None:
        super().__init__(f"{role.capitalize()} directory doesn't exist or is invalid")
        self.role: str = role
        self.path: str = str(path)


class InvalidPatternError(SelectionError):
    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid regular expression: {pattern}")
        self.pattern: str = pattern
        self.reason: str = reason


class NoMatchesError(SelectionError):
    def __init__(self) -> None:
        super().__init__("No files match the patterns")


class DirectoryUnreadableError(SelectionError):
    def __init__(self, path: str | Path, exc: OSError) -> None:
        super().__init__(f"Failed to read source directory: {path}")
        self.path: str = str(path)
        self.reason: str = str(exc)


def active_patterns(patterns: Iterable[str]) -> list[str]:
    return [pattern for pattern in patterns if pattern.strip()]


def compile_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile every active pattern, failing on the first invalid one.

    Blank patterns are skipped without being compiled.
    """
    compiled: list[re.Pattern[str]] = []
    for pattern in active_patterns(patterns):
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise InvalidPatternError(pattern, str(exc)) from exc
    return compiled


def _list_entries(source_dir: Path) -> list[str]:
    try:
        return sorted(os.listdir(source_dir))
    except OSError as exc:
        raise DirectoryUnreadableError(source_dir, exc) from exc


def _is_directory(source_dir: Path, name: str, *, indent: str) -> bool | None:
    try:
        mode = os.stat(source_dir / name).st_mode
    except OSError as exc:
        log_line(f"Skipping {name}: {exc.strerror or exc}", indent=indent)
        return None
    return stat.S_ISDIR(mode)


def select_files(
    source_dir: str | Path,
    patterns: Iterable[str],
    *,
    indent: str = "  ",
) -> list[str]:
    """Select non-directory entries of source_dir matching any pattern.

    Patterns use search semantics (a match anywhere in the name). With no
    active patterns every non-directory entry is selected. Names are unique
    and ordered by discovery: pattern order, then sorted name.

    Raises DirectoryUnreadableError when listing fails, InvalidPatternError
    before any entry is matched when a pattern does not compile and
    NoMatchesError when nothing is selected. Entries that cannot be stat-ed
    are left out.
    """
    source = Path(source_dir).expanduser()
    entries = _list_entries(source)
    compiled = compile_patterns(patterns)

    if not compiled:
        candidates = entries
    else:
        matched: list[str] = []
        for regex in compiled:
            matched.extend(name for name in entries if regex.search(name))
        candidates = list(dict.fromkeys(matched))

    selected = [
        name
        for name in candidates
        if _is_directory(source, name, indent=indent) is False
    ]
    if not selected:
        raise NoMatchesError()
    return selected
