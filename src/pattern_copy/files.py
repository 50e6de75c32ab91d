from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from .common import is_verbose, log_line, print_names


@dataclass(frozen=True)
class CopyOutcome:
    name: str
    error: OSError | None = None

    @property
    def copied(self) -> bool:
        return self.error is None


@dataclass
class CopyReport:
    outcomes: list[CopyOutcome] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def copied(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.copied)

    @property
    def failed(self) -> list[CopyOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.copied]

    @property
    def failed_names(self) -> list[str]:
        return [outcome.name for outcome in self.failed]


def copy_file(source_dir: Path, dest_dir: Path, name: str) -> CopyOutcome:
    try:
        _ = shutil.copyfile(source_dir / name, dest_dir / name)
    except OSError as exc:
        return CopyOutcome(name=name, error=exc)
    return CopyOutcome(name=name)


def _existing_names(dest_dir: Path, files: list[str]) -> list[str]:
    existing: list[str] = []
    for name in files:
        try:
            if (dest_dir / name).exists():
                existing.append(name)
        except OSError:
            continue
    return existing


def copy_all(
    source_dir: str | Path,
    dest_dir: str | Path,
    files: list[str],
    *,
    indent: str = "  ",
) -> CopyReport:
    """Copy each named file from source_dir to dest_dir.

    Existing destination files are overwritten. A failure is recorded
    against its file and the remaining files are still copied.
    """
    source = Path(source_dir).expanduser()
    dest = Path(dest_dir).expanduser()

    if is_verbose():
        existing = _existing_names(dest, files)
        print_names(existing, "Replacing existing files", indent=indent)

    report = CopyReport()
    for name in files:
        outcome = copy_file(source, dest, name)
        report.outcomes.append(outcome)
        if outcome.error is None:
            log_line(f"Copied {name}", indent=indent)
        else:
            log_line(f"Failed {name}: {outcome.error}", indent=indent)
    return report
