"""Turn pipeline outcomes into a single message for the caller.

Nothing here touches the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .files import CopyReport
from .selection import (
    CopyError,
    DirectoryUnreadableError,
    InvalidDirectoryError,
    InvalidPatternError,
)

Severity = Literal["success", "warning", "failure"]

PREVIEW_LIMIT = 3


@dataclass(frozen=True)
class UserMessage:
    severity: Severity
    title: str
    detail: str | None = None


def failure(title: str, detail: str | None = None) -> UserMessage:
    return UserMessage(severity="failure", title=title, detail=detail)


def preview_names(names: list[str], limit: int = PREVIEW_LIMIT) -> str:
    preview = ", ".join(names[:limit])
    if len(names) > limit:
        preview += "..."
    return preview


def summarize(report: CopyReport) -> UserMessage:
    failed = report.failed_names
    if failed:
        return UserMessage(
            severity="warning",
            title=f"Copied {report.copied} files, but {len(failed)} files failed",
            detail=f"Failed files: {preview_names(failed)}",
        )
    return UserMessage(
        severity="success",
        title=f"{report.copied} files copied successfully",
    )


def summarize_error(exc: CopyError) -> UserMessage:
    if isinstance(exc, InvalidDirectoryError):
        return failure(str(exc), exc.path)
    if isinstance(exc, InvalidPatternError):
        return failure(str(exc), exc.reason)
    if isinstance(exc, DirectoryUnreadableError):
        return failure("Failed to copy files", exc.reason)
    return failure(str(exc))
