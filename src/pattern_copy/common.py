from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .report import UserMessage

_verbose = False


def set_verbose(value: bool) -> None:
    global _verbose
    _verbose = value


def is_verbose() -> bool:
    return _verbose


def log_stage(title: str) -> str:
    if not _verbose:
        return ""
    print(f"{title}:")
    return "  "


def log_line(message: str, *, indent: str = "  ") -> None:
    if not _verbose:
        return
    print(f"{indent}{message}")


def log_success(message: str, *, indent: str = "") -> None:
    print(f"{indent}{message}")


def print_names(names: list[str], label: str, *, indent: str = "") -> None:
    if not names or not _verbose:
        return
    print(f"{indent}{label} ({len(names)}):")
    list_indent = indent or "  "
    for name in names[:5]:
        print(f"{list_indent}{name}")
    if len(names) > 5:
        print(f"{list_indent}...and {len(names) - 5} more")


def print_message(message: UserMessage) -> None:
    """Render a pipeline outcome on the console."""
    if message.severity == "failure":
        print(f"Error: {message.title}")
    elif message.severity == "warning":
        print(f"Warning: {message.title}")
    else:
        log_success(message.title)
    if message.detail:
        print(f"  {message.detail}")
