from __future__ import annotations

from pathlib import Path

from .common import log_line, log_stage, print_message, set_verbose
from .config import CopyRequest, load_config
from .files import copy_all
from .report import UserMessage, summarize, summarize_error
from .selection import CopyError, InvalidDirectoryError, active_patterns, select_files
from .validate import is_valid_directory

EXIT_CODES = {"success": 0, "failure": 1, "warning": 2}


def _check_directories(request: CopyRequest) -> None:
    if not is_valid_directory(request.source):
        raise InvalidDirectoryError("source", request.source)
    if not is_valid_directory(request.destination):
        raise InvalidDirectoryError("destination", request.destination)


def run_copy(request: CopyRequest) -> UserMessage:
    """Validate, select, copy and summarize one request.

    Validation and selection errors end the run before anything is copied.
    """
    try:
        _check_directories(request)

        indent = log_stage("Selecting files")
        patterns = active_patterns(request.patterns)
        if patterns:
            log_line(f"Patterns: {', '.join(patterns)}", indent=indent)
        else:
            log_line("No patterns given; selecting all files", indent=indent)
        files = select_files(request.source, request.patterns, indent=indent)
        log_line(f"Selected {len(files)} file(s) from {request.source}", indent=indent)
    except CopyError as exc:
        return summarize_error(exc)

    indent = log_stage(f"Copying to {request.destination}")
    report = copy_all(request.source, request.destination, files, indent=indent)
    return summarize(report)


def exit_code(message: UserMessage) -> int:
    return EXIT_CODES[message.severity]


def run_request(request: CopyRequest, *, verbose: bool = False) -> int:
    set_verbose(verbose)
    message = run_copy(request)
    print_message(message)
    return exit_code(message)


def run_job(config_path: Path, *, verbose: bool = False) -> int:
    request = load_config(config_path)
    if request is None:
        return 1
    return run_request(request, verbose=verbose)
