from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import cast

from .config import CopyRequest
from .main import run_job, run_request


def _dispatch_run(args: argparse.Namespace) -> int:
    config_path = cast(Path, args.config).expanduser()
    return run_job(config_path, verbose=cast(bool, args.verbose))


def _dispatch_copy(args: argparse.Namespace) -> int:
    request = CopyRequest.create(
        cast(str, args.source),
        cast(str, args.destination),
        cast(list[str], args.pattern),
    )
    return run_request(request, verbose=cast(bool, args.verbose))


def _add_verbose_arg(parser: argparse.ArgumentParser) -> None:
    _ = parser.add_argument(
        "-v", "--verbose", action="store_true", help="show verbose output"
    )


SUBCOMMANDS = ("run", "copy")


def _is_run_fallback(argv: list[str]) -> bool:
    if not argv:
        return False
    if argv[0] in (*SUBCOMMANDS, "-h", "--help"):
        return False
    return True


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="pattern-copy",
        description="Copy files whose names match regular expressions.",
    )
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="run a copy job from a YAML file")
    _ = run_parser.add_argument(
        "config",
        nargs="?",
        default="copy.yml",
        type=Path,
        help="path to job YAML file (default: ./copy.yml)",
    )
    _add_verbose_arg(run_parser)

    copy_parser = subparsers.add_parser(
        "copy", help="copy matching files from SOURCE to DESTINATION"
    )
    _ = copy_parser.add_argument("source", help="source directory")
    _ = copy_parser.add_argument("destination", help="destination directory")
    _ = copy_parser.add_argument(
        "-p",
        "--pattern",
        action="append",
        default=[],
        help="regular expression to match file names (repeatable; "
        + "omit to copy all files)",
    )
    _add_verbose_arg(copy_parser)

    argv = sys.argv[1:]
    if _is_run_fallback(argv):
        argv = ["run", *argv]

    args = parser.parse_args(argv)
    command = cast(str | None, args.command)

    dispatch = {
        "run": _dispatch_run,
        "copy": _dispatch_copy,
    }

    handler = dispatch.get(command or "")
    if handler:
        sys.exit(handler(args))
    else:
        parser.print_help()
        sys.exit(1)
