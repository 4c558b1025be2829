from __future__ import annotations

import logging
import sys

from . import __version__
from .errors import InvalidTimestampError
from .utils.time import Instant, format_time_ago

USAGE_ERROR = 2


def main(argv: list[str] | None = None) -> int:
    """Entry point for the `relago` console script.

    Prints how long ago the given timestamp was, or handles the
    `--version` and `--help` flags.

    Args:
        argv: Command-line arguments without the program name. Defaults to
            `sys.argv[1:]`.

    Returns:
        Process exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_help(file=sys.stderr)
        return USAGE_ERROR

    command = args[0]
    if command in ("--version", "-v"):
        print(f"relago {__version__}")
        return 0
    elif command in ("--help", "-h"):
        print_help()
        return 0

    debug = "--debug" in args
    if debug:
        args.remove("--debug")
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    now: Instant | None = None
    if "--now" in args:
        idx = args.index("--now")
        if idx + 1 >= len(args):
            print("Error: --now requires a timestamp.", file=sys.stderr)
            return USAGE_ERROR
        now = parse_timestamp_arg(args[idx + 1])
        del args[idx : idx + 2]

    if len(args) != 1:
        print_help(file=sys.stderr)
        return USAGE_ERROR

    try:
        print(format_time_ago(parse_timestamp_arg(args[0]), now=now))
    except InvalidTimestampError as e:
        print(f"Error: {e}", file=sys.stderr)
        return USAGE_ERROR
    return 0


def parse_timestamp_arg(text: str) -> Instant:
    """Interpret a command-line timestamp.

    Purely numeric arguments are Unix epoch seconds; anything else is passed
    on as an ISO 8601 string.
    """
    try:
        return float(text)
    except ValueError:
        return text


def print_help(file=None) -> None:
    """Print help message for relago CLI commands.

    Args:
        file: Stream to write to. Defaults to stdout.
    """
    help_text = """relago - Describe how long ago a timestamp was

Usage:
  relago <timestamp> [--now <timestamp>] [--debug]
  relago --version    Show version information
  relago --help       Show this help message

Timestamps are ISO 8601 (e.g. 2024-05-01T12:00:00Z) or Unix epoch seconds.
Timestamps without an offset are read as local time.

Options:
  --now <timestamp>    Reference instant instead of the current time
  --debug              Enable debug logging
  -h, --help           Show this help message
  -v, --version        Show version information
"""
    print(help_text, file=file)
