"""Helpers shared by the tracker and the command line."""

from __future__ import annotations

import time

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def file_matches_pattern(filename: str, pattern: str) -> bool:
    """Return True if *filename* matches *pattern*.

    A pattern starting with ``*`` matches any name ending with the rest of
    the pattern (``*.txt``); any other pattern must equal the name exactly.
    """
    if filename is None or pattern is None:
        return False
    if pattern.startswith("*"):
        return filename.endswith(pattern[1:])
    return filename == pattern


def format_timestamp(timestamp: float) -> str:
    """Format a Unix timestamp as local time, ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime(TIMESTAMP_FORMAT, time.localtime(timestamp))


def usage_text(program_name: str) -> str:
    """Return the usage message for the command."""
    return (
        f"Usage: {program_name} [OPTIONS] <directory>\n"
        "File Tracker - Monitor file changes in a directory\n"
        "\n"
        "Options:\n"
        "  -l <logfile>    Specify log file (default: tracker.log)\n"
        "  -p <pattern>    Add file pattern to monitor (e.g., *.c, *.txt)\n"
        "  -i <interval>   Monitoring interval in seconds (default: 5)\n"
        "  -v              Verbose output\n"
        "  -h              Show this help\n"
        "\n"
        "Examples:\n"
        f"  {program_name} /home/user/documents\n"
        f"  {program_name} -l changes.log -p '*.c' -p '*.h' /home/user/project\n"
    )


def print_usage(program_name: str) -> None:
    """Print the usage message to standard output."""
    print(usage_text(program_name), end="")