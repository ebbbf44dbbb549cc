"""Command line entry point: watch a directory until interrupted."""

from __future__ import annotations

import getopt
import re
import signal
import sys
import threading
from dataclasses import dataclass, field

from filetracker.tracker import FileTracker, TrackerError
from filetracker.utils import print_usage

PROGRAM_NAME = "filetracker"
DEFAULT_LOG_FILE = "tracker.log"
DEFAULT_INTERVAL = 5


@dataclass
class Options:
    """Settings taken from the command line."""

    directory: str | None = None
    log_file: str = DEFAULT_LOG_FILE
    patterns: list[str] = field(default_factory=list)
    interval: int = DEFAULT_INTERVAL
    verbose: bool = False
    show_help: bool = False


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_args(argv) -> Options:
    """Parse arguments (without the program name).

    Raises getopt.GetoptError for an unknown option or missing option value
    and ValueError when no directory is given.
    """
    opts, rest = getopt.gnu_getopt(list(argv), "l:p:i:vh")
    options = Options()
    for flag, value in opts:
        if flag == "-l":
            options.log_file = value
        elif flag == "-p":
            options.patterns.append(value)
        elif flag == "-i":
            interval = _leading_int(value)
            options.interval = interval if interval > 0 else DEFAULT_INTERVAL
        elif flag == "-v":
            options.verbose = True
        elif flag == "-h":
            options.show_help = True
            return options
    if not rest:
        raise ValueError("No directory specified")
    options.directory = rest[0]
    return options


def run(options: Options, stop_event: threading.Event) -> int:
    """Monitor the directory until *stop_event* is set; return an exit code."""
    verbose = options.verbose
    if verbose:
        print("Starting file tracker...")
        print(f"Directory: {options.directory}")
        print(f"Log file: {options.log_file}")
        print(f"Interval: {options.interval} seconds")

    tracker = FileTracker(options.directory, options.log_file)
    for pattern in options.patterns:
        tracker.add_pattern(pattern)
        if verbose:
            print(f"Added pattern: {pattern}")

    if verbose:
        print("Performing initial scan...")
    try:
        tracker.scan_directory()
    except TrackerError as exc:
        print(exc, file=sys.stderr)
        print("Error: Failed to scan directory", file=sys.stderr)
        return 1
    if verbose:
        print(f"Initial scan complete. Monitoring {tracker.file_count} files.")

    while not stop_event.is_set():
        stop_event.wait(options.interval)
        if verbose:
            print("Checking for changes...")
        tracker.check_changes()
        try:
            tracker.scan_directory()
        except TrackerError as exc:
            print(exc, file=sys.stderr)
        if verbose:
            print(f"Currently monitoring {tracker.file_count} files.")

    if verbose:
        print("Cleaning up...")
        print(f"Monitored {tracker.file_count} files in total.")
    print("File tracker stopped.")
    return 0


def main(argv=None) -> int:
    """Run the command; return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except getopt.GetoptError as exc:
        print(f"{PROGRAM_NAME}: {exc}", file=sys.stderr)
        print_usage(PROGRAM_NAME)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print_usage(PROGRAM_NAME)
        return 1
    if options.show_help:
        print_usage(PROGRAM_NAME)
        return 0

    stop_event = threading.Event()

    def _on_sigint(signum, frame):
        print("\nReceived SIGINT, shutting down gracefully...")
        stop_event.set()

    previous = signal.signal(signal.SIGINT, _on_sigint)
    try:
        return run(options, stop_event)
    finally:
        signal.signal(signal.SIGINT, previous)


if __name__ == "__main__":
    sys.exit(main())