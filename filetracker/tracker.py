"""Directory scanning and change detection."""

from __future__ import annotations

import os
import stat
import sys
import time
from dataclasses import dataclass

from filetracker.utils import file_matches_pattern, format_timestamp


class TrackerError(Exception):
    """Raised when the monitored directory cannot be read."""


@dataclass
class FileInfo:
    """A monitored file and the state last seen for it."""

    path: str
    last_modified: int
    size: int


class FileTracker:
    """Watches the regular files of one directory and logs changes."""

    def __init__(self, directory, log_file):
        self.monitored_directory = os.fspath(directory)
        self.log_file_path = os.fspath(log_file)
        self.watch_patterns: list[str] = []
        self._files: dict[str, FileInfo] = {}

    @property
    def files(self) -> list[FileInfo]:
        """Monitored files, most recently added first."""
        return list(reversed(self._files.values()))

    @property
    def file_count(self) -> int:
        """Number of files currently monitored."""
        return len(self._files)

    def add_pattern(self, pattern: str) -> None:
        """Restrict monitoring to names matching *pattern* (or any other pattern)."""
        if pattern is None:
            return
        self.watch_patterns.append(pattern)

    def matches(self, filename: str) -> bool:
        """Return True if *filename* should be monitored."""
        if not self.watch_patterns:
            return True
        return any(file_matches_pattern(filename, p) for p in self.watch_patterns)

    def scan_directory(self) -> list[str]:
        """Add new matching files; return the paths that were added."""
        try:
            names = sorted(os.listdir(self.monitored_directory))
        except OSError as exc:
            raise TrackerError(f"opendir: {exc}") from exc

        added = []
        for name in names:
            if name.startswith("."):
                continue
            full_path = f"{self.monitored_directory}/{name}"
            try:
                st = os.stat(full_path)
            except OSError:
                continue
            if not stat.S_ISREG(st.st_mode) or not self.matches(name):
                continue
            if full_path in self._files:
                continue
            self._files[full_path] = FileInfo(full_path, int(st.st_mtime), st.st_size)
            self.log_event("ADDED", full_path)
            added.append(full_path)
        return added

    def check_changes(self) -> list[tuple[str, str]]:
        """Detect removed, modified and resized files; return (event, path) pairs."""
        events = []
        for info in self.files:
            try:
                st = os.stat(info.path)
            except OSError:
                self.log_event("REMOVED", info.path)
                del self._files[info.path]
                print(f"Removed file: {info.path}")
                events.append(("REMOVED", info.path))
                continue

            mtime = int(st.st_mtime)
            if mtime != info.last_modified:
                self.log_event("MODIFIED", info.path)
                info.last_modified = mtime
                events.append(("MODIFIED", info.path))
            if st.st_size != info.size:
                self.log_event("SIZE_CHANGED", info.path)
                info.size = st.st_size
                events.append(("SIZE_CHANGED", info.path))
        return events

    def log_event(self, event: str, filepath: str) -> None:
        """Append a timestamped line for *event* on *filepath* to the log file."""
        if event is None or filepath is None:
            return
        entry = f"[{format_timestamp(time.time())}] {event}: {filepath}\n"
        try:
            with open(self.log_file_path, "a", encoding="utf-8") as log:
                log.write(entry)
        except OSError as exc:
            print(f"fopen log file: {exc}", file=sys.stderr)