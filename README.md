# filetracker

Watches one directory and appends a line to a log file each time a regular
file shows up, changes its modification time, changes its size, or goes away.

It polls at a fixed interval. Hidden files (names starting with `.`) and
anything that is not a regular file, such as subdirectories, are skipped.

## Installing

```
pip install .
```

## Running

```
filetracker [OPTIONS] <directory>
```

Options:

- `-l <logfile>`: the log file to append to (default: `tracker.log`)
- `-p <pattern>`: watch only files that match the pattern; give it more than
  once for several patterns
- `-i <interval>`: seconds between checks (default: 5). The leading integer of
  the value is used; a value that is not positive falls back to 5
- `-v`: say what is happening on standard output
- `-h`: show help and exit

Options may come before or after the directory. An unknown option, an option
missing its value, or no directory prints an error and the help text and exits
with status 1.

Patterns are simple. A pattern that starts with `*` matches every name ending
in the rest of the pattern (`*.c`, `*.txt`). Any other pattern has to match the
whole name exactly. With no patterns, every regular file is watched.

Examples:

```
filetracker /home/user/documents
filetracker -l changes.log -p '*.c' -p '*.h' /home/user/project
```

Press Ctrl+C to stop; the tracker finishes the current round and prints
`File tracker stopped.` If the directory cannot be read at start-up, the
command reports it and exits with status 1. When a file is removed, a
`Removed file: <path>` line is also printed to standard output.

## Log format

Each event is one line:

```
[2024-05-01 12:34:56] ADDED: /home/user/project/main.c
```

The events are `ADDED`, `MODIFIED`, `SIZE_CHANGED` and `REMOVED`. Timestamps
use local time. Paths are the directory as given, a `/`, and the file name.
If the log file cannot be opened, a message goes to standard error and the
tracker carries on.

## Using it from Python

```python
from filetracker.tracker import FileTracker

tracker = FileTracker("project", "changes.log")
tracker.add_pattern("*.py")
added = tracker.scan_directory()    # paths of newly recorded files, each logged
events = tracker.check_changes()    # list of (event, path) pairs, each logged
print(tracker.file_count)
for info in tracker.files:          # FileInfo(path, last_modified, size)
    print(info.path, info.size)
```

`scan_directory` raises `filetracker.tracker.TrackerError` when the directory
cannot be listed. `FileTracker.matches(name)` tells whether a file name passes
the patterns, and `filetracker.utils.file_matches_pattern(filename, pattern)`
checks a single pattern.

`filetracker.cli.parse_args(argv)` turns a command line (without the program
name) into an `Options` object, and `filetracker.cli.run(options, stop_event)`
runs the polling loop until the given `threading.Event` is set, returning the
exit status.

## What it does not do

- It does not look into subdirectories; only the files directly inside the
  watched directory are tracked.
- It polls; it does not use operating-system change notifications, so changes
  within the same second of modification time, or undone between two checks,
  can go unnoticed.
- Patterns support only a leading `*`; there is no full glob or regular
  expression matching.