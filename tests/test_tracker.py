import os
import re

import pytest

from filetracker.tracker import FileInfo, FileTracker, TrackerError

LINE_RE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] (\w+): (.+)$")


@pytest.fixture
def setup(tmp_path):
    watched = tmp_path / "watched"
    watched.mkdir()
    log = tmp_path / "tracker.log"
    return watched, log, FileTracker(str(watched), str(log))


def _log_entries(log):
    lines = log.read_text(encoding="utf-8").splitlines()
    result = []
    for line in lines:
        m = LINE_RE.match(line)
        assert m, line
        result.append((m.group(1), m.group(2)))
    return result


def test_scan_adds_regular_visible_files(setup):
    watched, log, tracker = setup
    (watched / "a.c").write_text("x")
    (watched / "b.txt").write_text("yy")
    (watched / ".hidden").write_text("z")
    (watched / "sub").mkdir()

    added = tracker.scan_directory()

    assert sorted(added) == [f"{watched}/a.c", f"{watched}/b.txt"]
    assert tracker.file_count == 2
    assert sorted(_log_entries(log)) == [("ADDED", p) for p in sorted(added)]


def test_scan_is_idempotent(setup):
    watched, log, tracker = setup
    (watched / "a.c").write_text("x")
    tracker.scan_directory()
    assert tracker.scan_directory() == []
    assert tracker.file_count == 1
    assert len(_log_entries(log)) == 1


def test_file_info_records_size(setup):
    watched, _, tracker = setup
    (watched / "a.c").write_text("hello")
    tracker.scan_directory()
    (info,) = tracker.files
    assert isinstance(info, FileInfo)
    assert info.size == len("hello")
    assert info.last_modified == int(os.stat(info.path).st_mtime)


def test_patterns_filter_files(setup):
    watched, _, tracker = setup
    for name in ("a.c", "b.h", "c.txt", "Makefile"):
        (watched / name).write_text("x")
    tracker.add_pattern("*.c")
    tracker.add_pattern("Makefile")
    added = tracker.scan_directory()
    assert sorted(added) == [f"{watched}/Makefile", f"{watched}/a.c"]


def test_matches_without_patterns_accepts_all(setup):
    _, _, tracker = setup
    assert tracker.matches("anything.bin") is True
    tracker.add_pattern("*.py")
    assert tracker.matches("anything.bin") is False
    assert tracker.matches("mod.py") is True


def test_many_patterns_are_accepted(setup):
    _, _, tracker = setup
    names = [f"*.{i}" for i in range(20)]
    for p in names:
        tracker.add_pattern(p)
    assert tracker.watch_patterns == names


def test_missing_directory_raises(tmp_path):
    tracker = FileTracker(str(tmp_path / "missing"), str(tmp_path / "log"))
    with pytest.raises(TrackerError):
        tracker.scan_directory()


def test_check_changes_detects_removal(setup, capsys):
    watched, log, tracker = setup
    target = watched / "a.c"
    target.write_text("x")
    tracker.scan_directory()
    target.unlink()

    events = tracker.check_changes()

    path = f"{watched}/a.c"
    assert events == [("REMOVED", path)]
    assert tracker.file_count == 0
    assert f"Removed file: {path}" in capsys.readouterr().out
    assert _log_entries(log)[-1] == ("REMOVED", path)


def test_check_changes_detects_modification(setup):
    watched, log, tracker = setup
    target = watched / "a.c"
    target.write_text("x")
    tracker.scan_directory()
    mtime = os.stat(target).st_mtime
    os.utime(target, (mtime + 100, mtime + 100))

    path = f"{watched}/a.c"
    assert tracker.check_changes() == [("MODIFIED", path)]
    assert tracker.check_changes() == []
    assert _log_entries(log)[-1] == ("MODIFIED", path)


def test_check_changes_detects_size_change(setup):
    watched, _, tracker = setup
    target = watched / "a.c"
    target.write_text("x")
    tracker.scan_directory()
    st = os.stat(target)
    target.write_text("much longer content")
    os.utime(target, (st.st_atime, st.st_mtime))

    path = f"{watched}/a.c"
    assert tracker.check_changes() == [("SIZE_CHANGED", path)]
    assert tracker.files[0].size == len("much longer content")


def test_check_changes_without_changes(setup):
    watched, _, tracker = setup
    (watched / "a.c").write_text("x")
    tracker.scan_directory()
    assert tracker.check_changes() == []
    assert tracker.file_count == 1


def test_log_event_appends(setup):
    _, log, tracker = setup
    tracker.log_event("ADDED", "/some/path")
    tracker.log_event("REMOVED", "/some/path")
    assert _log_entries(log) == [("ADDED", "/some/path"), ("REMOVED", "/some/path")]


def test_log_event_unwritable_reports(tmp_path, capsys):
    tracker = FileTracker(str(tmp_path), str(tmp_path / "no" / "such" / "log"))
    tracker.log_event("ADDED", "x")
    assert "fopen log file" in capsys.readouterr().err