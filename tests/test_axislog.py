import re

import pytest

from axiskit.axislog import AxisLog, LogEntry, LogLevel

LINE = re.compile(r"^\d{2}:\d{2}:\d{2} \((Status|Warning|Error|Debug)\): (.*)$")


@pytest.mark.parametrize(
    "level, label",
    [(0, "Status"), (1, "Warning"), (2, "Error"), (3, "Debug"), (42, "Debug"), (-1, "Debug")],
)
def test_level_labels(tmp_path, level, label):
    with AxisLog(tmp_path / "a.log") as log:
        entry = log.add(level, "hello")
    assert entry.kind == label
    assert entry.message == "hello"


def test_time_format(tmp_path):
    with AxisLog(tmp_path / "a.log") as log:
        entry = log.add(LogLevel.STATUS, "x")
    parts = entry.time.split(":")
    assert [len(part) for part in parts] == [2, 2, 2]
    hours, minutes, seconds = (int(part) for part in parts)
    assert 0 <= hours < 24
    assert 0 <= minutes < 60
    assert 0 <= seconds < 60
    assert entry.format() == f"{entry.time} (Status): x"


def test_file_lines_match_entries(tmp_path):
    path = tmp_path / "a.log"
    with AxisLog(path) as log:
        log.add(0, "first")
        log.add(2, "second")
        entries = list(log.entries)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [e.format() for e in entries]
    for line in lines:
        assert LINE.match(line)


def test_appends_across_instances(tmp_path):
    path = tmp_path / "a.log"
    with AxisLog(path) as log:
        log.add(0, "one")
    with AxisLog(path) as log:
        log.add(1, "two")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [LINE.match(l).group(2) for l in lines] == ["one", "two"]


def test_clear_removes_file_and_keeps_entries(tmp_path):
    path = tmp_path / "a.log"
    log = AxisLog(path)
    log.add(0, "msg")
    log.clear()
    assert not path.exists()
    assert len(log.entries) == 1


def test_clear_without_file_is_harmless(tmp_path):
    log = AxisLog(tmp_path / "missing.log")
    log.clear()
    assert not (tmp_path / "missing.log").exists()


def test_no_path_keeps_memory_only(tmp_path):
    log = AxisLog(None)
    entry = log.add(1, "mem")
    assert log.entries == [entry]
    assert list(tmp_path.iterdir()) == []


def test_unopenable_file_records_nothing(tmp_path):
    log = AxisLog(tmp_path / "nodir" / "a.log")
    assert log.add(0, "lost") is None
    assert log.entries == []


def test_listeners_receive_entries(tmp_path):
    seen = []
    log = AxisLog(None)
    log.listeners.append(seen.append)
    entry = log.add(0, "ping")
    assert seen == [entry]


def test_entry_format():
    entry = LogEntry("12:00:00", "Warning", "careful")
    assert entry.format() == "12:00:00 (Warning): careful"