from __future__ import annotations

import logging
import re

from attendance_tracker.audit import AuditLog

LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] (?P<body>.*)$")


def test_record_appends_one_formatted_line(tmp_path):
    log_file = tmp_path / "attendance.log"
    log_file.write_text("[2024-01-01 00:00:00] System: earlier\n", encoding="utf-8")
    audit = AuditLog(log_file)

    audit.record("Add Person", "Added person S1: Ann (10A)")
    audit.record("Error", "Invalid email format")
    audit.close()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert [LINE.match(line).group("body") for line in lines] == [
        "System: earlier",
        "Add Person: Added person S1: Ann (10A)",
        "Error: Invalid email format",
    ]


def test_unwritable_log_does_not_raise(tmp_path):
    audit = AuditLog(tmp_path / "missing-dir" / "attendance.log")

    audit.record("Success", "still fine")
    audit.close()


def test_instances_do_not_register_loggers(tmp_path):
    before = set(logging.root.manager.loggerDict)

    for n in range(3):
        AuditLog(tmp_path / f"{n}.log").close()

    assert set(logging.root.manager.loggerDict) == before


def test_two_instances_write_to_their_own_files(tmp_path):
    first = AuditLog(tmp_path / "a.log")
    second = AuditLog(tmp_path / "b.log")

    first.record("System", "one")
    second.record("System", "two")
    first.close()
    second.close()

    assert (tmp_path / "a.log").read_text(encoding="utf-8").endswith("System: one\n")
    assert (tmp_path / "b.log").read_text(encoding="utf-8").endswith("System: two\n")
