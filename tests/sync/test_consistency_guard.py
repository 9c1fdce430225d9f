from __future__ import annotations

from datetime import date, datetime

import pytest

from attendance_tracker.attendance.csv_snapshot_repository import CsvSnapshotRepository
from attendance_tracker.attendance.model import AttendanceRecord, AttendanceSnapshot
from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.core.exceptions import NotFoundError
from attendance_tracker.roster.csv_roster_repository import CsvRosterRepository
from attendance_tracker.roster.model import Person
from attendance_tracker.sync.service import ConsistencyGuard

DAY = date(2024, 1, 10)


@pytest.fixture
def repos(paths, store):
    return CsvRosterRepository(store, paths), CsvSnapshotRepository(store, paths)


@pytest.fixture
def guard(repos, audit):
    roster, snapshots = repos
    return ConsistencyGuard(roster, snapshots, audit)


def record(pid, status=AttendanceStatus.PRESENT, ts="08:00:00"):
    return AttendanceRecord(pid, status, ts)


def test_align_keeps_roster_order_and_defaults_absent():
    roster = [Person("S2", "Bob", "b@b.com", "1"), Person("S1", "Ann", "a@b.com", "1")]

    aligned = ConsistencyGuard.align(roster, {"S1": record("S1"), "S9": record("S9")}, "10:00:00")

    assert list(aligned) == ["S2", "S1"]
    assert aligned["S2"] == record("S2", AttendanceStatus.ABSENT, "10:00:00")
    assert aligned["S1"] == record("S1")


def test_cascade_delete_removes_history_but_not_snapshots(guard, repos, paths):
    _, snapshots = repos
    snapshots.save(AttendanceSnapshot(day=DAY, records={"S1": record("S1")}))
    snapshots.write_person_history("S1", [(DAY, record("S1"))])

    assert guard.cascade_delete("S1") is True
    assert not paths.person_history_path("S1").exists()
    assert snapshots.get(DAY).records == {"S1": record("S1")}
    assert guard.cascade_delete("S1") is False


def test_reconcile_adds_new_and_drops_removed(guard, repos, audit):
    roster, snapshots = repos
    roster.add(Person("S1", "Ann", "a@b.com", "10A"))
    roster.add(Person("S3", "Cat", "c@b.com", "10A"))
    snapshots.save(AttendanceSnapshot(day=DAY, records={"S1": record("S1"), "S2": record("S2")}))

    result = guard.reconcile_snapshot_with_roster("2024-01-10", now=datetime(2024, 1, 12, 14, 0, 0))

    assert result.added == ["S3"]
    assert result.dropped == ["S2"]
    assert snapshots.get(DAY).records == {
        "S1": record("S1"),
        "S3": record("S3", AttendanceStatus.ABSENT, "14:00:00"),
    }
    assert audit.actions() == ["Reconcile"]


def test_reconcile_consistent_snapshot_writes_nothing(guard, repos, paths, audit):
    roster, snapshots = repos
    roster.add(Person("S1", "Ann", "a@b.com", "10A"))
    snapshots.save(AttendanceSnapshot(day=DAY, records={"S1": record("S1")}))
    before = paths.snapshot_path(DAY).read_bytes()

    result = guard.reconcile_snapshot_with_roster(DAY)

    assert not result.changed
    assert paths.snapshot_path(DAY).read_bytes() == before
    assert audit.entries == []


def test_reconcile_missing_snapshot_raises(guard):
    with pytest.raises(NotFoundError):
        guard.reconcile_snapshot_with_roster(DAY)
