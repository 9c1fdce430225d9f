from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.csv_snapshot_repository import CsvSnapshotRepository
from .attendance.service import AttendanceService
from .audit import AuditLog, AuditSink
from .roster.csv_roster_repository import CsvRosterRepository
from .roster.service import RosterService
from .storage.paths import StoragePaths
from .storage.record_store import RecordStore
from .sync.service import ConsistencyGuard


@dataclass(frozen=True)
class Container:
    paths: StoragePaths
    store: RecordStore
    audit: AuditSink

    roster_repo: CsvRosterRepository
    snapshots_repo: CsvSnapshotRepository

    guard: ConsistencyGuard
    roster_service: RosterService
    attendance_service: AttendanceService


def build_container(*, data_config: dict, audit: Optional[AuditSink] = None) -> Container:
    paths = StoragePaths.from_config(data_config)
    store = RecordStore()
    if audit is None:
        audit = AuditLog(paths.log_file)

    roster_repo = CsvRosterRepository(store, paths)
    snapshots_repo = CsvSnapshotRepository(store, paths)

    guard = ConsistencyGuard(roster_repo, snapshots_repo, audit)
    roster_service = RosterService(roster_repo, guard, audit)
    attendance_service = AttendanceService(snapshots_repo, roster_repo, guard, audit)

    return Container(
        paths=paths,
        store=store,
        audit=audit,
        roster_repo=roster_repo,
        snapshots_repo=snapshots_repo,
        guard=guard,
        roster_service=roster_service,
        attendance_service=attendance_service,
    )
