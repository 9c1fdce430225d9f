from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import DATE_FORMAT, HISTORY_FIELDS, RECORD_SUFFIX, SNAPSHOT_FIELDS
from ..core.enums import AttendanceStatus
from ..storage.paths import StoragePaths
from ..storage.record_store import RecordStore
from .model import AttendanceRecord, AttendanceSnapshot
from .repository import SnapshotRepository

logger = logging.getLogger(__name__)


class CsvSnapshotRepository(SnapshotRepository):
    """One ``YYYY-MM-DD.csv`` file per date inside the attendance directory."""

    def __init__(self, store: RecordStore, paths: StoragePaths):
        self._store = store
        self._paths = paths

    def get(self, day: date) -> Optional[AttendanceSnapshot]:
        path = self._paths.snapshot_path(day)
        if not self._store.exists(path):
            return None

        records: Dict[str, AttendanceRecord] = {}
        for row in self._store.read_all(path, SNAPSHOT_FIELDS):
            try:
                status = AttendanceStatus(row["status"])
            except ValueError:
                logger.warning("Skipping row with unknown status %r in %s", row["status"], path)
                continue
            records[row["id"]] = AttendanceRecord(person_id=row["id"], status=status, timestamp=row["timestamp"])
        return AttendanceSnapshot(day=day, records=records)

    def save(self, snapshot: AttendanceSnapshot) -> None:
        rows = [
            {"id": r.person_id, "status": r.status.value, "timestamp": r.timestamp}
            for r in snapshot.records.values()
        ]
        self._store.overwrite(self._paths.snapshot_path(snapshot.day), SNAPSHOT_FIELDS, rows)

    def list_dates(self) -> List[date]:
        days: List[date] = []
        # Per-person history files share the directory; only date-named files are snapshots.
        for name in self._store.list_names(self._paths.attendance_dir, RECORD_SUFFIX):
            try:
                days.append(datetime.strptime(name, DATE_FORMAT).date())
            except ValueError:
                continue
        return sorted(days)

    def write_person_history(self, person_id: str, rows: Sequence[Tuple[date, AttendanceRecord]]) -> Path:
        path = self._paths.person_history_path(person_id)
        self._store.overwrite(
            path,
            HISTORY_FIELDS,
            [
                {"date": day.strftime(DATE_FORMAT), "status": r.status.value, "timestamp": r.timestamp}
                for day, r in rows
            ],
        )
        return path

    def delete_person_history(self, person_id: str) -> bool:
        return self._store.delete(self._paths.person_history_path(person_id))
