from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Mapping, Optional, Sequence, Union

from ..attendance.model import AttendanceRecord, AttendanceSnapshot
from ..attendance.repository import SnapshotRepository
from ..audit import AuditSink
from ..common.datetime_utils import format_time, now_local, resolve_day
from ..core.constants import DATE_FORMAT
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..roster.model import Person
from ..roster.repository import RosterRepository
from .model import ReconcileResult


class ConsistencyGuard:
    """Keeps per-date snapshots and per-person artifacts in line with the roster.

    Deleting a person only removes their history artifact. Past snapshots keep
    the orphaned rows until ``reconcile_snapshot_with_roster`` is run for that
    date.
    """

    def __init__(self, roster: RosterRepository, snapshots: SnapshotRepository, audit: AuditSink):
        self._roster = roster
        self._snapshots = snapshots
        self._audit = audit

    @staticmethod
    def align(
        roster: Sequence[Person],
        records: Mapping[str, AttendanceRecord],
        timestamp: str,
    ) -> Dict[str, AttendanceRecord]:
        """One record per roster member, in roster order; missing members default to absent."""
        aligned: Dict[str, AttendanceRecord] = {}
        for person in roster:
            aligned[person.person_id] = records.get(person.person_id) or AttendanceRecord(
                person_id=person.person_id,
                status=AttendanceStatus.ABSENT,
                timestamp=timestamp,
            )
        return aligned

    def cascade_delete(self, person_id: str) -> bool:
        return self._snapshots.delete_person_history(person_id)

    def reconcile_snapshot_with_roster(
        self,
        day: Union[date, str, None],
        *,
        now: Optional[datetime] = None,
    ) -> ReconcileResult:
        now = now or now_local()
        day = resolve_day(day, today=now.date())

        snapshot = self._snapshots.get(day)
        if snapshot is None:
            raise NotFoundError(f"No attendance recorded for {day.strftime(DATE_FORMAT)}")

        roster = list(self._roster.list_all())
        aligned = self.align(roster, snapshot.records, format_time(now))

        added = [pid for pid in aligned if pid not in snapshot.records]
        dropped = [pid for pid in snapshot.records if pid not in aligned]
        result = ReconcileResult(day=day, added=added, dropped=dropped)

        if result.changed:
            self._snapshots.save(AttendanceSnapshot(day=day, records=aligned))
            self._audit.record(
                "Reconcile",
                f"Reconciled {day.strftime(DATE_FORMAT)}: added {len(added)}, dropped {len(dropped)}",
            )
        return result
