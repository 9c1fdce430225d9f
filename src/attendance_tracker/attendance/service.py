from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..audit import AuditSink
from ..common.datetime_utils import format_time, now_local, resolve_day
from ..core.constants import DATE_FORMAT
from ..core.enums import AttendanceStatus
from ..core.exceptions import EmptyRosterError, NotFoundError
from ..roster.model import Person
from ..roster.repository import RosterRepository
from ..sync.service import ConsistencyGuard
from .model import AttendanceRecord, AttendanceSnapshot, PersonSummary, RecordingResult, SnapshotRow
from .repository import SnapshotRepository

logger = logging.getLogger(__name__)

DayInput = Union[date, str, None]


class AttendanceService:
    """Use case: record and read per-date attendance snapshots."""

    def __init__(
        self,
        snapshots: SnapshotRepository,
        roster: RosterRepository,
        guard: ConsistencyGuard,
        audit: AuditSink,
    ):
        self._snapshots = snapshots
        self._roster = roster
        self._guard = guard
        self._audit = audit

    def _require_person(self, person_id: str) -> Person:
        person = self._roster.get_by_id(person_id)
        if not person:
            raise NotFoundError(f"Person with ID '{person_id}' not found")
        return person

    def open_snapshot_for_date(self, day: DayInput = None, *, now: Optional[datetime] = None) -> Dict[str, AttendanceStatus]:
        """Prior status of every current roster member for ``day``.

        Read-only: people without a stored row (or every one, when nothing was
        recorded yet) come back as absent.
        """

        now = now or now_local()
        day = resolve_day(day, today=now.date())

        snapshot = self._snapshots.get(day)
        records = snapshot.records if snapshot else {}
        aligned = self._guard.align(list(self._roster.list_all()), records, format_time(now))
        return {pid: record.status for pid, record in aligned.items()}

    def record_attendance(
        self,
        day: DayInput,
        present_ids: Iterable[str],
        *,
        now: Optional[datetime] = None,
    ) -> RecordingResult:
        now = now or now_local()
        day = resolve_day(day, today=now.date())
        timestamp = format_time(now)

        roster = list(self._roster.list_all())
        if not roster:
            raise EmptyRosterError("No people on the roster. Add people first.")

        present = set(present_ids)
        unknown = present.difference(p.person_id for p in roster)
        if unknown:
            logger.warning("Ignoring ids not on the roster: %s", ", ".join(sorted(unknown)))

        records: Dict[str, AttendanceRecord] = {}
        for person in roster:
            status = AttendanceStatus.PRESENT if person.person_id in present else AttendanceStatus.ABSENT
            records[person.person_id] = AttendanceRecord(person_id=person.person_id, status=status, timestamp=timestamp)

        self._snapshots.save(AttendanceSnapshot(day=day, records=records))

        present_count = sum(1 for r in records.values() if r.status == AttendanceStatus.PRESENT)
        result = RecordingResult(day=day, present=present_count, absent=len(records) - present_count)
        self._audit.record(
            "Record Attendance",
            f"Recorded attendance for {day.strftime(DATE_FORMAT)}: {result.present} present, {result.absent} absent",
        )
        return result

    def list_recorded_dates(self) -> List[date]:
        return list(self._snapshots.list_dates())

    def snapshot_report(self, day: DayInput, *, now: Optional[datetime] = None) -> List[SnapshotRow]:
        now = now or now_local()
        day = resolve_day(day, today=now.date())

        snapshot = self._snapshots.get(day)
        if snapshot is None:
            raise NotFoundError(f"No attendance recorded for {day.strftime(DATE_FORMAT)}")

        names = {p.person_id: p.name for p in self._roster.list_all()}
        rows = [
            SnapshotRow(person_id=r.person_id, name=names.get(r.person_id), status=r.status, timestamp=r.timestamp)
            for r in snapshot.records.values()
        ]
        self._audit.record("View Attendance", f"Viewed attendance for {day.strftime(DATE_FORMAT)}")
        return rows

    def _history(self, person_id: str) -> List[tuple]:
        history = []
        for day in self._snapshots.list_dates():
            snapshot = self._snapshots.get(day)
            record = snapshot.records.get(person_id) if snapshot else None
            if record:
                history.append((day, record))
        return history

    def person_summary(self, person_id: str) -> PersonSummary:
        person = self._require_person(person_id)
        statuses = [record.status for _, record in self._history(person_id)]
        return PersonSummary(
            person=person,
            present_days=statuses.count(AttendanceStatus.PRESENT),
            absent_days=statuses.count(AttendanceStatus.ABSENT),
        )

    def export_person_history(self, person_id: str) -> Path:
        self._require_person(person_id)
        history = self._history(person_id)
        path = self._snapshots.write_person_history(person_id, history)
        self._audit.record("Export History", f"Exported {len(history)} day(s) for {person_id} to {path}")
        return path
